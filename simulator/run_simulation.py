"""
CLI entry point for running a workload through the scheduler.

Usage:
    python -m simulator.run_simulation workload.json                     # default policy/cores
    python -m simulator.run_simulation workload.json --policy psjf --cores 2
    python -m simulator.run_simulation workload.json --policy rr --quantum 4
    python -m simulator.run_simulation workload.json --policy all        # compare every policy

Defaults come from config/settings.py (override with env vars or .env).
Generate a workload with `python -m scripts.generate_workload`.
"""

import argparse
import json
import logging
import sys

from config.settings import settings
from models.enums import SchedulingPolicy
from simulator.driver import Simulation, SimulationResult
from simulator.workload import Workload, load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Multi-core scheduling policy simulator")
    parser.add_argument("workload", help="Path to a workload JSON file")
    parser.add_argument(
        "--cores", type=int, default=settings.DEFAULT_CORES,
        help=f"Number of cores (default: {settings.DEFAULT_CORES})",
    )
    parser.add_argument(
        "--policy", type=str, default=settings.DEFAULT_SCHEDULING_POLICY,
        choices=[p.value for p in SchedulingPolicy] + ["all"],
        help=f"Scheduling policy (default: {settings.DEFAULT_SCHEDULING_POLICY})",
    )
    parser.add_argument(
        "--quantum", type=int, default=settings.ROUND_ROBIN_TIME_QUANTUM,
        help=f"Round Robin quantum in ticks (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--show-dispatches", action="store_true",
        help="Include every core assignment in the JSON output",
    )
    return parser


def run_policies(
    workload: Workload, cores: int, policies: list[SchedulingPolicy], quantum: int
) -> list[SimulationResult]:
    return [Simulation(cores, policy, quantum).run(workload) for policy in policies]


def format_summary(results: list[SimulationResult]) -> str:
    lines = [
        "{:<8} {:>10} {:>12} {:>10}".format("Policy", "Waiting", "Turnaround", "Response"),
        "-" * 43,
    ]
    for r in results:
        lines.append("{:<8} {:>10.2f} {:>12.2f} {:>10.2f}".format(
            r.policy.value,
            r.average_waiting_time,
            r.average_turnaround_time,
            r.average_response_time,
        ))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.policy == "all":
        policies = list(SchedulingPolicy)
    else:
        policies = [SchedulingPolicy(args.policy)]

    try:
        workload = load_workload(args.workload)
        results = run_policies(workload, args.cores, policies, args.quantum)
    except (OSError, ValueError) as e:  # ValidationError and SchedulerContractError are ValueErrors
        logger.error(f"Simulation failed: {e}")
        return 1

    exclude = None if args.show_dispatches else {"dispatches"}
    print("=== Scheduling Simulation ===")
    print(f"Jobs: {len(workload.jobs)} | Cores: {args.cores} | Policy: {args.policy}\n")
    print(json.dumps([r.model_dump(mode="json", exclude=exclude) for r in results], indent=2))
    print()
    print(format_summary(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
