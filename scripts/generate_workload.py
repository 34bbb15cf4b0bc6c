"""
Workload generator: writes a random workload JSON for demo purposes.

Usage:
    python -m scripts.generate_workload workload.json
    python -m scripts.generate_workload workload.json --num-jobs 50 --seed 7

Arrival times are distinct (the classic assumption the scheduling
algorithms are usually analysed under); running times and priorities
are drawn uniformly.

Then run it:
    python -m simulator.run_simulation workload.json --policy all --cores 2
"""

import argparse
import random
from pathlib import Path

from simulator.workload import JobSpec, Workload


def generate(
    num_jobs: int,
    seed: int | None = None,
    max_arrival: int = 100,
    max_running: int = 20,
    max_priority: int = 10,
) -> Workload:
    if num_jobs > max_arrival + 1:
        raise ValueError(
            f"Cannot give {num_jobs} jobs distinct arrival times in 0..{max_arrival}"
        )
    rng = random.Random(seed)
    arrivals = sorted(rng.sample(range(max_arrival + 1), num_jobs))

    return Workload(jobs=[
        JobSpec(
            job_id=job_id,
            arrival_time=arrival,
            running_time=rng.randint(1, max_running),
            priority=rng.randint(1, max_priority),
        )
        for job_id, arrival in enumerate(arrivals)
    ])


def main():
    parser = argparse.ArgumentParser(description="Generate a random scheduling workload")
    parser.add_argument("output", help="Where to write the workload JSON")
    parser.add_argument("--num-jobs", type=int, default=20)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-arrival", type=int, default=100)
    parser.add_argument("--max-running", type=int, default=20)
    parser.add_argument("--max-priority", type=int, default=10)
    args = parser.parse_args()

    workload = generate(
        args.num_jobs,
        seed=args.seed,
        max_arrival=args.max_arrival,
        max_running=args.max_running,
        max_priority=args.max_priority,
    )
    Path(args.output).write_text(workload.model_dump_json(indent=2), encoding="utf-8")
    print(f"Wrote {len(workload.jobs)} jobs to {args.output}")


if __name__ == "__main__":
    main()
