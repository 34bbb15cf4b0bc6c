"""
Discrete-event driver: replays a workload against a SchedulerEngine.

The engine only makes decisions; this driver owns the clock and the truth
about how much work each job still needs. Time is counted in integer ticks.
At every event time `t`, in this order:

    1. Completions:  any core whose job has no work left → job_finished()
    2. Quanta (RR):  any core whose slice lasted `quantum` ticks → quantum_expired()
    3. Arrivals:     every job arriving at t (by id) → new_job()
    4. Execution:    busy cores run until the next completion, expiry or arrival

Completions go first so a freed core is visible to jobs arriving in the
same tick. Between events nothing changes that the engine could see, so
the clock jumps straight to the next one: a run costs time per event, not
per tick of simulated work. With every core idle that is the next arrival.

Every decision the engine returns is recorded as a Dispatch, which makes
runs easy to inspect and to assert on in tests.
"""

import logging
from collections import deque
from typing import Optional

from pydantic import BaseModel

from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine
from simulator.workload import Workload

logger = logging.getLogger(__name__)


class Dispatch(BaseModel):
    """`job_id` started (or resumed) on `core` at `time`."""

    time: int
    core: int
    job_id: int


class SimulationResult(BaseModel):
    policy: SchedulingPolicy
    cores: int
    quantum: Optional[int] = None    # only set for Round Robin
    finished_jobs: int
    average_waiting_time: float
    average_turnaround_time: float
    average_response_time: float
    makespan: int                    # time the last job finished
    dispatches: list[Dispatch]


class Simulation:

    def __init__(self, cores: int, policy: SchedulingPolicy, quantum: int = 2):
        if quantum < 1:
            raise ValueError(f"Quantum must be positive, got {quantum}")
        self.cores = cores
        self.policy = SchedulingPolicy(policy)
        self.quantum = quantum

    def run(self, workload: Workload) -> SimulationResult:
        """Replay every job in the workload until all of them have finished."""
        engine = SchedulerEngine(self.cores, self.policy)
        pending = deque(sorted(workload.jobs, key=lambda j: (j.arrival_time, j.job_id)))

        remaining: dict[int, int] = {}                        # job_id → ticks of work left
        running: list[Optional[int]] = [None] * self.cores    # core → job_id
        slice_start = [0] * self.cores                        # core → tick the current run began
        dispatches: list[Dispatch] = []
        makespan = 0

        def place(core_id: int, job_id: Optional[int], time: int) -> None:
            running[core_id] = job_id
            slice_start[core_id] = time
            if job_id is not None:
                dispatches.append(Dispatch(time=time, core=core_id, job_id=job_id))

        time = pending[0].arrival_time if pending else 0
        logger.info(
            f"Simulating {len(pending)} jobs on {self.cores} core(s) "
            f"with policy {self.policy.value}"
        )

        while pending or any(job_id is not None for job_id in running):
            # ── 1. Completions ──────────────────────────────────
            for core_id in range(self.cores):
                job_id = running[core_id]
                if job_id is not None and remaining[job_id] == 0:
                    del remaining[job_id]
                    makespan = time
                    place(core_id, engine.job_finished(core_id, job_id, time), time)

            # ── 2. Quantum expiry ───────────────────────────────
            if self.policy.is_time_sliced:
                for core_id in range(self.cores):
                    if running[core_id] is not None and time - slice_start[core_id] >= self.quantum:
                        place(core_id, engine.quantum_expired(core_id, time), time)

            # ── 3. Arrivals ─────────────────────────────────────
            while pending and pending[0].arrival_time == time:
                spec = pending.popleft()
                remaining[spec.job_id] = spec.running_time
                core_id = engine.new_job(spec.job_id, time, spec.running_time, spec.priority)
                if core_id is not None:
                    place(core_id, spec.job_id, time)

            if all(job_id is None for job_id in running):
                if not pending:
                    break
                time = pending[0].arrival_time
                continue

            # ── 4. Execution ────────────────────────────────────
            step = self._ticks_to_next_event(time, running, remaining, slice_start, pending)
            for job_id in running:
                if job_id is not None:
                    remaining[job_id] -= step
            time += step

        stats = engine.stats.as_dict()
        engine.clean_up()
        logger.info(
            f"Finished {stats['finished_jobs']} jobs at t={makespan}: "
            f"waiting={stats['average_waiting_time']:.2f} "
            f"turnaround={stats['average_turnaround_time']:.2f} "
            f"response={stats['average_response_time']:.2f}"
        )

        return SimulationResult(
            policy=self.policy,
            cores=self.cores,
            quantum=self.quantum if self.policy.is_time_sliced else None,
            makespan=makespan,
            dispatches=dispatches,
            **stats,
        )

    def _ticks_to_next_event(
        self,
        time: int,
        running: list[Optional[int]],
        remaining: dict[int, int],
        slice_start: list[int],
        pending: deque,
    ) -> int:
        """
        Ticks until the next completion, quantum expiry or arrival.

        Nothing the engine can observe changes in between, so the busy cores
        run that many ticks in one step. Always >= 1: every running job has
        work left and every slice has time left once steps 1-3 are done.
        """
        step = min(remaining[job_id] for job_id in running if job_id is not None)
        if self.policy.is_time_sliced:
            for core_id, job_id in enumerate(running):
                if job_id is not None:
                    step = min(step, self.quantum - (time - slice_start[core_id]))
        if pending:
            step = min(step, pending[0].arrival_time - time)
        return step
