"""
Scheduler Engine: the core decision maker.

The simulation driver owns the clock. Whenever something happens it calls
one of three handlers and gets an immediate answer:

    new_job(...)          → which core should start the new job (or None)
    job_finished(...)     → which job should take over the freed core (or None)
    quantum_expired(...)  → which job should take over after a Round Robin slice

The engine keeps two pieces of state:

    ┌──────────────────────────────┐      ┌──────────────────────────┐
    │ OrderedJobQueue              │      │ core table               │
    │ every live job, policy order │<────>│ core i → running Job     │
    │ (running AND waiting)        │      │          or None         │
    └──────────────────────────────┘      └──────────────────────────┘

A job is always in the queue; it is "running" when a core slot points at it
(and job.core_number points back), "waiting" otherwise.

Preemption (PSJF / PPRI only): when every core is busy and the new job landed
at a rank < cores, the engine looks for the running job with the worst key
(largest remaining time / largest priority number). The scan goes by
ascending core index and only moves on a strictly greater key, so ties go
to the lowest core index. The victim is evicted only if its key is strictly
worse than the new job's.

One engine instance = one simulation run. Nothing is global, so tests and the
API can run as many simulations side by side as they like.
"""

import logging
from operator import attrgetter
from typing import Optional

from models.enums import SchedulingPolicy
from scheduler.base import Job, SchedulerContractError
from scheduler.queue import OrderedJobQueue
from scheduler.registry import get_comparator
from scheduler.stats import SchedulerStats

logger = logging.getLogger(__name__)

# The key whose largest value marks the preemption victim, per policy
_VICTIM_KEYS = {
    SchedulingPolicy.PSJF: attrgetter("remaining_time"),
    SchedulingPolicy.PPRI: attrgetter("priority"),
}


class SchedulerEngine:

    def __init__(self, cores: int, policy: SchedulingPolicy):
        self._stats = SchedulerStats()
        self.start_up(cores, policy)

    # ── Lifecycle ───────────────────────────────────────────────

    def start_up(self, cores: int, policy: SchedulingPolicy) -> None:
        """
        (Re)initialize the engine: empty queue, idle cores, zeroed statistics.

        Raises SchedulerContractError for a non-positive core count and
        ValueError for an unknown policy.
        """
        if cores < 1:
            raise SchedulerContractError(f"Core count must be positive, got {cores}")
        comparator = get_comparator(policy)

        self._policy = SchedulingPolicy(policy)
        self._core_count = cores
        self._cores: list[Optional[Job]] = [None] * cores
        self._queue = OrderedJobQueue(comparator)
        self._stats.reset()
        self._last_time: Optional[int] = None
        self._active = True
        logger.info(f"Scheduler started: {cores} core(s), policy {self._policy.value}")

    def clean_up(self) -> None:
        """
        Drop every remaining job and the core table.

        Statistics stay readable; any further event is rejected until
        start_up() is called again.
        """
        leftover = self._queue.size()
        self._queue.clear()
        self._cores = []
        self._active = False
        if leftover:
            logger.warning(f"Clean up discarded {leftover} unfinished job(s)")
        logger.info("Scheduler cleaned up")

    # ── Event handlers ──────────────────────────────────────────

    def new_job(self, job_id: int, time: int, running_time: int, priority: int) -> Optional[int]:
        """
        A job arrives.

        Returns the core it should start on right now, or None if it has to
        wait. If the returned core was busy, the job that was on it has been
        preempted and is back to waiting.
        """
        self._require_active()
        self._require_time(time)
        if self._queue.index_of(job_id) is not None:
            raise SchedulerContractError(f"Job {job_id} is already scheduled")
        self._last_time = time

        job = Job(job_id=job_id, arrival_time=time, running_time=running_time, priority=priority)

        if self._policy is SchedulingPolicy.PSJF:
            # PSJF ranks by remaining time, so bring running jobs up to date first
            self._sync_remaining_time(time)

        rank = self._queue.insert(job)
        if rank >= self._core_count:
            logger.debug(f"t={time}: job {job_id} queued at rank {rank}")
            return None

        for core_id, running in enumerate(self._cores):
            if running is None:
                self._assign(job, core_id, time)
                logger.debug(f"t={time}: job {job_id} → idle core {core_id}")
                return core_id

        victim_core = self._find_victim(job)
        if victim_core is None:
            return None

        evicted = self._cores[victim_core]
        evicted.core_number = None
        if evicted.first_start_time == time:
            # evicted at the very instant it started: it never really ran
            evicted.first_start_time = None
        self._assign(job, victim_core, time)
        logger.debug(
            f"t={time}: job {job_id} preempts job {evicted.job_id} on core {victim_core}"
        )
        return victim_core

    def job_finished(self, core_id: int, job_id: int, time: int) -> Optional[int]:
        """
        The job on `core_id` completed.

        Its statistics are recorded and it is forgotten. Returns the id of the
        job that should run on the freed core next, or None to leave it idle.
        """
        self._require_active()
        self._require_core(core_id)
        self._require_time(time)

        rank = self._queue.index_of(job_id)
        if rank is None:
            raise SchedulerContractError(f"Job {job_id} is not known to the scheduler")
        job = self._queue.at(rank)
        if self._cores[core_id] is not job:
            raise SchedulerContractError(f"Job {job_id} is not running on core {core_id}")
        self._last_time = time

        self._cores[core_id] = None
        self._queue.remove_at(rank)
        self._stats.record(job, time)
        logger.debug(f"t={time}: job {job_id} finished on core {core_id}")

        return self._promote(core_id, time)

    def quantum_expired(self, core_id: int, time: int) -> Optional[int]:
        """
        Round Robin only: the slice on `core_id` ran out.

        The running job goes to the back of the queue and the first waiting
        job takes the core. If nobody else is waiting, that is the same job
        again. Returns the id of the job to run on the core, or None.
        """
        self._require_active()
        if not self._policy.is_time_sliced:
            raise SchedulerContractError(
                f"Quantum expiry is only valid under {SchedulingPolicy.RR.value}, "
                f"not {self._policy.value}"
            )
        self._require_core(core_id)
        job = self._cores[core_id]
        if job is None:
            raise SchedulerContractError(f"Quantum expired on idle core {core_id}")
        self._require_time(time)
        self._last_time = time

        self._cores[core_id] = None
        self._queue.remove_at(self._queue.index_of(job.job_id))
        job.core_number = None
        self._queue.insert(job)
        logger.debug(f"t={time}: job {job.job_id} requeued from core {core_id}")

        return self._promote(core_id, time)

    # ── Statistics ──────────────────────────────────────────────

    def average_waiting_time(self) -> float:
        return self._stats.average_waiting()

    def average_turnaround_time(self) -> float:
        return self._stats.average_turnaround()

    def average_response_time(self) -> float:
        return self._stats.average_response()

    @property
    def stats(self) -> SchedulerStats:
        return self._stats

    # ── Introspection ───────────────────────────────────────────

    @property
    def cores(self) -> int:
        return self._core_count

    @property
    def policy(self) -> SchedulingPolicy:
        return self._policy

    def running_jobs(self) -> tuple[Optional[Job], ...]:
        """Snapshot of the core table, index = core id."""
        return tuple(self._cores)

    def waiting_jobs(self) -> list[Job]:
        return [job for job in self._queue if not job.is_running]

    def live_jobs(self) -> list[Job]:
        """Every job not yet finished, in rank order."""
        return list(self._queue)

    def show_queue(self) -> str:
        """
        Jobs in rank order as "id(core)", with -1 for jobs that are waiting.

        Example: "2(-1) 4(0) 1(-1)" means job 4 runs on core 0, jobs 2 and 1 wait.
        """
        return " ".join(
            f"{job.job_id}({job.core_number if job.core_number is not None else -1})"
            for job in self._queue
        )

    # ── Internals ───────────────────────────────────────────────

    def _assign(self, job: Job, core_id: int, time: int) -> None:
        job.start_on(core_id, time)
        self._cores[core_id] = job

    def _promote(self, core_id: int, time: int) -> Optional[int]:
        """Give the core to the highest-ranked job that isn't running anywhere."""
        for job in self._queue:
            if not job.is_running:
                self._assign(job, core_id, time)
                logger.debug(f"t={time}: job {job.job_id} → core {core_id}")
                return job.job_id
        return None

    def _sync_remaining_time(self, time: int) -> None:
        for job in self._cores:
            if job is not None:
                job.remaining_time -= time - job.last_start_time
                job.last_start_time = time

    def _find_victim(self, job: Job) -> Optional[int]:
        """Core whose job should make way for `job`, or None (non-preemptive policy or nobody worse)."""
        key = _VICTIM_KEYS.get(self._policy)
        if key is None:
            return None

        victim_core = 0
        for core_id in range(1, self._core_count):
            if key(self._cores[core_id]) > key(self._cores[victim_core]):
                victim_core = core_id

        if key(self._cores[victim_core]) > key(job):
            return victim_core
        return None

    def _require_active(self) -> None:
        if not self._active:
            raise SchedulerContractError("Scheduler has been cleaned up; call start_up() first")

    def _require_core(self, core_id: int) -> None:
        if not 0 <= core_id < self._core_count:
            raise SchedulerContractError(
                f"Core {core_id} out of range (0..{self._core_count - 1})"
            )

    def _require_time(self, time: int) -> None:
        if self._last_time is not None and time < self._last_time:
            raise SchedulerContractError(
                f"Time went backwards: {time} after {self._last_time}"
            )
