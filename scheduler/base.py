"""
Core types shared by the scheduling layer.

Job is the unit the engine schedules. The immutable attributes (id, arrival,
running time, priority) come from the simulation driver; the rest is engine
bookkeeping:

- remaining_time: only decremented under PSJF, where the ordering depends on it
- core_number: the core running the job, or None while it waits
- first_start_time: when the job first ran (response time), None until then
- last_start_time: when the job was last (re)started on a core

A Comparator is any function (a, b) -> int that returns a negative number
when `a` should run before `b`. Each scheduling policy is one comparator
(see scheduler/comparators.py), which is the Strategy pattern in its
simplest form: the engine never branches on ordering, it just asks.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass(eq=False)
class Job:
    """
    One unit of work, alive from its arrival until its completion event.

    eq=False keeps identity semantics: two jobs are only "the same job"
    if they are the same object. The ordered queue relies on this when
    removing a specific job.
    """
    job_id: int
    arrival_time: int
    running_time: int
    priority: int              # lower number = more important
    remaining_time: int = field(init=False)
    core_number: Optional[int] = None
    first_start_time: Optional[int] = None
    last_start_time: Optional[int] = None

    def __post_init__(self) -> None:
        self.remaining_time = self.running_time

    @property
    def is_running(self) -> bool:
        return self.core_number is not None

    def start_on(self, core_id: int, time: int) -> None:
        """Put the job on a core. The first start is remembered for response time."""
        self.core_number = core_id
        if self.first_start_time is None:
            self.first_start_time = time
        self.last_start_time = time

    def __repr__(self) -> str:
        return f"<Job {self.job_id} core={self.core_number} remaining={self.remaining_time}>"


Comparator = Callable[[Job, Job], int]


class SchedulerContractError(ValueError):
    """
    The driver broke the calling contract (bad core id, unknown job,
    time going backwards, ...). Raised before any state is touched.
    """
