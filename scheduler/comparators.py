"""
Per-policy orderings.

Each function compares two jobs and returns:
- negative → `a` runs before `b`
- zero     → equal rank
- positive → `b` runs before `a`

The two-key policies fall back to arrival time, so equal keys run in
arrival order. FCFS and Round Robin always answer -1 ("a stays ahead"),
which makes the ordered queue append every new job at the back.
"""

from scheduler.base import Job


def _by_key_then_arrival(a_key: int, b_key: int, a: Job, b: Job) -> int:
    if a_key != b_key:
        return a_key - b_key
    return a.arrival_time - b.arrival_time


def fcfs(a: Job, b: Job) -> int:
    return -1


def sjf(a: Job, b: Job) -> int:
    return _by_key_then_arrival(a.running_time, b.running_time, a, b)


def psjf(a: Job, b: Job) -> int:
    # remaining_time, not running_time; this is what makes PSJF preemptive
    return _by_key_then_arrival(a.remaining_time, b.remaining_time, a, b)


def pri(a: Job, b: Job) -> int:
    return _by_key_then_arrival(a.priority, b.priority, a, b)


def ppri(a: Job, b: Job) -> int:
    return pri(a, b)


def rr(a: Job, b: Job) -> int:
    return -1
