"""
Comparator factory: maps policies to their ordering function.

This is the Factory pattern: instead of writing if/elif chains in the engine,
there is ONE place that knows which ordering belongs to which policy.

Adding a policy: write the comparator, add one line here. Whether it preempts
is a property of SchedulingPolicy itself (models/enums.py).
"""

from models.enums import SchedulingPolicy
from scheduler import comparators
from scheduler.base import Comparator


_REGISTRY: dict[SchedulingPolicy, Comparator] = {
    SchedulingPolicy.FCFS: comparators.fcfs,
    SchedulingPolicy.SJF: comparators.sjf,
    SchedulingPolicy.PSJF: comparators.psjf,
    SchedulingPolicy.PRI: comparators.pri,
    SchedulingPolicy.PPRI: comparators.ppri,
    SchedulingPolicy.RR: comparators.rr,
}


def get_comparator(policy: SchedulingPolicy) -> Comparator:
    """
    Look up the ordering for a policy.

    Accepts the enum or its string value ("psjf"); anything else
    raises ValueError.
    """
    try:
        policy = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown scheduling policy: {policy}") from None

    comparator = _REGISTRY.get(policy)
    if comparator is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")
    return comparator
