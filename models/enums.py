"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("psjf", not "SchedulingPolicy.PSJF")
- They work as FastAPI request fields and argparse choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingPolicy(str, enum.Enum):
    FCFS = "fcfs"    # First Come First Served: arrival order only
    SJF = "sjf"      # Shortest Job First: by total running time
    PSJF = "psjf"    # Preemptive SJF: by remaining time, may evict a running job
    PRI = "pri"      # Priority: lower number runs first
    PPRI = "ppri"    # Preemptive Priority: may evict a less important job
    RR = "rr"        # Round Robin: arrival order, requeued on quantum expiry

    @property
    def is_preemptive(self) -> bool:
        """True if an arriving job can evict a running one."""
        return self in (SchedulingPolicy.PSJF, SchedulingPolicy.PPRI)

    @property
    def is_time_sliced(self) -> bool:
        return self is SchedulingPolicy.RR
