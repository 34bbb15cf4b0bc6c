"""
Pydantic schemas for the /scheduler endpoints.

PolicyInfo: one entry of GET /scheduler/policies.
"""

from pydantic import BaseModel

from models.enums import SchedulingPolicy


class PolicyInfo(BaseModel):
    """Response item for GET /scheduler/policies."""

    policy: SchedulingPolicy
    preemptive: bool     # an arriving job may evict a running one (psjf, ppri)
    time_sliced: bool    # jobs are requeued when their quantum expires (rr)
