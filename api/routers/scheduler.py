"""
Scheduler information endpoints.

GET /scheduler/policies → every supported policy and how it behaves
"""

from fastapi import APIRouter

from api.schemas.scheduler import PolicyInfo
from models.enums import SchedulingPolicy

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/policies", response_model=list[PolicyInfo])
async def list_policies() -> list[PolicyInfo]:
    return [
        PolicyInfo(
            policy=policy,
            preemptive=policy.is_preemptive,
            time_sliced=policy.is_time_sliced,
        )
        for policy in SchedulingPolicy
    ]
