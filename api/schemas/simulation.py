"""
Pydantic schemas for the /simulations endpoints.

SimulationRequest: what the user sends: machine shape, policy, and the jobs.
The response body is simulator.driver.SimulationResult, reused as-is.

FastAPI validates incoming data against these automatically.
If someone sends cores=0, FastAPI returns a 422 error before our code even runs.
"""

from pydantic import Field

from config.settings import settings
from models.enums import SchedulingPolicy
from simulator.workload import Workload


class SimulationRequest(Workload):
    """Request body for POST /simulations/: a workload plus how to run it."""

    cores: int = Field(default=settings.DEFAULT_CORES, ge=1, le=1024)
    policy: SchedulingPolicy = Field(
        default=SchedulingPolicy(settings.DEFAULT_SCHEDULING_POLICY),
        description="One of: fcfs, sjf, psjf, pri, ppri, rr",
    )
    quantum: int = Field(
        default=settings.ROUND_ROBIN_TIME_QUANTUM,
        ge=1,
        description="Round Robin time slice in ticks (ignored by other policies)",
    )
