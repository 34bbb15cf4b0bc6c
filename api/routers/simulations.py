"""
Simulation endpoints.

POST /simulations/ → Replay a workload under one policy and return the metrics

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Hand the workload to the Simulation driver
- Return the result

It does NOT make scheduling decisions itself; that's the engine's job.
"""

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.simulation import SimulationRequest
from config.settings import settings
from simulator.driver import Simulation, SimulationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResult)
def run_simulation(sim: SimulationRequest) -> SimulationResult:
    """
    Run one simulation to completion.

    Runs are independent: each request gets a fresh engine, so concurrent
    requests never see each other's jobs or statistics.

    Plain `def`: FastAPI runs it in its threadpool, so a long simulation
    does not hold up the event loop.
    """
    if len(sim.jobs) > settings.MAX_SIMULATION_JOBS:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.MAX_SIMULATION_JOBS} jobs per simulation",
        )

    logger.info(
        f"Simulation requested: {len(sim.jobs)} jobs, "
        f"{sim.cores} core(s), policy {sim.policy.value}"
    )
    return Simulation(sim.cores, sim.policy, sim.quantum).run(sim)
