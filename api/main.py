"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Registers all routers (simulations, scheduler, health)
3. Maps scheduler contract violations to HTTP 400

There is no database or cache to connect to: every request builds its own
SchedulerEngine, runs it to completion and throws it away.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from scheduler.base import SchedulerContractError
from api.routers import simulations, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def contract_error_handler(request: Request, exc: SchedulerContractError) -> JSONResponse:
    """A workload that drives the engine into an invalid state is the caller's fault."""
    logger.warning(f"Rejected simulation request: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Scheduler Simulator",
        description="Multi-core CPU scheduling simulator (FCFS, SJF, PSJF, PRI, PPRI, RR)",
        version="1.0.0",
    )

    app.include_router(health.router)
    app.include_router(simulations.router)
    app.include_router(scheduler.router)
    app.add_exception_handler(SchedulerContractError, contract_error_handler)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
