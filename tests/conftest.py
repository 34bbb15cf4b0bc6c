"""
Shared test fixtures.

The API has no infrastructure behind it, so the only thing to fake is the
network: httpx.AsyncClient with ASGI transport talks to the FastAPI app
in-process.

`assert_partition` is shared by the engine and driver tests: it checks that
every live job is either on exactly one core (and knows it) or waiting.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from scheduler.engine import SchedulerEngine


def assert_partition(engine: SchedulerEngine) -> None:
    slots = engine.running_jobs()
    live = engine.live_jobs()

    running = [job for job in slots if job is not None]
    assert len({id(job) for job in running}) == len(running)   # no job on two cores
    for core_id, job in enumerate(slots):
        if job is not None:
            assert job.core_number == core_id
            assert any(job is queued for queued in live)

    for job in live:
        if job.core_number is None:
            assert all(job is not slot for slot in slots)
        else:
            assert slots[job.core_number] is job


@pytest.fixture
def check_partition():
    return assert_partition


@pytest_asyncio.fixture
async def client():
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
