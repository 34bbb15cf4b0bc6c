"""
Health check endpoint.

The simulator has no external services, so "healthy" just means the
process is up and serving requests.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
