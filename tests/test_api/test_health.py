"""Tests for the /health endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_reports_healthy(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_health_rejects_post(client):
    response = await client.post("/health")
    assert response.status_code == 405
