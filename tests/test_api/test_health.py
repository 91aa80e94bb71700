"""Tests for the /health and /policies endpoints."""

import pytest


@pytest.mark.asyncio
async def test_health_check(client):
    """GET /health should return healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


@pytest.mark.asyncio
async def test_list_policies(client):
    response = await client.get("/policies")

    assert response.status_code == 200
    data = response.json()
    assert data["policies"] == ["FIFO", "SJF", "STCF", "RR"]
    assert data["default_policy"] == "FIFO"
    assert data["round_robin_time_quantum"] == 1


@pytest.mark.asyncio
async def test_policies_reflect_configuration(client, api_settings):
    """The endpoint reads settings through get_settings, so overrides show up."""
    api_settings.DEFAULT_SCHEDULING_POLICY = "rr"
    api_settings.ROUND_ROBIN_TIME_QUANTUM = 3

    data = (await client.get("/policies")).json()

    assert data["default_policy"] == "RR"
    assert data["round_robin_time_quantum"] == 3
