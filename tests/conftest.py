"""
Shared test fixtures.

- make_job: build Job records with short positional arguments
- api_settings: a fresh Settings object the API reads through get_settings
- client: httpx.AsyncClient talking to the FastAPI app in-process
  (ASGI transport, no server, no network)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.dependencies import get_settings
from api.main import create_app
from config.settings import Settings
from models.job import Job


@pytest.fixture
def make_job():
    """Factory: make_job("A", 4, 0) → Job named A, 4 ticks of work, arriving at tick 0."""
    counter = {"pid": 0}

    def _make(name: str, remaining: int, arrival: int = 0, pid: int = None) -> Job:
        counter["pid"] += 1
        return Job(
            pid=pid if pid is not None else counter["pid"],
            name=name,
            remaining_time=remaining,
            arrival_time=arrival,
        )

    return _make


@pytest.fixture
def api_settings():
    return Settings(DEFAULT_SCHEDULING_POLICY="FIFO", ROUND_ROBIN_TIME_QUANTUM=1)


@pytest_asyncio.fixture
async def client(api_settings):
    """
    Test HTTP client bound to a fresh app.

    dependency_overrides replaces get_settings with the api_settings fixture,
    so a test can change configuration by overriding that fixture.
    """
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: api_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
