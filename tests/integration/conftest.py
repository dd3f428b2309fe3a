"""Integration test fixtures.

Provides the FastAPI app wired with real clients and cache around an httpx
client whose upstream traffic is intercepted by respx, plus an in-process
ASGI client for calling the API.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import respx

from servicecatalogue.api.app import create_app
from servicecatalogue.config import Settings
from servicecatalogue.state import AppState, build_state
from tests.factories import PROD, TT02


@pytest.fixture()
def upstream() -> Iterator[respx.MockRouter]:
    """Mock router for upstream registry traffic (ASGI calls are not intercepted)."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture()
async def app_state(upstream: respx.MockRouter) -> AsyncIterator[AppState]:
    settings = Settings(
        resource_registry={"environments": {"tt02": TT02, "prod": PROD}},
        metadata={"environments": {"tt02": TT02}},
    )
    async with httpx.AsyncClient() as client:
        yield build_state(settings, client)


@pytest.fixture()
async def api(app_state: AppState) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(state=app_state)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
