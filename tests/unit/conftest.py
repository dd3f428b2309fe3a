"""Unit-specific fixtures (no network; upstream replaced by in-memory stubs)."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest

from servicecatalogue.cache import ResourceCache
from servicecatalogue.errors import ErrorCode, ServiceCatalogueError

if TYPE_CHECKING:
    from servicecatalogue.models.resource import ServiceResource


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class StubSource:
    """Records calls per base URL and serves configured lists (or failures)."""

    def __init__(self) -> None:
        self.lists: dict[str, list[ServiceResource]] = {}
        self.calls: dict[str, int] = defaultdict(int)
        self.failing: set[str] = set()
        self.gate: asyncio.Event | None = None

    async def get_resource_list(self, base_url: str) -> list[ServiceResource]:
        self.calls[base_url] += 1
        if self.gate is not None:
            await self.gate.wait()
        if base_url in self.failing:
            raise ServiceCatalogueError(
                code=ErrorCode.UPSTREAM_UNAVAILABLE,
                message=f"Upstream request to {base_url} failed: HTTP 503",
                recoverable=True,
            )
        return list(self.lists.get(base_url, []))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def source() -> StubSource:
    return StubSource()


@pytest.fixture()
def cache(source: StubSource, clock: FakeClock) -> ResourceCache:
    return ResourceCache(source, ttl=timedelta(minutes=10), clock=clock)
