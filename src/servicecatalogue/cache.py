"""In-memory cache of the full resource list, one entry per upstream environment.

Cache-aside: a read serves the stored list while it is younger than the TTL,
otherwise it fetches the whole list from the Resource Registry and swaps in a
new entry. Entries are never mutated in place, so a reader still holding an
old tuple keeps a consistent view after a refresh.

Concurrent misses for the same base URL share one upstream call through a
per-key ``asyncio.Lock``. Locks are per key, so a slow fetch for one
environment never delays another.

Upstream failures propagate as ``ServiceCatalogueError(UPSTREAM_UNAVAILABLE)``.
There is no retry and no stale fallback: an expired entry is treated exactly
like a missing one.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Protocol

import structlog

from servicecatalogue.keywords import build_keyword_index, has_keyword
from servicecatalogue.models.cache import ResourceListCacheEntry

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from servicecatalogue.models.resource import ServiceResource

log = structlog.get_logger()

DEFAULT_TTL = timedelta(minutes=10)


class ResourceListSource(Protocol):
    """Anything that can fetch the full resource list for a base URL."""

    async def get_resource_list(self, base_url: str) -> Sequence[ServiceResource]: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ResourceCache:
    def __init__(
        self,
        source: ResourceListSource,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._source = source
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, ResourceListCacheEntry] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get_entry(self, base_url: str) -> ResourceListCacheEntry | None:
        """Return the entry for ``base_url`` if it is still valid, else ``None``."""
        entry = self._entries.get(base_url)
        if entry is None:
            return None
        if not entry.is_valid(self._clock()):
            # Expired entries are indistinguishable from absent ones
            del self._entries[base_url]
            log.debug("resource_cache_expired", base_url=base_url, fetched_at=entry.fetched_at)
            return None
        return entry

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def get_resource_list(self, base_url: str) -> tuple[ServiceResource, ...]:
        entry = self.get_entry(base_url)
        if entry is not None:
            log.debug("resource_cache_hit", base_url=base_url)
            return entry.resources

        lock = self._locks.setdefault(base_url, asyncio.Lock())
        async with lock:
            # Another task may have populated the entry while we waited
            entry = self.get_entry(base_url)
            if entry is not None:
                return entry.resources
            return await self._populate(base_url)

    async def get_resource_by_id(self, base_url: str, resource_id: str) -> ServiceResource | None:
        """Exact, case-sensitive match on ``identifier``. ``None`` when absent."""
        resources = await self.get_resource_list(base_url)
        return next((r for r in resources if r.identifier == resource_id), None)

    async def get_keywords(self, base_url: str) -> list[str]:
        return build_keyword_index(await self.get_resource_list(base_url))

    async def get_resources_by_keyword(
        self, base_url: str, keyword: str
    ) -> list[ServiceResource]:
        resources = await self.get_resource_list(base_url)
        return [r for r in resources if has_keyword(r, keyword)]

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    async def _populate(self, base_url: str) -> tuple[ServiceResource, ...]:
        log.info("resource_cache_miss", base_url=base_url)
        resources = tuple(await self._source.get_resource_list(base_url))

        entry = ResourceListCacheEntry(
            base_url=base_url,
            resources=resources,
            fetched_at=self._clock(),
            ttl=self._ttl,
        )
        self._entries[base_url] = entry
        log.info(
            "resource_list_cached",
            base_url=base_url,
            count=len(resources),
            expires_at=entry.expires_at.isoformat(),
        )
        return entry.resources
