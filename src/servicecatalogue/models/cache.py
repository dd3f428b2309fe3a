from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from servicecatalogue.models.resource import ServiceResource


class ResourceListCacheEntry(BaseModel):
    """Full resource list for one upstream environment."""

    model_config = ConfigDict(frozen=True)

    base_url: str  # Partition key
    resources: tuple[ServiceResource, ...]
    fetched_at: datetime
    ttl: timedelta

    @property
    def expires_at(self) -> datetime:
        return self.fetched_at + self.ttl

    def is_valid(self, now: datetime) -> bool:
        return now - self.fetched_at < self.ttl
