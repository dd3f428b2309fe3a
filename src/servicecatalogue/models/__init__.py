from __future__ import annotations

from servicecatalogue.models.cache import ResourceListCacheEntry
from servicecatalogue.models.resource import ResourceKeyword, ResourceSearch, ServiceResource

__all__ = [
    # resource
    "ServiceResource",
    "ResourceKeyword",
    "ResourceSearch",
    # cache
    "ResourceListCacheEntry",
]
