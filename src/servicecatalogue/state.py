"""Process-wide application state, built once at startup and shared by all requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from servicecatalogue.cache import ResourceCache
from servicecatalogue.environments import EnvironmentResolver
from servicecatalogue.metadata_client import MetadataClient
from servicecatalogue.registry_client import ResourceRegistryClient

if TYPE_CHECKING:
    import httpx

    from servicecatalogue.config import Settings


@dataclass
class AppState:
    settings: Settings
    http_client: httpx.AsyncClient
    registry_environments: EnvironmentResolver
    metadata_environments: EnvironmentResolver
    registry_client: ResourceRegistryClient
    metadata_client: MetadataClient
    resource_cache: ResourceCache


def build_state(settings: Settings, http_client: httpx.AsyncClient) -> AppState:
    """Wire clients, resolvers and the resource cache around one HTTP client."""
    registry_client = ResourceRegistryClient(http_client)
    return AppState(
        settings=settings,
        http_client=http_client,
        registry_environments=EnvironmentResolver.from_settings(settings.resource_registry),
        metadata_environments=EnvironmentResolver.from_settings(settings.metadata),
        registry_client=registry_client,
        metadata_client=MetadataClient(http_client),
        resource_cache=ResourceCache(
            registry_client,
            ttl=timedelta(minutes=settings.cache.ttl_minutes),
        ),
    )
