"""Logical environment name → upstream base URL resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicecatalogue.errors import ErrorCode, ServiceCatalogueError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from servicecatalogue.config import UpstreamSettings


class EnvironmentResolver:
    """Case-insensitive lookup over one upstream's configured environments."""

    def __init__(self, environments: Mapping[str, str]) -> None:
        self._environments = {
            name.lower(): url.rstrip("/") for name, url in environments.items()
        }

    @classmethod
    def from_settings(cls, settings: UpstreamSettings) -> EnvironmentResolver:
        return cls(settings.environments)

    @property
    def names(self) -> list[str]:
        return sorted(self._environments)

    def resolve(self, environment: str) -> str:
        """Return the base URL for ``environment`` or raise UNKNOWN_ENVIRONMENT."""
        base_url = self._environments.get(environment.strip().lower())
        if base_url is None:
            raise ServiceCatalogueError(
                code=ErrorCode.UNKNOWN_ENVIRONMENT,
                message=f"Unknown environment: {environment}",
                recoverable=False,
            )
        return base_url
