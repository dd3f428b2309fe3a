"""Unit tests for servicecatalogue.environments."""

from __future__ import annotations

import pytest

from servicecatalogue.config import UpstreamSettings
from servicecatalogue.environments import EnvironmentResolver
from servicecatalogue.errors import ErrorCode, ServiceCatalogueError
from tests.factories import PROD, TT02


@pytest.fixture()
def resolver() -> EnvironmentResolver:
    return EnvironmentResolver({"tt02": TT02, "prod": PROD + "/"})


class TestEnvironmentResolver:
    def test_resolves_known_name(self, resolver: EnvironmentResolver) -> None:
        assert resolver.resolve("tt02") == TT02

    def test_case_insensitive(self, resolver: EnvironmentResolver) -> None:
        assert resolver.resolve("TT02") == TT02
        assert resolver.resolve("Prod") == PROD

    def test_trailing_slash_stripped(self, resolver: EnvironmentResolver) -> None:
        assert resolver.resolve("prod") == PROD

    def test_unknown_name_raises(self, resolver: EnvironmentResolver) -> None:
        with pytest.raises(ServiceCatalogueError) as exc_info:
            resolver.resolve("at22")
        assert exc_info.value.code == ErrorCode.UNKNOWN_ENVIRONMENT
        assert exc_info.value.recoverable is False
        assert "at22" in exc_info.value.message

    def test_names_sorted(self, resolver: EnvironmentResolver) -> None:
        assert resolver.names == ["prod", "tt02"]

    def test_from_settings(self) -> None:
        resolver = EnvironmentResolver.from_settings(UpstreamSettings())
        assert resolver.resolve("tt02") == TT02
