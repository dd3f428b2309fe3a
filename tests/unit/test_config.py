"""Unit tests for configuration defaults and validation."""

from __future__ import annotations

import platformdirs
import pytest
from pydantic import ValidationError

from servicecatalogue.config import (
    _DEFAULT_CONFIG_DIR,
    CacheSettings,
    Settings,
    UpstreamSettings,
)


class TestDefaults:
    def test_default_config_dir_matches_platformdirs(self) -> None:
        assert platformdirs.user_config_dir("servicecatalogue") == _DEFAULT_CONFIG_DIR

    def test_cache_ttl_defaults_to_ten_minutes(self) -> None:
        assert Settings().cache.ttl_minutes == 10

    def test_default_environments(self) -> None:
        settings = Settings()
        assert settings.resource_registry.environments == {
            "tt02": "https://platform.tt02.altinn.no",
            "prod": "https://platform.altinn.no",
        }
        assert settings.metadata.environments == settings.resource_registry.environments

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICECATALOGUE__CACHE__TTL_MINUTES", "3")
        monkeypatch.setenv("SERVICECATALOGUE__HTTP__TIMEOUT_SECONDS", "5")
        settings = Settings()
        assert settings.cache.ttl_minutes == 3
        assert settings.http.timeout_seconds == 5.0


class TestUpstreamSettings:
    def test_names_lowercased_and_trailing_slash_removed(self) -> None:
        settings = UpstreamSettings(environments={"AT22": "https://platform.at22.altinn.cloud/"})
        assert settings.environments == {"at22": "https://platform.at22.altinn.cloud"}

    def test_non_http_url_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UpstreamSettings(environments={"tt02": "platform.tt02.altinn.no"})


class TestConfigValidation:
    def test_wrong_type_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(server={"port": "not-a-number"})  # type: ignore[arg-type]

    def test_unknown_top_level_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(completely_unknown_field="oops")  # type: ignore[call-arg]

    def test_unknown_nested_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(ttl_minuts=5)  # type: ignore[call-arg]

    def test_zero_ttl_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(ttl_minutes=0)
