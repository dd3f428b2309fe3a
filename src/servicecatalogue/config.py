"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables       (SERVICECATALOGUE__CACHE__TTL_MINUTES=5)
  2. servicecatalogue.yaml       (searched in cwd, then the user config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_APP_NAME = "servicecatalogue"
_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir(_APP_NAME)

_DEFAULT_ENVIRONMENTS: dict[str, str] = {
    "tt02": "https://platform.tt02.altinn.no",
    "prod": "https://platform.altinn.no",
}


def _find_config_file() -> str | None:
    """Return the path of the first servicecatalogue.yaml found, or None."""
    candidates = [
        Path(f"{_APP_NAME}.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / f"{_APP_NAME}.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ServerSettings(_Section):
    host: str = "0.0.0.0"
    port: int = 8080


class UpstreamSettings(_Section):
    """Environment name → platform base URL for one upstream API."""

    environments: dict[str, str] = dict(_DEFAULT_ENVIRONMENTS)

    @field_validator("environments")
    @classmethod
    def validate_environments(cls, v: dict[str, str]) -> dict[str, str]:
        normalised: dict[str, str] = {}
        for name, url in v.items():
            url = url.strip().rstrip("/")
            if not url.startswith(("http://", "https://")):
                raise ValueError(f"Base URL for environment {name!r} must use http or https")
            normalised[name.strip().lower()] = url
        return normalised


class CacheSettings(_Section):
    ttl_minutes: int = 10

    @field_validator("ttl_minutes")
    @classmethod
    def validate_ttl(cls, v: int) -> int:
        if v < 1:
            raise ValueError("ttl_minutes must be >= 1")
        return v


class HttpSettings(_Section):
    timeout_seconds: float = 30.0


class LoggingSettings(_Section):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: SERVICECATALOGUE__SERVER__PORT=9090
        env_prefix="SERVICECATALOGUE__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    server: ServerSettings = ServerSettings()
    resource_registry: UpstreamSettings = UpstreamSettings()
    metadata: UpstreamSettings = UpstreamSettings()
    cache: CacheSettings = CacheSettings()
    http: HttpSettings = HttpSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
