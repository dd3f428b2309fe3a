"""Upstream payload builders shared by unit and integration tests."""

from __future__ import annotations

from typing import Any

TT02 = "https://platform.tt02.altinn.no"
PROD = "https://platform.altinn.no"

RESOURCE_LIST_PATH = "/resourceregistry/api/v1/resource/resourcelist"


def resource_payload(identifier: str, *words: str | None, **extra: Any) -> dict[str, Any]:
    return {
        "identifier": identifier,
        "title": {"nb": identifier, "en": identifier},
        "keywords": [{"word": w, "language": "nb"} for w in words],
        **extra,
    }
