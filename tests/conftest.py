"""Shared fixtures: sample registry payloads used by unit and integration tests."""

from __future__ import annotations

from typing import Any

import pytest

from servicecatalogue.models.resource import ServiceResource
from tests.factories import resource_payload


@pytest.fixture()
def sample_payload() -> list[dict[str, Any]]:
    """Resource list as returned by /resourceregistry/api/v1/resource/resourcelist."""
    return [
        resource_payload(
            "urn:altinn:resource:123",
            "Skatt",
            "MVA",
            hasCompetentAuthority={"orgcode": "skd", "organization": "974761076"},
        ),
        resource_payload("skattemelding-innsyn", "skattemelding", "skatt"),
        resource_payload("helseopplysninger", "Helse", "   "),
        {"identifier": "no-keywords", "title": {"nb": "Ingen"}, "keywords": None},
    ]


@pytest.fixture()
def sample_resources(sample_payload: list[dict[str, Any]]) -> list[ServiceResource]:
    return [ServiceResource.model_validate(item) for item in sample_payload]
