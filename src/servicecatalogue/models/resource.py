from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResourceKeyword(BaseModel):
    """Single keyword attached to a resource. ``word`` may be blank upstream."""

    model_config = ConfigDict(frozen=True, extra="allow")

    word: str | None = None
    language: str | None = None


class ServiceResource(BaseModel):
    """Resource as published by the Resource Registry.

    Only ``identifier`` and ``keywords`` are interpreted; every other upstream
    field is kept as extra data and re-emitted unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    identifier: str
    keywords: tuple[ResourceKeyword, ...] | None = None


class ResourceSearch(BaseModel):
    """Filter sent as the JSON body of the upstream search endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    title: str | None = None
    description: str | None = None
    resource_type: str | None = Field(default=None, alias="resourceType")
    keyword: str | None = None
    reference: str | None = None

    def to_body(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)
