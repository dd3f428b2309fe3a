"""Client for the Resource Registry API (``/resourceregistry/api/v1/resource``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import TypeAdapter

from servicecatalogue.models.resource import ServiceResource
from servicecatalogue.upstream import (
    JsonObject,
    Params,
    UpstreamClient,
    bool_param,
    encode_segment,
)

if TYPE_CHECKING:
    from servicecatalogue.models.resource import ResourceSearch

log = structlog.get_logger()

_RESOURCE = TypeAdapter(ServiceResource)
_RESOURCE_LIST = TypeAdapter(list[ServiceResource] | None)
_ORG_LIST = TypeAdapter(JsonObject)


class ResourceRegistryClient(UpstreamClient):
    """Typed access to the Resource Registry. Satisfies ``ResourceListSource``."""

    base_path = "/resourceregistry/api/v1/resource"

    async def get_resource_list(
        self,
        base_url: str,
        include_apps: bool | None = None,
        include_altinn2: bool | None = None,
    ) -> list[ServiceResource]:
        params: Params = {}
        if include_apps is not None:
            params["includeApps"] = bool_param(include_apps)
        if include_altinn2 is not None:
            params["includeAltinn2"] = bool_param(include_altinn2)

        url = self._url(base_url, "/resourcelist")
        log.info("fetching_resource_list", url=url, **params)
        return await self._get_items(url, _RESOURCE_LIST, params=params or None)

    async def get_resource(self, base_url: str, resource_id: str) -> ServiceResource | None:
        url = self._url(base_url, f"/{encode_segment(resource_id)}")
        return await self._get_optional(url, _RESOURCE)

    async def search_resources(
        self, base_url: str, search: ResourceSearch
    ) -> list[ServiceResource]:
        # Upstream search is a GET with a JSON body
        url = self._url(base_url, "/search")
        return await self._get_items(url, _RESOURCE_LIST, json=search.to_body())

    async def get_resources_by_subject(
        self, base_url: str, subject: JsonObject
    ) -> list[ServiceResource]:
        """Resources available to one subject. Also a GET with a JSON body."""
        url = self._url(base_url, "/bysubject")
        return await self._get_items(url, _RESOURCE_LIST, json=subject)

    async def get_resources_by_subjects(self, base_url: str, subject_urns: list[str]) -> bytes:
        url = self._url(base_url, "/bysubjects")
        return await self._raw("POST", url, json=subject_urns)

    async def get_org_list(self, base_url: str) -> JsonObject:
        url = self._url(base_url, "/orgs")
        return await self._get(url, _ORG_LIST)

    async def get_resource_policy(self, base_url: str, resource_id: str) -> bytes:
        return await self._raw("GET", self._url(base_url, f"/{encode_segment(resource_id)}/policy"))

    async def get_resource_policy_subjects(self, base_url: str, resource_id: str) -> bytes:
        path = f"/{encode_segment(resource_id)}/policy/subjects"
        return await self._raw("GET", self._url(base_url, path))

    async def get_resource_policy_rules(self, base_url: str, resource_id: str) -> bytes:
        path = f"/{encode_segment(resource_id)}/policy/rules"
        return await self._raw("GET", self._url(base_url, path))
