"""Client for the Access Management metadata API (``/accessmanagement/api/v1/meta``).

Payloads are passed through as plain JSON; the catalogue does not interpret
packages, areas or roles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from servicecatalogue.upstream import (
    JsonList,
    JsonObject,
    Params,
    UpstreamClient,
    bool_param,
    encode_segment,
)

if TYPE_CHECKING:
    from uuid import UUID

log = structlog.get_logger()

_PACKAGES = "/info/accesspackages"
_ROLES = "/info/roles"


class MetadataClient(UpstreamClient):
    base_path = "/accessmanagement/api/v1/meta"

    # ------------------------------------------------------------------
    # Access packages
    # ------------------------------------------------------------------

    async def search_packages(
        self,
        base_url: str,
        term: str | None = None,
        resource_provider_codes: list[str] | None = None,
        search_in_resources: bool | None = None,
        type_name: str | None = None,
    ) -> JsonList:
        params: Params = {}
        if term:
            params["term"] = term
        if resource_provider_codes:
            params["resourceProviderCode"] = list(resource_provider_codes)
        if search_in_resources is not None:
            params["searchInResources"] = bool_param(search_in_resources)
        if type_name:
            params["typeName"] = type_name

        url = self._url(base_url, f"{_PACKAGES}/search")
        log.info("fetching_package_search", url=url, term=term)
        return await self._get_list(url, params=params or None)

    async def export_packages(self, base_url: str) -> JsonList:
        url = self._url(base_url, f"{_PACKAGES}/export")
        log.info("fetching_package_export", url=url)
        return await self._get_list(url)

    async def get_groups(self, base_url: str) -> JsonList:
        url = self._url(base_url, f"{_PACKAGES}/group")
        log.info("fetching_groups", url=url)
        return await self._get_list(url)

    async def get_group(self, base_url: str, group_id: UUID) -> JsonObject | None:
        return await self._get_object(self._url(base_url, f"{_PACKAGES}/group/{group_id}"))

    async def get_group_areas(self, base_url: str, group_id: UUID) -> JsonList:
        return await self._get_list(self._url(base_url, f"{_PACKAGES}/group/{group_id}/area"))

    async def get_area(self, base_url: str, area_id: UUID) -> JsonObject | None:
        return await self._get_object(self._url(base_url, f"{_PACKAGES}/area/{area_id}"))

    async def get_area_packages(self, base_url: str, area_id: UUID) -> JsonList:
        return await self._get_list(self._url(base_url, f"{_PACKAGES}/area/{area_id}/package"))

    async def get_package(self, base_url: str, package_id: UUID) -> JsonObject | None:
        return await self._get_object(self._url(base_url, f"{_PACKAGES}/{package_id}"))

    async def get_package_by_urn(self, base_url: str, urn: str) -> JsonObject | None:
        url = self._url(base_url, f"{_PACKAGES}/urn/{encode_segment(urn)}")
        return await self._get_object(url)

    async def get_package_resources(self, base_url: str, package_id: UUID) -> JsonList:
        return await self._get_list(self._url(base_url, f"{_PACKAGES}/{package_id}/resource"))

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    async def get_roles(self, base_url: str) -> JsonList:
        url = self._url(base_url, _ROLES)
        log.info("fetching_roles", url=url)
        return await self._get_list(url)

    async def get_role(self, base_url: str, role_id: UUID) -> JsonObject | None:
        return await self._get_object(self._url(base_url, f"{_ROLES}/{role_id}"))

    async def get_role_packages(
        self,
        base_url: str,
        role: str,
        variant: str,
        include_resources: bool | None = None,
    ) -> JsonList:
        path = f"{_ROLES}/{encode_segment(role)}/{encode_segment(variant)}/package"
        return await self._get_list(
            self._url(base_url, path),
            params=_flag("includeResources", include_resources),
        )

    async def get_role_resources(
        self,
        base_url: str,
        role: str,
        variant: str,
        include_package_resources: bool | None = None,
    ) -> JsonList:
        path = f"{_ROLES}/{encode_segment(role)}/{encode_segment(variant)}/resource"
        return await self._get_list(
            self._url(base_url, path),
            params=_flag("includePackageResources", include_package_resources),
        )

    async def get_role_packages_by_id(
        self,
        base_url: str,
        role_id: UUID,
        variant: str,
        include_resources: bool | None = None,
    ) -> JsonList:
        path = f"{_ROLES}/id/{role_id}/{encode_segment(variant)}/package"
        return await self._get_list(
            self._url(base_url, path),
            params=_flag("includeResources", include_resources),
        )

    async def get_role_resources_by_id(
        self,
        base_url: str,
        role_id: UUID,
        variant: str,
        include_package_resources: bool | None = None,
    ) -> JsonList:
        path = f"{_ROLES}/id/{role_id}/{encode_segment(variant)}/resource"
        return await self._get_list(
            self._url(base_url, path),
            params=_flag("includePackageResources", include_package_resources),
        )

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    async def get_organization_subtypes(self, base_url: str) -> JsonList:
        url = self._url(base_url, "/types/organization/subtypes")
        log.info("fetching_organization_subtypes", url=url)
        return await self._get_list(url)


def _flag(name: str, value: bool | None) -> Params | None:
    if value is None:
        return None
    return {name: bool_param(value)}
