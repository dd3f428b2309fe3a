"""Access Management metadata routes: ``/api/v1/{environment}/meta``.

Pure passthrough to the upstream metadata API.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Query

from servicecatalogue.api.dependencies import MetadataBaseUrl, State
from servicecatalogue.errors import ErrorCode, ServiceCatalogueError

router = APIRouter()

_PACKAGES = "/info/accesspackages"
_ROLES = "/info/roles"


def _found(value: dict[str, Any] | None, what: str) -> dict[str, Any]:
    if value is None:
        raise ServiceCatalogueError(code=ErrorCode.RESOURCE_NOT_FOUND, message=f"{what} not found")
    return value


# ----------------------------------------------------------------------
# Access packages
# ----------------------------------------------------------------------


@router.get(f"{_PACKAGES}/search", summary="Search access packages")
async def search_packages(
    base_url: MetadataBaseUrl,
    state: State,
    term: str | None = None,
    resource_provider_code: Annotated[list[str] | None, Query(alias="resourceProviderCode")] = None,
    search_in_resources: Annotated[bool | None, Query(alias="searchInResources")] = None,
    type_name: Annotated[str | None, Query(alias="typeName")] = None,
) -> list[Any]:
    return await state.metadata_client.search_packages(
        base_url, term, resource_provider_code, search_in_resources, type_name
    )


@router.get(f"{_PACKAGES}/export", summary="Export the full package hierarchy")
async def export_packages(base_url: MetadataBaseUrl, state: State) -> list[Any]:
    return await state.metadata_client.export_packages(base_url)


@router.get(f"{_PACKAGES}/group", summary="List area groups")
async def get_groups(base_url: MetadataBaseUrl, state: State) -> list[Any]:
    return await state.metadata_client.get_groups(base_url)


@router.get(f"{_PACKAGES}/group/{{group_id}}", summary="Get an area group")
async def get_group(group_id: UUID, base_url: MetadataBaseUrl, state: State) -> dict[str, Any]:
    return _found(await state.metadata_client.get_group(base_url, group_id), "Group")


@router.get(f"{_PACKAGES}/group/{{group_id}}/area", summary="Areas in a group")
async def get_group_areas(group_id: UUID, base_url: MetadataBaseUrl, state: State) -> list[Any]:
    return await state.metadata_client.get_group_areas(base_url, group_id)


@router.get(f"{_PACKAGES}/area/{{area_id}}", summary="Get an area")
async def get_area(area_id: UUID, base_url: MetadataBaseUrl, state: State) -> dict[str, Any]:
    return _found(await state.metadata_client.get_area(base_url, area_id), "Area")


@router.get(f"{_PACKAGES}/area/{{area_id}}/package", summary="Packages in an area")
async def get_area_packages(area_id: UUID, base_url: MetadataBaseUrl, state: State) -> list[Any]:
    return await state.metadata_client.get_area_packages(base_url, area_id)


@router.get(f"{_PACKAGES}/urn/{{urn}}", summary="Get a package by URN")
async def get_package_by_urn(urn: str, base_url: MetadataBaseUrl, state: State) -> dict[str, Any]:
    return _found(await state.metadata_client.get_package_by_urn(base_url, urn), "Package")


@router.get(f"{_PACKAGES}/{{package_id}}", summary="Get a package")
async def get_package(package_id: UUID, base_url: MetadataBaseUrl, state: State) -> dict[str, Any]:
    return _found(await state.metadata_client.get_package(base_url, package_id), "Package")


@router.get(f"{_PACKAGES}/{{package_id}}/resource", summary="Resources in a package")
async def get_package_resources(
    package_id: UUID, base_url: MetadataBaseUrl, state: State
) -> list[Any]:
    return await state.metadata_client.get_package_resources(base_url, package_id)


# ----------------------------------------------------------------------
# Roles
# ----------------------------------------------------------------------


@router.get(_ROLES, summary="List roles")
async def get_roles(base_url: MetadataBaseUrl, state: State) -> list[Any]:
    return await state.metadata_client.get_roles(base_url)


@router.get(f"{_ROLES}/{{role_id}}", summary="Get a role")
async def get_role(role_id: UUID, base_url: MetadataBaseUrl, state: State) -> dict[str, Any]:
    return _found(await state.metadata_client.get_role(base_url, role_id), "Role")


@router.get(f"{_ROLES}/id/{{role_id}}/{{variant}}/package", summary="Packages for a role id")
async def get_role_packages_by_id(
    role_id: UUID,
    variant: str,
    base_url: MetadataBaseUrl,
    state: State,
    include_resources: Annotated[bool | None, Query(alias="includeResources")] = None,
) -> list[Any]:
    return await state.metadata_client.get_role_packages_by_id(
        base_url, role_id, variant, include_resources
    )


@router.get(f"{_ROLES}/id/{{role_id}}/{{variant}}/resource", summary="Resources for a role id")
async def get_role_resources_by_id(
    role_id: UUID,
    variant: str,
    base_url: MetadataBaseUrl,
    state: State,
    include_package_resources: Annotated[
        bool | None, Query(alias="includePackageResources")
    ] = None,
) -> list[Any]:
    return await state.metadata_client.get_role_resources_by_id(
        base_url, role_id, variant, include_package_resources
    )


@router.get(f"{_ROLES}/{{role}}/{{variant}}/package", summary="Packages for a role code")
async def get_role_packages(
    role: str,
    variant: str,
    base_url: MetadataBaseUrl,
    state: State,
    include_resources: Annotated[bool | None, Query(alias="includeResources")] = None,
) -> list[Any]:
    return await state.metadata_client.get_role_packages(
        base_url, role, variant, include_resources
    )


@router.get(f"{_ROLES}/{{role}}/{{variant}}/resource", summary="Resources for a role code")
async def get_role_resources(
    role: str,
    variant: str,
    base_url: MetadataBaseUrl,
    state: State,
    include_package_resources: Annotated[
        bool | None, Query(alias="includePackageResources")
    ] = None,
) -> list[Any]:
    return await state.metadata_client.get_role_resources(
        base_url, role, variant, include_package_resources
    )


# ----------------------------------------------------------------------
# Types
# ----------------------------------------------------------------------


@router.get("/types/organization/subtypes", summary="Organization subtypes")
async def get_organization_subtypes(base_url: MetadataBaseUrl, state: State) -> list[Any]:
    return await state.metadata_client.get_organization_subtypes(base_url)
