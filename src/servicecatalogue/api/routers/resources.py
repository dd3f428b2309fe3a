"""Resource Registry routes: ``/api/v1/{environment}/resource``.

The full list, keyword index and keyword lookup are served from the resource
cache. Everything else is passed through to the upstream registry.
"""

from collections.abc import Sequence
from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Body, Query
from fastapi.responses import Response
from pydantic import TypeAdapter

from servicecatalogue.api.dependencies import RegistryBaseUrl, State
from servicecatalogue.errors import ErrorCode, ServiceCatalogueError
from servicecatalogue.models.resource import ResourceSearch, ServiceResource

log = structlog.get_logger()

router = APIRouter()

_RESOURCES = TypeAdapter(Sequence[ServiceResource])
_JSON = "application/json"


# Fields absent upstream stay absent in the response
def _json_resources(resources: Sequence[ServiceResource]) -> Response:
    return Response(content=_RESOURCES.dump_json(resources, exclude_unset=True), media_type=_JSON)


@router.get("/resourcelist", summary="List all resources")
async def get_resource_list(
    base_url: RegistryBaseUrl,
    state: State,
    include_apps: Annotated[bool | None, Query(alias="includeApps")] = None,
    include_altinn2: Annotated[bool | None, Query(alias="includeAltinn2")] = None,
) -> Response:
    """Full resource list. Filtered variants bypass the cache."""
    if include_apps is None and include_altinn2 is None:
        resources = await state.resource_cache.get_resource_list(base_url)
    else:
        resources = await state.registry_client.get_resource_list(
            base_url, include_apps, include_altinn2
        )
    return _json_resources(resources)


@router.get("/keywords", summary="List distinct keywords")
async def get_keywords(base_url: RegistryBaseUrl, state: State) -> list[str]:
    return await state.resource_cache.get_keywords(base_url)


@router.get("/bykeyword/{word}", summary="Resources tagged with a keyword")
async def get_resources_by_keyword(word: str, base_url: RegistryBaseUrl, state: State) -> Response:
    return _json_resources(await state.resource_cache.get_resources_by_keyword(base_url, word))


@router.get("/search", summary="Search resources")
async def search_resources(
    base_url: RegistryBaseUrl,
    state: State,
    id: str | None = None,
    title: str | None = None,
    description: str | None = None,
    resource_type: Annotated[str | None, Query(alias="resourceType")] = None,
    keyword: str | None = None,
    reference: str | None = None,
) -> Response:
    search = ResourceSearch(
        id=id,
        title=title,
        description=description,
        resource_type=resource_type,
        keyword=keyword,
        reference=reference,
    )
    return _json_resources(await state.registry_client.search_resources(base_url, search))


@router.get("/bysubject", summary="Resources available to a single subject")
async def get_resources_by_subject(
    base_url: RegistryBaseUrl,
    state: State,
    subject: Annotated[dict[str, Any], Body()],
) -> Response:
    return _json_resources(await state.registry_client.get_resources_by_subject(base_url, subject))


@router.post("/bysubjects", summary="Resources available to the given subjects")
async def get_resources_by_subjects(
    base_url: RegistryBaseUrl,
    state: State,
    subject_urns: Annotated[list[str], Body()],
) -> Response:
    content = await state.registry_client.get_resources_by_subjects(base_url, subject_urns)
    return Response(content=content, media_type=_JSON)


@router.get("/orgs", summary="List resource owner organizations")
async def get_org_list(base_url: RegistryBaseUrl, state: State) -> dict:
    return await state.registry_client.get_org_list(base_url)


@router.get(
    "/{resource_id}",
    summary="Get a single resource",
    responses={404: {"description": "Resource not found"}},
)
async def get_resource(resource_id: str, base_url: RegistryBaseUrl, state: State) -> Response:
    """Look the resource up in the cached list, then fall back to the registry."""
    resource = await state.resource_cache.get_resource_by_id(base_url, resource_id)
    if resource is None:
        log.info("resource_not_in_cache", base_url=base_url, resource_id=resource_id)
        resource = await state.registry_client.get_resource(base_url, resource_id)
    if resource is None:
        raise ServiceCatalogueError(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=f"Resource not found: {resource_id}",
        )
    return Response(content=resource.model_dump_json(exclude_unset=True), media_type=_JSON)


@router.get("/{resource_id}/policy", summary="Resource policy")
async def get_resource_policy(
    resource_id: str, base_url: RegistryBaseUrl, state: State
) -> Response:
    content = await state.registry_client.get_resource_policy(base_url, resource_id)
    return Response(content=content, media_type=_JSON)


@router.get("/{resource_id}/policy/subjects", summary="Subjects referenced by the policy")
async def get_resource_policy_subjects(
    resource_id: str, base_url: RegistryBaseUrl, state: State
) -> Response:
    content = await state.registry_client.get_resource_policy_subjects(base_url, resource_id)
    return Response(content=content, media_type=_JSON)


@router.get("/{resource_id}/policy/rules", summary="Rules of the policy")
async def get_resource_policy_rules(
    resource_id: str, base_url: RegistryBaseUrl, state: State
) -> Response:
    content = await state.registry_client.get_resource_policy_rules(base_url, resource_id)
    return Response(content=content, media_type=_JSON)
