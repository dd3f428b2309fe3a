"""Shared HTTP plumbing for the upstream API clients.

Every transport failure, non-success status and malformed payload is turned
into a single ``UPSTREAM_UNAVAILABLE`` error here, so the clients built on top
only ever raise ``ServiceCatalogueError``. 404 handling is left to the caller
because some endpoints treat it as absence rather than failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from servicecatalogue.errors import upstream_unavailable

if TYPE_CHECKING:
    from servicecatalogue.config import HttpSettings

log = structlog.get_logger()

T = TypeVar("T")

JsonList = list[Any]
JsonObject = dict[str, Any]

_JSON_LIST = TypeAdapter(JsonList | None)
_JSON_OBJECT = TypeAdapter(JsonObject)

Params = dict[str, str | list[str]]


def build_http_client(settings: HttpSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client used by all upstream clients."""
    timeout = settings.timeout_seconds if settings is not None else 30.0
    return httpx.AsyncClient(
        headers={"Accept": "application/json"},
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
    )


def encode_segment(value: str) -> str:
    """Percent-encode a single path segment (``/`` included)."""
    return quote(value, safe="")


def bool_param(value: bool) -> str:
    return "true" if value else "false"


class UpstreamClient:
    """Base class wrapping an ``httpx.AsyncClient`` with upstream error mapping."""

    base_path: str = ""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    def _url(self, base_url: str, path: str) -> str:
        return f"{base_url}{self.base_path}{path}"

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: Params | None = None,
        json: Any = None,
    ) -> httpx.Response:
        try:
            return await self._client.request(method, url, params=params, json=json)
        except httpx.HTTPError as exc:
            log.error("upstream_request_failed", method=method, url=url, error=repr(exc))
            raise upstream_unavailable(url, type(exc).__name__) from exc

    def _ensure_success(self, response: httpx.Response, url: str) -> None:
        if not response.is_success:
            log.error("upstream_bad_status", url=url, status_code=response.status_code)
            raise upstream_unavailable(url, f"HTTP {response.status_code}")

    def _parse(self, response: httpx.Response, url: str, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_json(response.content)
        except ValidationError as exc:
            log.error("upstream_malformed_payload", url=url, errors=exc.error_count())
            raise upstream_unavailable(url, "malformed payload") from exc

    async def _get(
        self,
        url: str,
        adapter: TypeAdapter[T],
        *,
        params: Params | None = None,
        json: Any = None,
    ) -> T:
        response = await self._send("GET", url, params=params, json=json)
        self._ensure_success(response, url)
        return self._parse(response, url, adapter)

    async def _get_optional(self, url: str, adapter: TypeAdapter[T]) -> T | None:
        """GET that maps 404 to ``None``."""
        response = await self._send("GET", url)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        self._ensure_success(response, url)
        return self._parse(response, url, adapter)

    async def _get_items(
        self,
        url: str,
        adapter: TypeAdapter[list[T] | None],
        *,
        params: Params | None = None,
        json: Any = None,
    ) -> list[T]:
        """GET a JSON array. A ``null`` body counts as an empty array."""
        return await self._get(url, adapter, params=params, json=json) or []

    async def _get_list(self, url: str, *, params: Params | None = None) -> JsonList:
        return await self._get_items(url, _JSON_LIST, params=params)

    async def _get_object(self, url: str) -> JsonObject | None:
        return await self._get_optional(url, _JSON_OBJECT)

    async def _raw(self, method: str, url: str, *, json: Any = None) -> bytes:
        """Return the response body untouched, for JSON passthrough endpoints."""
        response = await self._send(method, url, json=json)
        self._ensure_success(response, url)
        return response.content
