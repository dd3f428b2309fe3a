"""FastAPI application factory.

All catalogue routes live under ``/api/v1/{environment}``; the environment
segment is resolved to an upstream base URL per request. ``/health`` stays
unversioned.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI

from servicecatalogue import __version__
from servicecatalogue.api.dependencies import State
from servicecatalogue.api.exception_handlers import setup_exception_handlers
from servicecatalogue.api.routers import metadata_router, resources_router
from servicecatalogue.config import Settings
from servicecatalogue.state import AppState, build_state
from servicecatalogue.upstream import build_http_client

log = structlog.get_logger()

API_V1_PREFIX = "/api/v1"


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(
        resources_router, prefix="/{environment}/resource", tags=["Resource Registry"]
    )
    v1_router.include_router(metadata_router, prefix="/{environment}/meta", tags=["Metadata"])
    return v1_router


def create_app(settings: Settings | None = None, state: AppState | None = None) -> FastAPI:
    """Create the application.

    When ``state`` is given it is used as-is and the lifespan neither creates
    nor closes an HTTP client (the caller owns it). Otherwise the lifespan
    builds the state from ``settings`` at startup and closes the client at
    shutdown.
    """
    if settings is None:
        settings = state.settings if state is not None else Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if state is not None:
            yield
            return

        http_client = build_http_client(settings.http)
        app.state.catalogue = build_state(settings, http_client)
        log.info(
            "server_started",
            version=__version__,
            registry_environments=app.state.catalogue.registry_environments.names,
            metadata_environments=app.state.catalogue.metadata_environments.names,
            cache_ttl_minutes=settings.cache.ttl_minutes,
        )
        try:
            yield
        finally:
            await http_client.aclose()
            log.info("server_stopped")

    app = FastAPI(
        title="Service Catalogue",
        version=__version__,
        description="Read-only catalogue of Resource Registry resources and access metadata.",
        lifespan=lifespan,
    )
    if state is not None:
        app.state.catalogue = state

    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health(catalogue: State) -> dict[str, object]:
        return {
            "status": "ok",
            "version": __version__,
            "environments": {
                "resource_registry": catalogue.registry_environments.names,
                "metadata": catalogue.metadata_environments.names,
            },
        }

    return app
