from servicecatalogue.api.routers.metadata import router as metadata_router
from servicecatalogue.api.routers.resources import router as resources_router

__all__ = ["metadata_router", "resources_router"]
