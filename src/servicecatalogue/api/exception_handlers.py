"""Maps ``ServiceCatalogueError`` to HTTP responses.

Error response format:
    {"error": {"code": "UPSTREAM_UNAVAILABLE", "message": "...", "recoverable": true}}
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from servicecatalogue.errors import ErrorCode, ServiceCatalogueError

log = structlog.get_logger()

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.UNKNOWN_ENVIRONMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UPSTREAM_UNAVAILABLE: status.HTTP_502_BAD_GATEWAY,
}


async def service_catalogue_error_handler(
    request: Request, exc: ServiceCatalogueError
) -> JSONResponse:
    status_code = ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        log.error(
            "request_failed",
            path=request.url.path,
            code=exc.code.value,
            message=exc.message,
        )
    else:
        log.info("request_rejected", path=request.url.path, code=exc.code.value)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        ServiceCatalogueError,
        service_catalogue_error_handler,  # type: ignore[arg-type]
    )
