"""Error codes and the single exception type raised across the service.

Every failure that reaches the HTTP layer is a ``ServiceCatalogueError``.
The exception handler in ``servicecatalogue.api.exception_handlers`` maps
the code to a status and serialises ``to_dict()`` as the response body.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UNKNOWN_ENVIRONMENT = "UNKNOWN_ENVIRONMENT"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"


class ServiceCatalogueError(Exception):
    """Structured error carrying a machine-readable code.

    ``recoverable`` tells the caller whether retrying the same request
    later may succeed (upstream outages) or not (bad input).
    """

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }


def upstream_unavailable(url: str, reason: str) -> ServiceCatalogueError:
    return ServiceCatalogueError(
        code=ErrorCode.UPSTREAM_UNAVAILABLE,
        message=f"Upstream request to {url} failed: {reason}",
        recoverable=True,
    )
