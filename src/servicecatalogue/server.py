"""Entry point: ``python -m servicecatalogue.server`` or the ``servicecatalogue`` script.

Settings are loaded (and validated) before anything else, so a bad config
value exits non-zero before uvicorn binds a socket.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
import uvicorn

from servicecatalogue.api.app import create_app
from servicecatalogue.config import Settings

if TYPE_CHECKING:
    from servicecatalogue.config import LoggingSettings


def setup_logging(settings: LoggingSettings) -> None:
    """Configure structlog and stdlib logging to write to stderr."""
    level = logging.getLevelName(settings.level)

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    renderer: structlog.types.Processor
    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def main() -> None:
    settings = Settings()
    setup_logging(settings.logging)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
