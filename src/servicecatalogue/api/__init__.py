from __future__ import annotations

from servicecatalogue.api.app import create_app

__all__ = ["create_app"]
