"""API route modules."""

from tsundoku.api.routes.health import router as health_router
from tsundoku.api.routes.resolve import router as resolve_router

__all__ = [
    "health_router",
    "resolve_router",
]
