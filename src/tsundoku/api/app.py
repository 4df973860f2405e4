"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tsundoku import __version__
from tsundoku.api.routes import health_router, resolve_router
from tsundoku.config import get_settings
from tsundoku.db.session import DatabaseManager
from tsundoku.db.store import DatabaseBookStore
from tsundoku.log import configure_logging
from tsundoku.resolution.registry import ResolverRegistry
from tsundoku.services.resolution import ResolutionPipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    One pipeline is shared by all requests so that its per-ISBN locks
    cover concurrent requests for the same book.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Initializing database connection...")
    app.state.db = DatabaseManager(settings.database_url, echo=settings.debug)

    logger.info("Initializing resolver registry...")
    app.state.resolver_registry = ResolverRegistry.from_settings(settings)
    app.state.pipeline = ResolutionPipeline(
        DatabaseBookStore(app.state.db, timeout=settings.storage_timeout),
        app.state.resolver_registry.resolvers,
    )

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    await app.state.resolver_registry.close_all()
    await app.state.db.close()
    logger.info("Application shutdown complete")


def create_app(
    *,
    title: str = "Tsundoku API",
    description: str = "Resolve ISBNs into stored book metadata",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
    )

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    return app
