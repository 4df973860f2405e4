"""Health check endpoints."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tsundoku import __version__
from tsundoku.api.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its database.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "unhealthy"] = "healthy"

    db = getattr(request.app.state, "db", None)
    if db is None:
        services["database"] = "unknown"
    else:
        try:
            async with db.session() as session:
                await session.execute(text("SELECT 1"))
            services["database"] = "up"
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database health check failed: {e}")
            services["database"] = "down"
            overall_status = "unhealthy"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    pipeline = getattr(request.app.state, "pipeline", None)
    return {"ready": pipeline is not None}
