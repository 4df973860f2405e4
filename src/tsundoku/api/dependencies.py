"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from tsundoku.services.resolution import ResolutionPipeline


async def get_pipeline(request: Request) -> ResolutionPipeline:
    """Get the shared resolution pipeline from app state."""
    return request.app.state.pipeline


Pipeline = Annotated[ResolutionPipeline, Depends(get_pipeline)]
