"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from tsundoku.api.schemas.base import APIBaseSchema
from tsundoku.core.types import PipelineOutcome, PipelineState, SourceName


class BookResponse(APIBaseSchema):
    """Resolved book metadata."""

    title: str
    subtitle: str = ""
    description: str = ""
    publisher: str = ""
    thumbnail: str = ""
    published_date: datetime | None = None
    self_link: str = ""
    categories: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)
    isbn_10: str = ""
    isbn_13: str = ""
    source: SourceName


class ResolveBookResponse(APIBaseSchema):
    """Outcome of a resolution request."""

    outcome: PipelineOutcome
    found: bool
    isbn: str
    title: str | None = None
    record_id: int | None = None
    source: SourceName | None = None
    states: list[PipelineState] = Field(default_factory=list)
    sources_tried: list[SourceName] = Field(default_factory=list)
    book: BookResponse | None = None


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
