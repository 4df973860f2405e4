"""Domain models for resolved book records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .types import SourceName


def join_values(values: Iterable[str | None]) -> str:
    """Join non-empty strings with a comma, keeping their order."""
    return ",".join(v for v in values if v)


def _split(joined: str) -> list[str]:
    return [part for part in joined.split(",") if part]


class BookRecord(BaseModel):
    """
    Canonical book metadata produced by a provider adapter.

    Records are immutable and handed to the store exactly once. Authors and
    categories are held in their joined storage form.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Title of the book")
    subtitle: str = Field(default="", description="Subtitle")
    description: str = Field(default="", description="Description or blurb")
    publisher: str = Field(default="", description="Publisher name")
    thumbnail: str = Field(default="", description="Cover thumbnail URL")
    published_date: datetime | None = Field(
        default=None, description="Normalized publication date (UTC)"
    )
    self_link: str = Field(default="", description="Provider detail link")
    categories: str = Field(default="", description="Comma-joined categories")
    authors: str = Field(default="", description="Comma-joined authors")
    isbn_10: str = Field(default="", description="10-digit ISBN")
    isbn_13: str = Field(default="", description="13-digit ISBN")
    source: SourceName = Field(..., description="Provider that produced the record")

    @property
    def author_list(self) -> list[str]:
        return _split(self.authors)

    @property
    def category_list(self) -> list[str]:
        return _split(self.categories)
