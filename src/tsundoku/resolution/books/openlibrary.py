"""OpenLibrary resolver implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from tsundoku.core.dates import normalize_published_date
from tsundoku.core.exceptions import ShapeViolationError
from tsundoku.core.extraction import extract_field
from tsundoku.core.models import BookRecord
from tsundoku.core.types import PipelineState, SourceName
from tsundoku.resolution.base import AbstractResolver, ResolverConfig

logger = logging.getLogger(__name__)


class OpenLibraryResolver(AbstractResolver):
    """
    OpenLibrary Books API resolver (free, no API key required).

    API Documentation: https://openlibrary.org/dev/docs/api/books

    The ``jscmd=details`` body is keyed by the requested bibkey and its
    ``details`` subtree has no fixed schema, so every content field goes
    through ``extract_field``.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.OPEN_LIBRARY
    BASE_URL: ClassVar[str] = "https://openlibrary.org"
    FETCH_STATE: ClassVar[PipelineState] = PipelineState.FETCHING_OPEN_LIBRARY

    # Top-level keys the provider always sends alongside ``details``
    THUMBNAIL_KEY: ClassVar[str] = "thumbnail_url"
    INFO_LINK_KEY: ClassVar[str] = "info_url"

    def __init__(self, config: ResolverConfig | None = None) -> None:
        super().__init__(config)

    @property
    def priority(self) -> int:
        return 100

    async def fetch(self, isbn: str) -> Any:
        """Query the books API by ISBN bibkey."""
        params = {
            "bibkeys": f"ISBN:{isbn}",
            "jscmd": "details",
            "format": "json",
        }
        logger.debug(f"Querying OpenLibrary for {isbn}")
        return await self._get_json("/api/books", params=params)

    def _required_link(self, entry: Mapping[str, Any], key: str) -> str:
        value = entry.get(key)
        if not isinstance(value, str):
            raise ShapeViolationError(
                message=f"OpenLibrary entry is missing '{key}'",
                source=self.source_name.value,
                path=key,
            )
        return value

    def resolve_response(self, payload: Any) -> BookRecord | None:
        """Build a record from the first bibkey entry."""
        if not isinstance(payload, Mapping) or not payload:
            return None

        entry = next(iter(payload.values()))
        if not isinstance(entry, Mapping):
            return None

        details = entry.get("details")
        if not isinstance(details, Mapping):
            return None

        title = extract_field(details, "title")
        if not title:
            return None

        # Unlike Google, a missing date stays unset instead of defaulting
        publish_date = extract_field(details, "publish_date")
        published = normalize_published_date(publish_date) if publish_date is not None else None

        return BookRecord(
            title=title,
            subtitle=extract_field(details, "subtitle") or "",
            description=extract_field(details, "description") or "",
            authors=extract_field(details, "by_statement") or "",
            publisher=extract_field(details, "publishers") or "",
            categories=extract_field(details, "subjects") or "",
            isbn_13=extract_field(details, "isbn_13") or "",
            isbn_10=extract_field(details, "isbn_10") or "",
            published_date=published,
            thumbnail=self._required_link(entry, self.THUMBNAIL_KEY),
            self_link=self._required_link(entry, self.INFO_LINK_KEY),
            source=self.source_name,
        )
