"""Google Books resolver implementation."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from tsundoku.core.dates import normalize_published_date
from tsundoku.core.exceptions import ResolverUnavailableError
from tsundoku.core.models import BookRecord, join_values
from tsundoku.core.types import PipelineState, SourceName
from tsundoku.resolution.base import AbstractResolver, ResolverConfig

logger = logging.getLogger(__name__)

ISBN_13_TYPE = "ISBN_13"
ISBN_10_TYPE = "ISBN_10"


class _GoogleModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class IndustryIdentifier(_GoogleModel):
    type: str = ""
    identifier: str = ""


class ImageLinks(_GoogleModel):
    small_thumbnail: str = ""
    thumbnail: str = ""


class VolumeInfo(_GoogleModel):
    title: str = ""
    subtitle: str = ""
    authors: list[str] = Field(default_factory=list)
    publisher: str = ""
    published_date: str = ""
    description: str = ""
    industry_identifiers: list[IndustryIdentifier] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    image_links: ImageLinks = Field(default_factory=ImageLinks)
    page_count: int | None = None
    language: str = ""


class GoogleVolume(_GoogleModel):
    id: str = ""
    self_link: str = ""
    volume_info: VolumeInfo = Field(default_factory=VolumeInfo)


class GoogleVolumesResponse(_GoogleModel):
    """Body of ``GET /volumes``."""

    kind: str = ""
    total_items: int = 0
    items: list[GoogleVolume] = Field(default_factory=list)


def _find_identifier(identifiers: list[IndustryIdentifier], id_type: str) -> str:
    """First identifier of the given type wins."""
    for ident in identifiers:
        if ident.type == id_type:
            return ident.identifier
    return ""


class GoogleBooksResolver(AbstractResolver):
    """
    Google Books API resolver (primary book source).

    API Documentation: https://developers.google.com/books/docs/v1/using

    Works without API key; a key only raises the quota.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.GOOGLE
    BASE_URL: ClassVar[str] = "https://www.googleapis.com/books/v1"
    FETCH_STATE: ClassVar[PipelineState] = PipelineState.FETCHING_GOOGLE

    def __init__(self, config: ResolverConfig | None = None) -> None:
        super().__init__(config)
        self._api_key = config.api_key if config else None

    @property
    def priority(self) -> int:
        return 10

    async def fetch(self, isbn: str) -> Any:
        """Query volumes by ISBN."""
        params: dict[str, Any] = {"q": f"isbn:{isbn}"}
        if self._api_key:
            params["key"] = self._api_key

        logger.debug(f"Querying Google Books for {isbn}")
        return await self._get_json("/volumes", params=params)

    def parse_payload(self, payload: Any) -> GoogleVolumesResponse:
        """Deserialize the body into the typed response model."""
        try:
            return GoogleVolumesResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise ResolverUnavailableError(
                message=f"Unexpected Google Books response: {e}",
                source=self.source_name.value,
            ) from e

    def resolve_response(self, payload: Any) -> BookRecord | None:
        """Build a record from the top-ranked volume."""
        response = (
            payload if isinstance(payload, GoogleVolumesResponse) else self.parse_payload(payload)
        )

        if response.total_items < 1 or not response.items:
            return None

        volume = response.items[0]
        info = volume.volume_info
        if not info.title:
            logger.info(f"Google Books volume {volume.id} has no title")
            return None

        return BookRecord(
            title=info.title,
            subtitle=info.subtitle,
            description=info.description,
            publisher=info.publisher,
            thumbnail=info.image_links.thumbnail,
            published_date=normalize_published_date(info.published_date),
            self_link=volume.self_link,
            categories=join_values(info.categories),
            authors=join_values(info.authors),
            isbn_10=_find_identifier(info.industry_identifiers, ISBN_10_TYPE),
            isbn_13=_find_identifier(info.industry_identifiers, ISBN_13_TYPE),
            source=self.source_name,
        )
