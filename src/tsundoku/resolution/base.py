"""Abstract base resolver with HTTP client management."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel

from tsundoku.core.exceptions import ResolverUnavailableError, ShapeViolationError
from tsundoku.core.models import BookRecord
from tsundoku.core.types import PipelineState, ResolutionStatus, SourceName

logger = logging.getLogger(__name__)


class ResolverConfig(BaseModel):
    """Configuration for a resolver."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = 30.0
    enabled: bool = True


class ResolutionResult(BaseModel):
    """Result of a single provider attempt."""

    status: ResolutionStatus
    record: BookRecord | None = None
    error_message: str | None = None
    source: SourceName
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS and self.record is not None


class AbstractResolver(ABC):
    """
    Abstract base class for catalog provider adapters.

    An adapter has two halves: ``fetch`` performs the HTTP call and returns
    the decoded JSON body, ``resolve_response`` turns that body into a
    ``BookRecord`` (or ``None`` when the provider has no usable match).
    ``resolve`` chains them for the pipeline.

    Transport failures raise ``ResolverUnavailableError``. No retries are made.
    """

    SOURCE_NAME: ClassVar[SourceName]
    BASE_URL: ClassVar[str]
    FETCH_STATE: ClassVar[PipelineState]

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> SourceName:
        """The provider this resolver talks to."""
        return self.SOURCE_NAME

    @property
    def fetch_state(self) -> PipelineState:
        """Pipeline state recorded while this resolver runs."""
        return self.FETCH_STATE

    @property
    def is_enabled(self) -> bool:
        """Whether this resolver is enabled."""
        return self.config.enabled

    @property
    def priority(self) -> int:
        """Priority for fallback ordering (lower = tried first)."""
        return 100

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url or self.BASE_URL,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPStatusError as e:
            raise ResolverUnavailableError(
                message=f"HTTP {e.response.status_code} from {self.source_name}",
                source=self.source_name.value,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ResolverUnavailableError(
                message=f"HTTP error: {e}",
                source=self.source_name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": "tsundoku/0.1",
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, url: str, **kwargs: Any) -> Any:
        """GET ``url`` and decode the JSON body."""
        async with self._get_client() as client:
            response = await client.get(url, **kwargs)
            response.raise_for_status()

        try:
            return response.json()
        except ValueError as e:
            raise ResolverUnavailableError(
                message=f"Could not decode response body: {e}",
                source=self.source_name.value,
                status_code=response.status_code,
            ) from e

    @abstractmethod
    async def fetch(self, isbn: str) -> Any:
        """Fetch the raw provider payload for an ISBN."""
        ...

    @abstractmethod
    def resolve_response(self, payload: Any) -> BookRecord | None:
        """
        Convert a raw provider payload into a canonical record.

        Returns:
            The record, or None when the provider reports no usable match.

        Raises:
            ShapeViolationError: if a provider-guaranteed field is missing
        """
        ...

    async def resolve(self, isbn: str) -> ResolutionResult:
        """Fetch and convert in one step."""
        start = time.monotonic()
        payload = await self.fetch(isbn)

        try:
            record = self.resolve_response(payload)
        except ShapeViolationError as e:
            logger.warning(f"{self.source_name} returned malformed data for {isbn}: {e}")
            return ResolutionResult(
                status=ResolutionStatus.ERROR,
                source=self.source_name,
                error_message=str(e),
                duration_ms=(time.monotonic() - start) * 1000,
            )

        return ResolutionResult(
            status=ResolutionStatus.SUCCESS if record else ResolutionStatus.NOT_FOUND,
            record=record,
            source=self.source_name,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    async def __aenter__(self) -> "AbstractResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
