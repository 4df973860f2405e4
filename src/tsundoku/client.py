"""Main library client wiring settings, storage and providers together."""

from __future__ import annotations

import logging

from tsundoku.config import TsundokuSettings
from tsundoku.db.session import DatabaseManager
from tsundoku.db.store import DatabaseBookStore
from tsundoku.resolution.registry import ResolverRegistry
from tsundoku.services.resolution import ConfirmHook, PipelineResult, ResolutionPipeline

logger = logging.getLogger(__name__)


class TsundokuClient:
    """
    Main client for resolving and storing books.

    Usage:
        async with TsundokuClient() as client:
            result = await client.resolve("9780140449136")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: TsundokuSettings | None = None) -> None:
        self._settings = settings or TsundokuSettings()
        self._db: DatabaseManager | None = None
        self._registry: ResolverRegistry | None = None
        self._pipeline: ResolutionPipeline | None = None

    async def __aenter__(self) -> TsundokuClient:
        """Initialize resources on context entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def _initialize(self) -> None:
        logger.info("Connecting to database...")
        self._db = DatabaseManager(self._settings.database_url, echo=self._settings.debug)
        store = DatabaseBookStore(self._db, timeout=self._settings.storage_timeout)
        self._registry = ResolverRegistry.from_settings(self._settings)
        self._pipeline = ResolutionPipeline(store, self._registry.resolvers)

    async def close(self) -> None:
        """Close all resources."""
        if self._registry:
            await self._registry.close_all()
            self._registry = None
        self._pipeline = None

        if self._db:
            await self._db.close()
            self._db = None

    @property
    def pipeline(self) -> ResolutionPipeline:
        if self._pipeline is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with TsundokuClient() as client:'"
            )
        return self._pipeline

    async def resolve(
        self,
        isbn: str,
        *,
        force: bool = False,
        confirm: ConfirmHook | None = None,
    ) -> PipelineResult:
        """Resolve and store a book. See ``ResolutionPipeline.resolve``."""
        return await self.pipeline.resolve(isbn, force=force, confirm=confirm)


async def resolve_book(
    isbn: str,
    *,
    force: bool = False,
    settings: TsundokuSettings | None = None,
) -> PipelineResult:
    """
    Resolve a single book (convenience function).

    For multiple resolutions, use TsundokuClient to reuse connections.
    """
    async with TsundokuClient(settings) as client:
        return await client.resolve(isbn, force=force)
