"""Resolution pipeline: existing-record check, provider fallback, single write."""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from tsundoku.core.identifiers import normalize_isbn
from tsundoku.core.models import BookRecord
from tsundoku.core.types import PipelineOutcome, PipelineState, SourceName
from tsundoku.db.repositories.book import LookupResult

if TYPE_CHECKING:
    from tsundoku.resolution.base import AbstractResolver

logger = logging.getLogger(__name__)

ConfirmHook = Callable[[BookRecord], bool]


class BookStore(Protocol):
    """Persistence the pipeline depends on."""

    async def lookup(self, isbn: str) -> LookupResult: ...

    async def write(self, record: BookRecord) -> int: ...


@dataclass
class PipelineResult:
    """What one pipeline run ended with."""

    isbn: str
    outcome: PipelineOutcome
    record: BookRecord | None = None
    record_id: int | None = None
    existing_title: str | None = None
    states: list[PipelineState] = field(default_factory=list)
    sources_tried: list[SourceName] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.outcome.found

    @property
    def title(self) -> str | None:
        if self.record is not None:
            return self.record.title
        return self.existing_title

    @property
    def source(self) -> SourceName | None:
        return self.record.source if self.record is not None else None


class ResolutionPipeline:
    """
    Resolve one ISBN into a stored book.

    States::

        CHECKING_EXISTING -> FETCHING_GOOGLE -> FETCHING_OPEN_LIBRARY -> DONE

    A stored match ends the run before any provider is called. Otherwise
    resolvers are tried in the given order and the first record wins;
    ``ResolverUnavailableError`` from a provider and storage errors propagate
    to the caller. Nothing is retried and nothing is cached between runs.

    Runs for the same ISBN are serialized so the check and the write cannot
    interleave with a concurrent run.
    """

    def __init__(
        self,
        store: BookStore,
        resolvers: Sequence["AbstractResolver"],
    ) -> None:
        self._store = store
        self._resolvers = list(resolvers)
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, isbn: str) -> asyncio.Lock:
        lock = self._locks.get(isbn)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[isbn] = lock
        return lock

    async def resolve(
        self,
        raw_isbn: str,
        *,
        force: bool = False,
        confirm: ConfirmHook | None = None,
    ) -> PipelineResult:
        """
        Run the pipeline for one identifier.

        Args:
            raw_isbn: ISBN as typed by the user; surrounding whitespace is ignored.
            force: Skip the existing-record check ("add anyway").
            confirm: Called with the fetched record before writing; returning
                False ends the run as SKIPPED without a write.

        Raises:
            InvalidIdentifierError: if the trimmed ISBN is too short
            ResolverUnavailableError: if a provider cannot be reached
            StorageError: if the lookup or write fails
        """
        isbn = normalize_isbn(raw_isbn)
        lock = self._lock_for(isbn)

        async with lock:
            return await self._run(isbn, force=force, confirm=confirm)

    async def _run(
        self,
        isbn: str,
        *,
        force: bool,
        confirm: ConfirmHook | None,
    ) -> PipelineResult:
        result = PipelineResult(isbn=isbn, outcome=PipelineOutcome.NOT_FOUND)

        if not force:
            result.states.append(PipelineState.CHECKING_EXISTING)
            existing = await self._store.lookup(isbn)
            if existing.count > 0:
                logger.info(f"Title: '{existing.title}' found already ({isbn})")
                result.outcome = PipelineOutcome.EXISTING
                result.existing_title = existing.title
                result.states.append(PipelineState.DONE)
                return result

        record = await self._fetch(isbn, result)
        result.states.append(PipelineState.DONE)

        if record is None:
            logger.info(f"No records found for: {isbn}")
            return result

        result.record = record

        if confirm is not None and not confirm(record):
            logger.info(f"Skipped: {record.title} ({isbn})")
            result.outcome = PipelineOutcome.SKIPPED
            return result

        result.record_id = await self._store.write(record)
        result.outcome = PipelineOutcome.CREATED
        return result

    async def _fetch(self, isbn: str, result: PipelineResult) -> BookRecord | None:
        """Try each resolver in order, stopping at the first record."""
        for resolver in self._resolvers:
            result.states.append(resolver.fetch_state)
            result.sources_tried.append(resolver.source_name)

            attempt = await resolver.resolve(isbn)
            if attempt.success:
                logger.debug(
                    f"{resolver.source_name} resolved {isbn} in {attempt.duration_ms:.0f}ms"
                )
                return attempt.record

            logger.debug(f"{resolver.source_name} had no result for {isbn}: {attempt.status}")

        return None

    async def close(self) -> None:
        """Close all resolvers."""
        for resolver in self._resolvers:
            await resolver.close()

    async def __aenter__(self) -> "ResolutionPipeline":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
