"""Store facade the resolution pipeline writes through."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tsundoku.core.exceptions import StorageError, StorageTimeoutError
from tsundoku.core.models import BookRecord
from tsundoku.db.repositories.book import BookRepository, LookupResult
from tsundoku.db.session import DatabaseManager

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STORAGE_TIMEOUT = 180.0


class DatabaseBookStore:
    """
    Book store backed by the ``books`` table.

    Each call runs in its own session and transaction, bounded by
    ``timeout`` seconds. Failures abort only that call.
    """

    def __init__(
        self,
        db: DatabaseManager,
        *,
        timeout: float = DEFAULT_STORAGE_TIMEOUT,
    ) -> None:
        self._db = db
        self._timeout = timeout

    async def _run(
        self,
        operation: str,
        work: Callable[[BookRepository], Awaitable[T]],
    ) -> T:
        try:
            async with asyncio.timeout(self._timeout):
                async with self._db.session() as session:
                    return await work(self._repository(session))
        except TimeoutError as e:
            raise StorageTimeoutError(
                f"Storage {operation} timed out after {self._timeout:g}s",
                details={"operation": operation},
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(
                f"Storage {operation} failed: {e}",
                details={"operation": operation},
            ) from e

    @staticmethod
    def _repository(session: AsyncSession) -> BookRepository:
        return BookRepository(session)

    async def lookup(self, isbn: str) -> LookupResult:
        """Return how many stored books carry ``isbn`` and the first title."""
        return await self._run("lookup", lambda repo: repo.lookup(isbn))

    async def write(self, record: BookRecord) -> int:
        """Insert ``record`` and return the new row id."""
        row = await self._run("write", lambda repo: repo.add_record(record))
        logger.info(f"({row.id}) Created record for: '{row.title}'")
        return row.id
