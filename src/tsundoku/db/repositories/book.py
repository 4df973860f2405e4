"""Book repository with ISBN lookups."""

from typing import NamedTuple

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tsundoku.core.models import BookRecord
from tsundoku.db.models.book import BookModel


class LookupResult(NamedTuple):
    """Existing rows for an ISBN. ``title`` is None when ``count`` is 0."""

    count: int
    title: str | None


class BookRepository:
    """Queries against the ``books`` table within one session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _isbn_matches(isbn: str):
        return or_(BookModel.isbn_10 == isbn, BookModel.isbn_13 == isbn)

    async def lookup(self, isbn: str) -> LookupResult:
        """Count rows whose ISBN-10 or ISBN-13 equals ``isbn``."""
        count_stmt = select(func.count(BookModel.id)).where(self._isbn_matches(isbn))
        count = (await self._session.execute(count_stmt)).scalar_one()
        if not count:
            return LookupResult(0, None)

        title_stmt = (
            select(BookModel.title)
            .where(self._isbn_matches(isbn))
            .order_by(BookModel.id)
            .limit(1)
        )
        title = (await self._session.execute(title_stmt)).scalar_one_or_none()
        return LookupResult(count, title)

    async def add_record(self, record: BookRecord) -> BookModel:
        """Insert a new row for ``record``. Never updates existing rows."""
        row = BookModel.from_record(record)
        self._session.add(row)
        await self._session.flush()
        return row
