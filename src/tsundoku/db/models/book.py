"""Book database model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tsundoku.core.models import BookRecord
from tsundoku.core.types import SourceName
from tsundoku.db.base import Base, CreatedAtMixin


class BookModel(Base, CreatedAtMixin):
    """
    Stored book row.

    Rows are insert-only; the same ISBN can appear more than once when a
    user explicitly adds a book that already exists.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    subtitle: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    published_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    publisher: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    thumbnail: Mapped[str] = mapped_column(Text, nullable=False, default="")
    self_link: Mapped[str] = mapped_column(Text, nullable=False, default="")
    categories: Mapped[str] = mapped_column(Text, nullable=False, default="")
    authors: Mapped[str] = mapped_column(Text, nullable=False, default="")
    isbn_10: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    isbn_13: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    source: Mapped[SourceName] = mapped_column(
        Enum(
            SourceName,
            name="source_name",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )

    # Library bookkeeping, always written with defaults
    in_library: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index("ix_books_isbn_10", "isbn_10"),
        Index("ix_books_isbn_13", "isbn_13"),
    )

    @classmethod
    def from_record(cls, record: BookRecord) -> BookModel:
        """Build an unsaved row from a resolved record."""
        return cls(
            title=record.title,
            subtitle=record.subtitle,
            published_date=record.published_date,
            description=record.description,
            publisher=record.publisher,
            thumbnail=record.thumbnail,
            self_link=record.self_link,
            categories=record.categories,
            authors=record.authors,
            isbn_10=record.isbn_10,
            isbn_13=record.isbn_13,
            source=record.source,
            in_library=False,
            notes="",
        )

    def __repr__(self) -> str:
        return f"<BookModel(id={self.id}, source={self.source}, title='{self.title[:50]}')>"
