"""Database layer."""

from .base import Base, CreatedAtMixin
from .models import BookModel
from .repositories import BookRepository, LookupResult
from .session import DatabaseManager
from .store import DatabaseBookStore

__all__ = [
    "Base",
    "CreatedAtMixin",
    "BookModel",
    "BookRepository",
    "LookupResult",
    "DatabaseManager",
    "DatabaseBookStore",
]
