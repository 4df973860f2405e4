"""Repository implementations."""

from .book import BookRepository, LookupResult

__all__ = ["BookRepository", "LookupResult"]
