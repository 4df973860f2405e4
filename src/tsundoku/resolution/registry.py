"""Resolver registry for building the ordered provider list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tsundoku.resolution.base import AbstractResolver, ResolverConfig

if TYPE_CHECKING:
    from tsundoku.config import TsundokuSettings


class ResolverRegistry:
    """
    Factory for creating and managing resolver instances.

    Resolvers are handed out in priority order, which is the order the
    pipeline tries them in.
    """

    def __init__(self) -> None:
        self._resolvers: list[AbstractResolver] = []

    def register(self, resolver: AbstractResolver) -> None:
        """Register a book resolver."""
        self._resolvers.append(resolver)

    @property
    def resolvers(self) -> list[AbstractResolver]:
        """Enabled resolvers sorted by priority (lower first)."""
        return sorted(
            (r for r in self._resolvers if r.is_enabled),
            key=lambda r: r.priority,
        )

    @classmethod
    def from_settings(cls, settings: "TsundokuSettings") -> "ResolverRegistry":
        """Create a registry with Google Books and OpenLibrary configured from settings."""
        from tsundoku.resolution.books.google_books import GoogleBooksResolver
        from tsundoku.resolution.books.openlibrary import OpenLibraryResolver

        registry = cls()
        registry.register(
            GoogleBooksResolver(
                ResolverConfig(
                    api_key=settings.google_books_api_key,
                    base_url=settings.google_books_base_url,
                    timeout=settings.http_timeout,
                )
            )
        )
        registry.register(
            OpenLibraryResolver(
                ResolverConfig(
                    base_url=settings.openlibrary_base_url,
                    timeout=settings.http_timeout,
                )
            )
        )
        return registry

    async def close_all(self) -> None:
        """Close all registered resolvers."""
        for resolver in self._resolvers:
            await resolver.close()
