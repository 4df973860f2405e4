"""Book resolvers for fetching book metadata."""

from tsundoku.resolution.books.google_books import GoogleBooksResolver, GoogleVolumesResponse
from tsundoku.resolution.books.openlibrary import OpenLibraryResolver

__all__ = [
    "GoogleBooksResolver",
    "GoogleVolumesResponse",
    "OpenLibraryResolver",
]
