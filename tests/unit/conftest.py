"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import pytest
import respx

from tsundoku.resolution.base import ResolverConfig

GOOGLE_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"
OPENLIBRARY_BOOKS_URL = "https://openlibrary.org/api/books"


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """Create a resolver config for testing."""
    return ResolverConfig(
        api_key="test-api-key",
        timeout=10.0,
        enabled=True,
    )
