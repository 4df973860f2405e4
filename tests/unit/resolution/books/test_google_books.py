"""Tests for Google Books resolver."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import httpx
import pytest
import respx
from httpx import Response

from tsundoku.core.exceptions import ResolverUnavailableError
from tsundoku.core.types import PipelineState, ResolutionStatus, SourceName
from tsundoku.resolution.base import ResolverConfig
from tsundoku.resolution.books.google_books import GoogleBooksResolver, GoogleVolumesResponse

VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


@pytest.fixture
def resolver() -> GoogleBooksResolver:
    """Create a Google Books resolver."""
    return GoogleBooksResolver()


@pytest.fixture
def resolver_with_key() -> GoogleBooksResolver:
    """Create a Google Books resolver with API key."""
    return GoogleBooksResolver(ResolverConfig(api_key="test-api-key"))


# ============================================================================
# Resolver Configuration Tests
# ============================================================================


class TestGoogleBooksResolverConfig:
    """Tests for Google Books resolver configuration."""

    def test_source_name(self, resolver: GoogleBooksResolver):
        assert resolver.source_name == SourceName.GOOGLE

    def test_base_url(self, resolver: GoogleBooksResolver):
        assert resolver.BASE_URL == "https://www.googleapis.com/books/v1"

    def test_fetch_state(self, resolver: GoogleBooksResolver):
        assert resolver.fetch_state == PipelineState.FETCHING_GOOGLE

    def test_priority_before_openlibrary(self, resolver: GoogleBooksResolver):
        assert resolver.priority < 100

    def test_enabled_without_key(self, resolver: GoogleBooksResolver):
        assert resolver.is_enabled is True


# ============================================================================
# Response Conversion Tests
# ============================================================================


class TestGoogleBooksResolveResponse:
    """Tests for turning a volumes body into a record."""

    def test_full_record(self, resolver: GoogleBooksResolver, google_response_data: dict):
        record = resolver.resolve_response(google_response_data)

        assert record is not None
        assert record.title == "The Republic"
        assert record.authors == "Plato"
        assert record.publisher == "Penguin"
        assert record.categories == "Philosophy"
        assert record.isbn_13 == "9780140449136"
        assert record.isbn_10 == "0140449132"
        assert record.thumbnail == "http://books.google.com/books/content?id=abc"
        assert record.self_link == "https://www.googleapis.com/books/v1/volumes/abc"
        assert record.published_date == datetime(1955, 1, 1, tzinfo=timezone.utc)
        assert record.source == SourceName.GOOGLE

    def test_zero_total_items(self, resolver: GoogleBooksResolver, google_empty_response_data):
        assert resolver.resolve_response(google_empty_response_data) is None

    def test_items_ignored_when_total_is_zero(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        """The item list is not consulted when the count is below one."""
        google_response_data["totalItems"] = 0
        assert resolver.resolve_response(google_response_data) is None

    def test_positive_total_without_items(self, resolver: GoogleBooksResolver):
        assert resolver.resolve_response({"totalItems": 3, "items": []}) is None

    def test_first_item_only(self, resolver: GoogleBooksResolver, google_response_data: dict):
        second = {"id": "zzz", "volumeInfo": {"title": "Another Book"}}
        google_response_data["items"].append(second)
        google_response_data["totalItems"] = 2

        record = resolver.resolve_response(google_response_data)
        assert record is not None
        assert record.title == "The Republic"

    def test_first_identifier_of_each_type_wins(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        info = google_response_data["items"][0]["volumeInfo"]
        info["industryIdentifiers"] = [
            {"type": "OTHER", "identifier": "OCLC:1"},
            {"type": "ISBN_13", "identifier": "9780000000001"},
            {"type": "ISBN_10", "identifier": "0000000001"},
            {"type": "ISBN_13", "identifier": "9780000000002"},
            {"type": "ISBN_10", "identifier": "0000000002"},
        ]

        record = resolver.resolve_response(google_response_data)
        assert record is not None
        assert record.isbn_13 == "9780000000001"
        assert record.isbn_10 == "0000000001"

    def test_missing_identifiers_leave_isbns_empty(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        del google_response_data["items"][0]["volumeInfo"]["industryIdentifiers"]

        record = resolver.resolve_response(google_response_data)
        assert record is not None
        assert record.isbn_10 == ""
        assert record.isbn_13 == ""

    def test_lists_joined_in_order(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        info = google_response_data["items"][0]["volumeInfo"]
        info["authors"] = ["Plato", "Desmond Lee"]
        info["categories"] = ["Philosophy", "Classics", "Politics"]

        record = resolver.resolve_response(google_response_data)
        assert record is not None
        assert record.authors == "Plato,Desmond Lee"
        assert record.categories == "Philosophy,Classics,Politics"

    @pytest.mark.parametrize("raw_date", ["1955", "1955-03", "", "someday"])
    def test_unparseable_date_is_never_unset(
        self, resolver: GoogleBooksResolver, google_response_data: dict, raw_date: str
    ):
        google_response_data["items"][0]["volumeInfo"]["publishedDate"] = raw_date

        record = resolver.resolve_response(google_response_data)
        assert record is not None
        assert record.published_date is not None
        assert record.published_date.date() == datetime.now(timezone.utc).date()

    def test_missing_date_is_never_unset(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        del google_response_data["items"][0]["volumeInfo"]["publishedDate"]

        record = resolver.resolve_response(google_response_data)
        assert record is not None
        assert record.published_date is not None

    def test_missing_title_not_found(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        del google_response_data["items"][0]["volumeInfo"]["title"]
        assert resolver.resolve_response(google_response_data) is None

    def test_accepts_parsed_model(self, resolver: GoogleBooksResolver, google_response_data):
        parsed = GoogleVolumesResponse.model_validate(google_response_data)
        record = resolver.resolve_response(parsed)
        assert record is not None
        assert record.title == "The Republic"

    @pytest.mark.parametrize("payload", [[], "oops", {"totalItems": "many"}])
    def test_unexpected_body_raises(self, resolver: GoogleBooksResolver, payload: Any):
        with pytest.raises(ResolverUnavailableError):
            resolver.resolve_response(payload)


# ============================================================================
# HTTP Tests
# ============================================================================


class TestGoogleBooksHTTP:
    """Tests for the request side."""

    @respx.mock
    async def test_resolve_success(
        self, resolver: GoogleBooksResolver, google_response_data: dict
    ):
        respx.get(VOLUMES_URL).mock(return_value=Response(200, json=google_response_data))

        result = await resolver.resolve("9780140449136")

        assert result.status == ResolutionStatus.SUCCESS
        assert result.success is True
        assert result.source == SourceName.GOOGLE
        assert result.record is not None
        assert result.record.title == "The Republic"

    @respx.mock
    async def test_resolve_not_found(
        self, resolver: GoogleBooksResolver, google_empty_response_data: dict
    ):
        respx.get(VOLUMES_URL).mock(return_value=Response(200, json=google_empty_response_data))

        result = await resolver.resolve("9780000000002")

        assert result.status == ResolutionStatus.NOT_FOUND
        assert result.success is False
        assert result.record is None

    @respx.mock
    async def test_isbn_query_format(self, resolver: GoogleBooksResolver):
        route = respx.get(VOLUMES_URL).mock(return_value=Response(200, json={"totalItems": 0}))

        await resolver.resolve("9780140449136")

        request = route.calls[0].request
        assert request.url.params["q"] == "isbn:9780140449136"
        assert "key" not in request.url.params

    @respx.mock
    async def test_api_key_included(self, resolver_with_key: GoogleBooksResolver):
        route = respx.get(VOLUMES_URL).mock(return_value=Response(200, json={"totalItems": 0}))

        await resolver_with_key.resolve("9780140449136")

        assert route.calls[0].request.url.params["key"] == "test-api-key"

    @respx.mock
    async def test_server_error_raises(self, resolver: GoogleBooksResolver):
        respx.get(VOLUMES_URL).mock(return_value=Response(503))

        with pytest.raises(ResolverUnavailableError) as exc_info:
            await resolver.resolve("9780140449136")

        assert exc_info.value.status_code == 503
        assert exc_info.value.source == "google"

    @respx.mock
    async def test_network_error_raises(self, resolver: GoogleBooksResolver):
        respx.get(VOLUMES_URL).mock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(ResolverUnavailableError):
            await resolver.resolve("9780140449136")

    @respx.mock
    async def test_invalid_json_raises(self, resolver: GoogleBooksResolver):
        respx.get(VOLUMES_URL).mock(return_value=Response(200, content=b"<html>"))

        with pytest.raises(ResolverUnavailableError):
            await resolver.resolve("9780140449136")

    async def test_close_is_idempotent(self, resolver: GoogleBooksResolver):
        await resolver.close()
        await resolver.close()
