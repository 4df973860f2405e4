"""Resolution endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from tsundoku.api.dependencies import Pipeline
from tsundoku.api.schemas import BookResponse, ResolveBookRequest, ResolveBookResponse
from tsundoku.core.exceptions import (
    InvalidIdentifierError,
    ResolverUnavailableError,
    StorageError,
    StorageTimeoutError,
)
from tsundoku.core.models import BookRecord
from tsundoku.services.resolution import PipelineResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resolve", tags=["resolve"])


def _convert_book_to_response(record: BookRecord) -> BookResponse:
    """Convert domain BookRecord to API response."""
    return BookResponse(
        title=record.title,
        subtitle=record.subtitle,
        description=record.description,
        publisher=record.publisher,
        thumbnail=record.thumbnail,
        published_date=record.published_date,
        self_link=record.self_link,
        categories=record.category_list,
        authors=record.author_list,
        isbn_10=record.isbn_10,
        isbn_13=record.isbn_13,
        source=record.source,
    )


def _convert_result_to_response(result: PipelineResult) -> ResolveBookResponse:
    return ResolveBookResponse(
        outcome=result.outcome,
        found=result.found,
        isbn=result.isbn,
        title=result.title,
        record_id=result.record_id,
        source=result.source,
        states=result.states,
        sources_tried=result.sources_tried,
        book=_convert_book_to_response(result.record) if result.record else None,
    )


@router.post(
    "/book",
    response_model=ResolveBookResponse,
    operation_id="resolveBook",
    summary="Resolve and store a book",
    description=(
        "Look the ISBN up in the store, otherwise fetch it from Google Books "
        "then OpenLibrary and store the first match."
    ),
)
async def resolve_book(request: ResolveBookRequest, pipeline: Pipeline) -> ResolveBookResponse:
    """Resolve book metadata and persist it once."""
    try:
        result = await pipeline.resolve(request.isbn, force=request.force)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    except ResolverUnavailableError as e:
        logger.error(f"Provider {e.source} unavailable: {e.message}")
        raise HTTPException(status_code=502, detail=e.message) from e
    except StorageTimeoutError as e:
        raise HTTPException(status_code=504, detail=e.message) from e
    except StorageError as e:
        logger.error(f"Storage failure: {e.message}")
        raise HTTPException(status_code=503, detail=e.message) from e

    return _convert_result_to_response(result)
