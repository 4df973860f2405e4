"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from tsundoku.api.schemas.base import APIBaseSchema


class ResolveBookRequest(APIBaseSchema):
    """Request to resolve and store a book by ISBN."""

    isbn: Annotated[
        str,
        Field(
            min_length=1,
            max_length=100,
            description="ISBN-10 or ISBN-13. Surrounding whitespace is ignored.",
        ),
    ]

    force: Annotated[
        bool,
        Field(
            default=False,
            description="Add the book even if the ISBN is already stored.",
        ),
    ]
