"""API schema definitions."""

from tsundoku.api.schemas.base import APIBaseSchema
from tsundoku.api.schemas.requests import ResolveBookRequest
from tsundoku.api.schemas.responses import BookResponse, HealthResponse, ResolveBookResponse

__all__ = [
    # Base
    "APIBaseSchema",
    # Requests
    "ResolveBookRequest",
    # Responses
    "BookResponse",
    "HealthResponse",
    "ResolveBookResponse",
]
