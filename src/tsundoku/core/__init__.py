"""Core types, models, and utilities."""

from .dates import format_published_date, normalize_published_date
from .exceptions import (
    InvalidIdentifierError,
    ResolutionError,
    ResolverUnavailableError,
    ShapeViolationError,
    StorageError,
    StorageTimeoutError,
    TsundokuError,
)
from .extraction import extract_field
from .identifiers import MIN_ISBN_LENGTH, normalize_isbn
from .models import BookRecord, join_values
from .types import PipelineOutcome, PipelineState, ResolutionStatus, SourceName

__all__ = [
    # Types
    "PipelineOutcome",
    "PipelineState",
    "ResolutionStatus",
    "SourceName",
    # Models
    "BookRecord",
    "join_values",
    # Identifiers
    "MIN_ISBN_LENGTH",
    "normalize_isbn",
    # Normalization
    "extract_field",
    "format_published_date",
    "normalize_published_date",
    # Exceptions
    "InvalidIdentifierError",
    "ResolutionError",
    "ResolverUnavailableError",
    "ShapeViolationError",
    "StorageError",
    "StorageTimeoutError",
    "TsundokuError",
]
