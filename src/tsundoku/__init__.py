"""Tsundoku - resolve ISBNs into normalized, stored book metadata."""

from tsundoku.client import TsundokuClient, resolve_book
from tsundoku.core.models import BookRecord
from tsundoku.core.types import PipelineOutcome, PipelineState, SourceName
from tsundoku.services.resolution import PipelineResult, ResolutionPipeline

__version__ = "0.1.0"
__all__ = [
    # Client
    "TsundokuClient",
    "resolve_book",
    # Pipeline
    "PipelineResult",
    "ResolutionPipeline",
    # Types
    "PipelineOutcome",
    "PipelineState",
    "SourceName",
    # Models
    "BookRecord",
    # Version
    "__version__",
]
