"""Service layer."""

from tsundoku.services.resolution import (
    BookStore,
    ConfirmHook,
    PipelineResult,
    ResolutionPipeline,
)

__all__ = [
    "BookStore",
    "ConfirmHook",
    "PipelineResult",
    "ResolutionPipeline",
]
