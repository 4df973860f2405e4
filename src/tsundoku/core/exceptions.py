"""Custom exception hierarchy for tsundoku."""

from typing import Any


class TsundokuError(Exception):
    """Base exception for all tsundoku errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidIdentifierError(TsundokuError):
    """Identifier failed input validation."""

    pass


class ResolutionError(TsundokuError):
    """Failed to resolve identifier."""

    pass


class ResolverUnavailableError(ResolutionError):
    """External provider is unreachable or returned an unreadable body."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class ShapeViolationError(ResolutionError):
    """Provider response parsed but lacks a field required at a fixed path."""

    def __init__(
        self,
        message: str,
        source: str,
        path: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.path = path


class StorageError(TsundokuError):
    """Database operation failed."""

    pass


class StorageTimeoutError(StorageError):
    """Database operation exceeded the configured timeout."""

    pass
