"""Core enums and type definitions."""

from enum import StrEnum


class SourceName(StrEnum):
    """Catalog providers a record can originate from."""

    GOOGLE = "google"
    OPEN_LIBRARY = "openlibrary"


class ResolutionStatus(StrEnum):
    """Status of a single provider attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


class PipelineState(StrEnum):
    """States the resolution pipeline moves through."""

    CHECKING_EXISTING = "checking_existing"
    FETCHING_GOOGLE = "fetching_google"
    FETCHING_OPEN_LIBRARY = "fetching_open_library"
    DONE = "done"


class PipelineOutcome(StrEnum):
    """Terminal outcome of one pipeline run."""

    EXISTING = "existing"  # Store already holds the identifier
    CREATED = "created"  # Record fetched and written
    SKIPPED = "skipped"  # Record fetched but declined before writing
    NOT_FOUND = "not_found"  # Every provider exhausted

    @property
    def found(self) -> bool:
        return self is not PipelineOutcome.NOT_FOUND
