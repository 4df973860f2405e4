"""Provider resolution."""

from tsundoku.resolution.base import AbstractResolver, ResolutionResult, ResolverConfig
from tsundoku.resolution.registry import ResolverRegistry

__all__ = [
    "AbstractResolver",
    "ResolutionResult",
    "ResolverConfig",
    "ResolverRegistry",
]
