"""Published-date normalization across provider date formats."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

# Tried in order; the first layout that parses wins.
CANONICAL_LAYOUT = "%Y-%m-%d"  # 1955-01-01
VERBOSE_LAYOUT = "%B %d, %Y"  # January 1, 1955


def _parse(raw: str, layout: str) -> datetime | None:
    try:
        return datetime.strptime(raw, layout).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def _resolution_date(now: datetime | None) -> datetime:
    """Midnight UTC of the resolution time, used when nothing parses."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return datetime(now.year, now.month, now.day, tzinfo=timezone.utc)


def format_published_date(value: datetime) -> str:
    """Render a date in the canonical layout."""
    return value.strftime(CANONICAL_LAYOUT)


def normalize_published_date(raw: Any, *, now: datetime | None = None) -> datetime:
    """
    Parse a provider date string into a UTC timestamp.

    Precedence is canonical (``YYYY-MM-DD``), then verbose
    (``Month D, YYYY``), then the resolution date. A verbose match is
    rendered back into the canonical layout and parsed again, so both paths
    produce identical values. Year-only and year-month strings such as
    ``"1955"`` or ``"March 1955"`` match neither layout and fall through to
    the resolution date.

    Never raises.

    Args:
        raw: Date string from a provider. Non-strings are treated as unparseable.
        now: Resolution time override, mainly for tests.

    Returns:
        Timezone-aware UTC datetime at midnight. The fallback is the
        resolution date truncated to midnight UTC, not the full resolution
        timestamp, so formatting and normalizing a result again yields the
        same value.
    """
    if isinstance(raw, str):
        text = raw.strip()

        parsed = _parse(text, CANONICAL_LAYOUT)
        if parsed is not None:
            return parsed

        verbose = _parse(text, VERBOSE_LAYOUT)
        if verbose is not None:
            reparsed = _parse(format_published_date(verbose), CANONICAL_LAYOUT)
            if reparsed is not None:
                return reparsed

    return _resolution_date(now)
