"""Field extraction from schema-less provider trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def extract_field(node: Any, key: str) -> str | None:
    """
    Pull a string value for ``key`` out of an untyped JSON node.

    The key must be a direct child of ``node``; nested levels are not
    searched. The located value is interpreted in this order:

    1. a plain string is returned as is
    2. a mapping whose ``"value"`` entry is a string returns that entry
       (OpenLibrary's ``{"type": "/type/text", "value": "..."}`` pattern)
    3. a list has its string elements joined with ``","`` in order;
       a list without any string elements is not found
    4. anything else is not found

    Shape mismatches never raise.

    Returns:
        The extracted string, or ``None`` when the field has no usable value.
    """
    if not isinstance(node, Mapping):
        return None

    value = node.get(key)

    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        inner = value.get("value")
        if isinstance(inner, str):
            return inner
        return None

    if isinstance(value, list):
        strings = [item for item in value if isinstance(item, str)]
        if not strings:
            return None
        return ",".join(strings)

    return None
