"""Shared helpers for SQL query assembly."""

from __future__ import annotations

import re

from lightbnb.config import DEFAULT_RESULT_LIMIT
from lightbnb.errors import InvalidLimit

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


def positional_placeholder(index: int) -> str:
    """Return the ``$N`` placeholder token for a 1-based parameter index."""
    return f"${index}"


def resolve_limit(limit: int | None, default: int = DEFAULT_RESULT_LIMIT) -> int:
    """Return a positive row limit, using ``default`` when none is given."""
    if limit is None:
        limit = default
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidLimit(f"Limit must be a positive integer, got {limit!r}")
    if limit <= 0:
        raise InvalidLimit(f"Limit must be a positive integer, got {limit}")
    return limit
