"""Query execution port used by the repositories."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

ResultRow = dict[str, object]


class QueryExecutor(Protocol):
    """Run one statement with ``$N`` positional placeholders.

    ``params[N - 1]`` is bound to ``$N``. Implementations return the rows
    untouched (an empty list for statements without a result set) and raise
    ``lightbnb.errors.StoreError`` on any database failure.
    """

    def execute(self, statement: str, params: Sequence[object] = ()) -> list[ResultRow]:
        """Execute the statement and return its rows."""
