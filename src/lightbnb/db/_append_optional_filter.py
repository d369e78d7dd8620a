"""Append optional SQL filters."""

from __future__ import annotations

from lightbnb.db.predicate_fragment import PredicateFragment
from lightbnb.db.query_helpers import positional_placeholder


def _append_optional_filter(
    fragments: list[PredicateFragment],
    clause: str,
    value: object | None,
    bound_value: object | None = None,
) -> None:
    """Append a fragment when value is present.

    ``clause`` holds a single ``{}`` slot which receives the next placeholder.
    ``bound_value`` replaces ``value`` as the parameter when given.
    """
    if value is None:
        return
    placeholder = positional_placeholder(len(fragments) + 1)
    fragments.append(
        PredicateFragment(
            condition=clause.format(placeholder),
            value=value if bound_value is None else bound_value,
        )
    )
