"""Assemble the property search statement from predicate fragments."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from lightbnb.config import DEFAULT_RESULT_LIMIT
from lightbnb.db.accumulate_property_predicates import accumulate_property_predicates
from lightbnb.db.assembled_query import AssembledQuery
from lightbnb.db.predicate_fragment import PredicateFragment
from lightbnb.db.query_helpers import (
    PLACEHOLDER_PATTERN,
    positional_placeholder,
    resolve_limit,
)
from lightbnb.errors import InvalidFragment
from lightbnb.models.property_search_filters import PropertySearchFilters

# Inner join: properties without any review never match.
PROPERTY_SEARCH_PREFIX = """
SELECT p.*,
       ar.average_rating
  FROM properties p
       JOIN (
           SELECT property_id,
                  AVG(rating) AS average_rating
             FROM property_reviews
            GROUP BY property_id
       ) ar ON p.id = ar.property_id
""".strip()

PROPERTY_SEARCH_ORDER = "ORDER BY cost_per_night"


def _check_placeholder(fragment: PredicateFragment, expected: int) -> None:
    indexes = [int(match) for match in PLACEHOLDER_PATTERN.findall(fragment.condition)]
    if indexes != [expected]:
        raise InvalidFragment(
            f"Fragment {fragment.condition!r} must reference exactly "
            f"{positional_placeholder(expected)}"
        )


def assemble_property_search(
    fragments: Sequence[PredicateFragment],
    limit: int | None = None,
    *,
    default_limit: int = DEFAULT_RESULT_LIMIT,
) -> AssembledQuery:
    """Build the search statement and its parameters.

    The first fragment opens the WHERE clause and the rest are joined with
    AND. The limit is bound to the placeholder after the last fragment, so
    ``params[N - 1]`` is always the value of ``$N``.

    Raises:
        InvalidLimit: if the limit is not a positive integer.
        InvalidFragment: if a fragment is not numbered for its position.
    """
    resolved_limit = resolve_limit(limit, default_limit)
    lines = [PROPERTY_SEARCH_PREFIX]
    params: list[object] = []
    for index, fragment in enumerate(fragments, start=1):
        _check_placeholder(fragment, index)
        keyword = "WHERE" if index == 1 else "AND"
        lines.append(f"{keyword} {fragment.condition}")
        params.append(fragment.value)
    params.append(resolved_limit)
    lines.append(PROPERTY_SEARCH_ORDER)
    lines.append(f"LIMIT {positional_placeholder(len(params))};")
    return AssembledQuery(statement="\n".join(lines), params=tuple(params))


def build_property_search(
    criteria: PropertySearchFilters | Mapping[str, object] | None = None,
    limit: int | None = None,
    *,
    default_limit: int = DEFAULT_RESULT_LIMIT,
) -> AssembledQuery:
    """Accumulate predicates for ``criteria`` and assemble the full query."""
    fragments = accumulate_property_predicates(criteria)
    return assemble_property_search(fragments, limit, default_limit=default_limit)
