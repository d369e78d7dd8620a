"""Turn property search filters into ordered predicate fragments."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from lightbnb.db._append_optional_filter import _append_optional_filter
from lightbnb.db.predicate_fragment import PredicateFragment
from lightbnb.models.property_search_filters import (
    PropertySearchFilters,
    resolve_property_search_filters,
)

CENTS_PER_UNIT = 100


def _to_cents(price: int | float | None) -> int | None:
    if price is None:
        return None
    cents = Decimal(str(price)) * CENTS_PER_UNIT
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _contains_pattern(text: str) -> str:
    # Backslash is the default LIKE escape character in Postgres.
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def accumulate_property_predicates(
    criteria: PropertySearchFilters | Mapping[str, object] | None,
) -> list[PredicateFragment]:
    """Return one fragment per present filter, numbered ``$1`` upward.

    Filters are visited in a fixed order: city, owner, minimum price,
    maximum price, minimum rating. A filter is present when it is not
    ``None``; zero and empty strings still constrain the search.

    Raises:
        InvalidCriteria: if ``criteria`` is not a filters model, a mapping
            of valid options, or ``None``.
    """
    filters = resolve_property_search_filters(criteria)
    fragments: list[PredicateFragment] = []
    _append_optional_filter(
        fragments,
        "city ILIKE {}",
        filters.city,
        None if filters.city is None else _contains_pattern(filters.city),
    )
    _append_optional_filter(
        fragments,
        "owner_id = {}",
        filters.owner_id,
        None if filters.owner_id is None else str(filters.owner_id),
    )
    _append_optional_filter(
        fragments,
        "cost_per_night >= {}",
        filters.minimum_price_per_night,
        _to_cents(filters.minimum_price_per_night),
    )
    _append_optional_filter(
        fragments,
        "cost_per_night <= {}",
        filters.maximum_price_per_night,
        _to_cents(filters.maximum_price_per_night),
    )
    _append_optional_filter(
        fragments,
        "average_rating >= {}",
        filters.minimum_rating,
    )
    return fragments
