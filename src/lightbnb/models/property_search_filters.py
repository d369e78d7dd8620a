"""Pydantic models for property search filters."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from lightbnb.errors import InvalidCriteria


class PropertySearchFilters(BaseModel):
    """Filters accepted by the property search.

    Every field is optional; ``None`` means "no constraint". Both the
    snake_case names and their camelCase aliases (``ownerId``,
    ``minimumPricePerNight``...) are accepted. Prices are whole currency
    units, converted to cents when the query is built.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )

    city: str | None = None
    owner_id: int | str | None = None
    minimum_price_per_night: int | float | None = None
    maximum_price_per_night: int | float | None = None
    minimum_rating: int | float | None = None

    @field_validator(
        "owner_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before",
    )
    @classmethod
    def _reject_bool(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("booleans are not accepted for this filter")
        return value

    @field_validator("minimum_price_per_night", "maximum_price_per_night")
    @classmethod
    def _price_not_negative(cls, value: int | float | None) -> int | float | None:
        if value is not None and value < 0:
            raise ValueError("price bounds must be non-negative")
        return value


def resolve_property_search_filters(
    criteria: PropertySearchFilters | Mapping[str, object] | None,
) -> PropertySearchFilters:
    """Coerce caller input into a PropertySearchFilters instance."""
    if criteria is None:
        return PropertySearchFilters()
    if isinstance(criteria, PropertySearchFilters):
        return criteria
    if not isinstance(criteria, Mapping):
        raise InvalidCriteria(
            f"Search criteria must be a mapping, got {type(criteria).__name__}"
        )
    try:
        return PropertySearchFilters.model_validate(dict(criteria))
    except ValidationError as exc:
        raise InvalidCriteria(str(exc)) from exc
