"""Request and record models for the lightbnb data layer."""

from lightbnb.models.new_property import PROPERTY_INSERT_COLUMNS, NewProperty  # noqa: F401
from lightbnb.models.new_user import NewUser  # noqa: F401
from lightbnb.models.property_search_filters import (  # noqa: F401
    PropertySearchFilters,
    resolve_property_search_filters,
)
