"""LightBnB data-access layer."""

from lightbnb.app.wiring import LightbnbRepositories, build_repositories, lightbnb_database
from lightbnb.db.assemble_property_search import assemble_property_search, build_property_search
from lightbnb.db.accumulate_property_predicates import accumulate_property_predicates
from lightbnb.db.assembled_query import AssembledQuery
from lightbnb.db.predicate_fragment import PredicateFragment
from lightbnb.errors import InvalidCriteria, InvalidLimit, LightbnbError, StoreError
from lightbnb.models.property_search_filters import PropertySearchFilters

__all__ = [
    "AssembledQuery",
    "InvalidCriteria",
    "InvalidLimit",
    "LightbnbError",
    "LightbnbRepositories",
    "PredicateFragment",
    "PropertySearchFilters",
    "StoreError",
    "accumulate_property_predicates",
    "assemble_property_search",
    "build_property_search",
    "build_repositories",
    "lightbnb_database",
]
