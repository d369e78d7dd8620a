"""Postgres repository for property search and listing."""

from __future__ import annotations

from collections.abc import Mapping

from lightbnb.config import DEFAULT_RESULT_LIMIT
from lightbnb.db.assemble_property_search import build_property_search
from lightbnb.db.query_helpers import positional_placeholder
from lightbnb.models.new_property import PROPERTY_INSERT_COLUMNS, NewProperty
from lightbnb.models.property_search_filters import PropertySearchFilters
from lightbnb.ports.query_executor import QueryExecutor, ResultRow
from lightbnb.utils.logger import get_logger

logger = get_logger(__name__)

INSERT_PROPERTY_SQL = (
    f"INSERT INTO properties ({', '.join(PROPERTY_INSERT_COLUMNS)})\n"
    "VALUES ("
    + ", ".join(
        positional_placeholder(index) for index in range(1, len(PROPERTY_INSERT_COLUMNS) + 1)
    )
    + ")\nRETURNING *;"
)


class PostgresPropertyRepository:
    """Encapsulates property search and inserts."""

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        default_limit: int = DEFAULT_RESULT_LIMIT,
    ) -> None:
        self._executor = executor
        self._default_limit = default_limit

    def get_all_properties(
        self,
        criteria: PropertySearchFilters | Mapping[str, object] | None = None,
        limit: int | None = None,
    ) -> list[ResultRow]:
        """Return rated properties matching the criteria, cheapest first.

        Invalid criteria or limits fail before anything reaches the database.
        """
        query = build_property_search(criteria, limit, default_limit=self._default_limit)
        logger.debug("Property search with %s filter(s)", len(query.params) - 1)
        return self._executor.execute(query.statement, query.params)

    def add_property(self, property_row: NewProperty | Mapping[str, object]) -> ResultRow:
        """Insert a property and return the stored row."""
        if not isinstance(property_row, NewProperty):
            property_row = NewProperty.model_validate(dict(property_row))
        rows = self._executor.execute(INSERT_PROPERTY_SQL, property_row.insert_values())
        return rows[0]
