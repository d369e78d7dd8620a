"""Postgres repository for guest reservations."""

from __future__ import annotations

from lightbnb.config import DEFAULT_RESULT_LIMIT
from lightbnb.db.query_helpers import resolve_limit
from lightbnb.ports.query_executor import QueryExecutor, ResultRow

# Left joins keep guests without reservations and properties without reviews.
GUEST_RESERVATIONS_SQL = """
SELECT *
  FROM users u
       LEFT JOIN reservations r ON u.id = r.guest_id
       LEFT JOIN properties p ON p.id = r.property_id
       LEFT JOIN (
           SELECT property_id,
                  AVG(rating) AS average_rating
             FROM property_reviews
            GROUP BY property_id
       ) ar ON p.id = ar.property_id
 WHERE u.id = $1
 ORDER BY start_date
 LIMIT $2;
""".strip()


class PostgresReservationRepository:
    """Encapsulates reservation reads for a guest."""

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        default_limit: int = DEFAULT_RESULT_LIMIT,
    ) -> None:
        self._executor = executor
        self._default_limit = default_limit

    def get_all_reservations(
        self,
        guest_id: int | str,
        limit: int | None = None,
    ) -> list[ResultRow]:
        """Return the guest's reservations ordered by start date."""
        resolved = resolve_limit(limit, self._default_limit)
        return self._executor.execute(GUEST_RESERVATIONS_SQL, (guest_id, resolved))
