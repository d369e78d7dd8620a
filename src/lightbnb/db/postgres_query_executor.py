"""psycopg2 implementation of the query execution port."""

from __future__ import annotations

from collections.abc import Sequence

import psycopg2
from psycopg2.extras import RealDictCursor

from lightbnb.db.postgres_connection_pool import PostgresConnectionPool
from lightbnb.db.query_helpers import PLACEHOLDER_PATTERN
from lightbnb.errors import StoreError
from lightbnb.ports.query_executor import ResultRow
from lightbnb.utils.logger import get_logger

logger = get_logger(__name__)


def _to_pyformat(
    statement: str,
    params: Sequence[object],
) -> tuple[str, dict[str, object]]:
    """Rewrite ``$N`` placeholders into psycopg2 ``%(pN)s`` named parameters."""
    count = len(params)
    if not count:
        if PLACEHOLDER_PATTERN.search(statement):
            raise StoreError("Statement references placeholders but no parameters were bound")
        return statement, {}

    def _replace(match) -> str:
        index = int(match.group(1))
        if not 1 <= index <= count:
            raise StoreError(
                f"Statement references ${index} but {count} parameter(s) were bound"
            )
        return f"%(p{index})s"

    text = PLACEHOLDER_PATTERN.sub(_replace, statement.replace("%", "%%"))
    return text, {f"p{index}": value for index, value in enumerate(params, start=1)}


class PostgresQueryExecutor:
    """Run statements on connections borrowed from a PostgresConnectionPool."""

    def __init__(self, pool: PostgresConnectionPool) -> None:
        self._pool = pool

    def execute(self, statement: str, params: Sequence[object] = ()) -> list[ResultRow]:
        text, bound = _to_pyformat(statement, params)
        logger.debug("Executing statement with %s parameter(s):\n%s", len(bound), statement)
        try:
            with self._pool.connection() as conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cur:
                    cur.execute(text, bound or None)
                    if cur.description is None:
                        return []
                    rows = cur.fetchall()
        except psycopg2.Error as exc:
            logger.exception("Postgres statement failed")
            raise StoreError(str(exc)) from exc
        return [dict(row) for row in rows]
