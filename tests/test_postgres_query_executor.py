from unittest.mock import MagicMock

import psycopg2
import pytest

from lightbnb.db.postgres_query_executor import PostgresQueryExecutor, _to_pyformat
from lightbnb.errors import StoreError


def _make_pool(cursor: MagicMock) -> tuple[MagicMock, MagicMock]:
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    pool = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    return pool, conn


def test_to_pyformat_rewrites_positional_placeholders() -> None:
    text, bound = _to_pyformat("SELECT * FROM t WHERE a = $1 AND b <= $2 LIMIT $3", ["x", 2, 10])
    assert text == "SELECT * FROM t WHERE a = %(p1)s AND b <= %(p2)s LIMIT %(p3)s"
    assert bound == {"p1": "x", "p2": 2, "p3": 10}


def test_to_pyformat_handles_double_digit_indexes() -> None:
    params = list(range(1, 15))
    text, bound = _to_pyformat("VALUES ($1, $10, $14)", params)
    assert text == "VALUES (%(p1)s, %(p10)s, %(p14)s)"
    assert bound["p14"] == 14


def test_to_pyformat_escapes_literal_percent() -> None:
    text, _ = _to_pyformat("SELECT '100%' WHERE a = $1", ["x"])
    assert text == "SELECT '100%%' WHERE a = %(p1)s"


def test_to_pyformat_leaves_parameterless_statement_untouched() -> None:
    assert _to_pyformat("SELECT '100%'", []) == ("SELECT '100%'", {})


def test_to_pyformat_rejects_unbound_placeholder() -> None:
    with pytest.raises(StoreError):
        _to_pyformat("SELECT $2", ["only-one"])
    with pytest.raises(StoreError):
        _to_pyformat("SELECT $1", [])


def test_execute_returns_rows_as_dicts() -> None:
    cursor = MagicMock()
    cursor.description = [("id",), ("city",)]
    cursor.fetchall.return_value = [{"id": 1, "city": "Lisbon"}]
    pool, _ = _make_pool(cursor)

    rows = PostgresQueryExecutor(pool).execute("SELECT * FROM properties LIMIT $1", (10,))

    cursor.execute.assert_called_once_with("SELECT * FROM properties LIMIT %(p1)s", {"p1": 10})
    assert rows == [{"id": 1, "city": "Lisbon"}]
    assert type(rows[0]) is dict


def test_execute_without_result_set_returns_empty_list() -> None:
    cursor = MagicMock()
    cursor.description = None
    pool, _ = _make_pool(cursor)

    assert PostgresQueryExecutor(pool).execute("SELECT 1") == []
    cursor.execute.assert_called_once_with("SELECT 1", None)
    cursor.fetchall.assert_not_called()


def test_execute_wraps_driver_errors() -> None:
    cursor = MagicMock()
    error = psycopg2.ProgrammingError("syntax error")
    cursor.execute.side_effect = error
    pool, _ = _make_pool(cursor)

    with pytest.raises(StoreError) as excinfo:
        PostgresQueryExecutor(pool).execute("SELEC 1")

    assert excinfo.value.__cause__ is error


def test_execute_propagates_pool_failures() -> None:
    pool = MagicMock()
    pool.connection.side_effect = StoreError("Postgres pool is not open")

    with pytest.raises(StoreError, match="not open"):
        PostgresQueryExecutor(pool).execute("SELECT 1")
