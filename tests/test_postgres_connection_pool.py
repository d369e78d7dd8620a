from unittest.mock import MagicMock

import psycopg2
import pytest
from psycopg2.pool import PoolError

from lightbnb.config import Settings
from lightbnb.db.postgres_connection_pool import PostgresConnectionPool
from lightbnb.errors import StoreError, StoreNotConfigured


def _make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "postgres_dsn": None,
        "postgres_host": "localhost",
        "postgres_port": 5432,
        "postgres_db": "lightbnb",
        "postgres_user": "vagrant",
        "postgres_password": "123",
        "pool_min_size": 1,
        "pool_max_size": 4,
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


def test_open_builds_pool_from_settings() -> None:
    factory = MagicMock()
    pool = PostgresConnectionPool(_make_settings(), pool_factory=factory)

    assert pool.open() is pool
    assert pool.is_open

    args, kwargs = factory.call_args
    assert args == (1, 4)
    assert kwargs["host"] == "localhost"
    assert kwargs["dbname"] == "lightbnb"
    assert kwargs["user"] == "vagrant"


def test_open_is_idempotent() -> None:
    factory = MagicMock()
    pool = PostgresConnectionPool(_make_settings(), pool_factory=factory)
    pool.open()
    pool.open()
    factory.assert_called_once()


def test_open_without_settings_raises() -> None:
    pool = PostgresConnectionPool(
        _make_settings(postgres_host=None, postgres_db=None),
        pool_factory=MagicMock(),
    )
    with pytest.raises(StoreNotConfigured):
        pool.open()


def test_open_wraps_connect_errors() -> None:
    error = psycopg2.OperationalError("could not connect")
    factory = MagicMock(side_effect=error)
    pool = PostgresConnectionPool(_make_settings(), pool_factory=factory)

    with pytest.raises(StoreError) as excinfo:
        pool.open()
    assert excinfo.value.__cause__ is error
    assert not pool.is_open


def test_connection_is_returned_after_use() -> None:
    raw_pool = MagicMock()
    conn = MagicMock()
    conn.closed = 0
    raw_pool.getconn.return_value = conn
    pool = PostgresConnectionPool(_make_settings(), pool_factory=MagicMock(return_value=raw_pool))
    pool.open()

    with pool.connection() as borrowed:
        assert borrowed is conn
        assert conn.autocommit is True

    raw_pool.putconn.assert_called_once_with(conn, close=False)


def test_connection_is_returned_when_block_fails() -> None:
    raw_pool = MagicMock()
    conn = MagicMock()
    conn.closed = 2
    raw_pool.getconn.return_value = conn
    pool = PostgresConnectionPool(_make_settings(), pool_factory=MagicMock(return_value=raw_pool))
    pool.open()

    with pytest.raises(psycopg2.InterfaceError):
        with pool.connection():
            raise psycopg2.InterfaceError("connection already closed")

    raw_pool.putconn.assert_called_once_with(conn, close=True)


def test_exhausted_pool_raises_store_error() -> None:
    raw_pool = MagicMock()
    raw_pool.getconn.side_effect = PoolError("connection pool exhausted")
    pool = PostgresConnectionPool(_make_settings(), pool_factory=MagicMock(return_value=raw_pool))
    pool.open()

    with pytest.raises(StoreError):
        with pool.connection():
            pass


def test_connection_requires_open_pool() -> None:
    pool = PostgresConnectionPool(_make_settings(), pool_factory=MagicMock())
    with pytest.raises(StoreError, match="not open"):
        with pool.connection():
            pass


def test_context_manager_closes_pool() -> None:
    raw_pool = MagicMock()
    with PostgresConnectionPool(
        _make_settings(), pool_factory=MagicMock(return_value=raw_pool)
    ) as pool:
        assert pool.is_open
    raw_pool.closeall.assert_called_once()
    assert not pool.is_open
