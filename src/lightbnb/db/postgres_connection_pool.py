"""Scoped Postgres connection pool."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import psycopg2
from psycopg2.extensions import connection as PgConnection  # noqa: N812
from psycopg2.pool import ThreadedConnectionPool

from lightbnb._connection_kwargs import _connection_kwargs
from lightbnb.config import Settings
from lightbnb.errors import StoreError, StoreNotConfigured
from lightbnb.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class PostgresConnectionPool:
    """Own a psycopg2 pool between ``open`` and ``close``.

    Connections are handed out in autocommit mode, so every statement is its
    own transaction.
    """

    settings: Settings
    pool_factory: Callable[..., ThreadedConnectionPool] = ThreadedConnectionPool
    _pool: ThreadedConnectionPool | None = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> PostgresConnectionPool:
        if self._pool is not None:
            return self
        kwargs = _connection_kwargs(self.settings)
        if not kwargs:
            raise StoreNotConfigured("Postgres DSN or host/database settings are required")
        try:
            self._pool = self.pool_factory(
                self.settings.pool_min_size,
                self.settings.pool_max_size,
                **kwargs,
            )
        except psycopg2.Error as exc:
            logger.exception("Postgres pool could not be opened")
            raise StoreError(str(exc)) from exc
        logger.info(
            "Postgres pool opened (min=%s, max=%s)",
            self.settings.pool_min_size,
            self.settings.pool_max_size,
        )
        return self

    def close(self) -> None:
        if self._pool is None:
            return
        self._pool.closeall()
        self._pool = None
        logger.info("Postgres pool closed")

    @contextmanager
    def connection(self) -> Iterator[PgConnection]:
        """Borrow a connection and always give it back to the pool."""
        if self._pool is None:
            raise StoreError("Postgres pool is not open")
        try:
            conn = self._pool.getconn()
        except psycopg2.Error as exc:
            logger.exception("No Postgres connection available")
            raise StoreError(str(exc)) from exc
        try:
            conn.autocommit = True
            yield conn
        finally:
            self._pool.putconn(conn, close=bool(conn.closed))

    def __enter__(self) -> PostgresConnectionPool:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
