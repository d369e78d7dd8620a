"""Default dependency wiring for the repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from psycopg2.pool import ThreadedConnectionPool

from lightbnb.config import Settings, get_settings
from lightbnb.db.postgres_connection_pool import PostgresConnectionPool
from lightbnb.db.postgres_property_repository import PostgresPropertyRepository
from lightbnb.db.postgres_query_executor import PostgresQueryExecutor
from lightbnb.db.postgres_reservation_repository import PostgresReservationRepository
from lightbnb.db.postgres_user_repository import PostgresUserRepository
from lightbnb.ports.query_executor import QueryExecutor
from lightbnb.ports.repositories import (
    PropertyRepository,
    ReservationRepository,
    UserRepository,
)


@dataclass(frozen=True)
class LightbnbRepositories:
    """Repositories sharing one query executor."""

    users: UserRepository
    reservations: ReservationRepository
    properties: PropertyRepository


def build_repositories(executor: QueryExecutor, settings: Settings) -> LightbnbRepositories:
    """Wire every repository onto the given executor."""
    return LightbnbRepositories(
        users=PostgresUserRepository(executor),
        reservations=PostgresReservationRepository(
            executor,
            default_limit=settings.default_result_limit,
        ),
        properties=PostgresPropertyRepository(
            executor,
            default_limit=settings.default_result_limit,
        ),
    )


@contextmanager
def lightbnb_database(
    settings: Settings | None = None,
    *,
    pool_factory: Callable[..., ThreadedConnectionPool] = ThreadedConnectionPool,
) -> Iterator[LightbnbRepositories]:
    """Open a connection pool, yield the repositories, then close the pool."""
    resolved = settings or get_settings()
    with PostgresConnectionPool(resolved, pool_factory=pool_factory) as pool:
        yield build_repositories(PostgresQueryExecutor(pool), resolved)
