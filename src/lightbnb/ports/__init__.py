"""Port interfaces for the lightbnb data layer."""

from lightbnb.ports.query_executor import QueryExecutor, ResultRow  # noqa: F401
from lightbnb.ports.repositories import (  # noqa: F401
    PropertyRepository,
    ReservationRepository,
    UserRepository,
)
