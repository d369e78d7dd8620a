"""Repository port interfaces for database access boundaries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from lightbnb.models.new_property import NewProperty
from lightbnb.models.new_user import NewUser
from lightbnb.models.property_search_filters import PropertySearchFilters
from lightbnb.ports.query_executor import ResultRow


class UserRepository(Protocol):
    """Repository interface for user lookup and registration."""

    def get_user_with_email(self, email: str) -> ResultRow | None:
        """Return the user with the given email, if any."""

    def get_user_with_id(self, user_id: int | str) -> ResultRow | None:
        """Return the user with the given id, if any."""

    def add_user(self, user: NewUser | Mapping[str, object]) -> ResultRow:
        """Insert a user and return the stored row."""


class ReservationRepository(Protocol):
    """Repository interface for guest reservations."""

    def get_all_reservations(
        self,
        guest_id: int | str,
        limit: int | None = None,
    ) -> list[ResultRow]:
        """Return reservations for a guest ordered by start date."""


class PropertyRepository(Protocol):
    """Repository interface for property search and listing."""

    def get_all_properties(
        self,
        criteria: PropertySearchFilters | Mapping[str, object] | None = None,
        limit: int | None = None,
    ) -> list[ResultRow]:
        """Return rated properties matching the criteria, cheapest first."""

    def add_property(self, property_row: NewProperty | Mapping[str, object]) -> ResultRow:
        """Insert a property and return the stored row."""
