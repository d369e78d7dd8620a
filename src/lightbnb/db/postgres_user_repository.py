"""Postgres repository for users."""

from __future__ import annotations

from collections.abc import Mapping

from lightbnb.models.new_user import NewUser
from lightbnb.ports.query_executor import QueryExecutor, ResultRow

USER_BY_EMAIL_SQL = "SELECT * FROM users WHERE email = $1;"
USER_BY_ID_SQL = "SELECT * FROM users WHERE id = $1;"
INSERT_USER_SQL = """
INSERT INTO users (name, email, password)
VALUES ($1, $2, $3)
RETURNING *;
""".strip()


def _first_row(rows: list[ResultRow]) -> ResultRow | None:
    return rows[0] if rows else None


class PostgresUserRepository:
    """Encapsulates user lookups and registration."""

    def __init__(self, executor: QueryExecutor) -> None:
        self._executor = executor

    def get_user_with_email(self, email: str) -> ResultRow | None:
        """Return the user with this email (case-insensitive), or None."""
        return _first_row(self._executor.execute(USER_BY_EMAIL_SQL, (email.lower(),)))

    def get_user_with_id(self, user_id: int | str) -> ResultRow | None:
        """Return the user with this id, or None."""
        return _first_row(self._executor.execute(USER_BY_ID_SQL, (user_id,)))

    def add_user(self, user: NewUser | Mapping[str, object]) -> ResultRow:
        """Insert a user and return the stored row."""
        if not isinstance(user, NewUser):
            user = NewUser.model_validate(dict(user))
        rows = self._executor.execute(INSERT_USER_SQL, (user.name, user.email, user.password))
        return rows[0]
