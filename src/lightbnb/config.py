"""Environment-driven settings for the LightBnB data layer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from lightbnb.utils.to_int import to_int

load_dotenv()

DEFAULT_POSTGRES_PORT = 5432
DEFAULT_CONNECT_TIMEOUT_S = 5
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_RESULT_LIMIT = 10


def _env(name: str, legacy: str | None = None) -> str | None:
    value = os.getenv(f"LIGHTBNB_{name}")
    if value is None and legacy is not None:
        value = os.getenv(legacy)
    return value


def _env_int(name: str, default: int, legacy: str | None = None) -> int:
    return to_int(_env(name, legacy), default)


@dataclass(slots=True)
class Settings:
    """Central configuration for Postgres access and query defaults."""

    postgres_dsn: str | None = field(default_factory=lambda: _env("POSTGRES_DSN"))
    postgres_host: str | None = field(default_factory=lambda: _env("POSTGRES_HOST", "PG_HOST"))
    postgres_port: int = field(
        default_factory=lambda: _env_int("POSTGRES_PORT", DEFAULT_POSTGRES_PORT, "PG_PORT")
    )
    postgres_db: str | None = field(default_factory=lambda: _env("POSTGRES_DB", "PG_DATABASE"))
    postgres_user: str | None = field(default_factory=lambda: _env("POSTGRES_USER", "PG_USER"))
    postgres_password: str | None = field(
        default_factory=lambda: _env("POSTGRES_PASSWORD", "PG_PASSWORD")
    )
    postgres_sslmode: str = field(default_factory=lambda: _env("POSTGRES_SSLMODE") or "disable")
    postgres_connect_timeout_s: int = field(
        default_factory=lambda: _env_int("POSTGRES_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT_S)
    )
    pool_min_size: int = field(default_factory=lambda: _env_int("POOL_MIN", DEFAULT_POOL_MIN_SIZE))
    pool_max_size: int = field(default_factory=lambda: _env_int("POOL_MAX", DEFAULT_POOL_MAX_SIZE))
    default_result_limit: int = field(
        default_factory=lambda: _env_int("DEFAULT_LIMIT", DEFAULT_RESULT_LIMIT)
    )

    @property
    def is_configured(self) -> bool:
        """Return True when either a DSN or a host and database are set."""
        return bool(self.postgres_dsn or (self.postgres_host and self.postgres_db))


def get_settings() -> Settings:
    """Reload ``.env`` and return a fresh Settings instance."""
    load_dotenv(override=False)
    return Settings()
