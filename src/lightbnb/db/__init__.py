"""Postgres-backed query building and repositories."""
