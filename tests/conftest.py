"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from active_row.core.connection import ConnectionConfig, ConnectionManager

SCHEMA = (
    "CREATE TABLE Contact (id INTEGER PRIMARY KEY, firstName TEXT, lastName TEXT, "
    "email TEXT, groupId INTEGER)",
    "CREATE TABLE ContactGroup (id INTEGER PRIMARY KEY, name TEXT)",
    "CREATE TABLE Tag (code TEXT PRIMARY KEY, label TEXT)",
    "CREATE TABLE Badge (id INTEGER PRIMARY KEY)",
    "CREATE TABLE Company (id INTEGER PRIMARY KEY, name TEXT)",
    "CREATE TABLE Department (id INTEGER PRIMARY KEY, name TEXT, companyId INTEGER)",
    "CREATE TABLE Employee (id INTEGER PRIMARY KEY, name TEXT, departmentId INTEGER)",
)


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config (one connection, one database)."""
    return ConnectionConfig(driver="sqlite", database=":memory:", pool_size=1)


@pytest.fixture
def provider(sqlite_config: ConnectionConfig) -> Iterator[ConnectionManager]:
    """Connection manager over an in-memory database with the contact schema."""
    manager = ConnectionManager(sqlite_config)
    with manager.get_connection() as conn:
        for statement in SCHEMA:
            conn.execute(statement)
        conn.commit()
    yield manager
    manager.close_pool()


@pytest.fixture
def run_sql(provider: ConnectionManager):
    """Helper to run raw SQL against the test database.

    Usage:
        run_sql("INSERT INTO Contact (firstName) VALUES (?)", ("Ada",))
        rows = run_sql("SELECT * FROM Contact")
    """

    def _run(sql: str, args: tuple = ()) -> list[tuple]:
        with provider.get_connection() as conn:
            rows = conn.execute(sql, args).fetchall()
            conn.commit()
        return rows

    return _run
