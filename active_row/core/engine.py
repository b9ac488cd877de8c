"""Statement execution engine.

The Engine takes a BuiltQuery, validates its arguments, borrows one
connection from the provider for the duration of the statement, and
returns either a WriteResult or the raw positional rows.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import structlog

from active_row.core.connection import ConnectionConfig, ConnectionManager, ConnectionProvider
from active_row.core.exceptions import PersistenceError
from active_row.core.params import normalize_placeholders
from active_row.core.values import check_arguments
from active_row.sql.query import BuiltQuery

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a write statement."""

    rowcount: int
    generated_key: Any | None = None


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)


class Engine:
    """Synchronous statement execution engine.

    Holds no per-call state: timing and arguments live in each call's frame,
    so one Engine may serve concurrent callers.
    """

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider
        self._adapter = provider.adapter

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> Engine:
        """Create an Engine backed by a new ConnectionManager."""
        return cls(ConnectionManager(config))

    @property
    def provider(self) -> ConnectionProvider:
        return self._provider

    def _prepare(self, query: BuiltQuery) -> str:
        check_arguments(query.sql, query.args)
        return normalize_placeholders(query.sql, self._adapter.paramstyle)

    def execute(
        self,
        query: BuiltQuery,
        *,
        table: str | None = None,
        key_column: str | None = None,
    ) -> WriteResult:
        """Execute a write statement and commit it.

        When *table* and *key_column* are given the stored key of the
        inserted row is read back on the same connection.

        Raises:
            BindingError: If the arguments do not fit the placeholders.
            PersistenceError: If the connection or statement fails.
        """
        sql = self._prepare(query)
        logger.debug("executing_query", sql=query.sql, args=query.args)
        started = time.perf_counter()
        try:
            with self._provider.get_connection() as conn:
                try:
                    cursor = self._adapter.execute(conn, sql, query.args)
                    conn.commit()
                except Exception:
                    conn.rollback()
                    raise
                generated = None
                if table is not None and key_column is not None:
                    generated = self._adapter.generated_key(conn, cursor, table, key_column)
                result = WriteResult(rowcount=int(cursor.rowcount), generated_key=generated)
        except Exception as e:
            logger.warning("query_failed", sql=query.sql, args=query.args, error=str(e))
            raise PersistenceError(str(e), query.sql) from e

        logger.info(
            "executed_query",
            sql=query.sql,
            args=query.args,
            rowcount=result.rowcount,
            elapsed_ms=_elapsed_ms(started),
        )
        return result

    def fetch_all(self, query: BuiltQuery) -> list[tuple[Any, ...]]:
        """Execute a SELECT and return every row as a positional tuple.

        The connection is released before this returns, so callers may
        issue further statements while processing the rows.

        Raises:
            BindingError: If the arguments do not fit the placeholders.
            PersistenceError: If the connection or statement fails.
        """
        sql = self._prepare(query)
        logger.debug("executing_query", sql=query.sql, args=query.args)
        started = time.perf_counter()
        try:
            with self._provider.get_connection() as conn:
                cursor = self._adapter.execute(conn, sql, query.args)
                rows = [tuple(row) for row in cursor.fetchall()]
                # end the implicit read transaction before the connection goes back
                conn.commit()
        except Exception as e:
            logger.warning("query_failed", sql=query.sql, args=query.args, error=str(e))
            raise PersistenceError(str(e), query.sql) from e

        logger.info(
            "executed_query",
            sql=query.sql,
            args=query.args,
            rows=len(rows),
            elapsed_ms=_elapsed_ms(started),
        )
        return rows
