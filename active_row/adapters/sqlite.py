"""SQLite adapter using the stdlib sqlite3 driver."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from typing import Any

from active_row.core.connection import ConnectionConfig
from active_row.core.enums import ParamStyle
from active_row.core.exceptions import PoolError

_MEMORY_DATABASE = ":memory:"


class SqliteAdapter:
    """Synchronous SQLite adapter.

    Rows come back as plain tuples so that hydration can map them by
    position. Note that every ``:memory:`` connection is a separate
    database; use ``pool_size=1`` for in-memory work.
    """

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.QMARK

    def create_pool(self, config: ConnectionConfig) -> list[sqlite3.Connection]:
        """Create a 'pool' (list of connections) for SQLite."""
        pool: list[sqlite3.Connection] = []
        for _ in range(config.pool_size):
            conn = sqlite3.connect(
                config.database,
                timeout=config.pool_timeout,
                check_same_thread=False,
                **config.extra,
            )
            if config.database != _MEMORY_DATABASE:
                conn.execute("PRAGMA journal_mode=WAL")
            pool.append(conn)
        return pool

    def acquire_connection(self, pool: list[sqlite3.Connection]) -> sqlite3.Connection:
        """Acquire a connection from the pool."""
        if not pool:
            raise PoolError("No connections available in pool")
        return pool.pop()

    def release_connection(
        self, connection: sqlite3.Connection, pool: list[sqlite3.Connection]
    ) -> None:
        """Release a connection back to the pool."""
        pool.append(connection)

    def close_pool(self, pool: list[sqlite3.Connection]) -> None:
        """Close all connections in the pool."""
        for conn in pool:
            conn.close()
        pool.clear()

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        args: Sequence[Any] = (),
    ) -> sqlite3.Cursor:
        """Execute SQL and return a cursor."""
        return connection.execute(sql, tuple(args))

    def generated_key(
        self,
        connection: sqlite3.Connection,
        cursor: sqlite3.Cursor,
        table: str,
        key_column: str,
    ) -> Any | None:
        """Read back the key of the row just inserted through *cursor*.

        ``lastrowid`` is the internal rowid, which equals the key only for an
        ``INTEGER PRIMARY KEY`` column, so the stored key is selected by rowid.
        Tables declared ``WITHOUT ROWID`` have no rowid and yield None.
        """
        rowid = cursor.lastrowid
        if not rowid:
            return None
        try:
            row = connection.execute(
                f"SELECT {key_column} FROM {table} WHERE rowid = ?", (rowid,)
            ).fetchone()
        except sqlite3.OperationalError:
            return None
        return row[0] if row is not None else None
