"""PostgreSQL adapter using psycopg (v3+)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from active_row.core.connection import ConnectionConfig
from active_row.core.enums import ParamStyle
from active_row.core.exceptions import PoolError


def _build_conninfo(config: ConnectionConfig) -> str:
    """Build a libpq connection string from config fields."""
    parts: list[str] = []
    if config.host is not None:
        parts.append(f"host={config.host}")
    if config.port is not None:
        parts.append(f"port={config.port}")
    if config.user is not None:
        parts.append(f"user={config.user}")
    if config.password is not None:
        parts.append(f"password={config.password}")
    parts.append(f"dbname={config.database}")
    parts.append(f"connect_timeout={config.pool_timeout}")
    return " ".join(parts)


class PostgresqlAdapter:
    """Synchronous PostgreSQL adapter.

    Uses the default tuple row factory. Unquoted identifiers are folded to
    lower case by the server, so ``Contact.firstName`` resolves to table
    ``contact`` and column ``firstname``.
    """

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.FORMAT

    def create_pool(self, config: ConnectionConfig) -> list[Any]:
        import psycopg

        conninfo = _build_conninfo(config)
        pool: list[Any] = []
        for _ in range(config.pool_size):
            pool.append(psycopg.connect(conninfo, **config.extra))
        return pool

    def acquire_connection(self, pool: list[Any]) -> Any:
        if not pool:
            raise PoolError("No connections available in pool")
        return pool.pop()

    def release_connection(self, connection: Any, pool: list[Any]) -> None:
        pool.append(connection)

    def close_pool(self, pool: list[Any]) -> None:
        for conn in pool:
            conn.close()
        pool.clear()

    def execute(
        self,
        connection: Any,
        sql: str,
        args: Sequence[Any] = (),
    ) -> Any:
        return connection.execute(sql, tuple(args))

    def generated_key(
        self, connection: Any, cursor: Any, table: str, key_column: str
    ) -> Any | None:
        # a plain INSERT without RETURNING reports no key
        return None
