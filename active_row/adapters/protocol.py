"""Database adapter protocol.

Every adapter module MUST implement this protocol so the engine can stay
driver-agnostic.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from active_row.core.connection import ConnectionConfig
from active_row.core.enums import ParamStyle


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    @property
    def paramstyle(self) -> ParamStyle:
        """Positional placeholder style: QMARK (?) or FORMAT (%s)."""
        ...

    def create_pool(self, config: ConnectionConfig) -> Any:
        """Create a connection pool."""
        ...

    def acquire_connection(self, pool: Any) -> Any:
        """Acquire a connection from the pool."""
        ...

    def release_connection(self, connection: Any, pool: Any) -> None:
        """Release a connection back to the pool."""
        ...

    def close_pool(self, pool: Any) -> None:
        """Close the pool and release all connections."""
        ...

    def execute(
        self,
        connection: Any,
        sql: str,
        args: Sequence[Any] = (),
    ) -> Any:
        """Execute SQL with positional arguments and return a cursor-like object."""
        ...

    def generated_key(
        self, connection: Any, cursor: Any, table: str, key_column: str
    ) -> Any | None:
        """Stored *key_column* value of the row just inserted through *cursor*,
        or None if the backend cannot tell."""
        ...
