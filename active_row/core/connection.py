"""Connection configuration and management.

ConnectionConfig is a Pydantic model for type-safe connection config.
ConnectionManager is the stock ConnectionProvider: it owns a small pool of
driver connections and hands one out per operation.
"""

from __future__ import annotations

import importlib
import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from active_row.core.enums import DatabaseBackend
from active_row.core.exceptions import AdapterError


class ConnectionConfig(BaseModel):
    """Configuration for database connections."""

    driver: str
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    database: str
    pool_size: int = 5
    pool_timeout: int = 30
    extra: dict[str, Any] = {}


@runtime_checkable
class ConnectionProvider(Protocol):
    """Anything that can lend a ready-to-use connection for one operation."""

    @property
    def adapter(self) -> Any:
        """Adapter used to execute statements on lent connections."""
        ...

    def get_connection(self) -> AbstractContextManager[Any]:
        """Lend a connection; it is released when the context exits."""
        ...


# Adapter module mapping: backend → (module_path, class_name)
_ADAPTER_MAP: dict[DatabaseBackend, tuple[str, str]] = {
    DatabaseBackend.SQLITE: ("active_row.adapters.sqlite", "SqliteAdapter"),
    DatabaseBackend.POSTGRESQL: ("active_row.adapters.postgresql", "PostgresqlAdapter"),
}


def _load_adapter(driver: str) -> Any:
    """Load an adapter by driver name."""
    try:
        backend = DatabaseBackend(driver.lower())
    except ValueError:
        raise AdapterError(f"Unsupported database driver: {driver}") from None

    module_path, cls_name = _ADAPTER_MAP[backend]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e


class ConnectionManager:
    """Pool-backed connection provider using the SyncAdapter protocol."""

    def __init__(self, config: ConnectionConfig) -> None:
        self.config = config
        self._adapter = _load_adapter(config.driver)
        self._pool: Any = None
        self._lock = threading.Lock()

    @property
    def adapter(self) -> Any:
        return self._adapter

    def initialize_pool(self) -> Any:
        """Initialize the connection pool."""
        with self._lock:
            if self._pool is None:
                self._pool = self._adapter.create_pool(self.config)
            return self._pool

    @contextmanager
    def get_connection(self) -> Iterator[Any]:
        """Get a connection from the pool as a context manager."""
        pool = self._pool if self._pool is not None else self.initialize_pool()
        with self._lock:
            connection = self._adapter.acquire_connection(pool)
        try:
            yield connection
        finally:
            with self._lock:
                self._adapter.release_connection(connection, pool)

    def close_pool(self) -> None:
        """Close the connection pool."""
        with self._lock:
            if self._pool is not None:
                self._adapter.close_pool(self._pool)
                self._pool = None
