"""Unit tests for connection configuration, management and settings."""

from __future__ import annotations

import pytest

from active_row.core.connection import ConnectionConfig, ConnectionManager, ConnectionProvider
from active_row.core.exceptions import AdapterError, PoolError
from active_row.core.settings import ActiveRowSettings


class TestConnectionManager:
    def test_unsupported_driver(self) -> None:
        with pytest.raises(AdapterError, match="Unsupported database driver"):
            ConnectionManager(ConnectionConfig(driver="db2", database="x"))

    def test_driver_name_is_case_insensitive(self) -> None:
        manager = ConnectionManager(ConnectionConfig(driver="SQLite", database=":memory:"))
        assert manager.adapter is not None

    def test_is_a_connection_provider(self, sqlite_config: ConnectionConfig) -> None:
        assert isinstance(ConnectionManager(sqlite_config), ConnectionProvider)

    def test_pool_is_created_lazily(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        with manager.get_connection() as conn:
            assert conn.execute("SELECT 1").fetchone() == (1,)
        manager.close_pool()

    def test_connection_returned_on_exception(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        with pytest.raises(ValueError):
            with manager.get_connection():
                raise ValueError("boom")
        with manager.get_connection() as conn:
            assert conn is not None
        manager.close_pool()

    def test_exhausted_pool(self, sqlite_config: ConnectionConfig) -> None:
        manager = ConnectionManager(sqlite_config)
        with manager.get_connection():
            with pytest.raises(PoolError):
                with manager.get_connection():
                    pass
        manager.close_pool()


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ACTIVE_ROW_DRIVER", raising=False)
        monkeypatch.delenv("ACTIVE_ROW_DATABASE", raising=False)
        settings = ActiveRowSettings(_env_file=None)
        assert settings.driver == "sqlite"
        assert settings.database == ":memory:"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACTIVE_ROW_DRIVER", "postgresql")
        monkeypatch.setenv("ACTIVE_ROW_HOST", "db.internal")
        monkeypatch.setenv("ACTIVE_ROW_PORT", "5433")
        monkeypatch.setenv("ACTIVE_ROW_DATABASE", "contacts")
        config = ActiveRowSettings(_env_file=None).to_connection_config()
        assert config.driver == "postgresql"
        assert config.host == "db.internal"
        assert config.port == 5433
        assert config.database == "contacts"
