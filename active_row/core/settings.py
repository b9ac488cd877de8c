"""Environment-driven settings using Pydantic Settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from active_row.core.connection import ConnectionConfig


class ActiveRowSettings(BaseSettings):
    """Settings loaded from ``ACTIVE_ROW_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIVE_ROW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    driver: str = "sqlite"
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    database: str = ":memory:"
    pool_size: int = 1
    pool_timeout: int = 30

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    def to_connection_config(self) -> ConnectionConfig:
        """Build the ConnectionConfig described by these settings."""
        return ConnectionConfig(
            driver=self.driver,
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
            pool_size=self.pool_size,
            pool_timeout=self.pool_timeout,
        )
