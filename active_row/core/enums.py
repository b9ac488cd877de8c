"""Enumerations shared across the mapping and execution layers."""

from __future__ import annotations

from enum import Enum


class DatabaseBackend(Enum):
    """Supported database backends."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class AttributeRole(Enum):
    """Persistence role of a record attribute."""

    PLAIN = "plain"
    PRIMARY_KEY = "primary_key"
    RELATION = "relation"


class ParamStyle(Enum):
    """Positional placeholder style expected by a driver."""

    QMARK = "qmark"  # ?
    FORMAT = "format"  # %s
