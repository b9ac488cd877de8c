"""ActiveRow - minimal active-record mapping over positional SQL."""

from __future__ import annotations

from active_row.core.connection import (
    ConnectionConfig,
    ConnectionManager,
    ConnectionProvider,
)
from active_row.core.engine import Engine, WriteResult
from active_row.core.enums import AttributeRole, DatabaseBackend, ParamStyle
from active_row.core.exceptions import (
    ActiveRowError,
    AdapterError,
    BindingError,
    ConnectionError,  # noqa: A004
    MappingError,
    MultipleRowsError,
    PersistenceError,
    PoolError,
    QueryBuildError,
)
from active_row.core.logging import configure_logging
from active_row.core.settings import ActiveRowSettings
from active_row.mapping import (
    AttributeDescriptor,
    RecordDescriptor,
    describe,
    one_to_many,
    primary_key,
)
from active_row.record import ActiveRecord
from active_row.sql import BuiltQuery

__all__ = [
    # Records
    "ActiveRecord",
    "primary_key",
    "one_to_many",
    # Mapping
    "describe",
    "AttributeDescriptor",
    "RecordDescriptor",
    "BuiltQuery",
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    "ConnectionProvider",
    "ActiveRowSettings",
    # Engine
    "Engine",
    "WriteResult",
    # Logging
    "configure_logging",
    # Enums
    "AttributeRole",
    "DatabaseBackend",
    "ParamStyle",
    # Exceptions
    "ActiveRowError",
    "MappingError",
    "BindingError",
    "PersistenceError",
    "MultipleRowsError",
    "QueryBuildError",
    "AdapterError",
    "ConnectionError",
    "PoolError",
]
