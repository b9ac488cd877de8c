"""SQL layer - statement builders and built query values."""

from __future__ import annotations

from active_row.sql.builder import (
    DeleteStatement,
    InsertStatement,
    SelectStatement,
    UpdateStatement,
    delete,
    insert,
    select,
    update,
)
from active_row.sql.query import BuiltQuery

__all__ = [
    "BuiltQuery",
    "insert",
    "update",
    "select",
    "delete",
    "InsertStatement",
    "UpdateStatement",
    "SelectStatement",
    "DeleteStatement",
]
