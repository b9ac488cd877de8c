"""Fluent SQL statement builders.

Pure text construction, no I/O. Table and column names are emitted
verbatim: they must only ever come from record introspection.

    select(["firstName", "email"], "Contact").where("firstName").equals()
    -> SELECT firstName, email FROM Contact WHERE firstName = ?
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from active_row.core.exceptions import QueryBuildError
from active_row.core.params import QMARK
from active_row.sql.query import BuiltQuery

_F = TypeVar("_F", bound="_Filterable")


def _join(names: Iterable[str]) -> str:
    return ", ".join(names)


def _require_columns(kind: str, columns: Sequence[str]) -> list[str]:
    if not columns:
        raise QueryBuildError(f"{kind} statement needs at least one column")
    return list(columns)


class _Statement:
    """Base for all builders: render with ``sql`` / ``str()``, bind with ``build()``."""

    @property
    def sql(self) -> str:
        raise NotImplementedError

    def build(self, args: Iterable[Any] = ()) -> BuiltQuery:
        """Freeze the statement together with its positional arguments."""
        return BuiltQuery(self.sql, tuple(args))

    def __str__(self) -> str:
        return self.sql


class _Filterable(_Statement):
    """Statement with an optional WHERE clause of ANDed equality predicates."""

    def __init__(self) -> None:
        self._predicates: list[str] = []
        self._pending: str | None = None

    def where(self: _F, column: str) -> _F:
        """Start the WHERE clause with *column*."""
        if self._predicates or self._pending is not None:
            raise QueryBuildError("where() already called; use and_() for further predicates")
        self._pending = column
        return self

    def and_(self: _F, column: str) -> _F:
        """Add another predicate on *column*."""
        if self._pending is not None:
            raise QueryBuildError(f"Predicate on '{self._pending}' has no operand")
        if not self._predicates:
            raise QueryBuildError("and_() called before where()")
        self._pending = column
        return self

    def equals(self: _F) -> _F:
        """Close the pending predicate as an equality against a placeholder."""
        if self._pending is None:
            raise QueryBuildError("equals() called without a pending column")
        self._predicates.append(f"{self._pending} = {QMARK}")
        self._pending = None
        return self

    @property
    def where_clause(self) -> str:
        if self._pending is not None:
            raise QueryBuildError(f"Predicate on '{self._pending}' has no operand")
        if not self._predicates:
            return ""
        return " WHERE " + " AND ".join(self._predicates)


class InsertStatement(_Statement):
    def __init__(self, table: str, columns: Sequence[str]) -> None:
        self._table = table
        self._columns = _require_columns("INSERT", columns)

    @property
    def sql(self) -> str:
        placeholders = _join(QMARK for _ in self._columns)
        return f"INSERT INTO {self._table} ({_join(self._columns)}) VALUES ({placeholders})"


class UpdateStatement(_Statement):
    def __init__(self, table: str, set_columns: Sequence[str], key_column: str) -> None:
        self._table = table
        self._set_columns = _require_columns("UPDATE", set_columns)
        self._key_column = key_column

    @property
    def sql(self) -> str:
        assignments = _join(f"{column} = {QMARK}" for column in self._set_columns)
        return f"UPDATE {self._table} SET {assignments} WHERE {self._key_column} = {QMARK}"


class SelectStatement(_Filterable):
    def __init__(self, columns: Sequence[str], table: str) -> None:
        super().__init__()
        self._columns = _require_columns("SELECT", columns)
        self._table = table

    @property
    def sql(self) -> str:
        return f"SELECT {_join(self._columns)} FROM {self._table}{self.where_clause}"


class DeleteStatement(_Filterable):
    def __init__(self, table: str) -> None:
        super().__init__()
        self._table = table

    @property
    def sql(self) -> str:
        return f"DELETE FROM {self._table}{self.where_clause}"


def insert(table: str, columns: Sequence[str]) -> InsertStatement:
    """``INSERT INTO table (c1, c2) VALUES (?, ?)``."""
    return InsertStatement(table, columns)


def update(table: str, set_columns: Sequence[str], key_column: str) -> UpdateStatement:
    """``UPDATE table SET c1 = ?, c2 = ? WHERE key = ?``."""
    return UpdateStatement(table, set_columns, key_column)


def select(columns: Sequence[str], table: str) -> SelectStatement:
    """``SELECT c1, c2 FROM table``; chain ``where``/``and_``/``equals`` to filter."""
    return SelectStatement(columns, table)


def delete(table: str) -> DeleteStatement:
    """``DELETE FROM table``; chain ``where``/``and_``/``equals`` to filter."""
    return DeleteStatement(table)
