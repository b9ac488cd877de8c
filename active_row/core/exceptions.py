"""ActiveRow exception hierarchy.

Every failure of a record operation surfaces as one of these. Raw driver
exceptions are always chained as ``__cause__``, never raised directly.
"""

from __future__ import annotations


class ActiveRowError(Exception):
    """Base exception for all ActiveRow errors."""


# --- Mapping ---


class MappingError(ActiveRowError):
    """Raised for record-shape violations and result coercion failures."""

    def __init__(self, record_type: str, detail: str) -> None:
        self.record_type = record_type
        self.detail = detail
        super().__init__(f"Cannot map {record_type}: {detail}")


# --- Query building ---


class QueryBuildError(ActiveRowError):
    """Raised when a statement builder is used out of order."""


# --- Execution ---


class BindingError(ActiveRowError):
    """Raised when bound arguments do not fit the statement placeholders."""

    def __init__(
        self,
        sql: str,
        detail: str,
        *,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        self.sql = sql
        self.expected = expected
        self.actual = actual
        super().__init__(f"Binding error for '{sql}': {detail}")


class PersistenceError(ActiveRowError):
    """Raised when the underlying store fails to run a statement."""

    def __init__(self, detail: str, sql: str | None = None) -> None:
        self.sql = sql
        if sql is None:
            super().__init__(detail)
        else:
            super().__init__(f"Statement '{sql}' failed: {detail}")


class MultipleRowsError(PersistenceError):
    """Raised when find_one matches more than one row."""

    def __init__(self, record_type: str, row_count: int) -> None:
        self.record_type = record_type
        self.row_count = row_count
        super().__init__(
            f"find_one for '{record_type}' returned {row_count} rows (expected 0 or 1)"
        )


# --- Adapter ---


class AdapterError(ActiveRowError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""


class PoolError(AdapterError):
    """Raised on connection pool failures."""
