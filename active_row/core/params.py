"""Positional placeholder normalization.

Generated statements always use ``?``. Drivers that expect ``%s`` get the
statement rewritten just before execution. Identifiers come from record
introspection and never contain ``?``, so no literal scanning is needed.
"""

from __future__ import annotations

from functools import lru_cache

from active_row.core.enums import ParamStyle

QMARK = "?"


def count_placeholders(sql: str) -> int:
    """Number of ``?`` placeholders in a generated statement."""
    return sql.count(QMARK)


def normalize_placeholders(sql: str, paramstyle: ParamStyle) -> str:
    """Convert ``?`` placeholders to the driver's positional style.

    Args:
        sql: Statement text with ``?`` placeholders.
        paramstyle: Target style of the executing adapter.

    Returns:
        Statement text ready for the driver.
    """
    if paramstyle is ParamStyle.QMARK:
        return sql
    return _convert_to_format(sql)


@lru_cache(maxsize=256)
def _convert_to_format(sql: str) -> str:
    """Convert ``?`` to ``%s``, escaping literal percent signs first."""
    return sql.replace("%", "%%").replace(QMARK, "%s")
