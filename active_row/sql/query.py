"""Built statement value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from active_row.core.params import count_placeholders


@dataclass(frozen=True)
class BuiltQuery:
    """Statement text paired with its positional arguments."""

    sql: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def placeholder_count(self) -> int:
        return count_placeholders(self.sql)

    def __str__(self) -> str:
        return self.sql
