"""Record layer - the active record base class and statement planning."""

from __future__ import annotations

from active_row.record.base import ActiveRecord

__all__ = [
    "ActiveRecord",
]
