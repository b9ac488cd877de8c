"""Record descriptor data classes.

Frozen dataclasses describing a record type's persistent attributes.
Built once per type by ``describe()`` and consulted by both the statement
planner and the hydrator, so column order is defined in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from active_row.core.enums import AttributeRole


@dataclass(frozen=True)
class AttributeDescriptor:
    """One persistent attribute: a column, the key column, or a relation."""

    name: str
    role: AttributeRole
    annotation: Any = Any
    relation_target: type | None = None
    foreign_key: str | None = None  # attribute on relation_target

    @property
    def is_primary_key(self) -> bool:
        return self.role is AttributeRole.PRIMARY_KEY

    @property
    def is_relation(self) -> bool:
        return self.role is AttributeRole.RELATION


@dataclass(frozen=True)
class RecordDescriptor:
    """Ordered attribute table of a record type."""

    record_type: type
    table: str
    attributes: tuple[AttributeDescriptor, ...]

    @property
    def primary_key(self) -> AttributeDescriptor | None:
        for attribute in self.attributes:
            if attribute.is_primary_key:
                return attribute
        return None

    @property
    def columns(self) -> tuple[AttributeDescriptor, ...]:
        """Non-relation attributes, in declaration order."""
        return tuple(a for a in self.attributes if not a.is_relation)

    @property
    def column_names(self) -> list[str]:
        return [a.name for a in self.columns]

    @property
    def relations(self) -> tuple[AttributeDescriptor, ...]:
        return tuple(a for a in self.attributes if a.is_relation)
