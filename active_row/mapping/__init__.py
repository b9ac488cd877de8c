"""Mapping layer - record introspection and row hydration."""

from __future__ import annotations

from active_row.mapping.descriptor import AttributeDescriptor, RecordDescriptor
from active_row.mapping.fields import one_to_many, primary_key
from active_row.mapping.hydrator import RecordHydrator, hydrator_for
from active_row.mapping.introspect import describe

__all__ = [
    "describe",
    "primary_key",
    "one_to_many",
    "AttributeDescriptor",
    "RecordDescriptor",
    "RecordHydrator",
    "hydrator_for",
]
