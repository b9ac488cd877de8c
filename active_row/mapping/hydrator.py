"""Row-to-record hydration.

Rows are positional tuples whose columns follow ``RecordDescriptor.columns``,
the same order the SELECT was built from. Each value is coerced to the
attribute's annotation with Pydantic; NULL is always accepted.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from active_row.core.exceptions import MappingError
from active_row.mapping.descriptor import RecordDescriptor
from active_row.mapping.introspect import describe

T = TypeVar("T")


def empty_instance(record_type: type[T]) -> T:
    """Construct *record_type* with no arguments; every field needs a default."""
    try:
        return record_type()
    except TypeError as e:
        raise MappingError(record_type.__name__, f"cannot construct an empty instance: {e}") from e


class RecordHydrator(Generic[T]):
    """Builds fresh record instances from result rows.

    Relation attributes are left untouched; loading them needs a
    connection and is done by the record layer.

    Args:
        descriptor: Attribute table of the target record type.
    """

    def __init__(self, descriptor: RecordDescriptor) -> None:
        self._descriptor = descriptor
        self._record_type: type[T] = descriptor.record_type
        try:
            self._adapters = tuple(TypeAdapter(a.annotation) for a in descriptor.columns)
        except Exception as e:
            raise MappingError(descriptor.table, f"unsupported attribute type: {e}") from e

    @property
    def descriptor(self) -> RecordDescriptor:
        return self._descriptor

    def hydrate(self, row: Sequence[Any]) -> T:
        """Map a single positional row to a new instance."""
        columns = self._descriptor.columns
        if len(row) != len(columns):
            raise MappingError(
                self._descriptor.table,
                f"row has {len(row)} column(s), expected {len(columns)}",
            )

        instance = empty_instance(self._record_type)
        for attribute, adapter, value in zip(columns, self._adapters, row, strict=True):
            if value is not None:
                try:
                    value = adapter.validate_python(value)
                except ValidationError as e:
                    raise MappingError(
                        self._descriptor.table,
                        f"column '{attribute.name}' value {value!r} does not fit "
                        f"{attribute.annotation}",
                    ) from e
            setattr(instance, attribute.name, value)
        return instance

    def hydrate_many(self, rows: Iterable[Sequence[Any]]) -> list[T]:
        """Map all rows via hydrate."""
        return [self.hydrate(row) for row in rows]


@lru_cache(maxsize=None)
def hydrator_for(record_type: type[T]) -> RecordHydrator[T]:
    """Shared hydrator for *record_type*; holds only immutable type metadata."""
    return RecordHydrator(describe(record_type))
