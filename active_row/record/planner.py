"""Statement planning for record operations.

Turns a record instance into the BuiltQuery for save, find or delete.
Every plan walks ``RecordDescriptor.columns`` in order, so the argument
tuple always lines up with the placeholders it produced.
"""

from __future__ import annotations

from typing import Any

from active_row.core.exceptions import MappingError
from active_row.mapping.descriptor import RecordDescriptor
from active_row.mapping.introspect import describe
from active_row.sql import builder
from active_row.sql.query import BuiltQuery


def _describe_instance(record: Any) -> RecordDescriptor:
    return describe(type(record))


def _example_predicates(record: Any, descriptor: RecordDescriptor) -> list[tuple[str, Any]]:
    """Non-null column values of *record*, in declaration order."""
    predicates: list[tuple[str, Any]] = []
    for attribute in descriptor.columns:
        value = getattr(record, attribute.name)
        if value is not None:
            predicates.append((attribute.name, value))
    return predicates


def _filter_by_example(
    statement: builder.SelectStatement | builder.DeleteStatement,
    record: Any,
    descriptor: RecordDescriptor,
) -> BuiltQuery:
    predicates = _example_predicates(record, descriptor)
    for position, (column, _) in enumerate(predicates):
        if position == 0:
            statement.where(column).equals()
        else:
            statement.and_(column).equals()
    return statement.build(value for _, value in predicates)


def exists_in_storage(record: Any) -> bool:
    """A record is stored iff its primary key is not null."""
    key = _describe_instance(record).primary_key
    return key is not None and getattr(record, key.name) is not None


def plan_insert(record: Any) -> BuiltQuery:
    """INSERT every column, null key included."""
    descriptor = _describe_instance(record)
    columns = descriptor.column_names
    args = [getattr(record, name) for name in columns]
    return builder.insert(descriptor.table, columns).build(args)


def plan_update(record: Any) -> BuiltQuery:
    """UPDATE every non-key column; the key value is bound last."""
    descriptor = _describe_instance(record)
    key = descriptor.primary_key
    if key is None:
        raise MappingError(descriptor.table, "cannot update a record type without a primary key")

    set_columns = [a.name for a in descriptor.columns if not a.is_primary_key]
    if not set_columns:
        raise MappingError(descriptor.table, "no non-key columns to update")
    args = [getattr(record, name) for name in set_columns]
    args.append(getattr(record, key.name))
    return builder.update(descriptor.table, set_columns, key.name).build(args)


def plan_save(record: Any) -> BuiltQuery:
    """Update when the record already exists, insert otherwise."""
    if exists_in_storage(record):
        return plan_update(record)
    return plan_insert(record)


def plan_find(record: Any) -> BuiltQuery:
    """SELECT every column, filtered by the record's non-null columns.

    A record with every column null selects the whole table.
    """
    descriptor = _describe_instance(record)
    statement = builder.select(descriptor.column_names, descriptor.table)
    return _filter_by_example(statement, record, descriptor)


def plan_delete(record: Any) -> BuiltQuery:
    """DELETE filtered by the record's non-null columns.

    A record with every column null deletes the whole table.
    """
    descriptor = _describe_instance(record)
    statement = builder.delete(descriptor.table)
    return _filter_by_example(statement, record, descriptor)
