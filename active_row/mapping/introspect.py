"""Attribute introspection for record types."""

from __future__ import annotations

import dataclasses
import sys
import typing
from functools import lru_cache
from typing import Any

from active_row.core.enums import AttributeRole
from active_row.core.exceptions import MappingError
from active_row.mapping.descriptor import AttributeDescriptor, RecordDescriptor
from active_row.mapping.fields import FOREIGN_KEY, RELATION_TARGET, ROLE


def _resolve_target(owner: type, target: type | str) -> type:
    """Resolve a relation target given as a class or a class name."""
    if isinstance(target, str):
        module = sys.modules.get(owner.__module__)
        resolved = getattr(module, target, None) if module is not None else None
        if resolved is None:
            raise MappingError(
                owner.__name__,
                f"relation target '{target}' not found in module {owner.__module__}",
            )
        target = resolved
    if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
        raise MappingError(owner.__name__, f"relation target {target!r} is not a dataclass")
    return target


def _check_foreign_key(owner: type, target: type, foreign_key: str) -> None:
    # Looks at the target's fields directly so cyclic relations do not recurse here.
    for target_field in dataclasses.fields(target):
        if target_field.name == foreign_key:
            if target_field.metadata.get(ROLE) is AttributeRole.RELATION:
                raise MappingError(
                    owner.__name__,
                    f"foreign key '{foreign_key}' on {target.__name__} is a relation",
                )
            return
    raise MappingError(
        owner.__name__,
        f"foreign key '{foreign_key}' does not exist on {target.__name__}",
    )


def _type_hints(record_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record_type)
    except Exception as e:
        raise MappingError(record_type.__name__, f"unresolvable annotation: {e}") from e


@lru_cache(maxsize=None)
def describe(record_type: type) -> RecordDescriptor:
    """Build the ordered attribute table of *record_type*.

    Attributes follow dataclass field declaration order. The result is
    computed once per type.

    Raises:
        MappingError: If the type is not a mutable dataclass, declares more
            than one primary key, or declares a relation whose target or
            foreign key cannot be resolved.
    """
    name = getattr(record_type, "__name__", repr(record_type))
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise MappingError(name, "record types must be dataclasses")
    if record_type.__dataclass_params__.frozen:  # type: ignore[attr-defined]
        raise MappingError(name, "record types must not be frozen")

    hints = _type_hints(record_type)
    attributes: list[AttributeDescriptor] = []
    for f in dataclasses.fields(record_type):
        role = f.metadata.get(ROLE, AttributeRole.PLAIN)
        annotation = hints.get(f.name, Any)
        if role is AttributeRole.RELATION:
            target = _resolve_target(record_type, f.metadata[RELATION_TARGET])
            foreign_key = f.metadata[FOREIGN_KEY]
            _check_foreign_key(record_type, target, foreign_key)
            attributes.append(
                AttributeDescriptor(
                    name=f.name,
                    role=role,
                    annotation=annotation,
                    relation_target=target,
                    foreign_key=foreign_key,
                )
            )
        else:
            attributes.append(AttributeDescriptor(name=f.name, role=role, annotation=annotation))

    keys = [a.name for a in attributes if a.is_primary_key]
    if len(keys) > 1:
        raise MappingError(name, f"more than one primary key declared: {keys}")
    if not keys and any(a.is_relation for a in attributes):
        raise MappingError(name, "relations require a primary key on the owning type")

    return RecordDescriptor(record_type=record_type, table=name, attributes=tuple(attributes))
