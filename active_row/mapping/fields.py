"""Field declarations for record dataclasses.

    @dataclass
    class ContactGroup(ActiveRecord):
        id: int | None = primary_key()
        name: str | None = None
        contacts: list[Contact] | None = one_to_many(Contact, foreign_key="groupId")

A field with a plain default is an ordinary column.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from active_row.core.enums import AttributeRole

ROLE = "active_row.role"
RELATION_TARGET = "active_row.relation_target"
FOREIGN_KEY = "active_row.foreign_key"


def primary_key(*, default: Any = None) -> Any:
    """Declare the key column. A record with a null key has never been stored."""
    return dataclasses.field(default=default, metadata={ROLE: AttributeRole.PRIMARY_KEY})


def one_to_many(target: type | str, *, foreign_key: str) -> Any:
    """Declare a one-to-many relation.

    Args:
        target: Child record type, or its class name in the declaring module.
        foreign_key: Attribute on the child that holds this record's key.

    Relation values take no part in equality and stay None until loaded.
    """
    return dataclasses.field(
        default=None,
        compare=False,
        metadata={
            ROLE: AttributeRole.RELATION,
            RELATION_TARGET: target,
            FOREIGN_KEY: foreign_key,
        },
    )
