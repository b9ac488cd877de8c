"""Bindable value kinds.

Only a closed set of scalar kinds is ever handed to a driver. Anything
else is rejected with BindingError before the statement is prepared.
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Union

from active_row.core.exceptions import BindingError
from active_row.core.params import count_placeholders

BindableValue = Union[
    None,
    bool,
    int,
    float,
    str,
    bytes,
    Decimal,
    datetime.date,
    datetime.time,
    datetime.datetime,
]

# datetime.datetime is a subclass of datetime.date
_BINDABLE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    str,
    bytes,
    Decimal,
    datetime.date,
    datetime.time,
)


def is_bindable(value: Any) -> bool:
    """Return True if *value* is one of the storable scalar kinds."""
    return value is None or isinstance(value, _BINDABLE_TYPES)


def check_arguments(sql: str, args: Sequence[Any]) -> None:
    """Validate *args* against the placeholders of *sql*.

    Raises:
        BindingError: If the argument count differs from the placeholder
            count, or if an argument is not a bindable scalar.
    """
    expected = count_placeholders(sql)
    if expected != len(args):
        raise BindingError(
            sql,
            f"statement has {expected} placeholder(s) but {len(args)} argument(s) were supplied",
            expected=expected,
            actual=len(args),
        )
    for position, value in enumerate(args, start=1):
        if not is_bindable(value):
            raise BindingError(
                sql,
                f"argument {position} of type {type(value).__name__} is not bindable",
            )
