"""Unit tests for bindable value checks and placeholder normalization."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest

from active_row.core.enums import ParamStyle
from active_row.core.exceptions import BindingError
from active_row.core.params import count_placeholders, normalize_placeholders
from active_row.core.values import check_arguments, is_bindable


class TestIsBindable:
    @pytest.mark.parametrize(
        "value",
        [
            None,
            True,
            42,
            1.5,
            "text",
            b"\x00\x01",
            Decimal("9.99"),
            datetime.date(2024, 1, 1),
            datetime.time(12, 30),
            datetime.datetime(2024, 1, 1, 12, 30),
        ],
    )
    def test_scalar_kinds_are_bindable(self, value: object) -> None:
        assert is_bindable(value)

    @pytest.mark.parametrize("value", [[1], {"a": 1}, object(), (1, 2)])
    def test_containers_are_not_bindable(self, value: object) -> None:
        assert not is_bindable(value)


class TestCheckArguments:
    def test_matching_count_passes(self) -> None:
        check_arguments("SELECT id FROM Contact WHERE id = ? AND email = ?", (1, "a@b.c"))

    def test_too_few_arguments(self) -> None:
        with pytest.raises(BindingError) as exc_info:
            check_arguments("DELETE FROM Contact WHERE id = ?", ())
        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 0

    def test_too_many_arguments(self) -> None:
        with pytest.raises(BindingError, match="1 placeholder"):
            check_arguments("DELETE FROM Contact WHERE id = ?", (1, 2))

    def test_unbindable_argument(self) -> None:
        with pytest.raises(BindingError, match="argument 2 of type list"):
            check_arguments("INSERT INTO T (a, b) VALUES (?, ?)", (1, [2]))


class TestPlaceholders:
    def test_count(self) -> None:
        assert count_placeholders("UPDATE T SET a = ?, b = ? WHERE id = ?") == 3

    def test_qmark_passthrough(self) -> None:
        sql = "SELECT a FROM T WHERE a = ?"
        assert normalize_placeholders(sql, ParamStyle.QMARK) == sql

    def test_format_conversion(self) -> None:
        sql = "UPDATE T SET a = ?, b = ? WHERE id = ?"
        expected = "UPDATE T SET a = %s, b = %s WHERE id = %s"
        assert normalize_placeholders(sql, ParamStyle.FORMAT) == expected

    def test_format_escapes_percent(self) -> None:
        sql = "SELECT a FROM T% WHERE a = ?"
        assert normalize_placeholders(sql, ParamStyle.FORMAT) == "SELECT a FROM T%% WHERE a = %s"

    def test_no_placeholders(self) -> None:
        assert normalize_placeholders("DELETE FROM T", ParamStyle.FORMAT) == "DELETE FROM T"
