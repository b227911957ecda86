"""Tests for numeric coercion of catalog cost and quantity fields."""

from __future__ import annotations

import pytest

from roomcost.costing.coercion import coerce_number


class TestCoerceNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (12.5, 12.5),
            (3, 3.0),
            ("12.5", 12.5),
            (" 7 ", 7.0),
            ("-4", -4.0),
            ("1e3", 1000.0),
        ],
    )
    def test_numbers_and_numeric_strings(self, value: object, expected: float) -> None:
        assert coerce_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            None, "", "abc", "12,50", "$100", "1_000", "\u0661\u0662", "0x10",
            True, False, [], {}, float("nan"), "inf", "1e999", 10**400,
        ],
    )
    def test_unparseable_values_become_zero(self, value: object) -> None:
        assert coerce_number(value) == 0.0

    def test_result_is_always_float(self) -> None:
        assert isinstance(coerce_number(5), float)
