"""Tests for Decimal helpers."""

from decimal import Decimal

import pytest

from src.utils.decimal_utils import percent_of, round_half_up, round_money


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("89.5"), 90),
        (Decimal("89.49"), 89),
        (Decimal("-2.5"), -3),
        (Decimal("1E+40"), 10**40),
    ],
)
def test_round_half_up(value, expected) -> None:
    assert round_half_up(value) == expected


def test_round_money_beyond_default_precision() -> None:
    value = Decimal("1" + "0" * 40 + ".005")

    assert round_money(value) == Decimal("1" + "0" * 40 + ".01")


def test_round_money_places() -> None:
    assert round_money(Decimal("2.345")) == Decimal("2.35")
    assert round_money(Decimal("2.5"), places=0) == Decimal("3")


def test_percent_of_zero_whole() -> None:
    assert percent_of(Decimal("5"), Decimal("0")) == Decimal("0")
