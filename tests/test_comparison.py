from __future__ import annotations

import math

import pytest

from felis import Comparison


@pytest.mark.parametrize(
    "value,expected",
    [
        (7, Comparison.GREATER_THAN),
        (0, Comparison.EQUAL_TO),
        (-3, Comparison.LESS_THAN),
        (-5, Comparison.LESS_THAN),
    ],
)
def test_from_int(value, expected):
    assert Comparison.from_int(value) is expected


def test_from_double():
    assert Comparison.from_double(0.5) is Comparison.GREATER_THAN
    assert Comparison.from_double(-0.5) is Comparison.LESS_THAN
    assert Comparison.from_double(0.0) is Comparison.EQUAL_TO
    assert Comparison.from_double(-0.0) is Comparison.EQUAL_TO


def test_from_double_nan_has_no_comparison():
    assert Comparison.from_double(math.nan) is None


def test_round_trip_through_int():
    for comparison in Comparison:
        assert Comparison.from_int(comparison.to_int) is comparison
        assert comparison.to_double == float(comparison.to_int)


def test_compare_uses_natural_order():
    assert Comparison.compare(1, 2) is Comparison.LESS_THAN
    assert Comparison.compare("b", "a") is Comparison.GREATER_THAN
    assert Comparison.compare((1, 2), (1, 2)) is Comparison.EQUAL_TO
