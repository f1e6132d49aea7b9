import math

import pytest

from cutoff.numeric import to_one_digit


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.04, 1.0),
        (1.05, 1.1),
        (2.25, 2.3),
        (-2.25, -2.3),
        (1143.2142857, 1143.2),
        (824.9999999999999, 825.0),
        (12, 12.0),
    ],
)
def test_rounds_half_away_from_zero(value, expected):
    assert to_one_digit(value) == expected


@pytest.mark.parametrize("value", [0.15, 3.333333, 99.95, 1e6 + 0.05, 7.0])
def test_rounding_is_idempotent(value):
    once = to_one_digit(value)
    assert to_one_digit(once) == once


def test_non_finite_passthrough():
    assert math.isnan(to_one_digit(float("nan")))
    assert to_one_digit(float("inf")) == float("inf")
