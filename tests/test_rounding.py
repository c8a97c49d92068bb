"""
Tests for the shared rounding helper.
"""

import pytest

from streaming_summary.utils.rounding import format_percentage, round_ratio


@pytest.mark.parametrize("numerator, denominator, expected", [
    (90000, 60000, 1.5),
    (33000, 60000, 0.6),   # 0.55 rounds up
    (3000, 60000, 0.1),    # 0.05 rounds up
    (2999, 60000, 0.0),
    (125, 1000, 0.1),      # 0.125 -> 0.1
    (150, 1000, 0.2),      # 0.15 rounds up, unlike binary float rounding
])
def test_round_ratio_half_up(numerator, denominator, expected):
    assert round_ratio(numerator, denominator) == expected


def test_round_ratio_zero_denominator():
    assert round_ratio(5, 0) == 0.0


def test_round_ratio_places():
    assert round_ratio(2, 3, places=3) == 0.667


def test_format_percentage():
    assert format_percentage(1, 8) == "12.5%"
    assert format_percentage(1, 3) == "33.3%"
    assert format_percentage(2, 3) == "66.7%"
    assert format_percentage(4, 4) == "100.0%"
