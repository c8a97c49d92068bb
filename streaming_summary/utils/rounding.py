"""Shared decimal rounding for minutes and percentage labels"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float]

def round_ratio(numerator: Number, denominator: Number, places: int = 1) -> float:
    """
    Divide and round half-up to a fixed number of decimal places.

    The division is done in decimal arithmetic so 90000 / 60000 -> 1.5 and
    1 / 8 * 100 -> 12.5 round the same way on every platform.
    """
    if not denominator:
        return 0.0
    exact = Decimal(numerator) / Decimal(denominator)
    quantum = Decimal(1).scaleb(-places)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))

def format_percentage(value: Number, total: Number) -> str:
    """Format value as a share of total, e.g. '12.5%'"""
    return f"{round_ratio(value * 100, total):.1f}%"
