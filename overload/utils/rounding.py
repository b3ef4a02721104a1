"""Numeric helpers shared by the progression engine and normalization."""

import math


def round_to(value: float, step: float) -> float:
    """Round value to the nearest multiple of step, halves rounding up.

    A step of 0 returns the value untouched.
    """
    if step == 0:
        return value
    return math.floor(value / step + 0.5) * step


def is_finite_number(value: object) -> bool:
    """Return True for real ints/floats that are not NaN or infinite (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)
