import math

from overload.utils.rounding import is_finite_number, round_to
from overload.utils.units import format_duration, format_weight


def test_round_to_rounds_halves_up() -> None:
    assert round_to(58.9, 0.25) == 59.0
    assert round_to(58.875, 0.25) == 59.0
    assert round_to(58.85, 0.25) == 58.75
    assert round_to(12.3, 0) == 12.3


def test_is_finite_number() -> None:
    assert is_finite_number(3)
    assert is_finite_number(2.5)
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number(True)
    assert not is_finite_number("5")
    assert not is_finite_number(None)


def test_formatting() -> None:
    assert format_weight(100.0) == "100.0 kg / 220.5 lb"
    assert format_duration(90) == "1:30"
