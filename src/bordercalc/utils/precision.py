"""Rounding helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (22.5 -> 23)."""
    return int(math.floor(value + 0.5))


def round_to_precision(value: float, places: int = 2) -> float:
    """
    Round a value to a fixed number of decimal places.

    Halves round up (0.625 -> 0.63), unlike the built-in round().

    Args:
        value: Number to round.
        places: Decimal places to keep.

    Returns:
        Rounded value.
    """
    multiplier = 10 ** places
    return math.floor(value * multiplier + 0.5) / multiplier


def is_increment_of(value: float, increment: float, tolerance: float = 0.001) -> bool:
    """True when value lies on a multiple of increment (within tolerance of a step)."""
    if not math.isfinite(value) or increment <= 0:
        return False
    scaled = value / increment
    return abs(scaled - round(scaled)) < tolerance
