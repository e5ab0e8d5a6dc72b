"""Numeric helpers shared by the calculators."""

import math

KM_PER_MILE = 1.609344


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in round() uses banker's rounding, which would make
    targets like 140.5 g land on 140 instead of 141.
    """
    return math.floor(value + 0.5)


def round_to(value: float, digits: int = 1) -> float:
    """Round half-up to a fixed number of decimal places."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def to_km(value: float, unit: str) -> float:
    """Convert a distance in km, mi or m to kilometers."""
    if unit == "km":
        return value
    if unit == "mi":
        return value * KM_PER_MILE
    if unit == "m":
        return value / 1000
    raise ValueError(f"Unknown distance unit: {unit}")
