"""Utility helpers for coach."""

from .formatting import format_distance, format_duration, format_pace, parse_duration
from .units import round_half_up, round_to, to_km

__all__ = [
    "format_distance",
    "format_duration",
    "format_pace",
    "parse_duration",
    "round_half_up",
    "round_to",
    "to_km",
]
