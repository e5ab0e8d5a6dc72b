"""Text formatting for paces, durations and distances."""

from ..errors import ValidationError
from .units import round_half_up


def format_pace(seconds_per_km: float) -> str:
    """Format a pace as 'M:SS/km'.

    Example: 330 -> '5:30/km'
    """
    total = round_half_up(seconds_per_km)
    minutes, seconds = divmod(total, 60)
    return f"{minutes}:{seconds:02d}/km"


def format_duration(seconds: float) -> str:
    """Format a duration as 'H:MM:SS', or 'M:SS' when under an hour.

    Example: 6300 -> '1:45:00', 1500 -> '25:00'
    """
    total = round_half_up(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(meters: float) -> str:
    """Format a distance in meters as km (>= 1 km) or whole meters."""
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{round_half_up(meters)} m"


def parse_duration(value: str) -> int:
    """Parse 'H:MM:SS' or 'MM:SS' into total seconds.

    Raises:
        ValidationError: If the string is not a valid duration
    """
    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValidationError(f"Duration must look like H:MM:SS or MM:SS, got {value!r}")

    numbers = [int(p) for p in parts]
    if len(numbers) == 2:
        numbers.insert(0, 0)
    hours, minutes, seconds = numbers
    if minutes >= 60 or seconds >= 60:
        raise ValidationError(f"Invalid duration: {value!r}")
    return hours * 3600 + minutes * 60 + seconds
