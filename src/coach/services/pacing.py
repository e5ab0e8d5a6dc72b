"""Pace zones and race time prediction."""

from ..errors import ValidationError
from ..models.plan import PaceZone
from ..utils.units import round_half_up

# (name, fastest multiplier, slowest multiplier) of target race pace
PACE_ZONE_MULTIPLIERS = [
    ("recovery", 1.25, 1.40),
    ("easy", 1.15, 1.25),
    ("steady", 1.05, 1.15),
    ("race", 0.98, 1.05),
    ("threshold", 0.90, 0.98),
    ("interval", 0.82, 0.90),
]


def calculate_pace_zones(target_pace_seconds: float) -> list[PaceZone]:
    """Six training pace zones around a target race pace (sec/km).

    Raises:
        ValidationError: If the target pace is not positive
    """
    if target_pace_seconds <= 0:
        raise ValidationError("Target pace must be positive")

    return [
        PaceZone(
            name=name,
            min_seconds=round_half_up(target_pace_seconds * fast),
            max_seconds=round_half_up(target_pace_seconds * slow),
        )
        for name, fast, slow in PACE_ZONE_MULTIPLIERS
    ]


def riegel_exponent(distance_km: float) -> float:
    """Fatigue exponent for the predicted distance."""
    if distance_km <= 10:
        return 1.04
    if distance_km > 42:
        return 1.08
    return 1.06


def predict_race_time(known_km: float, known_seconds: float, target_km: float) -> float:
    """Predict a finish time from a known performance (Riegel).

    T2 = T1 * (D2 / D1) ** exponent, with the exponent picked from D2.

    Raises:
        ValidationError: If any input is not positive
    """
    if known_km <= 0 or known_seconds <= 0 or target_km <= 0:
        raise ValidationError("Distances and time must be positive")
    return known_seconds * (target_km / known_km) ** riegel_exponent(target_km)
