"""Athlete goal data models.

A goal is one of three variants (endurance, strength, body composition),
distinguished by the `type` field when serialized.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar

from ..errors import ValidationError
from ..utils.formatting import parse_duration
from ..utils.units import to_km


class GoalType(str, Enum):
    """Goal variant discriminant."""

    ENDURANCE = "endurance"
    STRENGTH = "strength"
    BODY_COMPOSITION = "body_composition"


class Sport(str, Enum):
    """Endurance sport."""

    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    TRIATHLON = "triathlon"


class RaceDistance(str, Enum):
    """Standard event distances."""

    FIVE_K = "5K"
    TEN_K = "10K"
    FIFTEEN_K = "15K"
    HALF_MARATHON = "21K"
    MARATHON = "42K"
    FIFTY_K = "50K"
    HUNDRED_K = "100K"
    ULTRA = "ultra"
    SPRINT_TRI = "sprint_tri"
    OLYMPIC_TRI = "olympic_tri"
    HALF_IRONMAN = "half_ironman"
    IRONMAN = "ironman"


# Triathlons count swim + bike + run
RACE_DISTANCE_KM: dict[RaceDistance, float] = {
    RaceDistance.FIVE_K: 5.0,
    RaceDistance.TEN_K: 10.0,
    RaceDistance.FIFTEEN_K: 15.0,
    RaceDistance.HALF_MARATHON: 21.0975,
    RaceDistance.MARATHON: 42.195,
    RaceDistance.FIFTY_K: 50.0,
    RaceDistance.HUNDRED_K: 100.0,
    RaceDistance.ULTRA: 60.0,
    RaceDistance.SPRINT_TRI: 0.75 + 20 + 5,
    RaceDistance.OLYMPIC_TRI: 1.5 + 40 + 10,
    RaceDistance.HALF_IRONMAN: 1.9 + 90 + 21.0975,
    RaceDistance.IRONMAN: 3.8 + 180 + 42.195,
}

RACE_DISTANCE_LABELS: dict[RaceDistance, str] = {
    RaceDistance.FIVE_K: "5K",
    RaceDistance.TEN_K: "10K",
    RaceDistance.FIFTEEN_K: "15K",
    RaceDistance.HALF_MARATHON: "Half Marathon (21K)",
    RaceDistance.MARATHON: "Marathon (42K)",
    RaceDistance.FIFTY_K: "50K Ultra",
    RaceDistance.HUNDRED_K: "100K Ultra",
    RaceDistance.ULTRA: "Ultra",
    RaceDistance.SPRINT_TRI: "Sprint Triathlon",
    RaceDistance.OLYMPIC_TRI: "Olympic Triathlon",
    RaceDistance.HALF_IRONMAN: "Half Ironman (70.3)",
    RaceDistance.IRONMAN: "Ironman",
}


class DistanceUnit(str, Enum):
    """Unit for custom distances."""

    KM = "km"
    MILES = "mi"
    METERS = "m"


class FitnessLevel(str, Enum):
    """Endurance fitness level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class StrengthFocus(str, Enum):
    """Strength training focus."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    POWER = "power"
    ENDURANCE = "endurance"
    FUNCTIONAL = "functional"
    MAINTENANCE = "maintenance"


class BodyCompFocus(str, Enum):
    """Body composition focus."""

    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    RECOMPOSITION = "recomposition"
    MAINTENANCE = "maintenance"
    PERFORMANCE = "performance"


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _format_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class EnduranceGoal:
    """Race or event goal.

    Either `distance` or `custom_distance` (with `custom_unit`) is set.
    """

    type: ClassVar[GoalType] = GoalType.ENDURANCE

    sport: Sport = Sport.RUNNING
    distance: RaceDistance | None = RaceDistance.HALF_MARATHON
    custom_distance: float | None = None
    custom_unit: DistanceUnit = DistanceUnit.KM
    target_date: date | None = None
    target_time: str | None = None  # e.g. "1:45:00"
    level: FitnessLevel | None = None

    def __post_init__(self):
        if self.distance is None and self.custom_distance is None:
            raise ValidationError("Endurance goal needs a race distance or a custom distance")
        if self.custom_distance is not None and self.custom_distance <= 0:
            raise ValidationError("Custom distance must be positive")
        if self.target_time not in (None, ""):
            if not isinstance(self.target_time, str):
                raise ValidationError("Target time must look like H:MM:SS or MM:SS")
            parse_duration(self.target_time)

    def distance_km(self) -> float:
        """Target distance in kilometers."""
        if self.distance is not None:
            return RACE_DISTANCE_KM[self.distance]
        return to_km(self.custom_distance, self.custom_unit.value)

    def distance_label(self) -> str:
        """Human-readable distance."""
        if self.distance is not None:
            return RACE_DISTANCE_LABELS[self.distance]
        return f"{self.custom_distance:g} {self.custom_unit.value}"

    def target_time_seconds(self) -> int | None:
        """Target finish time in seconds, if one was set."""
        if not self.target_time:
            return None
        return parse_duration(self.target_time)

    def target_pace_seconds(self) -> float | None:
        """Target pace in seconds per km, if a target time was set."""
        seconds = self.target_time_seconds()
        if seconds is None:
            return None
        return seconds / self.distance_km()

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "sport": self.sport.value,
            "distance": self.distance.value if self.distance else None,
            "custom_distance": self.custom_distance,
            "custom_unit": self.custom_unit.value,
            "target_date": _format_date(self.target_date),
            "target_time": self.target_time,
            "level": self.level.value if self.level else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EnduranceGoal":
        return cls(
            sport=Sport(data.get("sport", "running")),
            distance=RaceDistance(data["distance"]) if data.get("distance") else None,
            custom_distance=data.get("custom_distance"),
            custom_unit=DistanceUnit(data.get("custom_unit", "km")),
            target_date=_parse_date(data.get("target_date")),
            target_time=data.get("target_time"),
            level=FitnessLevel(data["level"]) if data.get("level") else None,
        )


@dataclass
class StrengthGoal:
    """Strength training goal."""

    type: ClassVar[GoalType] = GoalType.STRENGTH

    focus: StrengthFocus = StrengthFocus.FUNCTIONAL
    target_date: date | None = None
    lift_targets: dict[str, float] = field(default_factory=dict)  # lift -> kg

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "focus": self.focus.value,
            "target_date": _format_date(self.target_date),
            "lift_targets": dict(self.lift_targets),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StrengthGoal":
        return cls(
            focus=StrengthFocus(data.get("focus", "functional")),
            target_date=_parse_date(data.get("target_date")),
            lift_targets=data.get("lift_targets", {}),
        )


@dataclass
class BodyCompositionGoal:
    """Body composition goal."""

    type: ClassVar[GoalType] = GoalType.BODY_COMPOSITION

    focus: BodyCompFocus = BodyCompFocus.MAINTENANCE
    target_date: date | None = None
    target_weight_kg: float | None = None
    target_body_fat: float | None = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "focus": self.focus.value,
            "target_date": _format_date(self.target_date),
            "target_weight_kg": self.target_weight_kg,
            "target_body_fat": self.target_body_fat,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BodyCompositionGoal":
        return cls(
            focus=BodyCompFocus(data.get("focus", "maintenance")),
            target_date=_parse_date(data.get("target_date")),
            target_weight_kg=data.get("target_weight_kg"),
            target_body_fat=data.get("target_body_fat"),
        )


Goal = EnduranceGoal | StrengthGoal | BodyCompositionGoal

_GOAL_CLASSES: dict[GoalType, type] = {
    GoalType.ENDURANCE: EnduranceGoal,
    GoalType.STRENGTH: StrengthGoal,
    GoalType.BODY_COMPOSITION: BodyCompositionGoal,
}


def goal_from_dict(data: dict) -> Goal:
    """Create the matching goal variant from its serialized form.

    Raises:
        ValidationError: If the type is missing or unknown, or a field
            holds a value of the wrong type or outside its enumeration
    """
    try:
        goal_type = GoalType(data.get("type"))
    except ValueError:
        raise ValidationError(f"Unknown goal type: {data.get('type')!r}") from None

    try:
        return _GOAL_CLASSES[goal_type].from_dict(data)
    except (ValueError, TypeError) as e:
        if isinstance(e, ValidationError):
            raise
        raise ValidationError(f"Invalid {goal_type.value} goal: {e}") from e


def describe_goal(goal: Goal) -> str:
    """One-line description of a goal."""
    if isinstance(goal, EnduranceGoal):
        text = f"{goal.sport.value} {goal.distance_label()}"
        if goal.target_time:
            text += f" in {goal.target_time}"
        return text
    return f"{goal.type.value}: {goal.focus.value}"


@dataclass
class AthleteGoals:
    """Primary goal plus an optional secondary one.

    Only the primary goal drives macro targets and training plans.
    """

    primary: Goal = field(default_factory=BodyCompositionGoal)
    secondary: Goal | None = None

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict() if self.secondary else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AthleteGoals":
        secondary = data.get("secondary")
        return cls(
            primary=goal_from_dict(data["primary"]),
            secondary=goal_from_dict(secondary) if secondary else None,
        )
