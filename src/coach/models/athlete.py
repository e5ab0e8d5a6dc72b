"""Athlete profile and body metric data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..errors import ValidationError
from ..utils.units import round_half_up
from .goals import AthleteGoals, EnduranceGoal, describe_goal


class Sex(str, Enum):
    """Biological sex, used only to pick the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Weekly training load tier."""

    LOW = "low"  # Light exercise 1-2x/week
    MODERATE = "moderate"  # Exercise 3-4x/week
    HIGH = "high"  # Exercise 5-6x/week
    VERY_HIGH = "very_high"  # Exercise 6-7x/week + active job


@dataclass
class MetabolicProfile:
    """Inputs for energy expenditure and macro calculations."""

    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    activity_level: ActivityLevel = ActivityLevel.HIGH
    body_fat_percentage: float | None = None


@dataclass
class HeartRateZone:
    """A heart rate training zone in beats per minute."""

    name: str
    label: str
    min_bpm: int
    max_bpm: int


_ZONE_BOUNDS = [
    ("z1", "Recovery", 0.5, 0.6),
    ("z2", "Aerobic", 0.6, 0.7),
    ("z3", "Tempo", 0.7, 0.8),
    ("z4", "Threshold", 0.8, 0.9),
    ("z5", "VO2max", 0.9, 1.0),
]


def calculate_heart_rate_zones(max_hr: int) -> dict[str, HeartRateZone]:
    """Calculate the five heart rate zones from max heart rate.

    Each boundary is round(max_hr * fraction); the top of zone 5 is max_hr.

    Raises:
        ValidationError: If max_hr is not positive
    """
    if max_hr <= 0:
        raise ValidationError("Max heart rate must be positive")

    zones = {}
    for name, label, low, high in _ZONE_BOUNDS:
        zones[name] = HeartRateZone(
            name=name,
            label=label,
            min_bpm=round_half_up(max_hr * low),
            max_bpm=max_hr if high == 1.0 else round_half_up(max_hr * high),
        )
    return zones


_PROTEIN_INTENSITY = {"low": 1.6, "moderate": 1.8, "high": 2.2}


def calculate_protein_target(weight_kg: float, intensity: str = "moderate") -> int:
    """Daily protein in grams for a training intensity (low/moderate/high)."""
    return round_half_up(weight_kg * _PROTEIN_INTENSITY[intensity])


@dataclass(frozen=True)
class BodyCompositionEntry:
    """Snapshot of weight and body fat. History is append-only."""

    weight_kg: float
    body_fat_percentage: float
    lean_mass_kg: float
    fat_mass_kg: float
    recorded_at: datetime
    id: int | None = None

    @classmethod
    def from_measurement(
        cls,
        weight_kg: float,
        body_fat_percentage: float,
        recorded_at: datetime | None = None,
    ) -> "BodyCompositionEntry":
        """Build an entry, deriving fat and lean mass.

        Raises:
            ValidationError: If weight or body fat is out of range
        """
        if weight_kg <= 0:
            raise ValidationError("Weight must be positive")
        if not 0 <= body_fat_percentage < 100:
            raise ValidationError("Body fat percentage must be between 0 and 100")

        fat_mass_kg = weight_kg * (body_fat_percentage / 100)
        return cls(
            weight_kg=weight_kg,
            body_fat_percentage=body_fat_percentage,
            lean_mass_kg=weight_kg - fat_mass_kg,
            fat_mass_kg=fat_mass_kg,
            recorded_at=recorded_at or datetime.now(),
        )

    def to_dict(self) -> dict:
        return {
            "weight_kg": self.weight_kg,
            "body_fat_percentage": self.body_fat_percentage,
            "lean_mass_kg": self.lean_mass_kg,
            "fat_mass_kg": self.fat_mass_kg,
            "recorded_at": self.recorded_at.isoformat(),
        }


@dataclass
class Athlete:
    """Complete athlete profile."""

    name: str
    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    goals: AthleteGoals = field(default_factory=AthleteGoals)
    activity_level: ActivityLevel = ActivityLevel.HIGH
    body_fat_percentage: float | None = None
    resting_heart_rate: int | None = None
    max_heart_rate: int | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        """Reject non-positive body metrics.

        Raises:
            ValidationError: If weight, height or age is not positive
        """
        for label, value in (
            ("Weight", self.weight_kg),
            ("Height", self.height_cm),
            ("Age", self.age),
        ):
            if value is None or value <= 0:
                raise ValidationError(f"{label} must be positive")

    @property
    def effective_max_heart_rate(self) -> int:
        """Configured max heart rate, or the 220 - age estimate."""
        return self.max_heart_rate or 220 - self.age

    def heart_rate_zones(self) -> dict[str, HeartRateZone]:
        return calculate_heart_rate_zones(self.effective_max_heart_rate)

    def metabolic_profile(self) -> MetabolicProfile:
        return MetabolicProfile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            sex=self.sex,
            activity_level=self.activity_level,
            body_fat_percentage=self.body_fat_percentage,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "weight_kg": self.weight_kg,
            "height_cm": self.height_cm,
            "age": self.age,
            "sex": self.sex.value,
            "activity_level": self.activity_level.value,
            "body_fat_percentage": self.body_fat_percentage,
            "resting_heart_rate": self.resting_heart_rate,
            "max_heart_rate": self.max_heart_rate,
            "goals": self.goals.to_dict(),
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Athlete":
        """Create from dictionary."""
        goals = data.get("goals")
        return cls(
            id=id,
            name=data["name"],
            weight_kg=data["weight_kg"],
            height_cm=data["height_cm"],
            age=data["age"],
            sex=Sex(data["sex"]),
            activity_level=ActivityLevel(data.get("activity_level", "high")),
            body_fat_percentage=data.get("body_fat_percentage"),
            resting_heart_rate=data.get("resting_heart_rate"),
            max_heart_rate=data.get("max_heart_rate"),
            goals=AthleteGoals.from_dict(goals) if goals else AthleteGoals(),
            created_at=created_at,
            updated_at=updated_at,
        )

    def get_summary(self) -> str:
        """Generate a text summary of the profile."""
        summary = f"Athlete: {self.name}\n"
        summary += f"Weight: {self.weight_kg} kg\n"
        summary += f"Height: {self.height_cm} cm\n"
        summary += f"Age: {self.age}\n"
        summary += f"Sex: {self.sex.value}\n"
        summary += f"Activity level: {self.activity_level.value}\n"

        if self.body_fat_percentage is not None:
            summary += f"Body fat: {self.body_fat_percentage}%\n"
        if self.resting_heart_rate:
            summary += f"Resting HR: {self.resting_heart_rate} bpm\n"
        summary += f"Max HR: {self.effective_max_heart_rate} bpm"
        if not self.max_heart_rate:
            summary += " (estimated)"
        summary += "\n"

        summary += f"Primary goal: {describe_goal(self.goals.primary)}\n"
        primary = self.goals.primary
        if isinstance(primary, EnduranceGoal) and primary.target_date:
            summary += f"Race date: {primary.target_date.isoformat()}\n"
        if self.goals.secondary:
            summary += f"Secondary goal: {describe_goal(self.goals.secondary)}\n"

        return summary
