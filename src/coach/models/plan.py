"""Training plan data models."""

from dataclasses import dataclass, field
from enum import Enum


class PhaseName(str, Enum):
    """Training phases, in the order they always run."""

    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    TAPER = "taper"


class DistanceCategory(str, Enum):
    """Event length bucket that selects the phase template."""

    SHORT = "short"  # <= 10 km
    MEDIUM = "medium"  # <= 25 km
    LONG = "long"  # <= 50 km
    ULTRA = "ultra"  # > 50 km


@dataclass(frozen=True)
class TrainingPhase:
    """A block of weeks with shared volume and intensity targets."""

    name: PhaseName
    weeks: int
    focus: str
    strength_sessions: int

    def to_dict(self) -> dict:
        return {
            "name": self.name.value,
            "weeks": self.weeks,
            "focus": self.focus,
            "strength_sessions": self.strength_sessions,
        }


@dataclass(frozen=True)
class PlanWeek:
    """One week of a training plan."""

    week_number: int
    phase: PhaseName
    planned_distance_km: float
    long_run_km: float
    quality_session: str
    strength_focus: str
    strength_sessions: int

    def to_dict(self) -> dict:
        return {
            "week_number": self.week_number,
            "phase": self.phase.value,
            "planned_distance_km": self.planned_distance_km,
            "long_run_km": self.long_run_km,
            "quality_session": self.quality_session,
            "strength_focus": self.strength_focus,
            "strength_sessions": self.strength_sessions,
        }


@dataclass
class TrainingPlan:
    """A phased multi-week plan. Derived on demand, never stored."""

    distance_label: str
    distance_km: float
    category: DistanceCategory
    baseline_weekly_km: float
    phases: list[TrainingPhase]
    weeks: list[PlanWeek] = field(default_factory=list)

    @property
    def total_weeks(self) -> int:
        return sum(phase.weeks for phase in self.phases)

    def to_dict(self) -> dict:
        return {
            "distance_label": self.distance_label,
            "distance_km": self.distance_km,
            "category": self.category.value,
            "baseline_weekly_km": self.baseline_weekly_km,
            "total_weeks": self.total_weeks,
            "phases": [phase.to_dict() for phase in self.phases],
            "weeks": [week.to_dict() for week in self.weeks],
        }

    def get_summary(self) -> str:
        """Generate a summary of the plan."""
        summary = f"Plan: {self.distance_label} ({self.category.value})\n"
        summary += f"Duration: {self.total_weeks} weeks\n"
        summary += f"Baseline volume: {self.baseline_weekly_km:.1f} km/week\n\n"

        for phase in self.phases:
            summary += f"{phase.name.value.upper()} ({phase.weeks} wk): {phase.focus}\n"

        return summary


@dataclass(frozen=True)
class PaceZone:
    """A pace range in seconds per km. min_seconds is the faster bound."""

    name: str
    min_seconds: int
    max_seconds: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "min_seconds": self.min_seconds,
            "max_seconds": self.max_seconds,
        }
