"""Strength routine data models."""

from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Coarse muscle grouping for runner-oriented routines."""

    CORE = "core"
    GLUTES = "glutes"
    LEGS = "legs"
    UPPER = "upper"


@dataclass(frozen=True)
class StrengthExercise:
    """An exercise prescription within a routine."""

    name: str
    sets: int
    reps: int | str  # int, or a string like "30s" / "8/side"
    muscle_group: MuscleGroup
    rest_seconds: int = 60

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "muscle_group": self.muscle_group.value,
            "rest_seconds": self.rest_seconds,
        }


@dataclass(frozen=True)
class StrengthRoutine:
    """A pre-authored session, keyed by training phase or strength focus."""

    name: str
    key: str
    exercises: tuple[StrengthExercise, ...]
    duration_minutes: int
    notes: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "key": self.key,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "duration_minutes": self.duration_minutes,
            "notes": self.notes,
        }


@dataclass
class StrengthWeek:
    """Strength work for one week of a given training phase."""

    phase: str
    sessions: int
    notes: str
    routines: list[StrengthRoutine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "phase": self.phase,
            "sessions": self.sessions,
            "notes": self.notes,
            "routines": [r.to_dict() for r in self.routines],
        }


@dataclass(frozen=True)
class StrengthRecommendation:
    """Recommended strength focus and frequency for a goal."""

    focus: str
    sessions_per_week: int
    notes: str

    def to_dict(self) -> dict:
        return {
            "focus": self.focus,
            "sessions_per_week": self.sessions_per_week,
            "notes": self.notes,
        }
