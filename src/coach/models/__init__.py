"""Data models for coach."""

from .athlete import (
    ActivityLevel,
    Athlete,
    BodyCompositionEntry,
    HeartRateZone,
    MetabolicProfile,
    Sex,
)
from .goals import (
    AthleteGoals,
    BodyCompFocus,
    BodyCompositionGoal,
    EnduranceGoal,
    FitnessLevel,
    Goal,
    GoalType,
    RaceDistance,
    Sport,
    StrengthFocus,
    StrengthGoal,
)
from .nutrition import DayType, FoodEntry, MacroTargets, MacroTotals
from .plan import DistanceCategory, PaceZone, PhaseName, PlanWeek, TrainingPhase, TrainingPlan
from .strength import StrengthExercise, StrengthRecommendation, StrengthRoutine, StrengthWeek

__all__ = [
    "ActivityLevel",
    "Athlete",
    "AthleteGoals",
    "BodyCompFocus",
    "BodyCompositionEntry",
    "BodyCompositionGoal",
    "DayType",
    "DistanceCategory",
    "EnduranceGoal",
    "FitnessLevel",
    "FoodEntry",
    "Goal",
    "GoalType",
    "HeartRateZone",
    "MacroTargets",
    "MacroTotals",
    "MetabolicProfile",
    "PaceZone",
    "PhaseName",
    "PlanWeek",
    "RaceDistance",
    "Sex",
    "Sport",
    "StrengthExercise",
    "StrengthFocus",
    "StrengthGoal",
    "StrengthRecommendation",
    "StrengthRoutine",
    "StrengthWeek",
    "TrainingPhase",
    "TrainingPlan",
]
