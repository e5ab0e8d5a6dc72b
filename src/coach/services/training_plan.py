"""Endurance training plan generation.

A plan runs base -> build -> peak -> taper. The phase lengths, volume
ranges and quality sessions come from a fixed template per distance
category; weekly volume is interpolated inside each phase.
"""

import math
from dataclasses import dataclass
from datetime import date

from ..errors import ValidationError
from ..models.goals import EnduranceGoal, FitnessLevel
from ..models.plan import DistanceCategory, PhaseName, PlanWeek, TrainingPhase, TrainingPlan
from ..utils.units import round_to

LEVEL_MULTIPLIERS: dict[FitnessLevel, float] = {
    FitnessLevel.BEGINNER: 1.2,
    FitnessLevel.INTERMEDIATE: 1.5,
    FitnessLevel.ADVANCED: 1.8,
    FitnessLevel.ELITE: 2.2,
}
DEFAULT_LEVEL_MULTIPLIER = 1.5

STRENGTH_FOCUS_BY_PHASE: dict[PhaseName, str] = {
    PhaseName.BASE: "max strength + stability",
    PhaseName.BUILD: "strength-endurance",
    PhaseName.PEAK: "maintenance",
    PhaseName.TAPER: "neuromuscular activation",
}


@dataclass(frozen=True)
class PhaseTemplate:
    """Phase definition. Ranges are (start, end) fractions of baseline volume."""

    name: PhaseName
    weeks: int
    weekly_range: tuple[float, float]
    long_run_range: tuple[float, float]
    strength_sessions: int
    focus: str


PHASE_TEMPLATES: dict[DistanceCategory, tuple[PhaseTemplate, ...]] = {
    DistanceCategory.SHORT: (
        PhaseTemplate(PhaseName.BASE, 3, (0.8, 1.0), (0.25, 0.30), 2, "Aerobic base and running economy"),
        PhaseTemplate(PhaseName.BUILD, 3, (1.0, 1.2), (0.28, 0.32), 2, "VO2max and threshold development"),
        PhaseTemplate(PhaseName.PEAK, 2, (1.1, 1.25), (0.30, 0.33), 1, "Race-pace sharpening"),
        PhaseTemplate(PhaseName.TAPER, 1, (0.7, 0.5), (0.25, 0.20), 1, "Freshen up, keep some speed"),
    ),
    DistanceCategory.MEDIUM: (
        PhaseTemplate(PhaseName.BASE, 4, (0.8, 1.0), (0.28, 0.33), 2, "Aerobic base, easy volume"),
        PhaseTemplate(PhaseName.BUILD, 4, (1.0, 1.25), (0.33, 0.40), 2, "Threshold work and longer long runs"),
        PhaseTemplate(PhaseName.PEAK, 3, (1.2, 1.35), (0.38, 0.45), 1, "Half-marathon pace specificity"),
        PhaseTemplate(PhaseName.TAPER, 2, (0.75, 0.5), (0.30, 0.20), 1, "Reduce volume, hold intensity"),
    ),
    DistanceCategory.LONG: (
        PhaseTemplate(PhaseName.BASE, 6, (0.8, 1.0), (0.30, 0.35), 2, "Aerobic base and durability"),
        PhaseTemplate(PhaseName.BUILD, 6, (1.0, 1.3), (0.35, 0.45), 2, "Marathon-pace volume and threshold"),
        PhaseTemplate(PhaseName.PEAK, 3, (1.25, 1.4), (0.45, 0.50), 1, "Longest runs, race rehearsal"),
        PhaseTemplate(PhaseName.TAPER, 2, (0.7, 0.45), (0.35, 0.20), 1, "Absorb the training, arrive fresh"),
    ),
    DistanceCategory.ULTRA: (
        PhaseTemplate(PhaseName.BASE, 8, (0.8, 1.0), (0.30, 0.38), 2, "Time on feet, aerobic base"),
        PhaseTemplate(PhaseName.BUILD, 8, (1.0, 1.3), (0.38, 0.48), 2, "Back-to-back long runs, vert"),
        PhaseTemplate(PhaseName.PEAK, 4, (1.3, 1.45), (0.48, 0.55), 1, "Race simulation, fueling practice"),
        PhaseTemplate(PhaseName.TAPER, 3, (0.7, 0.4), (0.35, 0.20), 1, "Recover deeply, stay loose"),
    ),
}

QUALITY_SESSIONS: dict[DistanceCategory, dict[PhaseName, tuple[str, ...]]] = {
    DistanceCategory.SHORT: {
        PhaseName.BASE: ("Strides 6x100m", "Hill sprints 8x10s", "Fartlek 8x1min"),
        PhaseName.BUILD: ("Intervals 6x800m @5K", "Tempo 20min", "Intervals 5x1km @5K"),
        PhaseName.PEAK: ("Intervals 10x400m @3K", "Race pace 3x2km"),
        PhaseName.TAPER: ("Strides + 4x400m @race pace",),
    },
    DistanceCategory.MEDIUM: {
        PhaseName.BASE: ("Strides 6x100m", "Fartlek 6x2min", "Progression run 40min"),
        PhaseName.BUILD: ("Tempo 25min", "Intervals 5x1km @10K", "Cruise intervals 3x2km"),
        PhaseName.PEAK: ("Race pace 2x5km", "Tempo 30min", "Intervals 4x2km @HM"),
        PhaseName.TAPER: ("Race pace 3x2km", "Strides 6x100m"),
    },
    DistanceCategory.LONG: {
        PhaseName.BASE: ("Strides 6x100m", "Hill repeats 8x60s", "Progression run 50min"),
        PhaseName.BUILD: ("Tempo 30min", "Marathon pace 12km", "Cruise intervals 4x2km"),
        PhaseName.PEAK: ("Marathon pace 16km", "Intervals 3x3km @HM", "Long run with MP finish"),
        PhaseName.TAPER: ("Marathon pace 8km", "Strides 6x100m"),
    },
    DistanceCategory.ULTRA: {
        PhaseName.BASE: ("Hill repeats 8x90s", "Trail progression 60min", "Strides 6x100m"),
        PhaseName.BUILD: ("Tempo 30min", "Sustained climb 3x10min", "Back-to-back long runs"),
        PhaseName.PEAK: ("Race simulation 4h", "Tempo 40min", "Night run with race kit"),
        PhaseName.TAPER: ("Easy hills 6x60s", "Strides 6x100m"),
    },
}


def classify_distance(distance_km: float) -> DistanceCategory:
    """Bucket an event distance into short/medium/long/ultra."""
    if distance_km <= 10:
        return DistanceCategory.SHORT
    if distance_km <= 25:
        return DistanceCategory.MEDIUM
    if distance_km <= 50:
        return DistanceCategory.LONG
    return DistanceCategory.ULTRA


def calculate_baseline_weekly_km(
    distance_km: float,
    current_weekly_km: float,
    level: FitnessLevel | None = None,
) -> float:
    """Weekly volume the plan is built around.

    The larger of what the athlete already runs and a level-scaled multiple
    of the race distance.
    """
    multiplier = LEVEL_MULTIPLIERS.get(level, DEFAULT_LEVEL_MULTIPLIER)
    return max(current_weekly_km, distance_km * multiplier)


def _lerp(bounds: tuple[float, float], progress: float) -> float:
    start, end = bounds
    return start + (end - start) * progress


def generate_training_plan(goal: EnduranceGoal, current_weekly_km: float = 0.0) -> TrainingPlan:
    """Expand an endurance goal into a week-by-week plan.

    Args:
        goal: The endurance goal to train for
        current_weekly_km: What the athlete currently runs per week

    Returns:
        A plan whose weeks are numbered from 1 in phase order

    Raises:
        ValidationError: If the goal is not an endurance goal or the
            current volume is negative
    """
    if not isinstance(goal, EnduranceGoal):
        raise ValidationError("Training plans need an endurance goal")
    if current_weekly_km < 0:
        raise ValidationError("Current weekly distance cannot be negative")

    distance_km = goal.distance_km()
    category = classify_distance(distance_km)
    baseline = calculate_baseline_weekly_km(distance_km, current_weekly_km, goal.level)
    templates = PHASE_TEMPLATES[category]

    phases = []
    weeks = []
    week_number = 1
    for template in templates:
        phases.append(
            TrainingPhase(
                name=template.name,
                weeks=template.weeks,
                focus=template.focus,
                strength_sessions=template.strength_sessions,
            )
        )
        rotation = QUALITY_SESSIONS[category][template.name]

        for index in range(template.weeks):
            # progress stays below 1, so the end of a range is never reached
            progress = index / template.weeks
            weeks.append(
                PlanWeek(
                    week_number=week_number,
                    phase=template.name,
                    planned_distance_km=round_to(baseline * _lerp(template.weekly_range, progress)),
                    long_run_km=round_to(baseline * _lerp(template.long_run_range, progress)),
                    quality_session=rotation[index % len(rotation)],
                    strength_focus=STRENGTH_FOCUS_BY_PHASE[template.name],
                    strength_sessions=template.strength_sessions,
                )
            )
            week_number += 1

    return TrainingPlan(
        distance_label=goal.distance_label(),
        distance_km=distance_km,
        category=category,
        baseline_weekly_km=baseline,
        phases=phases,
        weeks=weeks,
    )


def find_current_week(plan: TrainingPlan, race_date: date, today: date | None = None) -> PlanWeek | None:
    """The plan week to train this week, counting back from race day.

    Returns None when the race is past or further out than the plan.
    """
    today = today or date.today()
    days_to_race = (race_date - today).days
    if days_to_race <= 0:
        return None

    weeks_to_race = math.ceil(days_to_race / 7)
    week_number = plan.total_weeks - weeks_to_race + 1
    if week_number < 1:
        return None
    return plan.weeks[week_number - 1]
