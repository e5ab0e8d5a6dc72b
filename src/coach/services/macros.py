"""Calorie and macro target calculation.

Targets come from Mifflin-St Jeor BMR scaled by an activity multiplier,
then split into macros from per-kg tables keyed by day type or goal.
"""

import logging
from dataclasses import dataclass

from ..errors import ValidationError
from ..models.athlete import ActivityLevel, MetabolicProfile, Sex
from ..models.goals import (
    BodyCompFocus,
    BodyCompositionGoal,
    EnduranceGoal,
    Goal,
    StrengthFocus,
    StrengthGoal,
)
from ..models.nutrition import DayType, MacroTargets
from ..utils.units import round_half_up

logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.LOW: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HIGH: 1.725,
    ActivityLevel.VERY_HIGH: 1.9,
}

FAT_FLOOR_G_PER_KG = 0.8
FIBER_TARGET_G = 30


@dataclass(frozen=True)
class MacroRule:
    """Per-kg macro factors and a calorie adjustment over TDEE."""

    protein_g_per_kg: float
    carbs_g_per_kg: float
    calorie_adjustment: int


DAY_TYPE_RULES: dict[DayType, MacroRule] = {
    DayType.LONG_RUN: MacroRule(1.8, 7, 300),
    DayType.QUALITY: MacroRule(1.8, 5, 100),
    DayType.EASY: MacroRule(1.8, 4, 0),
    DayType.STRENGTH: MacroRule(2.0, 4, 100),
    DayType.HIGH_VOLUME: MacroRule(2.2, 5, 200),
    DayType.REST: MacroRule(1.8, 3, -200),
    DayType.DELOAD: MacroRule(1.8, 3, -100),
    DayType.RACE_WEEK: MacroRule(1.6, 8, 200),  # Carb loading
    DayType.RACE_DAY: MacroRule(1.4, 10, 500),
}
DEFAULT_DAY_RULE = MacroRule(1.8, 4, 0)

ENDURANCE_RULE = MacroRule(1.6, 5, 0)

STRENGTH_FOCUS_RULES: dict[StrengthFocus, MacroRule] = {
    StrengthFocus.HYPERTROPHY: MacroRule(2.0, 4, 300),
    StrengthFocus.STRENGTH: MacroRule(1.8, 4, 100),
    StrengthFocus.POWER: MacroRule(1.8, 4, 100),
}

BODY_COMP_RULES: dict[BodyCompFocus, MacroRule] = {
    BodyCompFocus.FAT_LOSS: MacroRule(2.2, 2, -500),
    BodyCompFocus.MUSCLE_GAIN: MacroRule(2.0, 5, 300),
    BodyCompFocus.RECOMPOSITION: MacroRule(2.2, 3, -200),
    BodyCompFocus.MAINTENANCE: MacroRule(1.8, 3, 0),
    BodyCompFocus.PERFORMANCE: MacroRule(1.8, 4, 0),
}
DEFAULT_GOAL_RULE = MacroRule(1.8, 3, 0)


def validate_profile(profile: MetabolicProfile) -> None:
    """Raise ValidationError unless weight, height and age are positive."""
    if profile.weight_kg is None or profile.weight_kg <= 0:
        raise ValidationError("Weight must be positive")
    if profile.height_cm is None or profile.height_cm <= 0:
        raise ValidationError("Height must be positive")
    if profile.age is None or profile.age <= 0:
        raise ValidationError("Age must be positive")


def calculate_bmr(profile: MetabolicProfile) -> float:
    """Basal metabolic rate (Mifflin-St Jeor)."""
    validate_profile(profile)
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if Sex(profile.sex) == Sex.MALE:
        return base + 5
    return base - 161


def calculate_tdee(profile: MetabolicProfile) -> int:
    """Total daily energy expenditure, rounded to whole kcal."""
    bmr = calculate_bmr(profile)
    multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel(profile.activity_level)]
    return round_half_up(bmr * multiplier)


def _targets_from_rule(profile: MetabolicProfile, rule: MacroRule) -> MacroTargets:
    weight = profile.weight_kg
    tdee = calculate_tdee(profile)

    protein = round_half_up(weight * rule.protein_g_per_kg)
    carbs = round_half_up(weight * rule.carbs_g_per_kg)
    calories = tdee + rule.calorie_adjustment

    # Fat takes the remaining calories, floored to keep it from going too low
    fat_calories = calories - protein * 4 - carbs * 4
    fat = round_half_up(max(fat_calories / 9, weight * FAT_FLOOR_G_PER_KG))

    return MacroTargets(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=FIBER_TARGET_G,
    )


def resolve_day_rule(day_type: DayType | str) -> MacroRule:
    """Look up the macro rule for a day type, falling back to an easy day."""
    try:
        return DAY_TYPE_RULES[DayType(day_type)]
    except ValueError:
        logger.warning("Unknown day type %r, using default macro rule", day_type)
        return DEFAULT_DAY_RULE


def resolve_goal_rule(goal: Goal | None) -> MacroRule:
    """Look up the macro rule for a goal, falling back to maintenance values."""
    if isinstance(goal, EnduranceGoal):
        return ENDURANCE_RULE
    if isinstance(goal, StrengthGoal):
        return STRENGTH_FOCUS_RULES.get(goal.focus, DEFAULT_GOAL_RULE)
    if isinstance(goal, BodyCompositionGoal):
        rule = BODY_COMP_RULES.get(goal.focus)
        if rule is None:
            logger.warning("Unknown body composition focus %r, using default", goal.focus)
            return DEFAULT_GOAL_RULE
        return rule
    return DEFAULT_GOAL_RULE


def get_macro_targets(profile: MetabolicProfile, day_type: DayType | str) -> MacroTargets:
    """Calorie and macro targets for a training day type.

    Raises:
        ValidationError: If weight, height or age is not positive
    """
    return _targets_from_rule(profile, resolve_day_rule(day_type))


def get_macro_targets_for_goal(profile: MetabolicProfile, goal: Goal | None) -> MacroTargets:
    """Calorie and macro targets for an athlete's goal.

    Raises:
        ValidationError: If weight, height or age is not positive
    """
    return _targets_from_rule(profile, resolve_goal_rule(goal))
