"""Daily food log helpers and nutrition guidance."""

from collections.abc import Iterable

from ..models.goals import BodyCompositionGoal, EnduranceGoal, Goal, StrengthGoal
from ..models.nutrition import DayType, FoodEntry, MacroTargets, MacroTotals
from ..utils.units import round_half_up


def calculate_totals(entries: Iterable[FoodEntry]) -> MacroTotals:
    """Sum macros over a day's food entries."""
    totals = MacroTotals()
    for entry in entries:
        totals.calories += entry.calories
        totals.protein += entry.protein
        totals.carbs += entry.carbs
        totals.fat += entry.fat
        totals.fiber += entry.fiber or 0
    return totals


def calculate_remaining(totals: MacroTotals, targets: MacroTargets) -> MacroTotals:
    """Targets minus totals. Negative values mean the target was exceeded."""
    return MacroTotals(
        calories=targets.calories - totals.calories,
        protein=targets.protein - totals.protein,
        carbs=targets.carbs - totals.carbs,
        fat=targets.fat - totals.fat,
        fiber=(targets.fiber or 30) - (totals.fiber or 0),
    )


def calculate_macro_percentages(macros: MacroTotals | MacroTargets) -> dict[str, int]:
    """Share of calories coming from protein, carbs and fat."""
    total_kcal = macros.protein * 4 + macros.carbs * 4 + macros.fat * 9
    if total_kcal == 0:
        return {"protein": 0, "carbs": 0, "fat": 0}

    return {
        "protein": round_half_up(macros.protein * 4 / total_kcal * 100),
        "carbs": round_half_up(macros.carbs * 4 / total_kcal * 100),
        "fat": round_half_up(macros.fat * 9 / total_kcal * 100),
    }


def _fmt(value: float) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def format_macros(macros: MacroTotals | MacroTargets) -> str:
    """One-line macro summary, e.g. '2844 kcal | P: 126g | C: 280g | F: 136g'."""
    return (
        f"{_fmt(macros.calories)} kcal | P: {_fmt(macros.protein)}g | "
        f"C: {_fmt(macros.carbs)}g | F: {_fmt(macros.fat)}g"
    )


def suggest_meal_focus(remaining: MacroTotals) -> str:
    """Suggest what the next meal should emphasise."""
    if remaining.protein > 30:
        if remaining.carbs > 50:
            return "Prioritise protein + carbs (e.g. chicken with rice, fish with pasta)"
        return "Focus on lean protein (e.g. chicken breast, white fish, egg whites)"

    if remaining.carbs > 50:
        return "Add complex carbs (e.g. oats, rice, potato)"

    if remaining.calories > 300:
        return "Balanced meal to complete your calories"

    return "You're close to your targets, a light snack if you're hungry"


_PRE_WORKOUT = {
    DayType.LONG_RUN: (
        "3-4h before: carb-rich meal, low in fibre and fat\n"
        "30-60min before: simple snack (banana, gel, dates)\n"
        "Hydration: 500ml water 2h before"
    ),
    DayType.QUALITY: (
        "2-3h before: moderate-carb meal\n"
        "30min before: optional small snack\n"
        "Hydration: 400ml water 2h before"
    ),
    DayType.EASY: (
        "Fasted is fine if under 60min\n"
        "Or 1-2h after a light snack\n"
        "Normal hydration"
    ),
    DayType.STRENGTH: (
        "1-2h before: snack with protein and carbs\n"
        "e.g. Greek yoghurt with fruit, or toast with egg\n"
        "Hydration: 300ml water 1h before"
    ),
    DayType.HIGH_VOLUME: (
        "2-3h before: full meal with carbs and protein\n"
        "30min before: simple-carb snack\n"
        "Hydration: 500ml water 2h before, optional caffeine"
    ),
    DayType.RACE_DAY: (
        "3-4h before: high-carb meal, low in fibre/fat\n"
        "e.g. white bread with jam, oats with banana\n"
        "30min before: gel or sports drink\n"
        "Hydration: 500ml water, then sips until the start"
    ),
    DayType.RACE_WEEK: (
        "Increase carbs gradually\n"
        "Cut fibre over the last 2-3 days\n"
        "Keep hydration high"
    ),
    DayType.DELOAD: (
        "Eat to appetite, don't force it\n"
        "Keep protein high for recovery\n"
        "Normal hydration"
    ),
}

_POST_WORKOUT = {
    DayType.LONG_RUN: (
        "Immediately (30min): recovery drink or carb+protein snack\n"
        "1-2h after: full meal rich in carbs and protein\n"
        "Rehydrate: 1.5L per kg of weight lost"
    ),
    DayType.QUALITY: (
        "30-60min: snack with 20-30g protein\n"
        "Next meal: balanced, with an emphasis on protein\n"
        "Rehydrate properly"
    ),
    DayType.EASY: (
        "Normal next meal\n"
        "Moderate protein (20g minimum)\n"
        "No rush if a meal is coming soon"
    ),
    DayType.STRENGTH: (
        "30min: fast-absorbing protein (30-40g)\n"
        "e.g. whey shake, Greek yoghurt\n"
        "Next meal: protein-rich for muscle synthesis"
    ),
    DayType.HIGH_VOLUME: (
        "Immediately: 40-50g protein + 50-80g carbs\n"
        "e.g. shake with whey, banana and oats\n"
        "2h after: full high-protein meal\n"
        "Prioritise sleep for recovery"
    ),
    DayType.RACE_DAY: (
        "Immediately: recovery drink or snack\n"
        "1h after: full meal\n"
        "Celebrate, but keep hydrating"
    ),
}


def get_pre_workout_guidelines(day_type: DayType | str) -> str:
    """Pre-workout fueling guidance for a day type."""
    try:
        return _PRE_WORKOUT[DayType(day_type)]
    except (KeyError, ValueError):
        return "Rest day - eat according to hunger and goals"


def get_post_workout_guidelines(day_type: DayType | str) -> str:
    """Post-workout recovery guidance for a day type."""
    try:
        return _POST_WORKOUT[DayType(day_type)]
    except (KeyError, ValueError):
        return "Eat according to your normal plan, prioritise protein"


_STRENGTH_NOTES = {
    "hypertrophy": (
        "Hypertrophy goal:\n"
        "- Protein: 2.0-2.2g/kg spread across 4-5 meals\n"
        "- Carbs: 4-5g/kg for energy and recovery\n"
        "- Calorie surplus: +200-300 kcal/day\n"
        "- Timing: protein every 3-4h, carbs around training"
    ),
    "strength": (
        "Strength goal:\n"
        "- Protein: 1.8-2.0g/kg\n"
        "- Carbs: 3-4g/kg\n"
        "- Calories: maintenance or slight surplus\n"
        "- Timing: protein post-workout, moderate carbs"
    ),
    "maintenance": (
        "Maintenance goal:\n"
        "- Protein: 1.8g/kg minimum\n"
        "- Carbs: according to daily activity\n"
        "- Calories: maintenance\n"
        "- Consistency is key"
    ),
}

_BODY_COMP_NOTES = {
    "fat_loss": (
        "Fat loss goal:\n"
        "- Protein: 2.2g/kg MINIMUM, it protects your muscle\n"
        "- Carbs: 2-3g/kg, timed around training\n"
        "- Deficit: 400-600 kcal/day (no more aggressive)\n"
        "- Priorities: protein > vegetables > carbs"
    ),
    "muscle_gain": (
        "Muscle gain goal:\n"
        "- Protein: 2.0g/kg spread evenly\n"
        "- Carbs: 4-5g/kg for energy\n"
        "- Surplus: +200-300 kcal/day (lean gain)\n"
        "- Patience: 0.5-1kg/month is ideal"
    ),
    "recomposition": (
        "Recomposition goal:\n"
        "- Protein: 2.2g/kg, top priority\n"
        "- Carbs: cycled with training\n"
        "- Calories: slight deficit or maintenance\n"
        "- Slow but effective"
    ),
    "maintenance": (
        "Maintenance goal:\n"
        "- Keep habits consistent\n"
        "- Protein: 1.8g/kg\n"
        "- Adjust to energy and performance"
    ),
    "performance": (
        "Performance goal:\n"
        "- Nutrition serves training\n"
        "- Enough carbs to perform\n"
        "- Protein to recover\n"
        "- No unnecessary restrictions"
    ),
}


def get_nutrition_summary_for_goal(goal: Goal | None) -> str:
    """Static nutrition guidance for a goal."""
    if isinstance(goal, EnduranceGoal):
        return (
            "Endurance goal:\n"
            "- Protein: 1.6-1.8g/kg to preserve muscle\n"
            "- Carbs: the priority, 5-7g/kg depending on volume\n"
            "- Fat: 0.8g/kg minimum, favour unsaturated\n"
            "- Timing: carbs before/during/after long sessions"
        )

    if isinstance(goal, StrengthGoal):
        return _STRENGTH_NOTES.get(goal.focus.value, _STRENGTH_NOTES["maintenance"])

    if isinstance(goal, BodyCompositionGoal):
        return _BODY_COMP_NOTES.get(goal.focus.value, _BODY_COMP_NOTES["maintenance"])

    return (
        "General nutrition:\n"
        "- Protein: 1.6-1.8g/kg\n"
        "- Carbs: according to activity\n"
        "- Fat: 25-35% of calories\n"
        "- Prioritise whole foods"
    )
