"""Tests for food log helpers and nutrition guidance."""

from coach.models.goals import (
    BodyCompFocus,
    BodyCompositionGoal,
    EnduranceGoal,
    StrengthFocus,
    StrengthGoal,
)
from coach.models.nutrition import DayType, FoodEntry, MacroTargets, MacroTotals
from coach.services.nutrition import (
    calculate_macro_percentages,
    calculate_remaining,
    calculate_totals,
    format_macros,
    get_nutrition_summary_for_goal,
    get_post_workout_guidelines,
    get_pre_workout_guidelines,
    suggest_meal_focus,
)


def _entry(calories, protein, carbs, fat, fiber=None):
    return FoodEntry(
        name="Food",
        quantity=100,
        unit="g",
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
    )


class TestTotals:
    """Tests for calculate_totals and calculate_remaining."""

    def test_totals(self):
        totals = calculate_totals([_entry(400, 30, 40, 10, fiber=5), _entry(200, 10, 20, 5)])
        assert totals == MacroTotals(calories=600, protein=40, carbs=60, fat=15, fiber=5)

    def test_empty_day(self):
        assert calculate_totals([]) == MacroTotals()

    def test_remaining_can_go_negative(self):
        targets = MacroTargets(calories=2000, protein=120, carbs=200, fat=70)
        totals = MacroTotals(calories=2200, protein=100, carbs=250, fat=60, fiber=10)
        remaining = calculate_remaining(totals, targets)
        assert remaining.calories == -200
        assert remaining.protein == 20
        assert remaining.carbs == -50
        assert remaining.fiber == 20


class TestFormatting:
    def test_percentages(self):
        targets = MacroTargets(calories=2844, protein=126, carbs=280, fat=136)
        assert calculate_macro_percentages(targets) == {"protein": 18, "carbs": 39, "fat": 43}

    def test_percentages_empty(self):
        assert calculate_macro_percentages(MacroTotals()) == {"protein": 0, "carbs": 0, "fat": 0}

    def test_format_macros(self):
        targets = MacroTargets(calories=2844, protein=126, carbs=280, fat=136)
        assert format_macros(targets) == "2844 kcal | P: 126g | C: 280g | F: 136g"

    def test_format_fractional_totals(self):
        totals = MacroTotals(calories=350.0, protein=12.5, carbs=40.0, fat=9.25)
        assert format_macros(totals) == "350 kcal | P: 12.5g | C: 40g | F: 9.25g"


class TestSuggestMealFocus:
    """Tests for suggest_meal_focus branches."""

    def test_protein_and_carbs(self):
        assert "protein + carbs" in suggest_meal_focus(MacroTotals(protein=40, carbs=60))

    def test_protein_only(self):
        assert "lean protein" in suggest_meal_focus(MacroTotals(protein=40, carbs=10))

    def test_carbs_only(self):
        assert "complex carbs" in suggest_meal_focus(MacroTotals(protein=10, carbs=60))

    def test_calories_left(self):
        assert "Balanced" in suggest_meal_focus(MacroTotals(calories=500))

    def test_close_to_targets(self):
        assert "close to your targets" in suggest_meal_focus(MacroTotals(calories=100))


class TestGuidelines:
    def test_pre_workout(self):
        assert "banana" in get_pre_workout_guidelines(DayType.LONG_RUN)

    def test_rest_day_fallbacks(self):
        assert get_pre_workout_guidelines("rest") == "Rest day - eat according to hunger and goals"
        assert get_post_workout_guidelines("rest").startswith("Eat according to your normal plan")

    def test_unknown_day_type(self):
        assert get_pre_workout_guidelines("nap") == "Rest day - eat according to hunger and goals"

    def test_goal_summaries(self):
        assert get_nutrition_summary_for_goal(EnduranceGoal()).startswith("Endurance goal")
        assert get_nutrition_summary_for_goal(
            BodyCompositionGoal(focus=BodyCompFocus.FAT_LOSS)
        ).startswith("Fat loss goal")
        assert get_nutrition_summary_for_goal(
            StrengthGoal(focus=StrengthFocus.POWER)
        ).startswith("Maintenance goal")
        assert get_nutrition_summary_for_goal(None).startswith("General nutrition")
