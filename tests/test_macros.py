"""Tests for calorie and macro target calculation."""

import logging

import pytest

from coach.errors import ValidationError
from coach.models.athlete import ActivityLevel, MetabolicProfile, Sex
from coach.models.goals import (
    BodyCompFocus,
    BodyCompositionGoal,
    EnduranceGoal,
    StrengthFocus,
    StrengthGoal,
)
from coach.models.nutrition import DayType, MacroTargets
from coach.services.macros import (
    calculate_bmr,
    calculate_tdee,
    get_macro_targets,
    get_macro_targets_for_goal,
)


class TestEnergyExpenditure:
    """Tests for BMR and TDEE."""

    def test_bmr_male(self, sample_profile):
        assert calculate_bmr(sample_profile) == pytest.approx(1648.75)

    def test_tdee_male_high(self, sample_profile):
        assert calculate_tdee(sample_profile) == 2844

    def test_tdee_female(self, sample_profile):
        sample_profile.sex = Sex.FEMALE
        assert calculate_tdee(sample_profile) == 2558

    def test_activity_multiplier(self, sample_profile):
        sample_profile.activity_level = ActivityLevel.LOW
        assert calculate_tdee(sample_profile) == 2267  # 1648.75 * 1.375

    @pytest.mark.parametrize("field", ["weight_kg", "height_cm", "age"])
    def test_rejects_non_positive_metrics(self, sample_profile, field):
        setattr(sample_profile, field, 0)
        with pytest.raises(ValidationError):
            calculate_tdee(sample_profile)


class TestDayTypeTargets:
    """Tests for get_macro_targets."""

    def test_easy_day(self, sample_profile):
        targets = get_macro_targets(sample_profile, DayType.EASY)
        assert targets == MacroTargets(calories=2844, protein=126, carbs=280, fat=136, fiber=30)

    def test_long_run(self, sample_profile):
        targets = get_macro_targets(sample_profile, DayType.LONG_RUN)
        assert (targets.calories, targets.protein, targets.carbs, targets.fat) == (3144, 126, 490, 76)

    def test_rest_day(self, sample_profile):
        targets = get_macro_targets(sample_profile, "rest")
        assert (targets.calories, targets.carbs, targets.fat) == (2644, 210, 144)

    def test_race_day_hits_fat_floor(self, sample_profile):
        """Test fat never drops below 0.8 g/kg."""
        targets = get_macro_targets(sample_profile, DayType.RACE_DAY)
        assert targets.protein == 98
        assert targets.carbs == 700
        assert targets.calories == 3344
        assert targets.fat == 56

    @pytest.mark.parametrize("activity", [ActivityLevel.LOW, ActivityLevel.HIGH])
    @pytest.mark.parametrize("day_type", list(DayType))
    def test_fat_floor_for_every_day_type(self, day_type, activity):
        profile = MetabolicProfile(
            weight_kg=95, height_cm=160, age=60, sex=Sex.FEMALE, activity_level=activity
        )
        targets = get_macro_targets(profile, day_type)
        assert targets.fat >= 76
        assert targets.protein > 0 and targets.carbs > 0

    def test_unknown_day_type_falls_back_to_easy(self, sample_profile, caplog):
        with caplog.at_level(logging.WARNING):
            targets = get_macro_targets(sample_profile, "marathon_monday")
        assert targets == get_macro_targets(sample_profile, DayType.EASY)
        assert "Unknown day type" in caplog.text

    def test_same_input_same_output(self, sample_profile):
        first = get_macro_targets(sample_profile, DayType.QUALITY)
        second = get_macro_targets(sample_profile, DayType.QUALITY)
        assert first == second

    def test_invalid_weight(self):
        profile = MetabolicProfile(weight_kg=-5, height_cm=175, age=30, sex=Sex.MALE)
        with pytest.raises(ValidationError, match="Weight"):
            get_macro_targets(profile, DayType.EASY)


class TestGoalTargets:
    """Tests for get_macro_targets_for_goal."""

    def test_endurance_goal(self, sample_profile):
        targets = get_macro_targets_for_goal(sample_profile, EnduranceGoal())
        assert (targets.calories, targets.protein, targets.carbs, targets.fat) == (2844, 112, 350, 111)

    def test_fat_loss(self, sample_profile):
        goal = BodyCompositionGoal(focus=BodyCompFocus.FAT_LOSS)
        targets = get_macro_targets_for_goal(sample_profile, goal)
        assert (targets.calories, targets.protein, targets.carbs, targets.fat) == (2344, 154, 140, 130)

    def test_hypertrophy(self, sample_profile):
        goal = StrengthGoal(focus=StrengthFocus.HYPERTROPHY)
        targets = get_macro_targets_for_goal(sample_profile, goal)
        assert (targets.calories, targets.protein, targets.carbs, targets.fat) == (3144, 140, 280, 163)

    def test_strength_focus_without_rule_uses_default(self, sample_profile):
        """Test focuses with no dedicated rule use maintenance factors."""
        goal = StrengthGoal(focus=StrengthFocus.FUNCTIONAL)
        targets = get_macro_targets_for_goal(sample_profile, goal)
        assert (targets.calories, targets.protein, targets.carbs, targets.fat) == (2844, 126, 210, 167)

    def test_no_goal_uses_default(self, sample_profile):
        assert get_macro_targets_for_goal(sample_profile, None) == get_macro_targets_for_goal(
            sample_profile, BodyCompositionGoal()
        )
