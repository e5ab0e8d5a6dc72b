"""Tests for strength routine selection."""

from coach.models.goals import (
    BodyCompFocus,
    BodyCompositionGoal,
    StrengthFocus,
    StrengthGoal,
)
from coach.models.plan import PhaseName
from coach.services.strength import (
    format_routine,
    get_routines_for_focus,
    get_routines_for_phase,
    get_strength_recommendation,
    get_strength_week,
)


class TestPhaseRoutines:
    """Tests for get_routines_for_phase."""

    def test_base_phase(self):
        routines = get_routines_for_phase(PhaseName.BASE)
        assert [r.name for r in routines] == ["Base A - Max Strength", "Base B - Stability"]

    def test_string_key(self):
        assert len(get_routines_for_phase("build")) == 2
        assert len(get_routines_for_phase("peak")) == 1
        assert len(get_routines_for_phase("taper")) == 1

    def test_unknown_phase(self):
        assert get_routines_for_phase("offseason") == []

    def test_returns_a_copy(self):
        routines = get_routines_for_phase("base")
        routines.clear()
        assert len(get_routines_for_phase("base")) == 2


class TestFocusRoutines:
    def test_counts(self):
        assert len(get_routines_for_focus(StrengthFocus.HYPERTROPHY)) == 3
        assert len(get_routines_for_focus("strength")) == 2
        assert len(get_routines_for_focus("maintenance")) == 1

    def test_unknown_focus(self):
        assert get_routines_for_focus("yoga") == []


class TestStrengthWeek:
    """Tests for get_strength_week."""

    def test_base_week(self):
        week = get_strength_week("base")
        assert week.sessions == 2
        assert len(week.routines) == 2

    def test_taper_week(self):
        week = get_strength_week(PhaseName.TAPER)
        assert week.phase == "taper"
        assert week.sessions == 1

    def test_unknown_phase(self):
        week = get_strength_week("offseason")
        assert week.sessions == 0
        assert week.routines == []


class TestRecommendation:
    """Tests for get_strength_recommendation."""

    def test_endurance(self, half_marathon_goal):
        rec = get_strength_recommendation(half_marathon_goal)
        assert rec.focus == "functional"
        assert rec.sessions_per_week == 2

    def test_strength_goal(self):
        rec = get_strength_recommendation(StrengthGoal(focus=StrengthFocus.POWER))
        assert rec.focus == "power"
        assert rec.sessions_per_week == 3

    def test_body_composition(self):
        rec = get_strength_recommendation(BodyCompositionGoal(focus=BodyCompFocus.FAT_LOSS))
        assert rec.focus == "strength"
        assert rec.sessions_per_week == 3

        rec = get_strength_recommendation(BodyCompositionGoal(focus=BodyCompFocus.MUSCLE_GAIN))
        assert rec.focus == "hypertrophy"
        assert rec.sessions_per_week == 4


class TestFormatRoutine:
    def test_format(self):
        text = format_routine(get_routines_for_phase("base")[0])
        lines = text.splitlines()
        assert lines[0] == "Base A - Max Strength (50 min)"
        assert "  - Back Squat: 4x5 (rest 150s)" in lines
        assert lines[-1].startswith("  Note: ")
