"""Strength routine selection.

Selection is a direct catalog lookup; unknown keys give an empty list.
"""

from ..data.routines import FOCUS_ROUTINES, PHASE_ROUTINES
from ..models.goals import (
    BodyCompFocus,
    BodyCompositionGoal,
    EnduranceGoal,
    Goal,
    StrengthFocus,
    StrengthGoal,
)
from ..models.plan import PhaseName
from ..models.strength import StrengthRecommendation, StrengthRoutine, StrengthWeek


def _key(value) -> str:
    return value.value if hasattr(value, "value") else str(value)


def get_routines_for_phase(phase: PhaseName | str) -> list[StrengthRoutine]:
    """Complementary strength routines for a training phase."""
    return list(PHASE_ROUTINES.get(_key(phase), ()))


def get_routines_for_focus(focus: StrengthFocus | str) -> list[StrengthRoutine]:
    """Dedicated routines for a strength focus."""
    return list(FOCUS_ROUTINES.get(_key(focus), ()))


_PHASE_WEEKS = {
    "base": (2, "Build the foundation: heavy, low-rep work plus stability."),
    "build": (2, "Shift to strength-endurance; keep sessions away from quality runs."),
    "peak": (1, "Maintain only. Running takes priority this phase."),
    "taper": (1, "Short activation session early in the week, nothing near race day."),
}


def get_strength_week(phase: PhaseName | str) -> StrengthWeek:
    """Sessions, guidance and routines for one week of a phase.

    Unknown phases give a week with no sessions and no routines.
    """
    key = _key(phase)
    sessions, notes = _PHASE_WEEKS.get(key, (0, "No strength guidance for this phase."))
    return StrengthWeek(
        phase=key,
        sessions=sessions,
        notes=notes,
        routines=get_routines_for_phase(key),
    )


_FOCUS_SESSIONS = {
    StrengthFocus.HYPERTROPHY: (4, "Upper/lower split, 10-20 hard sets per muscle per week."),
    StrengthFocus.STRENGTH: (4, "Heavy compounds at 3-6 reps; add load when all sets hit the top."),
    StrengthFocus.POWER: (3, "Explosive work first in the session while fresh."),
    StrengthFocus.ENDURANCE: (3, "High-rep circuits with short rest."),
    StrengthFocus.FUNCTIONAL: (3, "Squat, hinge, carry, push and pull every week."),
    StrengthFocus.MAINTENANCE: (2, "Keep intensity, cut volume to a third."),
}

_BODY_COMP_RECOMMENDATIONS = {
    BodyCompFocus.FAT_LOSS: (
        StrengthFocus.STRENGTH,
        3,
        "Keep lifting heavy in a deficit to hold on to muscle.",
    ),
    BodyCompFocus.MUSCLE_GAIN: (
        StrengthFocus.HYPERTROPHY,
        4,
        "Progressive overload with a small calorie surplus.",
    ),
    BodyCompFocus.RECOMPOSITION: (
        StrengthFocus.HYPERTROPHY,
        3,
        "Hypertrophy volume with high protein; expect slow scale changes.",
    ),
    BodyCompFocus.MAINTENANCE: (
        StrengthFocus.MAINTENANCE,
        2,
        "Two full-body sessions keep what you have.",
    ),
    BodyCompFocus.PERFORMANCE: (
        StrengthFocus.POWER,
        3,
        "Train for output; body composition follows performance.",
    ),
}


def get_strength_recommendation(goal: Goal) -> StrengthRecommendation:
    """Recommended strength focus, weekly sessions and a note for a goal."""
    if isinstance(goal, EnduranceGoal):
        return StrengthRecommendation(
            focus=StrengthFocus.FUNCTIONAL.value,
            sessions_per_week=2,
            notes=(
                "Complementary strength for endurance: single-leg work, posterior "
                "chain and core. Drop to one session in peak and taper."
            ),
        )

    if isinstance(goal, StrengthGoal):
        sessions, notes = _FOCUS_SESSIONS[goal.focus]
        return StrengthRecommendation(
            focus=goal.focus.value,
            sessions_per_week=sessions,
            notes=notes,
        )

    if isinstance(goal, BodyCompositionGoal):
        focus, sessions, notes = _BODY_COMP_RECOMMENDATIONS.get(
            goal.focus, _BODY_COMP_RECOMMENDATIONS[BodyCompFocus.MAINTENANCE]
        )
        return StrengthRecommendation(
            focus=focus.value,
            sessions_per_week=sessions,
            notes=notes,
        )

    raise TypeError(f"Not a goal: {goal!r}")


def format_routine(routine: StrengthRoutine) -> str:
    """Render a routine as text."""
    lines = [f"{routine.name} ({routine.duration_minutes} min)"]
    for ex in routine.exercises:
        lines.append(f"  - {ex.name}: {ex.sets}x{ex.reps} (rest {ex.rest_seconds}s)")
    if routine.notes:
        lines.append(f"  Note: {routine.notes}")
    return "\n".join(lines)
