"""Plan and target calculators.

Everything here is pure: no storage, no network.
"""

from .macros import (
    calculate_bmr,
    calculate_tdee,
    get_macro_targets,
    get_macro_targets_for_goal,
)
from .pacing import calculate_pace_zones, predict_race_time
from .strength import (
    get_routines_for_focus,
    get_routines_for_phase,
    get_strength_recommendation,
    get_strength_week,
)
from .training_plan import classify_distance, find_current_week, generate_training_plan

__all__ = [
    "calculate_bmr",
    "calculate_pace_zones",
    "calculate_tdee",
    "classify_distance",
    "find_current_week",
    "generate_training_plan",
    "get_macro_targets",
    "get_macro_targets_for_goal",
    "get_routines_for_focus",
    "get_routines_for_phase",
    "get_strength_recommendation",
    "get_strength_week",
    "predict_race_time",
]
