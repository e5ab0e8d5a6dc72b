"""Today's overview: goal progress, nutrition and body composition."""

from datetime import date
from pathlib import Path

from .db import ActivityRepository, BodyCompositionRepository, FoodLogRepository
from .models.athlete import Athlete
from .models.goals import EnduranceGoal, describe_goal
from .services.macros import get_macro_targets_for_goal
from .services.nutrition import calculate_remaining, calculate_totals, suggest_meal_focus
from .services.strength import get_strength_recommendation
from .services.training_plan import find_current_week, generate_training_plan
from .utils.units import round_to


async def build_dashboard(
    athlete: Athlete, db_path: Path | None = None, today: date | None = None
) -> dict:
    """Collect everything the dashboard shows into one JSON-ready dict."""
    today = today or date.today()
    goal = athlete.goals.primary
    activities = ActivityRepository(db_path)
    weekly_km = await activities.weekly_distance_km("strava", today=today)

    goal_info: dict = {"type": goal.type.value, "description": describe_goal(goal)}
    if isinstance(goal, EnduranceGoal) and goal.target_date:
        plan = generate_training_plan(goal, weekly_km)
        week = find_current_week(plan, goal.target_date, today)
        goal_info.update(
            days_to_race=(goal.target_date - today).days,
            total_weeks=plan.total_weeks,
            current_week=week.to_dict() if week else None,
        )
    goal_info["strength"] = get_strength_recommendation(goal).to_dict()

    targets = get_macro_targets_for_goal(athlete.metabolic_profile(), goal)
    entries = await FoodLogRepository(db_path).get_day(athlete.id, today)
    totals = calculate_totals(entries)
    remaining = calculate_remaining(totals, targets)

    latest = await BodyCompositionRepository(db_path).get_latest(athlete.id)
    last_workouts = await activities.get_by_source("hevy", data_type="workout", limit=1)

    return {
        "date": today.isoformat(),
        "athlete": {"name": athlete.name, "weight_kg": athlete.weight_kg},
        "goal": goal_info,
        "nutrition": {
            "targets": targets.to_dict(),
            "consumed": totals.to_dict(),
            "remaining": remaining.to_dict(),
            "entries": len(entries),
            "suggestion": suggest_meal_focus(remaining),
        },
        "body_composition": latest.to_dict() if latest else None,
        "training": {
            "weekly_distance_km": round_to(weekly_km),
            "last_workout": last_workouts[0] if last_workouts else None,
        },
    }
