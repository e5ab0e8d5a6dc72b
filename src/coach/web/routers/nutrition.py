"""Nutrition routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from ...data.meals import MEAL_TEMPLATES
from ...db import FoodLogRepository
from ...models.athlete import Athlete
from ...models.nutrition import DayType, FoodEntry
from ...services.macros import get_macro_targets, get_macro_targets_for_goal
from ...services.nutrition import (
    calculate_macro_percentages,
    calculate_remaining,
    calculate_totals,
    get_nutrition_summary_for_goal,
    get_post_workout_guidelines,
    get_pre_workout_guidelines,
    suggest_meal_focus,
)
from ..deps import current_athlete
from ..schemas import FoodEntryCreate

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


def _targets(athlete: Athlete, day_type: DayType | None):
    profile = athlete.metabolic_profile()
    if day_type:
        return get_macro_targets(profile, day_type)
    return get_macro_targets_for_goal(profile, athlete.goals.primary)


def _entry_response(entry: FoodEntry) -> dict:
    return {"id": entry.id, **entry.to_dict()}


@router.get("/targets")
async def targets(
    day_type: DayType | None = None,
    athlete: Athlete = Depends(current_athlete),
):
    """Macro targets for a day type, or for the primary goal."""
    result = _targets(athlete, day_type)
    return {**result.to_dict(), "percentages": calculate_macro_percentages(result)}


@router.get("/day")
async def get_day(
    day: date | None = None,
    day_type: DayType | None = None,
    athlete: Athlete = Depends(current_athlete),
):
    """Food log for a day with totals and what's left."""
    entries = await FoodLogRepository().get_day(athlete.id, day or date.today())
    totals = calculate_totals(entries)
    goal_targets = _targets(athlete, day_type)
    remaining = calculate_remaining(totals, goal_targets)
    return {
        "date": (day or date.today()).isoformat(),
        "entries": [_entry_response(e) for e in entries],
        "totals": totals.to_dict(),
        "targets": goal_targets.to_dict(),
        "remaining": remaining.to_dict(),
        "suggestion": suggest_meal_focus(remaining),
    }


@router.post("/entries", status_code=201)
async def add_entry(payload: FoodEntryCreate, athlete: Athlete = Depends(current_athlete)):
    entry = FoodEntry(**payload.model_dump())
    entry_id = await FoodLogRepository().add(athlete.id, entry)
    return {"id": entry_id, **entry.to_dict()}


@router.delete("/entries/{entry_id}", status_code=204)
async def remove_entry(entry_id: int, athlete: Athlete = Depends(current_athlete)):
    if not await FoodLogRepository().remove(athlete.id, entry_id):
        raise HTTPException(status_code=404, detail="Food entry not found")


@router.get("/history")
async def history(
    days: int = Query(7, ge=1, le=90),
    athlete: Athlete = Depends(current_athlete),
):
    """Daily totals, newest day first."""
    log = await FoodLogRepository().get_history(athlete.id, days=days)
    return [
        {"date": day, "entries": len(entries), "totals": calculate_totals(entries).to_dict()}
        for day, entries in log.items()
    ]


@router.get("/guide")
async def guide(day_type: DayType | None = None, athlete: Athlete = Depends(current_athlete)):
    """Workout fueling guidance and goal advice."""
    response = {"goal": get_nutrition_summary_for_goal(athlete.goals.primary)}
    if day_type:
        response["pre_workout"] = get_pre_workout_guidelines(day_type)
        response["post_workout"] = get_post_workout_guidelines(day_type)
    return response


@router.get("/meals")
async def meals():
    return [
        {"key": key, "name": name, **macros.to_dict()}
        for key, (name, macros) in MEAL_TEMPLATES.items()
    ]
