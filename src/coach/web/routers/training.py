"""Training plan and pacing routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from ...db import ActivityRepository
from ...errors import ValidationError
from ...models.athlete import Athlete
from ...models.goals import EnduranceGoal
from ...services.pacing import calculate_pace_zones, predict_race_time
from ...services.training_plan import find_current_week, generate_training_plan
from ...utils.formatting import format_duration, format_pace, parse_duration
from ...utils.units import round_half_up
from ..deps import current_athlete

router = APIRouter(prefix="/training", tags=["training"])


def _endurance_goal(athlete: Athlete) -> EnduranceGoal:
    goal = athlete.goals.primary
    if not isinstance(goal, EnduranceGoal):
        raise ValidationError("Training plans need an endurance goal")
    return goal


async def _current_km(current_km: float | None) -> float:
    if current_km is not None:
        return current_km
    return await ActivityRepository().weekly_distance_km("strava")


@router.get("/plan")
async def plan(
    current_km: float | None = Query(None, ge=0),
    athlete: Athlete = Depends(current_athlete),
):
    """Full plan for the primary endurance goal."""
    goal = _endurance_goal(athlete)
    return generate_training_plan(goal, await _current_km(current_km)).to_dict()


@router.get("/current")
async def current_week(
    current_km: float | None = Query(None, ge=0),
    athlete: Athlete = Depends(current_athlete),
):
    """This week of the plan, counted back from the race date."""
    goal = _endurance_goal(athlete)
    if goal.target_date is None:
        raise ValidationError("The endurance goal has no race date")

    training_plan = generate_training_plan(goal, await _current_km(current_km))
    week = find_current_week(training_plan, goal.target_date)
    return {
        "days_to_race": (goal.target_date - date.today()).days,
        "total_weeks": training_plan.total_weeks,
        "week": week.to_dict() if week else None,
    }


@router.get("/pace-zones")
async def pace_zones(
    pace_seconds: float | None = Query(None, gt=0),
    athlete: Athlete = Depends(current_athlete),
):
    """Pace zones around a race pace (sec/km), defaulting to the goal's pace."""
    if pace_seconds is None:
        pace_seconds = _endurance_goal(athlete).target_pace_seconds()
        if pace_seconds is None:
            raise ValidationError("The goal has no target time; pass pace_seconds")

    return {
        "target_pace": format_pace(pace_seconds),
        "zones": [
            {**z.to_dict(), "range": f"{format_pace(z.min_seconds)} - {format_pace(z.max_seconds)}"}
            for z in calculate_pace_zones(pace_seconds)
        ],
    }


@router.get("/predict")
async def predict(known_km: float, known_time: str, target_km: float):
    """Riegel prediction from a known result."""
    seconds = predict_race_time(known_km, parse_duration(known_time), target_km)
    return {
        "target_km": target_km,
        "seconds": round_half_up(seconds),
        "time": format_duration(seconds),
        "pace": format_pace(seconds / target_km),
    }
