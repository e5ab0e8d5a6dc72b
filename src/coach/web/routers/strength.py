"""Strength routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...models.athlete import Athlete
from ...services.strength import (
    get_routines_for_focus,
    get_strength_recommendation,
    get_strength_week,
)
from ..deps import current_athlete

router = APIRouter(prefix="/strength", tags=["strength"])


@router.get("/phase/{phase}")
async def phase_week(phase: str):
    """Strength week (sessions, note, routines) for a training phase."""
    week = get_strength_week(phase)
    if not week.routines:
        raise HTTPException(status_code=404, detail=f"Unknown phase: {phase}")
    return week.to_dict()


@router.get("/focus/{focus}")
async def focus_routines(focus: str):
    return [r.to_dict() for r in get_routines_for_focus(focus)]


@router.get("/recommendation")
async def recommendation(athlete: Athlete = Depends(current_athlete)):
    return get_strength_recommendation(athlete.goals.primary).to_dict()
