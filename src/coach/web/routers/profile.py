"""Athlete profile routes."""

from fastapi import APIRouter, Depends, Query

from ...db import AthleteRepository, BodyCompositionRepository
from ...models.athlete import Athlete, BodyCompositionEntry
from ...models.goals import goal_from_dict
from ..deps import current_athlete
from ..schemas import BodyCompositionCreate, GoalUpdate, ProfileUpsert, WeightUpdate

router = APIRouter(prefix="/profile", tags=["profile"])


def _profile_response(athlete: Athlete) -> dict:
    return {
        "id": athlete.id,
        **athlete.to_dict(),
        "effective_max_heart_rate": athlete.effective_max_heart_rate,
    }


@router.get("")
async def get_profile(athlete: Athlete = Depends(current_athlete)):
    """Current athlete profile."""
    return _profile_response(athlete)


@router.put("")
async def save_profile(payload: ProfileUpsert):
    """Create the profile, or update the existing one (goals are kept)."""
    repo = AthleteRepository()
    existing = await repo.get_latest()

    athlete = Athlete(**payload.model_dump())
    if existing:
        athlete.id = existing.id
        athlete.goals = existing.goals
        athlete.body_fat_percentage = existing.body_fat_percentage
        await repo.update(athlete)
    else:
        athlete.id = await repo.create(athlete)

    return _profile_response(await repo.get(athlete.id))


@router.post("/weight")
async def update_weight(payload: WeightUpdate, athlete: Athlete = Depends(current_athlete)):
    repo = AthleteRepository()
    await repo.update_weight(athlete.id, payload.weight_kg)
    return _profile_response(await repo.get(athlete.id))


@router.put("/goal")
async def set_goal(payload: GoalUpdate, athlete: Athlete = Depends(current_athlete)):
    """Set the primary (or secondary) goal from its serialized form."""
    goal = goal_from_dict(payload.goal)
    repo = AthleteRepository()
    if payload.secondary:
        await repo.set_secondary_goal(athlete.id, goal)
    else:
        await repo.set_primary_goal(athlete.id, goal)
    return _profile_response(await repo.get(athlete.id))


@router.get("/heart-rate-zones")
async def heart_rate_zones(athlete: Athlete = Depends(current_athlete)):
    return {
        "max_heart_rate": athlete.effective_max_heart_rate,
        "estimated": athlete.max_heart_rate is None,
        "zones": {
            name: {"label": z.label, "min_bpm": z.min_bpm, "max_bpm": z.max_bpm}
            for name, z in athlete.heart_rate_zones().items()
        },
    }


@router.post("/body-composition", status_code=201)
async def add_body_composition(
    payload: BodyCompositionCreate, athlete: Athlete = Depends(current_athlete)
):
    entry = BodyCompositionEntry.from_measurement(payload.weight_kg, payload.body_fat_percentage)
    entry_id = await BodyCompositionRepository().add(athlete.id, entry)
    return {"id": entry_id, **entry.to_dict()}


@router.get("/body-composition")
async def list_body_composition(
    limit: int = Query(30, ge=1, le=365),
    athlete: Athlete = Depends(current_athlete),
):
    entries = await BodyCompositionRepository().list_recent(athlete.id, limit=limit)
    return [{"id": e.id, **e.to_dict()} for e in entries]
