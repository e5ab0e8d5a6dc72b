"""Shared route dependencies."""

from fastapi import HTTPException

from ..db import AthleteRepository
from ..models.athlete import Athlete


async def current_athlete() -> Athlete:
    """The athlete whose profile was updated last."""
    athlete = await AthleteRepository().get_latest()
    if athlete is None:
        raise HTTPException(status_code=404, detail="No athlete profile. Create one with PUT /profile")
    return athlete
