"""Dashboard route."""

from fastapi import APIRouter, Depends

from ...dashboard import build_dashboard
from ...models.athlete import Athlete
from ..deps import current_athlete

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def dashboard(athlete: Athlete = Depends(current_athlete)):
    return await build_dashboard(athlete)
