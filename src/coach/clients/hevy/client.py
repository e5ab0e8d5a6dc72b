"""Hevy API client."""

import logging
from collections.abc import AsyncIterator

import httpx

from ...config import get_settings
from ..base import BaseApiClient, WorkoutSession
from .parsers import parse_workout

logger = logging.getLogger(__name__)


class HevyClient(BaseApiClient):
    """Client for the Hevy public API (API key auth, page/page_count pagination)."""

    source_name = "hevy"

    def __init__(self, api_key: str, http_client: httpx.AsyncClient | None = None):
        super().__init__(get_settings().hevy_api_base, http_client=http_client)
        self.api_key = api_key

    def _auth_headers(self) -> dict[str, str]:
        return {"api-key": self.api_key}

    async def get_workouts(
        self, page: int = 1, page_size: int = 10
    ) -> tuple[list[WorkoutSession], int]:
        """One page of workouts and the total page count."""
        data = await self._get("/workouts", params={"page": page, "pageSize": page_size})
        workouts = [parse_workout(w) for w in data.get("workouts", [])]
        return workouts, data.get("page_count", page)

    async def get_workout(self, workout_id: str) -> WorkoutSession:
        data = await self._get(f"/workouts/{workout_id}")
        return parse_workout(data)

    async def get_routines(self, page: int = 1, page_size: int = 10) -> list[dict]:
        """Saved routines, as returned by the API."""
        data = await self._get("/routines", params={"page": page, "pageSize": page_size})
        return data.get("routines", [])

    async def get_exercise_templates(self, page: int = 1, page_size: int = 100) -> list[dict]:
        data = await self._get(
            "/exercise_templates", params={"page": page, "pageSize": page_size}
        )
        return data.get("exercise_templates", [])

    async def verify(self) -> bool:
        """Check the API key with a minimal request.

        Raises:
            CredentialExpiredError: If the key is rejected
        """
        await self.get_workouts(page=1, page_size=1)
        return True

    async def iter_workouts(
        self, max_pages: int = 10, page_size: int = 10
    ) -> AsyncIterator[WorkoutSession]:
        """Walk pages up to `page_count` (or `max_pages`)."""
        page = 1
        while page <= max_pages:
            workouts, page_count = await self.get_workouts(page=page, page_size=page_size)
            logger.debug("Fetched %d Hevy workouts from page %d/%d", len(workouts), page, page_count)
            for workout in workouts:
                yield workout
            if page >= page_count or not workouts:
                return
            page += 1
