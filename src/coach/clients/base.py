"""Shared types and HTTP plumbing for third-party fitness APIs."""

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import httpx

from ..config import get_settings
from ..errors import ClientError, CredentialExpiredError, RateLimitedError
from ..utils.units import round_half_up

logger = logging.getLogger(__name__)


@dataclass
class OAuthTokens:
    """Bearer credentials for an OAuth provider."""

    access_token: str
    refresh_token: str
    expires_at: int  # unix seconds
    athlete_id: str | None = None

    def expires_within(self, seconds: int, now: float | None = None) -> bool:
        """True if the access token expires in the next `seconds`."""
        now = time.time() if now is None else now
        return self.expires_at <= now + seconds

    def to_dict(self) -> dict:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at,
            "athlete_id": self.athlete_id,
        }


@dataclass
class ActivitySummary:
    """A cardio activity (run, ride, swim) from a tracking service."""

    id: str
    name: str
    sport_type: str
    start_time: datetime
    distance_m: float
    moving_time_s: int
    elapsed_time_s: int = 0
    elevation_gain_m: float = 0.0
    average_heartrate: float | None = None
    max_heartrate: float | None = None
    calories: float | None = None
    source: str = ""

    @property
    def distance_km(self) -> float:
        return self.distance_m / 1000

    @property
    def pace_seconds_per_km(self) -> float | None:
        if self.distance_m <= 0:
            return None
        return self.moving_time_s / self.distance_km

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "sport_type": self.sport_type,
            "start_time": self.start_time.isoformat(),
            "distance_m": self.distance_m,
            "moving_time_s": self.moving_time_s,
            "elapsed_time_s": self.elapsed_time_s,
            "elevation_gain_m": self.elevation_gain_m,
            "average_heartrate": self.average_heartrate,
            "max_heartrate": self.max_heartrate,
            "calories": self.calories,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ActivitySummary":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            sport_type=data.get("sport_type", ""),
            start_time=datetime.fromisoformat(data["start_time"]),
            distance_m=data.get("distance_m", 0.0),
            moving_time_s=data.get("moving_time_s", 0),
            elapsed_time_s=data.get("elapsed_time_s", 0),
            elevation_gain_m=data.get("elevation_gain_m", 0.0),
            average_heartrate=data.get("average_heartrate"),
            max_heartrate=data.get("max_heartrate"),
            calories=data.get("calories"),
            source=data.get("source", ""),
        )


@dataclass
class SetRecord:
    """Represents a single set of an exercise."""

    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: float | None = None  # for timed exercises
    rpe: float | None = None
    set_type: str = "normal"  # normal, warmup, dropset, failure


@dataclass
class ExerciseRecord:
    """Represents a recorded exercise within a workout."""

    name: str
    sets: list[SetRecord] = field(default_factory=list)
    template_id: str | None = None


@dataclass
class WorkoutSession:
    """A logged strength workout."""

    id: str
    title: str
    start_time: datetime
    end_time: datetime
    exercises: list[ExerciseRecord] = field(default_factory=list)
    source: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "exercises": [
                {
                    "name": ex.name,
                    "template_id": ex.template_id,
                    "sets": [
                        {
                            "reps": s.reps,
                            "weight_kg": s.weight_kg,
                            "duration_seconds": s.duration_seconds,
                            "rpe": s.rpe,
                            "set_type": s.set_type,
                        }
                        for s in ex.sets
                    ],
                }
                for ex in self.exercises
            ],
            "source": self.source,
        }


@dataclass
class WorkoutStats:
    """Aggregate numbers for a strength workout."""

    total_sets: int
    total_volume_kg: int
    exercise_count: int
    duration_minutes: int


def calculate_workout_stats(workout: WorkoutSession) -> WorkoutStats:
    """Working sets, volume (kg x reps), exercises and duration of a workout."""
    total_sets = 0
    total_volume = 0.0
    for exercise in workout.exercises:
        for s in exercise.sets:
            if s.set_type == "warmup":
                continue
            total_sets += 1
            if s.weight_kg and s.reps:
                total_volume += s.weight_kg * s.reps

    duration = workout.end_time - workout.start_time
    return WorkoutStats(
        total_sets=total_sets,
        total_volume_kg=round_half_up(total_volume),
        exercise_count=len(workout.exercises),
        duration_minutes=round_half_up(duration.total_seconds() / 60),
    )


RUN_TYPES = {"Run", "TrailRun", "VirtualRun"}


def average_weekly_distance_km(
    activities: list[ActivitySummary],
    weeks: int = 4,
    today: date | None = None,
    sport_types: set[str] | None = None,
) -> float:
    """Average weekly distance over the last `weeks` weeks.

    Only running activities count unless `sport_types` says otherwise.
    """
    if weeks <= 0:
        raise ValueError("weeks must be positive")
    today = today or date.today()
    since = today - timedelta(days=weeks * 7)
    sport_types = RUN_TYPES if sport_types is None else sport_types

    total = sum(
        a.distance_km
        for a in activities
        if a.sport_type in sport_types and since < a.start_time.date() <= today
    )
    return total / weeks


class BaseApiClient:
    """Async HTTP client with error mapping shared by provider clients.

    Use as an async context manager, or pass in an existing
    httpx.AsyncClient (which the caller then owns).
    """

    source_name = ""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout or get_settings().http_timeout
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _auth_headers(self) -> dict[str, str]:
        return {}

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.warning("%s request failed: %s", self.source_name, e)
            raise ClientError(f"{self.source_name} unreachable: {e}", retryable=True) from e

        if response.status_code == 401:
            raise CredentialExpiredError(
                f"{self.source_name} rejected the credentials. Please reconnect.",
                status_code=401,
            )
        if response.status_code == 429:
            raise RateLimitedError(f"{self.source_name} rate limit reached", status_code=429)
        if response.status_code >= 400:
            logger.warning(
                "%s %s %s -> %s", self.source_name, method, url, response.status_code
            )
            raise ClientError(
                f"{self.source_name} request failed ({response.status_code})",
                status_code=response.status_code,
                retryable=response.status_code >= 500,
            )
        return response

    async def _get(self, path: str, params: dict | None = None):
        response = await self._send(
            "GET",
            f"{self.base_url}{path}",
            params=params,
            headers=self._auth_headers(),
        )
        return response.json()
