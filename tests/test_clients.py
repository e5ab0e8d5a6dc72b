"""Tests for the Strava and Hevy API clients."""

import asyncio
import time
from datetime import date, datetime

import httpx
import pytest

from coach.clients.base import (
    ActivitySummary,
    BaseApiClient,
    ExerciseRecord,
    OAuthTokens,
    SetRecord,
    WorkoutSession,
    average_weekly_distance_km,
    calculate_workout_stats,
)
from coach.clients.hevy import HevyClient
from coach.clients.strava import StravaClient, authorization_url
from coach.clients.strava.parsers import parse_activity
from coach.errors import ClientError, CredentialExpiredError, NotConnectedError, RateLimitedError

STRAVA_ACTIVITY = {
    "id": 12345,
    "name": "Morning Run",
    "sport_type": "Run",
    "start_date": "2025-03-01T06:00:00Z",
    "start_date_local": "2025-03-01T07:00:00Z",
    "distance": 10000.0,
    "moving_time": 3000,
    "elapsed_time": 3100,
    "total_elevation_gain": 55.0,
    "average_heartrate": 148.2,
}

HEVY_WORKOUT = {
    "id": "w-1",
    "title": "Lower",
    "start_time": "2025-03-01T17:00:00Z",
    "end_time": "2025-03-01T18:00:00Z",
    "exercises": [
        {
            "title": "Back Squat",
            "exercise_template_id": "D04AC939",
            "sets": [
                {"type": "warmup", "reps": 5, "weight_kg": 60},
                {"type": "normal", "reps": 5, "weight_kg": 100},
                {"type": "normal", "reps": 5, "weight_kg": 100},
            ],
        },
        {
            "title": "Plank",
            "sets": [{"type": "normal", "duration_seconds": 45}],
        },
    ],
}


def _http(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _fresh_tokens() -> OAuthTokens:
    return OAuthTokens("access", "refresh", int(time.time()) + 3600, "55")


class TestErrorMapping:
    """Tests for HTTP status to exception mapping."""

    def _get(self, status_code):
        client = BaseApiClient(
            "https://api.example.com",
            http_client=_http(lambda request: httpx.Response(status_code, json={})),
        )
        return asyncio.run(client._get("/thing"))

    def test_unauthorized(self):
        with pytest.raises(CredentialExpiredError) as exc_info:
            self._get(401)
        assert exc_info.value.retryable is False

    def test_rate_limited(self):
        with pytest.raises(RateLimitedError) as exc_info:
            self._get(429)
        assert exc_info.value.retryable is True

    def test_server_error_is_retryable(self):
        with pytest.raises(ClientError) as exc_info:
            self._get(503)
        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 503

    def test_not_found_is_not_retryable(self):
        with pytest.raises(ClientError) as exc_info:
            self._get(404)
        assert exc_info.value.retryable is False

    def test_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("boom", request=request)

        client = BaseApiClient("https://api.example.com", http_client=_http(handler))
        with pytest.raises(ClientError) as exc_info:
            asyncio.run(client._get("/thing"))
        assert exc_info.value.retryable is True


class TestStravaClient:
    """Tests for StravaClient."""

    def test_parse_activity(self):
        activity = parse_activity(STRAVA_ACTIVITY)
        assert activity.id == "12345"
        assert activity.start_time == datetime(2025, 3, 1, 7, 0)
        assert activity.distance_km == 10
        assert activity.pace_seconds_per_km == 300
        assert activity.source == "strava"

    def test_get_activities(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[STRAVA_ACTIVITY])

        client = StravaClient(_fresh_tokens(), http_client=_http(handler))
        activities = asyncio.run(client.get_activities(page=2, per_page=50))

        assert [a.name for a in activities] == ["Morning Run"]
        assert seen["auth"] == "Bearer access"
        assert seen["params"] == {"page": "2", "per_page": "50"}

    def test_refreshes_expiring_token(self):
        """Test an expiring token is refreshed and handed to the callback."""
        stored = []

        def handler(request):
            if request.url.path == "/oauth/token":
                assert b"grant_type=refresh_token" in request.content
                assert b"refresh_token=old-refresh" in request.content
                return httpx.Response(
                    200,
                    json={"access_token": "new", "refresh_token": "new-refresh", "expires_at": 9999999999},
                )
            assert request.headers["Authorization"] == "Bearer new"
            return httpx.Response(200, json=[])

        async def on_refresh(tokens):
            stored.append(tokens)

        client = StravaClient(
            OAuthTokens("old", "old-refresh", int(time.time()) + 60, "55"),
            client_id="id",
            client_secret="secret",
            on_token_refresh=on_refresh,
            http_client=_http(handler),
        )
        asyncio.run(client.get_activities())

        assert stored == [OAuthTokens("new", "new-refresh", 9999999999, "55")]
        assert client.tokens.access_token == "new"

    def test_refresh_needs_client_credentials(self, data_dir, monkeypatch):
        monkeypatch.delenv("COACH_STRAVA_CLIENT_ID", raising=False)
        monkeypatch.delenv("COACH_STRAVA_CLIENT_SECRET", raising=False)
        client = StravaClient(
            OAuthTokens("old", "r", 0),
            http_client=_http(lambda request: httpx.Response(200, json=[])),
        )
        with pytest.raises(NotConnectedError):
            asyncio.run(client.get_activities())

    def test_stats_without_tokens(self):
        """Test an unconnected client fails before any request is sent."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={})

        client = StravaClient(http_client=_http(handler))
        with pytest.raises(NotConnectedError):
            asyncio.run(client.get_athlete_stats())
        assert requests == []

    def test_iter_activities_stops_on_empty_page(self):
        pages = []

        def handler(request):
            page = int(request.url.params["page"])
            pages.append(page)
            if page <= 2:
                return httpx.Response(200, json=[{**STRAVA_ACTIVITY, "id": page}])
            return httpx.Response(200, json=[])

        async def collect():
            client = StravaClient(_fresh_tokens(), http_client=_http(handler))
            return [a async for a in client.iter_activities(max_pages=5)]

        activities = asyncio.run(collect())
        assert [a.id for a in activities] == ["1", "2"]
        assert pages == [1, 2, 3]

    def test_authorization_url(self):
        url = authorization_url("123")
        assert url.startswith("https://www.strava.com/oauth/authorize?")
        assert "client_id=123" in url
        assert "activity%3Aread_all" in url


class TestHevyClient:
    """Tests for HevyClient."""

    def test_get_workouts(self):
        seen = {}

        def handler(request):
            seen["key"] = request.headers["api-key"]
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"page": 1, "page_count": 3, "workouts": [HEVY_WORKOUT]})

        client = HevyClient("secret", http_client=_http(handler))
        workouts, page_count = asyncio.run(client.get_workouts())

        assert seen["key"] == "secret"
        assert seen["params"] == {"page": "1", "pageSize": "10"}
        assert page_count == 3
        workout = workouts[0]
        assert workout.title == "Lower"
        assert workout.exercises[0].sets[0].set_type == "warmup"
        assert workout.exercises[0].template_id == "D04AC939"

    def test_iter_workouts_follows_page_count(self):
        pages = []

        def handler(request):
            page = int(request.url.params["page"])
            pages.append(page)
            workout = {**HEVY_WORKOUT, "id": f"w-{page}"}
            return httpx.Response(200, json={"page": page, "page_count": 2, "workouts": [workout]})

        async def collect():
            client = HevyClient("secret", http_client=_http(handler))
            return [w async for w in client.iter_workouts(max_pages=10)]

        workouts = asyncio.run(collect())
        assert [w.id for w in workouts] == ["w-1", "w-2"]
        assert pages == [1, 2]

    def test_verify_rejected_key(self):
        client = HevyClient("bad", http_client=_http(lambda request: httpx.Response(401)))
        with pytest.raises(CredentialExpiredError):
            asyncio.run(client.verify())


class TestWorkoutStats:
    """Tests for calculate_workout_stats."""

    def test_stats_skip_warmups(self):
        workout = WorkoutSession(
            id="1",
            title="Lower",
            start_time=datetime(2025, 3, 1, 17, 0),
            end_time=datetime(2025, 3, 1, 18, 5),
            exercises=[
                ExerciseRecord(
                    name="Back Squat",
                    sets=[
                        SetRecord(reps=5, weight_kg=60, set_type="warmup"),
                        SetRecord(reps=5, weight_kg=100),
                        SetRecord(reps=5, weight_kg=100),
                    ],
                ),
                ExerciseRecord(name="Plank", sets=[SetRecord(duration_seconds=45)]),
            ],
        )
        stats = calculate_workout_stats(workout)
        assert stats.total_sets == 3
        assert stats.total_volume_kg == 1000
        assert stats.exercise_count == 2
        assert stats.duration_minutes == 65


class TestWeeklyDistance:
    """Tests for average_weekly_distance_km."""

    def _activity(self, day, km, sport_type="Run"):
        return ActivitySummary(
            id=str(day),
            name="",
            sport_type=sport_type,
            start_time=datetime(2025, 3, day, 7),
            distance_m=km * 1000,
            moving_time_s=km * 300,
        )

    def test_average_over_window(self):
        activities = [
            self._activity(1, 10),
            self._activity(20, 30),
            self._activity(21, 40, sport_type="Ride"),
        ]
        assert average_weekly_distance_km(activities, weeks=2, today=date(2025, 3, 21)) == 15
        assert average_weekly_distance_km(activities, weeks=4, today=date(2025, 3, 21)) == 10

    def test_rejects_zero_weeks(self):
        with pytest.raises(ValueError):
            average_weekly_distance_km([], weeks=0)
