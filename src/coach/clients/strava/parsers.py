"""Parsers for Strava API payloads."""

from datetime import datetime

from ..base import ActivitySummary, OAuthTokens


def parse_timestamp(value: str) -> datetime:
    """Parse a Strava ISO-8601 timestamp ("2024-03-01T07:00:00Z")."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_activity(data: dict) -> ActivitySummary:
    """Convert a Strava activity (summary or detailed) to an ActivitySummary."""
    # start_date_local keeps the athlete's wall-clock day
    start = data.get("start_date_local") or data["start_date"]
    return ActivitySummary(
        id=str(data["id"]),
        name=data.get("name", ""),
        sport_type=data.get("sport_type") or data.get("type", ""),
        start_time=parse_timestamp(start).replace(tzinfo=None),
        distance_m=float(data.get("distance") or 0),
        moving_time_s=int(data.get("moving_time") or 0),
        elapsed_time_s=int(data.get("elapsed_time") or 0),
        elevation_gain_m=float(data.get("total_elevation_gain") or 0),
        average_heartrate=data.get("average_heartrate"),
        max_heartrate=data.get("max_heartrate"),
        calories=data.get("calories"),
        source="strava",
    )


def parse_tokens(data: dict, athlete_id: str | None = None) -> OAuthTokens:
    """Convert a token endpoint response to OAuthTokens."""
    athlete = data.get("athlete") or {}
    return OAuthTokens(
        access_token=data["access_token"],
        refresh_token=data["refresh_token"],
        expires_at=int(data["expires_at"]),
        athlete_id=str(athlete["id"]) if athlete.get("id") else athlete_id,
    )
