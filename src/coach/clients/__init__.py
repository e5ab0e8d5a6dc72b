"""Third-party fitness API clients."""

from .base import (
    ActivitySummary,
    OAuthTokens,
    WorkoutSession,
    average_weekly_distance_km,
    calculate_workout_stats,
)
from .hevy import HevyClient
from .strava import StravaClient

__all__ = [
    "ActivitySummary",
    "HevyClient",
    "OAuthTokens",
    "StravaClient",
    "WorkoutSession",
    "average_weekly_distance_km",
    "calculate_workout_stats",
]
