"""Integration tests for the full flow.

The pipeline test runs against a real database file. The live tests talk to
Strava and Hevy and only run when STRAVA_ACCESS_TOKEN / HEVY_API_KEY are set.
"""

import asyncio
import os
import time
from datetime import date, datetime, timedelta

import pytest

from coach.clients.base import OAuthTokens
from coach.clients.hevy import HevyClient
from coach.clients.strava import StravaClient
from coach.dashboard import build_dashboard
from coach.db import (
    ActivityRepository,
    AthleteRepository,
    FoodLogRepository,
    export_all,
    init_db,
)
from coach.models.athlete import Athlete, Sex
from coach.models.goals import AthleteGoals, EnduranceGoal, FitnessLevel, RaceDistance
from coach.models.nutrition import FoodEntry
from coach.services.macros import get_macro_targets_for_goal
from coach.services.training_plan import find_current_week, generate_training_plan


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "coach.db"
    asyncio.run(init_db(path))
    return path


class TestPipelineIntegration:
    """Profile to plan, targets, food log and dashboard."""

    def test_profile_to_dashboard_flow(self, db_path):
        today = date(2025, 6, 1)
        race_goal = EnduranceGoal(
            distance=RaceDistance.MARATHON,
            level=FitnessLevel.ADVANCED,
            target_date=today + timedelta(days=60),
            target_time="3:15:00",
        )
        athlete = Athlete(
            name="Pipeline Runner",
            weight_kg=65,
            height_cm=170,
            age=35,
            sex=Sex.FEMALE,
            goals=AthleteGoals(primary=race_goal),
        )

        async def run():
            athlete.id = await AthleteRepository(db_path).create(athlete)

            # Four weeks of 40 km runs from Strava
            activities = ActivityRepository(db_path)
            for i in range(8):
                start = datetime(2025, 5, 5) + timedelta(days=i * 3)
                await activities.upsert(
                    "strava",
                    str(i),
                    "activity",
                    {
                        "id": str(i),
                        "name": "Run",
                        "sport_type": "Run",
                        "start_time": start.isoformat(),
                        "distance_m": 20000,
                        "moving_time_s": 6000,
                    },
                    recorded_at=start,
                    distance_km=20,
                )

            await FoodLogRepository(db_path).add(
                athlete.id,
                FoodEntry(
                    name="Bagel",
                    quantity=1,
                    unit="piece",
                    calories=280,
                    protein=10,
                    carbs=55,
                    fat=2,
                    logged_at=datetime(2025, 6, 1, 7, 30),
                ),
            )
            return await build_dashboard(athlete, db_path, today=today)

        dashboard = asyncio.run(run())

        weekly_km = dashboard["training"]["weekly_distance_km"]
        assert weekly_km == 40.0

        plan = generate_training_plan(race_goal, weekly_km)
        assert plan.total_weeks == 17
        week = find_current_week(plan, race_goal.target_date, today)
        assert dashboard["goal"]["current_week"] == week.to_dict()
        assert week.week_number == 17 - 9 + 1

        targets = get_macro_targets_for_goal(athlete.metabolic_profile(), race_goal)
        assert dashboard["nutrition"]["targets"] == targets.to_dict()
        assert dashboard["nutrition"]["consumed"]["calories"] == 280
        assert dashboard["nutrition"]["entries"] == 1

        exported = asyncio.run(export_all(athlete.id, db_path))
        assert len(exported["activities"]) == 8
        assert exported["food_log"]["2025-06-01"][0]["name"] == "Bagel"


@pytest.mark.strava
class TestStravaLive:
    def test_fetch_recent_activities(self):
        tokens = OAuthTokens(
            access_token=os.environ["STRAVA_ACCESS_TOKEN"],
            refresh_token="",
            expires_at=int(time.time()) + 3600,
        )

        async def fetch():
            async with StravaClient(tokens) as client:
                return await client.get_activities(per_page=5)

        activities = asyncio.run(fetch())
        assert all(a.source == "strava" for a in activities)


@pytest.mark.hevy
class TestHevyLive:
    def test_fetch_workouts(self):
        async def fetch():
            async with HevyClient(os.environ["HEVY_API_KEY"]) as client:
                await client.verify()
                return await client.get_workouts(page_size=3)

        workouts, page_count = asyncio.run(fetch())
        assert page_count >= 0
        assert all(w.source == "hevy" for w in workouts)
