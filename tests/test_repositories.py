"""Tests for the SQLite repositories."""

import asyncio
from datetime import date, datetime

import pytest

from coach.clients.base import OAuthTokens
from coach.db import (
    ActivityRepository,
    AthleteRepository,
    BodyCompositionRepository,
    FoodLogRepository,
    IntegrationRepository,
    export_all,
)
from coach.errors import ValidationError
from coach.models.athlete import BodyCompositionEntry
from coach.models.goals import StrengthFocus, StrengthGoal
from coach.models.nutrition import FoodEntry


def _food(name, calories, logged_at):
    return FoodEntry(
        name=name,
        quantity=100,
        unit="g",
        calories=calories,
        protein=10,
        carbs=20,
        fat=5,
        logged_at=logged_at,
    )


@pytest.fixture
def athlete_id(db_path, sample_athlete):
    return asyncio.run(AthleteRepository(db_path).create(sample_athlete))


class TestAthleteRepository:
    """Tests for AthleteRepository."""

    def test_create_and_get(self, db_path, athlete_id, sample_athlete):
        athlete = asyncio.run(AthleteRepository(db_path).get(athlete_id))
        assert athlete.id == athlete_id
        assert athlete.name == "Test Runner"
        assert athlete.goals == sample_athlete.goals
        assert athlete.created_at is not None

    def test_get_missing(self, db_path):
        assert asyncio.run(AthleteRepository(db_path).get(999)) is None

    def test_get_latest(self, db_path, athlete_id):
        athlete = asyncio.run(AthleteRepository(db_path).get_latest())
        assert athlete.id == athlete_id

    def test_get_latest_empty(self, db_path):
        assert asyncio.run(AthleteRepository(db_path).get_latest()) is None

    def test_create_rejects_invalid(self, db_path, sample_athlete):
        sample_athlete.height_cm = 0
        with pytest.raises(ValidationError):
            asyncio.run(AthleteRepository(db_path).create(sample_athlete))

    def test_update(self, db_path, athlete_id):
        repo = AthleteRepository(db_path)
        athlete = asyncio.run(repo.get(athlete_id))
        athlete.age = 31
        asyncio.run(repo.update(athlete))
        assert asyncio.run(repo.get(athlete_id)).age == 31

    def test_update_weight(self, db_path, athlete_id):
        repo = AthleteRepository(db_path)
        asyncio.run(repo.update_weight(athlete_id, 68.5))
        assert asyncio.run(repo.get(athlete_id)).weight_kg == 68.5

        with pytest.raises(ValidationError):
            asyncio.run(repo.update_weight(athlete_id, 0))

    def test_goals(self, db_path, athlete_id, half_marathon_goal):
        """Test primary and secondary goals are replaced independently."""
        repo = AthleteRepository(db_path)
        secondary = StrengthGoal(focus=StrengthFocus.STRENGTH)
        asyncio.run(repo.set_secondary_goal(athlete_id, secondary))

        new_primary = StrengthGoal(focus=StrengthFocus.HYPERTROPHY)
        asyncio.run(repo.set_primary_goal(athlete_id, new_primary))

        goals = asyncio.run(repo.get(athlete_id)).goals
        assert goals.primary == new_primary
        assert goals.secondary == secondary

        asyncio.run(repo.set_secondary_goal(athlete_id, None))
        assert asyncio.run(repo.get(athlete_id)).goals.secondary is None

    def test_goal_for_missing_athlete(self, db_path, half_marathon_goal):
        with pytest.raises(ValueError):
            asyncio.run(AthleteRepository(db_path).set_primary_goal(42, half_marathon_goal))


class TestFoodLogRepository:
    """Tests for FoodLogRepository."""

    def test_add_and_get_day(self, db_path, athlete_id):
        repo = FoodLogRepository(db_path)
        asyncio.run(repo.add(athlete_id, _food("Oats", 300, datetime(2025, 3, 1, 8, 0))))
        asyncio.run(repo.add(athlete_id, _food("Rice", 400, datetime(2025, 3, 1, 13, 0))))
        asyncio.run(repo.add(athlete_id, _food("Pasta", 500, datetime(2025, 3, 2, 19, 0))))

        entries = asyncio.run(repo.get_day(athlete_id, date(2025, 3, 1)))
        assert [e.name for e in entries] == ["Oats", "Rice"]
        assert all(e.id is not None for e in entries)

    def test_remove(self, db_path, athlete_id):
        repo = FoodLogRepository(db_path)
        entry_id = asyncio.run(repo.add(athlete_id, _food("Oats", 300, datetime(2025, 3, 1, 8))))

        assert asyncio.run(repo.remove(athlete_id, entry_id)) is True
        assert asyncio.run(repo.remove(athlete_id, entry_id)) is False
        assert asyncio.run(repo.get_day(athlete_id, date(2025, 3, 1))) == []

    def test_history_includes_empty_days(self, db_path, athlete_id):
        repo = FoodLogRepository(db_path)
        asyncio.run(repo.add(athlete_id, _food("Oats", 300, datetime(2025, 3, 1, 8))))
        asyncio.run(repo.add(athlete_id, _food("Old", 300, datetime(2025, 2, 1, 8))))

        history = asyncio.run(repo.get_history(athlete_id, days=3, today=date(2025, 3, 2)))
        assert list(history) == ["2025-03-02", "2025-03-01", "2025-02-28"]
        assert history["2025-03-02"] == []
        assert [e.name for e in history["2025-03-01"]] == ["Oats"]


class TestBodyCompositionRepository:
    """Tests for BodyCompositionRepository."""

    def test_add_updates_profile(self, db_path, athlete_id):
        repo = BodyCompositionRepository(db_path)
        entry = BodyCompositionEntry.from_measurement(72, 15, datetime(2025, 3, 1, 7))
        asyncio.run(repo.add(athlete_id, entry))

        athlete = asyncio.run(AthleteRepository(db_path).get(athlete_id))
        assert athlete.weight_kg == 72
        assert athlete.body_fat_percentage == 15

    def test_list_recent_newest_first(self, db_path, athlete_id):
        repo = BodyCompositionRepository(db_path)
        for day, weight in [(1, 72), (8, 71), (15, 70)]:
            entry = BodyCompositionEntry.from_measurement(weight, 15, datetime(2025, 3, day))
            asyncio.run(repo.add(athlete_id, entry))

        entries = asyncio.run(repo.list_recent(athlete_id, limit=2))
        assert [e.weight_kg for e in entries] == [70, 71]
        assert asyncio.run(repo.get_latest(athlete_id)).weight_kg == 70

    def test_latest_empty(self, db_path, athlete_id):
        assert asyncio.run(BodyCompositionRepository(db_path).get_latest(athlete_id)) is None


class TestIntegrationRepository:
    """Tests for IntegrationRepository."""

    def test_tokens_upsert(self, db_path, athlete_id):
        repo = IntegrationRepository(db_path)
        asyncio.run(repo.save_tokens(athlete_id, "strava", OAuthTokens("a1", "r1", 1000, "55")))
        asyncio.run(repo.save_tokens(athlete_id, "strava", OAuthTokens("a2", "r2", 2000)))

        tokens = asyncio.run(repo.get_tokens(athlete_id, "strava"))
        assert tokens == OAuthTokens("a2", "r2", 2000, "55")

    def test_api_key(self, db_path, athlete_id):
        repo = IntegrationRepository(db_path)
        asyncio.run(repo.save_api_key(athlete_id, "hevy", "key-1"))
        assert asyncio.run(repo.get_api_key(athlete_id, "hevy")) == "key-1"
        assert asyncio.run(repo.get_tokens(athlete_id, "hevy")) is None
        assert asyncio.run(repo.list_providers(athlete_id)) == ["hevy"]

    def test_delete(self, db_path, athlete_id):
        repo = IntegrationRepository(db_path)
        asyncio.run(repo.save_api_key(athlete_id, "hevy", "key-1"))
        assert asyncio.run(repo.delete(athlete_id, "hevy")) is True
        assert asyncio.run(repo.get_api_key(athlete_id, "hevy")) is None


class TestActivityRepository:
    """Tests for ActivityRepository."""

    def _run(self, id, day, distance_m):
        return {
            "id": id,
            "name": "Run",
            "sport_type": "Run",
            "start_time": datetime(2025, 3, day, 7).isoformat(),
            "distance_m": distance_m,
            "moving_time_s": 1800,
            "source": "strava",
        }

    def test_upsert_reports_new(self, db_path):
        repo = ActivityRepository(db_path)
        data = self._run("1", 1, 5000)
        assert asyncio.run(repo.upsert("strava", "1", "activity", data)) is True
        assert asyncio.run(repo.upsert("strava", "1", "activity", data)) is False
        assert asyncio.run(repo.count("strava")) == 1
        assert asyncio.run(repo.count()) == 1

    def test_get_by_source_newest_first(self, db_path):
        repo = ActivityRepository(db_path)
        for id, day in [("1", 1), ("2", 10), ("3", 5)]:
            asyncio.run(
                repo.upsert("strava", id, "activity", self._run(id, day, 5000), datetime(2025, 3, day))
            )

        records = asyncio.run(repo.get_by_source("strava", limit=2))
        assert [r["id"] for r in records] == ["2", "3"]

    def test_weekly_distance(self, db_path):
        repo = ActivityRepository(db_path)
        for id, day, meters in [("1", 1, 10000), ("2", 10, 20000), ("3", 20, 10000)]:
            asyncio.run(
                repo.upsert("strava", id, "activity", self._run(id, day, meters), datetime(2025, 3, day))
            )

        weekly = asyncio.run(repo.weekly_distance_km(today=date(2025, 3, 21)))
        assert weekly == pytest.approx(10.0)


class TestExport:
    """Tests for export_all."""

    def test_export(self, db_path, athlete_id):
        asyncio.run(
            FoodLogRepository(db_path).add(athlete_id, _food("Oats", 300, datetime(2025, 3, 1, 8)))
        )
        asyncio.run(IntegrationRepository(db_path).save_api_key(athlete_id, "hevy", "secret"))

        data = asyncio.run(export_all(athlete_id, db_path))
        assert data["athlete"]["id"] == athlete_id
        assert data["athlete"]["name"] == "Test Runner"
        assert list(data["food_log"]) == ["2025-03-01"]
        assert data["food_log"]["2025-03-01"][0]["name"] == "Oats"
        assert data["body_composition"] == []
        assert "secret" not in str(data)

    def test_export_missing_athlete(self, db_path):
        with pytest.raises(ValueError):
            asyncio.run(export_all(99, db_path))
