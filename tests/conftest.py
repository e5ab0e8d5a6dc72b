"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from pathlib import Path

import pytest

from coach.config import get_settings
from coach.db import init_db
from coach.models.athlete import ActivityLevel, Athlete, MetabolicProfile, Sex
from coach.models.goals import AthleteGoals, EnduranceGoal, FitnessLevel, RaceDistance


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """A temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the settings (and so the default database) at a temp directory."""
    monkeypatch.setenv("COACH_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def sample_profile():
    """The 70 kg / 175 cm / 30 y male used throughout the macro tests."""
    return MetabolicProfile(
        weight_kg=70,
        height_cm=175,
        age=30,
        sex=Sex.MALE,
        activity_level=ActivityLevel.HIGH,
    )


@pytest.fixture
def half_marathon_goal():
    return EnduranceGoal(
        distance=RaceDistance.HALF_MARATHON,
        level=FitnessLevel.INTERMEDIATE,
        target_time="1:45:00",
    )


@pytest.fixture
def sample_athlete(half_marathon_goal):
    """Create a sample athlete for testing."""
    return Athlete(
        name="Test Runner",
        weight_kg=70,
        height_cm=175,
        age=30,
        sex=Sex.MALE,
        max_heart_rate=190,
        goals=AthleteGoals(primary=half_marathon_goal),
    )
