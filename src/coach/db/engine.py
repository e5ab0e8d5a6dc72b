"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import get_settings

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_settings().data_dir
    data_dir = Path(data_dir).expanduser()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "coach.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Athlete profiles (goals stored as a JSON document)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS athletes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                weight_kg REAL NOT NULL,
                height_cm REAL NOT NULL,
                age INTEGER NOT NULL,
                sex TEXT NOT NULL,
                activity_level TEXT NOT NULL DEFAULT 'high',
                body_fat_percentage REAL,
                resting_heart_rate INTEGER,
                max_heart_rate INTEGER,
                goals TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Food log, keyed by calendar day
        await db.execute("""
            CREATE TABLE IF NOT EXISTS food_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                athlete_id INTEGER NOT NULL,
                day TEXT NOT NULL,
                food_id TEXT NOT NULL,
                name TEXT NOT NULL,
                quantity REAL NOT NULL,
                unit TEXT NOT NULL DEFAULT 'g',
                calories REAL NOT NULL,
                protein REAL NOT NULL,
                carbs REAL NOT NULL,
                fat REAL NOT NULL,
                fiber REAL,
                logged_at TIMESTAMP NOT NULL,
                FOREIGN KEY (athlete_id) REFERENCES athletes(id) ON DELETE CASCADE
            )
        """)

        # Body composition history (append-only)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS body_composition (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                athlete_id INTEGER NOT NULL,
                weight_kg REAL NOT NULL,
                body_fat_percentage REAL NOT NULL,
                lean_mass_kg REAL NOT NULL,
                fat_mass_kg REAL NOT NULL,
                recorded_at TIMESTAMP NOT NULL,
                FOREIGN KEY (athlete_id) REFERENCES athletes(id) ON DELETE CASCADE
            )
        """)

        # Third-party credentials, one row per athlete and provider
        await db.execute("""
            CREATE TABLE IF NOT EXISTS integrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                athlete_id INTEGER NOT NULL,
                provider TEXT NOT NULL,
                access_token TEXT,
                refresh_token TEXT,
                expires_at INTEGER,
                api_key TEXT,
                external_athlete_id TEXT,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE (athlete_id, provider),
                FOREIGN KEY (athlete_id) REFERENCES athletes(id) ON DELETE CASCADE
            )
        """)

        # Cached activities and workouts fetched from providers
        await db.execute("""
            CREATE TABLE IF NOT EXISTS activities (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                athlete_id INTEGER,
                source TEXT NOT NULL,
                external_id TEXT NOT NULL,
                data_type TEXT NOT NULL,
                data TEXT NOT NULL,
                distance_km REAL DEFAULT 0,
                recorded_at TIMESTAMP,
                imported_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE (source, external_id),
                FOREIGN KEY (athlete_id) REFERENCES athletes(id)
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_food_entries_day
            ON food_entries(athlete_id, day)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_body_composition_athlete
            ON body_composition(athlete_id, recorded_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_activities_source
            ON activities(source, recorded_at)
        """)

        await db.commit()

    logger.info("Initialized database at %s", db_path)
