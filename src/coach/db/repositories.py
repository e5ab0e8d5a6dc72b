"""Data access layer for coach."""

import json
from datetime import date, datetime, timedelta
from pathlib import Path

import aiosqlite

from ..clients.base import ActivitySummary, OAuthTokens, average_weekly_distance_km
from ..errors import ValidationError
from ..models.athlete import Athlete, BodyCompositionEntry
from ..models.goals import AthleteGoals, Goal
from ..models.nutrition import FoodEntry
from .engine import get_db_path


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class AthleteRepository:
    """Repository for athlete profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, athlete: Athlete) -> int:
        """Create a new athlete profile."""
        athlete.validate()
        data = athlete.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO athletes
                (name, weight_kg, height_cm, age, sex, activity_level,
                 body_fat_percentage, resting_heart_rate, max_heart_rate, goals)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["name"],
                    data["weight_kg"],
                    data["height_cm"],
                    data["age"],
                    data["sex"],
                    data["activity_level"],
                    data["body_fat_percentage"],
                    data["resting_heart_rate"],
                    data["max_heart_rate"],
                    json.dumps(data["goals"]),
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, athlete_id: int) -> Athlete | None:
        """Get an athlete by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM athletes WHERE id = ?", (athlete_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_athlete(row)

    async def get_latest(self) -> Athlete | None:
        """Get the most recently updated athlete."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM athletes ORDER BY updated_at DESC, id DESC LIMIT 1"
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_athlete(row)

    async def update(self, athlete: Athlete) -> None:
        """Update an existing athlete profile."""
        if athlete.id is None:
            raise ValueError("Athlete must have an ID to update")
        athlete.validate()
        data = athlete.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE athletes SET
                    name = ?, weight_kg = ?, height_cm = ?, age = ?, sex = ?,
                    activity_level = ?, body_fat_percentage = ?,
                    resting_heart_rate = ?, max_heart_rate = ?, goals = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    data["name"],
                    data["weight_kg"],
                    data["height_cm"],
                    data["age"],
                    data["sex"],
                    data["activity_level"],
                    data["body_fat_percentage"],
                    data["resting_heart_rate"],
                    data["max_heart_rate"],
                    json.dumps(data["goals"]),
                    athlete.id,
                ),
            )
            await db.commit()

    async def update_weight(self, athlete_id: int, weight_kg: float) -> None:
        """Record a new body weight."""
        if weight_kg <= 0:
            raise ValidationError("Weight must be positive")
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE athletes SET weight_kg = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (weight_kg, athlete_id),
            )
            await db.commit()

    async def set_primary_goal(self, athlete_id: int, goal: Goal) -> None:
        """Replace the primary goal, keeping the secondary one."""
        await self._set_goals(athlete_id, lambda goals: AthleteGoals(goal, goals.secondary))

    async def set_secondary_goal(self, athlete_id: int, goal: Goal | None) -> None:
        """Replace (or clear, with None) the secondary goal."""
        await self._set_goals(athlete_id, lambda goals: AthleteGoals(goals.primary, goal))

    async def _set_goals(self, athlete_id: int, change) -> None:
        athlete = await self.get(athlete_id)
        if athlete is None:
            raise ValueError(f"Athlete {athlete_id} not found")
        goals = change(athlete.goals)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE athletes SET goals = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (json.dumps(goals.to_dict()), athlete_id),
            )
            await db.commit()

    def _row_to_athlete(self, row: aiosqlite.Row) -> Athlete:
        """Convert a database row to an Athlete."""
        data = {
            "name": row["name"],
            "weight_kg": row["weight_kg"],
            "height_cm": row["height_cm"],
            "age": row["age"],
            "sex": row["sex"],
            "activity_level": row["activity_level"],
            "body_fat_percentage": row["body_fat_percentage"],
            "resting_heart_rate": row["resting_heart_rate"],
            "max_heart_rate": row["max_heart_rate"],
            "goals": json.loads(row["goals"]),
        }
        return Athlete.from_dict(
            data,
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class FoodLogRepository:
    """Repository for the day-keyed food log."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def add(self, athlete_id: int, entry: FoodEntry) -> int:
        """Log a food entry on the day of its timestamp."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO food_entries
                (athlete_id, day, food_id, name, quantity, unit,
                 calories, protein, carbs, fat, fiber, logged_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    athlete_id,
                    entry.logged_at.date().isoformat(),
                    entry.food_id,
                    entry.name,
                    entry.quantity,
                    entry.unit,
                    entry.calories,
                    entry.protein,
                    entry.carbs,
                    entry.fat,
                    entry.fiber,
                    entry.logged_at.isoformat(),
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def remove(self, athlete_id: int, entry_id: int) -> bool:
        """Remove an entry. Returns False if it did not exist."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM food_entries WHERE id = ? AND athlete_id = ?",
                (entry_id, athlete_id),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def get_day(self, athlete_id: int, day: date | None = None) -> list[FoodEntry]:
        """Entries for one day (default today), in logging order."""
        day = day or date.today()
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM food_entries
                WHERE athlete_id = ? AND day = ?
                ORDER BY logged_at, id
                """,
                (athlete_id, day.isoformat()),
            )
            rows = await cursor.fetchall()
            return [self._row_to_entry(row) for row in rows]

    async def get_history(
        self, athlete_id: int, days: int = 7, today: date | None = None
    ) -> dict[str, list[FoodEntry]]:
        """Entries for the last `days` days keyed by ISO date, newest first.

        Days without entries are present with an empty list.
        """
        today = today or date.today()
        keys = [(today - timedelta(days=i)).isoformat() for i in range(days)]
        history: dict[str, list[FoodEntry]] = {key: [] for key in keys}
        if not keys:
            return history

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM food_entries
                WHERE athlete_id = ? AND day >= ? AND day <= ?
                ORDER BY logged_at, id
                """,
                (athlete_id, keys[-1], keys[0]),
            )
            rows = await cursor.fetchall()
            for row in rows:
                history[row["day"]].append(self._row_to_entry(row))
        return history

    def _row_to_entry(self, row: aiosqlite.Row) -> FoodEntry:
        return FoodEntry(
            id=row["id"],
            food_id=row["food_id"],
            name=row["name"],
            quantity=row["quantity"],
            unit=row["unit"],
            calories=row["calories"],
            protein=row["protein"],
            carbs=row["carbs"],
            fat=row["fat"],
            fiber=row["fiber"],
            logged_at=datetime.fromisoformat(row["logged_at"]),
        )


class BodyCompositionRepository:
    """Repository for body composition history."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def add(self, athlete_id: int, entry: BodyCompositionEntry) -> int:
        """Append a measurement and copy it onto the athlete profile."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO body_composition
                (athlete_id, weight_kg, body_fat_percentage, lean_mass_kg,
                 fat_mass_kg, recorded_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    athlete_id,
                    entry.weight_kg,
                    entry.body_fat_percentage,
                    entry.lean_mass_kg,
                    entry.fat_mass_kg,
                    entry.recorded_at.isoformat(),
                ),
            )
            await db.execute(
                """
                UPDATE athletes SET
                    weight_kg = ?, body_fat_percentage = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (entry.weight_kg, entry.body_fat_percentage, athlete_id),
            )
            await db.commit()
            return cursor.lastrowid

    async def list_recent(self, athlete_id: int, limit: int = 30) -> list[BodyCompositionEntry]:
        """Most recent measurements first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM body_composition
                WHERE athlete_id = ?
                ORDER BY recorded_at DESC, id DESC
                LIMIT ?
                """,
                (athlete_id, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_entry(row) for row in rows]

    async def get_latest(self, athlete_id: int) -> BodyCompositionEntry | None:
        entries = await self.list_recent(athlete_id, limit=1)
        return entries[0] if entries else None

    def _row_to_entry(self, row: aiosqlite.Row) -> BodyCompositionEntry:
        return BodyCompositionEntry(
            id=row["id"],
            weight_kg=row["weight_kg"],
            body_fat_percentage=row["body_fat_percentage"],
            lean_mass_kg=row["lean_mass_kg"],
            fat_mass_kg=row["fat_mass_kg"],
            recorded_at=datetime.fromisoformat(row["recorded_at"]),
        )


class IntegrationRepository:
    """Repository for third-party credentials."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def save_tokens(self, athlete_id: int, provider: str, tokens: OAuthTokens) -> None:
        """Store (or replace) OAuth tokens for a provider."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO integrations
                (athlete_id, provider, access_token, refresh_token, expires_at,
                 external_athlete_id)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(athlete_id, provider) DO UPDATE SET
                    access_token = excluded.access_token,
                    refresh_token = excluded.refresh_token,
                    expires_at = excluded.expires_at,
                    external_athlete_id = COALESCE(
                        excluded.external_athlete_id, integrations.external_athlete_id
                    ),
                    updated_at = CURRENT_TIMESTAMP
                """,
                (
                    athlete_id,
                    provider,
                    tokens.access_token,
                    tokens.refresh_token,
                    tokens.expires_at,
                    tokens.athlete_id,
                ),
            )
            await db.commit()

    async def get_tokens(self, athlete_id: int, provider: str) -> OAuthTokens | None:
        row = await self._get_row(athlete_id, provider)
        if row is None or not row["access_token"]:
            return None
        return OAuthTokens(
            access_token=row["access_token"],
            refresh_token=row["refresh_token"],
            expires_at=row["expires_at"],
            athlete_id=row["external_athlete_id"],
        )

    async def save_api_key(self, athlete_id: int, provider: str, api_key: str) -> None:
        """Store (or replace) a static API key for a provider."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO integrations (athlete_id, provider, api_key)
                VALUES (?, ?, ?)
                ON CONFLICT(athlete_id, provider) DO UPDATE SET
                    api_key = excluded.api_key,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (athlete_id, provider, api_key),
            )
            await db.commit()

    async def get_api_key(self, athlete_id: int, provider: str) -> str | None:
        row = await self._get_row(athlete_id, provider)
        return row["api_key"] if row else None

    async def delete(self, athlete_id: int, provider: str) -> bool:
        """Forget a provider's credentials."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM integrations WHERE athlete_id = ? AND provider = ?",
                (athlete_id, provider),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def list_providers(self, athlete_id: int) -> list[str]:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT provider FROM integrations WHERE athlete_id = ? ORDER BY provider",
                (athlete_id,),
            )
            rows = await cursor.fetchall()
            return [row[0] for row in rows]

    async def _get_row(self, athlete_id: int, provider: str) -> aiosqlite.Row | None:
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM integrations WHERE athlete_id = ? AND provider = ?",
                (athlete_id, provider),
            )
            return await cursor.fetchone()


class ActivityRepository:
    """Repository for activities and workouts cached from providers."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def upsert(
        self,
        source: str,
        external_id: str,
        data_type: str,
        data: dict,
        recorded_at: datetime | None = None,
        distance_km: float = 0.0,
        athlete_id: int | None = None,
    ) -> bool:
        """Insert or refresh a cached record. Returns True if it was new."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT id FROM activities WHERE source = ? AND external_id = ?",
                (source, external_id),
            )
            existing = await cursor.fetchone()

            await db.execute(
                """
                INSERT INTO activities
                (athlete_id, source, external_id, data_type, data, distance_km, recorded_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(source, external_id) DO UPDATE SET
                    data_type = excluded.data_type,
                    data = excluded.data,
                    distance_km = excluded.distance_km,
                    recorded_at = excluded.recorded_at,
                    imported_at = CURRENT_TIMESTAMP
                """,
                (
                    athlete_id,
                    source,
                    external_id,
                    data_type,
                    json.dumps(data),
                    distance_km,
                    recorded_at.isoformat() if recorded_at else None,
                ),
            )
            await db.commit()
            return existing is None

    async def get_by_source(
        self,
        source: str,
        data_type: str | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """Cached records from a source, newest first."""
        query = "SELECT data FROM activities WHERE source = ?"
        params: list = [source]
        if data_type:
            query += " AND data_type = ?"
            params.append(data_type)
        query += " ORDER BY recorded_at DESC, id DESC"
        if limit:
            query += " LIMIT ?"
            params.append(limit)

        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [json.loads(row[0]) for row in rows]

    async def count(self, source: str | None = None) -> int:
        async with aiosqlite.connect(self.db_path) as db:
            if source:
                cursor = await db.execute(
                    "SELECT COUNT(*) FROM activities WHERE source = ?", (source,)
                )
            else:
                cursor = await db.execute("SELECT COUNT(*) FROM activities")
            row = await cursor.fetchone()
            return row[0]

    async def weekly_distance_km(
        self, source: str = "strava", weeks: int = 4, today: date | None = None
    ) -> float:
        """Average weekly running distance from cached activities."""
        records = await self.get_by_source(source, data_type="activity")
        activities = [ActivitySummary.from_dict(r) for r in records]
        return average_weekly_distance_km(activities, weeks=weeks, today=today)


async def export_all(athlete_id: int, db_path: Path | None = None) -> dict:
    """Everything stored for an athlete as one JSON-ready document.

    Credentials are left out.
    """
    athlete = await AthleteRepository(db_path).get(athlete_id)
    if athlete is None:
        raise ValueError(f"Athlete {athlete_id} not found")

    food_repo = FoodLogRepository(db_path)
    async with aiosqlite.connect(food_repo.db_path) as db:
        cursor = await db.execute(
            "SELECT DISTINCT day FROM food_entries WHERE athlete_id = ? ORDER BY day",
            (athlete_id,),
        )
        days = [row[0] for row in await cursor.fetchall()]

    food_log = {}
    for day in days:
        entries = await food_repo.get_day(athlete_id, date.fromisoformat(day))
        food_log[day] = [{"id": e.id, **e.to_dict()} for e in entries]

    body_comp = await BodyCompositionRepository(db_path).list_recent(athlete_id, limit=-1)
    activity_repo = ActivityRepository(db_path)

    return {
        "exported_at": datetime.now().isoformat(),
        "athlete": {"id": athlete.id, **athlete.to_dict()},
        "food_log": food_log,
        "body_composition": [e.to_dict() for e in reversed(body_comp)],
        "activities": await activity_repo.get_by_source("strava"),
        "workouts": await activity_repo.get_by_source("hevy"),
    }
