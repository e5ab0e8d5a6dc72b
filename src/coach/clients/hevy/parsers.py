"""Parsers for Hevy API payloads."""

from datetime import datetime

from ..base import ExerciseRecord, SetRecord, WorkoutSession


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00")).replace(tzinfo=None)


def parse_set(data: dict) -> SetRecord:
    return SetRecord(
        reps=data.get("reps"),
        weight_kg=data.get("weight_kg"),
        duration_seconds=data.get("duration_seconds"),
        rpe=data.get("rpe"),
        set_type=data.get("type") or "normal",
    )


def parse_workout(data: dict) -> WorkoutSession:
    """Convert a Hevy workout to a WorkoutSession."""
    exercises = [
        ExerciseRecord(
            name=ex.get("title", ""),
            template_id=ex.get("exercise_template_id"),
            sets=[parse_set(s) for s in ex.get("sets", [])],
        )
        for ex in data.get("exercises", [])
    ]
    return WorkoutSession(
        id=str(data["id"]),
        title=data.get("title", ""),
        start_time=_parse_timestamp(data["start_time"]),
        end_time=_parse_timestamp(data["end_time"]),
        exercises=exercises,
        source="hevy",
    )
