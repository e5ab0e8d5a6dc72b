"""Interactive questionnaires for profile and goal setup."""

from datetime import date

import click
import questionary
from questionary import Style

from ..models.athlete import ActivityLevel, Athlete, Sex
from ..models.goals import (
    BodyCompFocus,
    BodyCompositionGoal,
    EnduranceGoal,
    FitnessLevel,
    Goal,
    GoalType,
    RaceDistance,
    RACE_DISTANCE_LABELS,
    StrengthFocus,
    StrengthGoal,
)
from ..utils.formatting import parse_duration

custom_style = Style(
    [
        ("qmark", "fg:#00897b bold"),
        ("question", "bold"),
        ("answer", "fg:#ef6c00 bold"),
        ("pointer", "fg:#00897b bold"),
        ("highlighted", "fg:#00897b bold"),
        ("selected", "fg:#ef6c00"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _positive(value: str) -> bool | str:
    try:
        return float(value) > 0 or "Must be greater than zero"
    except ValueError:
        return "Enter a number"


def _optional_positive(value: str) -> bool | str:
    return not value.strip() or _positive(value)


def _optional_date(value: str) -> bool | str:
    if not value.strip():
        return True
    try:
        date.fromisoformat(value.strip())
        return True
    except ValueError:
        return "Use YYYY-MM-DD"


def _optional_duration(value: str) -> bool | str:
    if not value.strip():
        return True
    try:
        parse_duration(value)
        return True
    except ValueError:
        return "Use H:MM:SS or MM:SS"


def _answer(answer):
    """questionary returns None when the user hits Ctrl+C."""
    if answer is None:
        raise click.Abort()
    return answer


async def _text(message: str, validate=None, default: str = "") -> str:
    return _answer(
        await questionary.text(
            message, validate=validate, default=default, style=custom_style
        ).ask_async()
    )


async def _select(message: str, choices: list, default=None):
    return _answer(
        await questionary.select(
            message, choices=choices, default=default, style=custom_style
        ).ask_async()
    )


async def collect_profile(existing: Athlete | None = None) -> Athlete:
    """Ask for body metrics, keeping existing values as defaults."""
    click.echo("\n=== Athlete Profile ===\n")

    def default(attr: str) -> str:
        value = getattr(existing, attr, None) if existing else None
        return "" if value is None else str(value)

    name = await _text("What's your name?", default=default("name") or "Athlete")
    weight = await _text("Current weight (kg):", validate=_positive, default=default("weight_kg"))
    height = await _text("Height (cm):", validate=_positive, default=default("height_cm"))
    age = await _text("Age:", validate=_positive, default=default("age"))
    sex = await _select(
        "Sex (used for the BMR formula):",
        choices=[
            questionary.Choice("Male", Sex.MALE),
            questionary.Choice("Female", Sex.FEMALE),
        ],
    )
    activity = await _select(
        "How much do you train?",
        choices=[
            questionary.Choice("Low (1-2x/week)", ActivityLevel.LOW),
            questionary.Choice("Moderate (3-4x/week)", ActivityLevel.MODERATE),
            questionary.Choice("High (5-6x/week)", ActivityLevel.HIGH),
            questionary.Choice("Very high (6-7x/week + active job)", ActivityLevel.VERY_HIGH),
        ],
        default=ActivityLevel.HIGH,
    )
    resting_hr = await _text(
        "Resting heart rate (optional):",
        validate=_optional_positive,
        default=default("resting_heart_rate"),
    )
    max_hr = await _text(
        "Max heart rate (optional, Enter for 220 - age):",
        validate=_optional_positive,
        default=default("max_heart_rate"),
    )

    athlete = Athlete(
        name=name.strip() or "Athlete",
        weight_kg=float(weight),
        height_cm=float(height),
        age=int(float(age)),
        sex=sex,
        activity_level=activity,
        resting_heart_rate=int(float(resting_hr)) if resting_hr.strip() else None,
        max_heart_rate=int(float(max_hr)) if max_hr.strip() else None,
    )
    if existing:
        athlete.id = existing.id
        athlete.goals = existing.goals
        athlete.body_fat_percentage = existing.body_fat_percentage
    return athlete


async def collect_goal() -> Goal:
    """Ask for a goal of any type."""
    goal_type = await _select(
        "Goal type:",
        choices=[
            questionary.Choice("Race / endurance", GoalType.ENDURANCE),
            questionary.Choice("Strength / hypertrophy", GoalType.STRENGTH),
            questionary.Choice("Body composition", GoalType.BODY_COMPOSITION),
        ],
    )

    if goal_type == GoalType.ENDURANCE:
        return await _collect_endurance_goal()

    if goal_type == GoalType.STRENGTH:
        focus = await _select(
            "Strength focus:",
            choices=[questionary.Choice(f.value.title(), f) for f in StrengthFocus],
        )
        return StrengthGoal(focus=focus)

    focus = await _select(
        "Body composition focus:",
        choices=[
            questionary.Choice(f.value.replace("_", " ").title(), f) for f in BodyCompFocus
        ],
    )
    target_weight = await _text("Target weight in kg (optional):", validate=_optional_positive)
    return BodyCompositionGoal(
        focus=focus,
        target_weight_kg=float(target_weight) if target_weight.strip() else None,
    )


async def _collect_endurance_goal() -> EnduranceGoal:
    distance = await _select(
        "Target distance:",
        choices=[questionary.Choice(RACE_DISTANCE_LABELS[d], d) for d in RaceDistance]
        + [questionary.Choice("Other (custom km)", "custom")],
    )
    custom_km = None
    if distance == "custom":
        distance = None
        custom_km = float(await _text("Distance in km:", validate=_positive))

    level = await _select(
        "Fitness level:",
        choices=[questionary.Choice(lvl.value.title(), lvl) for lvl in FitnessLevel],
    )
    race_date = await _text("Race date (YYYY-MM-DD, optional):", validate=_optional_date)
    target_time = await _text("Target time (e.g. 1:45:00, optional):", validate=_optional_duration)

    return EnduranceGoal(
        distance=distance,
        custom_distance=custom_km,
        level=level,
        target_date=date.fromisoformat(race_date.strip()) if race_date.strip() else None,
        target_time=target_time.strip() or None,
    )


async def ask_secret(message: str) -> str:
    return _answer(await questionary.password(message, style=custom_style).ask_async())


async def ask_text(message: str) -> str:
    return await _text(message)
