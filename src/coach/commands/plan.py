"""Training plan commands."""

from datetime import date

import click

from ..db import ActivityRepository, get_db_path
from ..errors import ValidationError
from ..models.athlete import Athlete
from ..models.goals import RACE_DISTANCE_KM, EnduranceGoal, RaceDistance
from ..models.plan import TrainingPlan
from ..services.pacing import calculate_pace_zones, predict_race_time
from ..services.training_plan import find_current_week, generate_training_plan
from ..utils.formatting import format_duration, format_pace, parse_duration
from .base import (
    async_command,
    echo_info,
    echo_section,
    echo_warning,
    ensure_initialized,
    format_table,
    load_athlete,
)


@click.group()
@click.pass_context
def plan(ctx):
    """Training plan, pace zones and race predictions."""
    ensure_initialized(ctx)


def _endurance_goal(ctx: click.Context, athlete: Athlete) -> EnduranceGoal:
    goal = athlete.goals.primary
    if not isinstance(goal, EnduranceGoal):
        echo_warning("You need an endurance goal for a training plan.")
        echo_info("Set one with 'coach profile goal --type endurance'")
        ctx.exit(1)
    return goal


async def _build_plan(goal: EnduranceGoal, current_km: float | None) -> TrainingPlan:
    """Plan from the given weekly volume, or from synced Strava runs."""
    if current_km is None:
        current_km = await ActivityRepository(get_db_path()).weekly_distance_km("strava")
    return generate_training_plan(goal, current_km)


def _week_rows(weeks) -> list[list[str]]:
    return [
        [
            str(w.week_number),
            w.phase.value,
            f"{w.planned_distance_km}",
            f"{w.long_run_km} km",
            w.quality_session,
            str(w.strength_sessions),
        ]
        for w in weeks
    ]


_WEEK_HEADERS = ["Wk", "Phase", "Km/wk", "Long run", "Quality", "Strength"]


@plan.command()
@click.option("--weeks", "-n", type=int, help="Only show the first N weeks")
@click.option("--current-km", type=float, help="Current weekly km (default: synced Strava average)")
@click.pass_context
@async_command
async def show(ctx, weeks: int | None, current_km: float | None):
    """Show the full plan for your endurance goal."""
    athlete = await load_athlete(ctx)
    goal = _endurance_goal(ctx, athlete)
    training_plan = await _build_plan(goal, current_km)

    echo_section(f"Training Plan - {training_plan.distance_label}")
    click.echo(training_plan.get_summary())

    shown = training_plan.weeks[:weeks] if weeks else training_plan.weeks
    click.echo(format_table(_WEEK_HEADERS, _week_rows(shown)))


@plan.command()
@click.option("--current-km", type=float, help="Current weekly km (default: synced Strava average)")
@click.pass_context
@async_command
async def current(ctx, current_km: float | None):
    """Show this week of the plan, counting back from race day."""
    athlete = await load_athlete(ctx)
    goal = _endurance_goal(ctx, athlete)
    if goal.target_date is None:
        echo_warning("Your goal has no race date. Add one with 'coach profile goal --date'.")
        ctx.exit(1)

    days_to_race = (goal.target_date - date.today()).days
    training_plan = await _build_plan(goal, current_km)
    week = find_current_week(training_plan, goal.target_date)

    click.echo(f"{training_plan.distance_label} in {days_to_race} days")
    if week is None:
        if days_to_race > 0:
            echo_info(
                f"The {training_plan.total_weeks}-week plan has not started yet. "
                "Keep building your base."
            )
        else:
            echo_info("Race day has passed. Set a new goal!")
        return

    click.echo(f"Week {week.week_number}/{training_plan.total_weeks} - {week.phase.value.upper()}")
    click.echo(f"  Volume:   {week.planned_distance_km} km")
    click.echo(f"  Long run: {week.long_run_km} km")
    click.echo(f"  Quality:  {week.quality_session}")
    click.echo(f"  Strength: {week.strength_sessions}x ({week.strength_focus})")


def _parse_pace(value: str) -> float:
    """Seconds per km from "5:30" or "330"."""
    if ":" in value:
        return parse_duration(value)
    try:
        return float(value)
    except ValueError:
        raise ValidationError(f"Invalid pace: {value!r}") from None


def _parse_distance(value: str) -> float:
    """Kilometers from a race label ("10K", "21K") or a number."""
    try:
        return RACE_DISTANCE_KM[RaceDistance(value)]
    except ValueError:
        pass
    try:
        km = float(value)
    except ValueError:
        raise ValidationError(f"Invalid distance: {value!r}") from None
    if km <= 0:
        raise ValidationError("Distance must be positive")
    return km


@plan.command(name="pace-zones")
@click.argument("pace", required=False)
@click.pass_context
@async_command
async def pace_zones(ctx, pace: str | None):
    """Training pace zones around a race pace (e.g. 5:30 per km).

    Uses your goal's target pace when PACE is omitted.
    """
    if pace:
        target = _parse_pace(pace)
    else:
        athlete = await load_athlete(ctx)
        goal = _endurance_goal(ctx, athlete)
        target = goal.target_pace_seconds()
        if target is None:
            raise ValidationError("Your goal has no target time; pass a PACE instead")

    echo_section("Pace Zones")
    click.echo(f"Target race pace: {format_pace(target)}")
    click.echo()
    rows = [
        [zone.name, f"{format_pace(zone.min_seconds)} - {format_pace(zone.max_seconds)}"]
        for zone in calculate_pace_zones(target)
    ]
    click.echo(format_table(["Zone", "Pace"], rows))


@plan.command()
@click.argument("known_distance")
@click.argument("known_time")
@click.argument("target_distance")
def predict(known_distance: str, known_time: str, target_distance: str):
    """Predict a race time from a recent result.

    Example: coach plan predict 10K 48:30 21K
    """
    try:
        known_km = _parse_distance(known_distance)
        target_km = _parse_distance(target_distance)
        predicted = predict_race_time(known_km, parse_duration(known_time), target_km)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e

    click.echo(f"Predicted time for {target_km:g} km: {format_duration(predicted)}")
    click.echo(f"Pace: {format_pace(predicted / target_km)}")
