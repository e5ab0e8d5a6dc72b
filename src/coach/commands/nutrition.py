"""Nutrition commands: targets, food log and guidance."""

from datetime import date, datetime

import click

from ..data.meals import MEAL_TEMPLATES
from ..db import FoodLogRepository, get_db_path
from ..errors import ValidationError
from ..models.athlete import Athlete
from ..models.nutrition import DayType, FoodEntry, MacroTargets
from ..services.macros import get_macro_targets, get_macro_targets_for_goal
from ..services.nutrition import (
    calculate_macro_percentages,
    calculate_remaining,
    calculate_totals,
    format_macros,
    get_nutrition_summary_for_goal,
    get_post_workout_guidelines,
    get_pre_workout_guidelines,
    suggest_meal_focus,
)
from .base import (
    async_command,
    echo_info,
    echo_section,
    echo_success,
    ensure_initialized,
    format_table,
    load_athlete,
)

_DAY_TYPES = [d.value for d in DayType]


@click.group()
@click.pass_context
def nutrition(ctx):
    """Daily macro targets and food log."""
    ensure_initialized(ctx)


def _targets(athlete: Athlete, day_type: str | None) -> MacroTargets:
    if day_type:
        return get_macro_targets(athlete.metabolic_profile(), day_type)
    return get_macro_targets_for_goal(athlete.metabolic_profile(), athlete.goals.primary)


@nutrition.command()
@click.option("--day-type", "-d", type=click.Choice(_DAY_TYPES), help="Targets for a training day type")
@click.pass_context
@async_command
async def targets(ctx, day_type: str | None):
    """Daily targets for a day type, or for your primary goal."""
    athlete = await load_athlete(ctx)
    result = _targets(athlete, day_type)

    echo_section(f"Daily targets ({day_type or 'goal'})")
    click.echo(format_macros(result))
    split = calculate_macro_percentages(result)
    click.echo(f"Split: P {split['protein']}% | C {split['carbs']}% | F {split['fat']}%")
    click.echo(f"Fiber: {result.fiber} g")


@nutrition.command()
@click.argument("name")
@click.option("--quantity", "-q", type=float, required=True, help="Amount eaten")
@click.option("--unit", default="g", show_default=True)
@click.option("--calories", type=float, required=True)
@click.option("--protein", type=float, default=0.0)
@click.option("--carbs", type=float, default=0.0)
@click.option("--fat", type=float, default=0.0)
@click.option("--fiber", type=float)
@click.pass_context
@async_command
async def log(ctx, name, quantity, unit, calories, protein, carbs, fat, fiber):
    """Log a food you ate."""
    if quantity <= 0 or calories < 0 or min(protein, carbs, fat) < 0:
        raise ValidationError("Quantity must be positive and macros cannot be negative")

    athlete = await load_athlete(ctx)
    entry = FoodEntry(
        name=name,
        quantity=quantity,
        unit=unit,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
    )
    entry_id = await FoodLogRepository(get_db_path()).add(athlete.id, entry)
    echo_success(f"Logged {name} ({calories:g} kcal) [#{entry_id}]")


@nutrition.command()
@click.argument("entry_id", type=int)
@click.pass_context
@async_command
async def remove(ctx, entry_id: int):
    """Remove a logged food by its number."""
    athlete = await load_athlete(ctx)
    if not await FoodLogRepository(get_db_path()).remove(athlete.id, entry_id):
        raise ValidationError(f"Food entry #{entry_id} not found")
    echo_success(f"Removed entry #{entry_id}")


@nutrition.command()
@click.option("--day-type", "-d", type=click.Choice(_DAY_TYPES), help="Compare against a day type")
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Another day")
@click.pass_context
@async_command
async def today(ctx, day_type: str | None, day: datetime | None):
    """What you ate today against your targets."""
    athlete = await load_athlete(ctx)
    the_day = day.date() if day else date.today()
    entries = await FoodLogRepository(get_db_path()).get_day(athlete.id, the_day)

    echo_section(f"Food log {the_day.isoformat()}")
    if entries:
        rows = [
            [
                str(e.id),
                e.logged_at.strftime("%H:%M"),
                e.name,
                f"{e.quantity:g}{e.unit}",
                f"{e.calories:g}",
                f"{e.protein:g}",
                f"{e.carbs:g}",
                f"{e.fat:g}",
            ]
            for e in entries
        ]
        click.echo(format_table(["#", "Time", "Food", "Qty", "kcal", "P", "C", "F"], rows))
    else:
        echo_info("Nothing logged yet")

    goal_targets = _targets(athlete, day_type)
    totals = calculate_totals(entries)
    remaining = calculate_remaining(totals, goal_targets)

    click.echo()
    click.echo(f"Targets:   {format_macros(goal_targets)}")
    click.echo(f"Eaten:     {format_macros(totals)}")
    click.echo(f"Remaining: {format_macros(remaining)}")
    click.echo()
    click.echo(f"Suggestion: {suggest_meal_focus(remaining)}")


@nutrition.command()
@click.option("--days", type=int, default=7, show_default=True)
@click.pass_context
@async_command
async def history(ctx, days: int):
    """Daily totals for recent days."""
    athlete = await load_athlete(ctx)
    log_by_day = await FoodLogRepository(get_db_path()).get_history(athlete.id, days=days)

    rows = []
    for day, entries in log_by_day.items():
        totals = calculate_totals(entries)
        rows.append([day, str(len(entries)), format_macros(totals)])
    click.echo(format_table(["Day", "Items", "Totals"], rows))


@nutrition.command()
@click.argument("day_type", type=click.Choice(_DAY_TYPES), required=False)
@click.option("--meals", is_flag=True, help="Also list sample meals")
@click.pass_context
@async_command
async def guide(ctx, day_type: str | None, meals: bool):
    """Pre/post workout guidance, or advice for your goal."""
    if day_type:
        echo_section("Before training")
        click.echo(get_pre_workout_guidelines(day_type))
        echo_section("After training")
        click.echo(get_post_workout_guidelines(day_type))
    else:
        athlete = await load_athlete(ctx)
        echo_section("Nutrition for your goal")
        click.echo(get_nutrition_summary_for_goal(athlete.goals.primary))

    if meals:
        echo_section("Sample meals")
        for key, (name, macros) in MEAL_TEMPLATES.items():
            click.echo(f"  {name} [{key}]: {format_macros(macros)}")
