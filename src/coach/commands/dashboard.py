"""Dashboard command."""

import click

from ..dashboard import build_dashboard
from ..db import get_db_path
from ..models.nutrition import MacroTargets, MacroTotals
from ..services.nutrition import format_macros
from .base import async_command, echo_section, ensure_initialized, load_athlete


@click.command()
@click.pass_context
@async_command
async def dashboard(ctx):
    """Overview of your goal, today's nutrition and body composition."""
    ensure_initialized(ctx)
    athlete = await load_athlete(ctx)
    data = await build_dashboard(athlete, get_db_path())

    click.echo("=" * 60)
    click.echo(f"DASHBOARD - {data['date']}")
    click.echo("=" * 60)
    click.echo(f"Athlete: {athlete.name} ({athlete.weight_kg} kg)")

    goal = data["goal"]
    echo_section(f"Goal: {goal['description']}")
    if "days_to_race" in goal:
        click.echo(f"Race in {goal['days_to_race']} days ({goal['total_weeks']}-week plan)")
        week = goal["current_week"]
        if week:
            click.echo(f"Week {week['week_number']} - {week['phase'].upper()}")
            click.echo(f"  Volume:   {week['planned_distance_km']} km")
            click.echo(f"  Long run: {week['long_run_km']} km")
            click.echo(f"  Strength: {week['strength_focus']}")
    strength = goal["strength"]
    click.echo(f"Strength: {strength['focus']}, {strength['sessions_per_week']}x/week")

    nutrition = data["nutrition"]
    echo_section("Nutrition today")
    click.echo(f"Targets:   {format_macros(MacroTargets(**nutrition['targets']))}")
    click.echo(f"Eaten:     {format_macros(MacroTotals(**nutrition['consumed']))}")
    click.echo(f"Suggestion: {nutrition['suggestion']}")

    body = data["body_composition"]
    if body:
        echo_section("Body composition")
        click.echo(
            f"Lean mass: {body['lean_mass_kg']:.1f} kg | Body fat: {body['body_fat_percentage']}%"
        )

    training = data["training"]
    echo_section("Training")
    click.echo(f"Running volume: {training['weekly_distance_km']} km/week (last 4 weeks)")
    if training["last_workout"]:
        click.echo(f"Last workout: {training['last_workout']['title']}")
