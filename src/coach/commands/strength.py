"""Strength routine commands."""

import click

from ..models.goals import StrengthFocus
from ..models.plan import PhaseName
from ..services.strength import (
    format_routine,
    get_routines_for_focus,
    get_strength_recommendation,
    get_strength_week,
)
from .base import async_command, echo_info, echo_section, ensure_initialized, load_athlete


@click.group()
def strength():
    """Strength routines by training phase or focus."""


@strength.command()
@click.argument("phase", type=click.Choice([p.value for p in PhaseName]))
def routines(phase: str):
    """Routines for a training phase (base, build, peak, taper)."""
    week = get_strength_week(phase)

    echo_section(f"Strength - {phase.upper()} phase")
    click.echo(f"Recommended sessions: {week.sessions}/week")
    click.echo(f"Note: {week.notes}")
    for routine in week.routines:
        click.echo()
        click.echo(format_routine(routine))


@strength.command()
@click.argument("focus", type=click.Choice([f.value for f in StrengthFocus]))
def focus(focus: str):
    """Routines for a strength focus (hypertrophy, power, ...)."""
    found = get_routines_for_focus(focus)
    if not found:
        echo_info(f"No routines for {focus}")
        return

    echo_section(f"Strength - {focus}")
    for routine in found:
        click.echo(format_routine(routine))
        click.echo()


@strength.command()
@click.pass_context
@async_command
async def recommend(ctx):
    """Strength recommendation for your primary goal."""
    ensure_initialized(ctx)
    athlete = await load_athlete(ctx)
    recommendation = get_strength_recommendation(athlete.goals.primary)

    echo_section("Strength Recommendation")
    click.echo(f"Focus:    {recommendation.focus}")
    click.echo(f"Sessions: {recommendation.sessions_per_week}/week")
    click.echo(f"Notes:    {recommendation.notes}")

    suggested = get_routines_for_focus(recommendation.focus)
    if suggested:
        click.echo()
        click.echo("Suggested routines:")
        for routine in suggested:
            click.echo()
            click.echo(format_routine(routine))
