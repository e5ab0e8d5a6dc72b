"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the coach data directory and database.

    Safe to run again; existing data is kept.
    """
    data_dir = get_settings().data_dir
    echo_info(f"Initializing coach in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your profile:    coach profile setup")
    click.echo("  2. Set a goal:             coach profile goal")
    click.echo("  3. See today's targets:    coach nutrition targets")
    click.echo("  4. Connect your services:  coach connect strava | coach connect hevy")
