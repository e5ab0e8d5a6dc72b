"""CLI entry point for coach."""

import logging

import click

from . import __version__
from .commands import (
    connect,
    dashboard,
    export,
    init,
    nutrition,
    plan,
    profile,
    serve,
    strength,
    sync,
)
from .config import get_settings


@click.group()
@click.version_option(version=__version__, prog_name="coach")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """coach: endurance, strength and nutrition planning.

    Example usage:

        # Initialize and create your profile
        coach init
        coach profile setup

        # Set a race goal and look at the plan
        coach profile goal --type endurance --distance 21K --date 2025-10-12
        coach plan show

        # Today's macros
        coach nutrition targets --day-type long_run
    """
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(plan)
main.add_command(strength)
main.add_command(nutrition)
main.add_command(connect)
main.add_command(sync)
main.add_command(dashboard)
main.add_command(export)
main.add_command(serve)


if __name__ == "__main__":
    main()
