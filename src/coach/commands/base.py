"""Shared CLI utilities."""

import asyncio
import logging
from functools import wraps

import click

from ..db import AthleteRepository, get_db_path
from ..errors import ClientError, CoachError
from ..models.athlete import Athlete

logger = logging.getLogger(__name__)


def async_command(f):
    """Decorator to run async Click commands.

    CoachError is reported with echo_error and exits with status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except CoachError as e:
            logger.debug("Command failed", exc_info=True)
            echo_error(str(e))
            if isinstance(e, ClientError) and e.retryable:
                echo_info("This looks temporary. Try again in a few minutes.")
            raise click.exceptions.Exit(1) from e

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        echo_error("Coach not initialized. Run 'coach init' first.")
        ctx.exit(1)


async def load_athlete(ctx: click.Context) -> Athlete:
    """Load the current athlete, or exit if no profile exists yet."""
    athlete = await AthleteRepository(get_db_path()).get_latest()
    if athlete is None:
        echo_error("No athlete profile found. Run 'coach profile setup' first.")
        ctx.exit(1)
    return athlete


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_section(title: str) -> None:
    click.echo()
    click.echo(title)
    click.echo("-" * max(len(title), 40))


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format rows as a left-aligned text table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    def render(cells) -> str:
        return "".join(str(c).ljust(widths[i] + padding) for i, c in enumerate(cells)).rstrip()

    lines = [render(headers), render("-" * w for w in widths)]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)
