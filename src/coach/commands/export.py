"""Export command."""

import json
from pathlib import Path

import click

from ..db import export_all, get_db_path
from .base import async_command, echo_success, ensure_initialized, load_athlete


@click.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to file")
@click.pass_context
@async_command
async def export(ctx, output: Path | None):
    """Export all your data as JSON.

    Prints to stdout unless --output is given. Credentials are not included.
    """
    ensure_initialized(ctx)
    athlete = await load_athlete(ctx)
    data = await export_all(athlete.id, get_db_path())
    text = json.dumps(data, indent=2)

    if output:
        output.write_text(text)
        echo_success(f"Exported to {output}")
    else:
        click.echo(text)
