"""Web server command."""

import click
import uvicorn

from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the JSON API server.

    Examples:

        coach serve

        coach serve --port 3000 --reload
    """
    ensure_initialized(ctx)

    from ..web import create_app

    click.echo(click.style("Starting coach API...", fg="green"))
    click.echo(f"  http://{host}:{port}  (docs at /docs)")
    click.echo("Press Ctrl+C to stop the server.")

    uvicorn.run(
        "coach.web:create_app" if reload else create_app(),
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
