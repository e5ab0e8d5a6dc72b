"""Strava and Hevy connection and sync commands."""

import logging

import click

from ..clients.base import OAuthTokens, calculate_workout_stats
from ..clients.hevy import HevyClient
from ..clients.strava import StravaClient, authorization_url
from ..config import get_settings
from ..db import ActivityRepository, IntegrationRepository, get_db_path
from ..errors import NotConnectedError
from ..utils.formatting import format_distance, format_duration
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    load_athlete,
)
from .prompts import ask_secret, ask_text

logger = logging.getLogger(__name__)

STRAVA = "strava"
HEVY = "hevy"


@click.group()
@click.pass_context
def connect(ctx):
    """Connect Strava or Hevy."""
    ensure_initialized(ctx)


@connect.command(name="strava")
@click.option("--code", help="Authorization code from the redirect URL")
@click.pass_context
@async_command
async def connect_strava(ctx, code: str | None):
    """Authorize access to your Strava activities."""
    athlete = await load_athlete(ctx)
    settings = get_settings()

    async with StravaClient() as client:
        client.require_client_credentials()
        if not code:
            click.echo("Open this URL, approve access, then copy the 'code' parameter")
            click.echo("from the page you are redirected to:")
            click.echo()
            click.echo(f"  {authorization_url(settings.strava_client_id)}")
            click.echo()
            code = await ask_text("Authorization code:")

        tokens = await client.exchange_code(code.strip())

    await IntegrationRepository(get_db_path()).save_tokens(athlete.id, STRAVA, tokens)
    echo_success(f"Strava connected (athlete {tokens.athlete_id})")
    echo_info("Import your activities with 'coach sync strava'")


@connect.command(name="hevy")
@click.option("--api-key", help="Hevy API key (Settings > Developer in the Hevy app)")
@click.pass_context
@async_command
async def connect_hevy(ctx, api_key: str | None):
    """Store and verify your Hevy API key."""
    athlete = await load_athlete(ctx)
    api_key = api_key or await ask_secret("Hevy API key:")

    async with HevyClient(api_key.strip()) as client:
        await client.verify()

    await IntegrationRepository(get_db_path()).save_api_key(athlete.id, HEVY, api_key.strip())
    echo_success("Hevy connected")
    echo_info("Import your workouts with 'coach sync hevy'")


@click.group()
@click.pass_context
def sync(ctx):
    """Import activities and workouts."""
    ensure_initialized(ctx)


@sync.command(name="strava")
@click.option("--pages", type=int, default=3, show_default=True, help="Pages of 100 activities")
@click.pass_context
@async_command
async def sync_strava(ctx, pages: int):
    """Import recent Strava activities."""
    athlete = await load_athlete(ctx)
    integrations = IntegrationRepository(get_db_path())
    tokens = await integrations.get_tokens(athlete.id, STRAVA)
    if tokens is None:
        raise NotConnectedError("Strava is not connected. Run 'coach connect strava' first.")

    async def persist(new_tokens: OAuthTokens) -> None:
        await integrations.save_tokens(athlete.id, STRAVA, new_tokens)

    activity_repo = ActivityRepository(get_db_path())
    fetched = new = 0
    async with StravaClient(tokens, on_token_refresh=persist) as client:
        async for activity in client.iter_activities(max_pages=pages):
            fetched += 1
            created = await activity_repo.upsert(
                source=STRAVA,
                external_id=activity.id,
                data_type="activity",
                data=activity.to_dict(),
                recorded_at=activity.start_time,
                distance_km=activity.distance_km,
                athlete_id=athlete.id,
            )
            new += created

    logger.info("Strava sync: %d fetched, %d new", fetched, new)
    echo_success(f"Synced {fetched} activities from Strava ({new} new)")

    weekly = await activity_repo.weekly_distance_km(STRAVA)
    click.echo(f"Average running volume (last 4 weeks): {weekly:.1f} km/week")


@sync.command(name="hevy")
@click.option("--pages", type=int, default=5, show_default=True, help="Pages of 10 workouts")
@click.pass_context
@async_command
async def sync_hevy(ctx, pages: int):
    """Import recent Hevy workouts."""
    athlete = await load_athlete(ctx)
    api_key = await IntegrationRepository(get_db_path()).get_api_key(athlete.id, HEVY)
    if not api_key:
        raise NotConnectedError("Hevy is not connected. Run 'coach connect hevy' first.")

    activity_repo = ActivityRepository(get_db_path())
    workouts = []
    new = 0
    async with HevyClient(api_key) as client:
        async for workout in client.iter_workouts(max_pages=pages):
            workouts.append(workout)
            new += await activity_repo.upsert(
                source=HEVY,
                external_id=workout.id,
                data_type="workout",
                data=workout.to_dict(),
                recorded_at=workout.start_time,
                athlete_id=athlete.id,
            )

    logger.info("Hevy sync: %d fetched, %d new", len(workouts), new)
    echo_success(f"Synced {len(workouts)} workouts from Hevy ({new} new)")

    if workouts:
        rows = []
        for workout in workouts[:5]:
            stats = calculate_workout_stats(workout)
            rows.append([
                workout.start_time.strftime("%Y-%m-%d"),
                workout.title,
                str(stats.total_sets),
                f"{stats.total_volume_kg} kg",
                format_duration(stats.duration_minutes * 60),
            ])
        click.echo()
        click.echo(format_table(["Date", "Workout", "Sets", "Volume", "Time"], rows))


@sync.command(name="recent")
@click.option("--limit", type=int, default=10, show_default=True)
@click.pass_context
@async_command
async def recent(ctx, limit: int):
    """Show recently synced Strava activities."""
    records = await ActivityRepository(get_db_path()).get_by_source(
        STRAVA, data_type="activity", limit=limit
    )
    if not records:
        echo_info("No activities synced yet")
        return

    rows = [
        [
            r["start_time"][:10],
            r["name"],
            r["sport_type"],
            format_distance(r["distance_m"]),
            format_duration(r["moving_time_s"]),
        ]
        for r in records
    ]
    click.echo(format_table(["Date", "Name", "Type", "Distance", "Time"], rows))
