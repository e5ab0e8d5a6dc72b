"""Athlete profile commands."""

from datetime import datetime

import click

from ..db import AthleteRepository, BodyCompositionRepository, get_db_path
from ..errors import ValidationError
from ..models.athlete import (
    ActivityLevel,
    Athlete,
    BodyCompositionEntry,
    Sex,
    calculate_protein_target,
)
from ..models.goals import (
    BodyCompFocus,
    FitnessLevel,
    Goal,
    GoalType,
    RaceDistance,
    StrengthFocus,
    describe_goal,
    goal_from_dict,
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
from .prompts import collect_goal, collect_profile


@click.group()
@click.pass_context
def profile(ctx):
    """View and edit your athlete profile."""
    ensure_initialized(ctx)


@profile.command()
@click.option("--name", help="Your name")
@click.option("--weight", type=float, help="Weight in kg")
@click.option("--height", type=float, help="Height in cm")
@click.option("--age", type=int, help="Age in years")
@click.option("--sex", type=click.Choice([s.value for s in Sex]))
@click.option(
    "--activity",
    type=click.Choice([a.value for a in ActivityLevel]),
    default=ActivityLevel.HIGH.value,
    show_default=True,
)
@click.option("--resting-hr", type=int, help="Resting heart rate (bpm)")
@click.option("--max-hr", type=int, help="Max heart rate (bpm); defaults to 220 - age")
@click.pass_context
@async_command
async def setup(ctx, name, weight, height, age, sex, activity, resting_hr, max_hr):
    """Create or update your profile.

    Runs an interactive questionnaire unless weight, height, age and sex
    are all given as options.
    """
    repo = AthleteRepository(get_db_path())
    existing = await repo.get_latest()

    if None in (weight, height, age, sex):
        athlete = await collect_profile(existing)
    else:
        athlete = Athlete(
            name=name or (existing.name if existing else "Athlete"),
            weight_kg=weight,
            height_cm=height,
            age=age,
            sex=Sex(sex),
            activity_level=ActivityLevel(activity),
            resting_heart_rate=resting_hr,
            max_heart_rate=max_hr,
        )
        if existing:
            athlete.id = existing.id
            athlete.goals = existing.goals
            athlete.body_fat_percentage = existing.body_fat_percentage

    if athlete.id is not None:
        await repo.update(athlete)
        echo_success(f"Profile updated for {athlete.name}")
    else:
        athlete.id = await repo.create(athlete)
        echo_success(f"Profile created for {athlete.name}")
        echo_info("Set your goal next with 'coach profile goal'")


@profile.command()
@click.pass_context
@async_command
async def show(ctx):
    """Show your profile."""
    athlete = await load_athlete(ctx)

    echo_section("Your Profile")
    click.echo(athlete.get_summary())
    protein = calculate_protein_target(athlete.weight_kg, "high")
    click.echo(f"Recommended protein: {protein} g/day")


@profile.command()
@click.argument("weight_kg", type=float)
@click.pass_context
@async_command
async def weight(ctx, weight_kg: float):
    """Record a new body weight (kg)."""
    athlete = await load_athlete(ctx)
    await AthleteRepository(get_db_path()).update_weight(athlete.id, weight_kg)
    echo_success(f"Weight updated to {weight_kg} kg")


def build_goal(
    goal_type: str,
    distance: str | None = None,
    custom_km: float | None = None,
    race_date: datetime | None = None,
    target_time: str | None = None,
    level: str | None = None,
    focus: str | None = None,
) -> Goal:
    """Build a goal from command-line options."""
    data: dict = {"type": goal_type}
    if goal_type == GoalType.ENDURANCE.value:
        data.update(
            distance=(
                None if custom_km is not None else (distance or RaceDistance.HALF_MARATHON.value)
            ),
            custom_distance=custom_km,
            target_date=race_date.date().isoformat() if race_date else None,
            target_time=target_time,
            level=level,
        )
    elif focus:
        data["focus"] = focus
    return goal_from_dict(data)


_FOCUS_CHOICES = sorted({f.value for f in StrengthFocus} | {f.value for f in BodyCompFocus})


@profile.command()
@click.option("--type", "goal_type", type=click.Choice([t.value for t in GoalType]))
@click.option("--distance", type=click.Choice([d.value for d in RaceDistance]))
@click.option("--custom-km", type=float, help="Custom race distance in km")
@click.option("--date", "race_date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--time", "target_time", help="Target finish time, e.g. 1:45:00")
@click.option("--level", type=click.Choice([lvl.value for lvl in FitnessLevel]))
@click.option("--focus", type=click.Choice(_FOCUS_CHOICES))
@click.option("--secondary", is_flag=True, help="Set the secondary goal instead")
@click.pass_context
@async_command
async def goal(ctx, goal_type, distance, custom_km, race_date, target_time, level, focus, secondary):
    """Set your primary (or secondary) goal.

    Interactive unless --type is given.

    Examples:

        coach profile goal --type endurance --distance 21K --date 2025-10-12 --time 1:45:00

        coach profile goal --type body_composition --focus fat_loss
    """
    athlete = await load_athlete(ctx)

    if goal_type:
        new_goal = build_goal(goal_type, distance, custom_km, race_date, target_time, level, focus)
    else:
        new_goal = await collect_goal()

    repo = AthleteRepository(get_db_path())
    if secondary:
        await repo.set_secondary_goal(athlete.id, new_goal)
    else:
        await repo.set_primary_goal(athlete.id, new_goal)

    label = "Secondary" if secondary else "Primary"
    echo_success(f"{label} goal set: {describe_goal(new_goal)}")


@profile.command(name="body-comp")
@click.argument("weight_kg", type=float, required=False)
@click.argument("body_fat", type=float, required=False)
@click.option("--history", is_flag=True, help="Show recent measurements instead")
@click.pass_context
@async_command
async def body_comp(ctx, weight_kg: float | None, body_fat: float | None, history: bool):
    """Log a body composition measurement (weight kg, body fat %)."""
    athlete = await load_athlete(ctx)
    repo = BodyCompositionRepository(get_db_path())

    if history:
        entries = await repo.list_recent(athlete.id, limit=10)
        if not entries:
            echo_info("No measurements yet")
            return
        rows = [
            [
                e.recorded_at.strftime("%Y-%m-%d"),
                f"{e.weight_kg:.1f}",
                f"{e.body_fat_percentage:.1f}",
                f"{e.lean_mass_kg:.1f}",
                f"{e.fat_mass_kg:.1f}",
            ]
            for e in entries
        ]
        click.echo(format_table(["Date", "Weight", "BF %", "Lean kg", "Fat kg"], rows))
        return

    if weight_kg is None or body_fat is None:
        raise ValidationError("Give both WEIGHT_KG and BODY_FAT (or use --history)")

    entry = BodyCompositionEntry.from_measurement(weight_kg, body_fat)
    await repo.add(athlete.id, entry)
    echo_success("Measurement recorded")
    click.echo(f"  Lean mass: {entry.lean_mass_kg:.1f} kg")
    click.echo(f"  Fat mass:  {entry.fat_mass_kg:.1f} kg")


@profile.command(name="hr-zones")
@click.pass_context
@async_command
async def hr_zones(ctx):
    """Show your heart rate training zones."""
    athlete = await load_athlete(ctx)

    echo_section("Heart Rate Zones")
    estimated = "" if athlete.max_heart_rate else " (estimated as 220 - age)"
    click.echo(f"Max HR: {athlete.effective_max_heart_rate} bpm{estimated}")
    click.echo()
    rows = [
        [zone.name.upper(), zone.label, f"{zone.min_bpm}-{zone.max_bpm} bpm"]
        for zone in athlete.heart_rate_zones().values()
    ]
    click.echo(format_table(["Zone", "Name", "Range"], rows))
