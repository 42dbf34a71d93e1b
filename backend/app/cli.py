"""
CLI interface for the triathlon normalizer.

Usage:
    tri-normalize standards --units imperial
    tri-normalize normalize --tier 70.3 --swim 33:00 --bike 1:16:30 --bike-distance 45 --run 1:28:00
    tri-normalize normalize --file race.yaml --json
"""

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from app.config import settings
from app.shared.constants import (
    Discipline,
    Tier,
    UnitSystem,
    DISTANCE_UNITS,
    SWIM_PACE_UNITS,
)
from app.shared.errors import NormalizerError
from app.shared.formatters import format_distance, format_percent, format_speed_with_unit
from app.features.triathlon import NormalizedResult, RaceForm, list_standards, load_race_file


logger = logging.getLogger(__name__)

TIER_CHOICES = [t.value for t in Tier]
UNIT_CHOICES = [u.value for u in UnitSystem]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Normalize triathlon race times to standard distances."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@cli.command()
@click.option(
    "--units",
    default=None,
    type=click.Choice(UNIT_CHOICES),
    help="Unit system (default from settings)"
)
def standards(units):
    """List Olympic, 70.3 and Full distances."""
    unit_system = UnitSystem(units or settings.default_unit_system)
    for s in list_standards(unit_system):
        click.echo(
            f"{s.tier.value:<8} {s.name:<14} "
            f"swim {format_distance(s.swim, unit_system):<9} "
            f"bike {format_distance(s.bike, unit_system):<9} "
            f"run {format_distance(s.run, unit_system)}"
        )


@cli.command("normalize")
@click.option("--file", "race_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="YAML race file (options below override it)")
@click.option("--tier", default=None, type=click.Choice(TIER_CHOICES), help="Target standard")
@click.option("--units", default=None, type=click.Choice(UNIT_CHOICES), help="Unit system")
@click.option("--swim", "swim_time", default=None, help="Swim time (mm:ss or hh:mm:ss)")
@click.option("--swim-distance", default=None, type=float, help="Recorded swim distance")
@click.option("--t1", "t1_time", default=None, help="T1 time (blank: 2:00)")
@click.option("--bike", "bike_time", default=None, help="Bike time")
@click.option("--bike-distance", default=None, type=float, help="Recorded bike distance")
@click.option("--t2", "t2_time", default=None, help="T2 time (blank: 2:00)")
@click.option("--run", "run_time", default=None, help="Run time")
@click.option("--run-distance", default=None, type=float, help="Recorded run distance")
@click.option("--name", "athlete_name", default=None, help="Athlete name")
@click.option("--age", default=None, type=int, help="Athlete age")
@click.option("--race-name", default=None, help="Race name")
@click.option("--bike-power", default=None, type=float, help="Average bike power (W)")
@click.option("--bike-elevation", default=None, type=float, help="Bike elevation gain (m)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def normalize_command(race_file, tier, units, as_json, **fields):
    """
    Normalize a race to a standard distance.

    Distances not given on the command line or in the file default to
    the target standard's distances.
    """
    try:
        data = load_race_file(race_file) if race_file else None
        file_tier = data.tier if data else None
        file_units = data.unit_system if data else None

        form = RaceForm(tier=tier or file_tier, unit_system=units or file_units)
        if data:
            form.update(**data.fields)
        form.update(**{k: v for k, v in fields.items() if v is not None})

        if not form.is_ready():
            missing = [d.value for d in Discipline if not str(form.fields[f"{d.value}_time"]).strip()]
            raise click.UsageError(f"Missing time for: {', '.join(missing)}")

        result = form.recompute()
    except NormalizerError as e:
        logger.debug(f"Normalization failed: {e.kind} ({e.field})")
        raise click.UsageError(e.message)
    except yaml.YAMLError as e:
        raise click.UsageError(f"Invalid race file: {e}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_result(result)


def _print_result(result: NormalizedResult) -> None:
    """Render a result as a console table."""
    unit_system = result.standard.unit_system
    unit = DISTANCE_UNITS[unit_system]
    meta = result.metadata

    header = f"{result.standard.name} ({unit_system.value})"
    if meta.race_name:
        header = f"{meta.race_name} - {header}"
    if meta.athlete_name:
        header = f"{meta.athlete_name}: {header}"
    click.echo(header)

    click.echo(
        f"  Swim  {format_distance(result.swim.distance, unit_system):<9} "
        f"{result.swim.time:>8}  pace {result.swim.pace}{SWIM_PACE_UNITS[unit_system]}"
    )
    click.echo(f"  T1    {'':<9} {result.t1.time:>8}")
    click.echo(
        f"  Bike  {format_distance(result.bike.distance, unit_system):<9} "
        f"{result.bike.time:>8}  {format_speed_with_unit(result.bike.speed, unit_system)}"
    )
    click.echo(f"  T2    {'':<9} {result.t2.time:>8}")
    click.echo(
        f"  Run   {format_distance(result.run.distance, unit_system):<9} "
        f"{result.run.time:>8}  pace {result.run.pace}/{unit}"
    )
    click.echo(f"  Total {'':<9} {result.total:>8}  (actual {result.actual_total}, difference {result.time_saved})")

    timeline = result.timeline
    click.echo(
        "  Timeline: "
        f"swim {format_percent(timeline.swim_percent)} | "
        f"T1 {format_percent(timeline.t1_percent)} | "
        f"bike {format_percent(timeline.bike_percent)} | "
        f"T2 {format_percent(timeline.t2_percent)} | "
        f"run {format_percent(timeline.run_percent)}"
    )


if __name__ == "__main__":
    cli()
