"""CLI entry point for timemap."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from timemap.config.defaults import default_schedule
from timemap.core.boundaries import Granularity
from timemap.core.dates import format_date, format_instant
from timemap.core.timemap import TimeMap
from timemap.io.serialize import dump_steps_csv, dump_time_map_summary, load_schedule_file
from timemap.schedule.directives import build_time_map
from timemap.utils.exceptions import TimeMapError


def _build(config_path: Path | None) -> TimeMap:
    try:
        if config_path is None:
            schedule = default_schedule()
        else:
            schedule = load_schedule_file(config_path)
        return build_time_map(schedule)
    except TimeMapError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.version_option(package_name="timemap")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """timemap — report-step timeline builder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a JSON or YAML schedule. Uses an empty schedule if not provided.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the step table as CSV.",
)
@click.option(
    "--summary",
    "summary_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write a JSON summary.",
)
def build(
    config_path: Path | None,
    output_path: Path | None,
    summary_path: Path | None,
) -> None:
    """Build the report-step timeline of a schedule."""
    time_map = _build(config_path)

    click.echo(f"Start: {format_instant(time_map.instant_at(0))}")
    click.echo(f"Steps: {time_map.num_steps()}")
    click.echo(f"Total: {time_map.total_duration() / 86400:.2f} days")
    for step in range(1, time_map.length()):
        click.echo(f"  {step:>4}  {format_instant(time_map.instant_at(step))}")

    if output_path is not None:
        output_path.write_text(dump_steps_csv(time_map))
        click.echo(f"\nSteps written to {output_path}")
    if summary_path is not None:
        summary_path.write_text(dump_time_map_summary(time_map))
        click.echo(f"Summary written to {summary_path}")


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to a JSON or YAML schedule.",
)
@click.option(
    "--granularity",
    type=click.Choice(["month", "year"]),
    default="month",
    show_default=True,
)
@click.option("--anchor", default=0, type=int, show_default=True, help="Step to count from.")
@click.option(
    "--frequency", default=1, type=int, show_default=True, help="Flag every N-th boundary."
)
def boundaries(config_path: Path, granularity: Granularity, anchor: int, frequency: int) -> None:
    """List the month/year boundary steps flagged at a frequency."""
    time_map = _build(config_path)
    steps = time_map.periodic_boundaries(granularity, anchor, frequency)

    click.echo(f"{granularity.capitalize()} boundaries (anchor={anchor}, frequency={frequency}):")
    if not steps:
        click.echo("  none")
    for step in steps:
        click.echo(f"  {step:>4}  {format_date(time_map.instant_at(step))}")


if __name__ == "__main__":
    cli()
