# Command-line entry point for the pace calculator
import sys
from typing import List

import typer
from loguru import logger
from typer.core import TyperCommand

from pacecalc.config import Config
from pacecalc.io.models import Pace
from pacecalc.io.token_parser import ParseError, parse_distance, parse_duration, parse_pace
from pacecalc.metrics.compute_pace import (
    pace_per_km,
    pace_per_mile,
    project_race_times,
    seconds_per_km,
    seconds_per_mile,
    split_pace,
)
from pacecalc.report.render_text import USAGE, render_projection, render_summary

# Define Typer instance
app = typer.Typer(
    name="pace",
    help="Pace / time / distance calculator for runners",
    add_completion=False,
)


def _setup_logging(level: str) -> None:
    """Send diagnostics to stderr so they never mix with results on stdout."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{file.name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )


def display_distances(pace: Pace) -> None:
    typer.echo(render_projection(project_race_times(pace)))


def do_distance(d_raw: str, t_raw: str) -> int:
    """
    Distance mode: derive pace from a distance and a time, e.g. `pace 10k 1h`.
    Returns the process exit code.
    """
    try:
        # distance unit is reported before anything is wrong with the time
        distance = parse_distance(d_raw)
        duration = parse_duration(t_raw)
    except ParseError as e:
        logger.debug("Distance mode rejected {!r} {!r}: {}", d_raw, t_raw, e)
        typer.echo(str(e))
        return 1

    logger.debug("Parsed {} and {} minutes", distance, duration.minutes)

    result_k = pace_per_km(distance, duration)
    result_m = pace_per_mile(distance, duration)
    logger.debug("Pace {:.4f} min/km, {:.4f} min/mile", result_k, result_m)

    split_k = split_pace(seconds_per_km(distance, duration))
    split_m = split_pace(seconds_per_mile(distance, duration))
    typer.echo(render_summary(distance, duration, split_k, split_m))
    display_distances(Pace(result_k))
    return 0


def do_pace(p: str) -> int:
    """
    Pace mode: project race times from a pace, e.g. `pace 4:30k`.
    Returns the process exit code.
    """
    try:
        pace = parse_pace(p)
    except ParseError as e:
        logger.debug("Pace mode rejected {!r}: {}", p, e)
        typer.echo(str(e))
        return 1

    logger.debug("Pace {!r} is {:.4f} min/km", p, pace.minutes_per_km)
    display_distances(pace)
    return 0


def run(args: List[str]) -> int:
    """Pick the mode from the number of arguments."""
    if len(args) == 1:
        return do_pace(args[0])
    if len(args) == 2:
        return do_distance(args[0], args[1])
    typer.echo(USAGE)
    return 1


class RawArgsCommand(TyperCommand):
    """Keep the argument vector as typed; click would otherwise swallow a literal `--`."""

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawArgsCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def pace(ctx: typer.Context):
    try:
        Config.validate()
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    _setup_logging(Config.LOG_LEVEL)
    raise typer.Exit(code=run(ctx.meta.get("raw_args", [])))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
