"""CLI command for printing the day/night terminator."""

from __future__ import annotations

import csv
import json
import os
import sys
from typing import Optional, TextIO

import click

from ..constants import DEFAULT_RESOLUTION
from ..logging import get_logger
from ..terminator import Terminator
from .common import parse_time_input

logger = get_logger(__name__)


def _write_csv(result: Terminator, output: TextIO) -> None:
    writer = csv.DictWriter(output, fieldnames=["latitude", "longitude"])
    writer.writeheader()
    for point in result.points:
        writer.writerow({"latitude": round(point.lat, 6), "longitude": point.lng})
    output.flush()


def _write_text(result: Terminator, output: TextIO) -> None:
    """Write a readable listing of the terminator ring."""
    (south, west), (north, east) = result.bounds()
    output.write(
        f"Terminator at {result.time.isoformat()} "
        f"({len(result.points)} points, resolution {result.resolution}°)\n"
    )
    output.write(f"Bounds: {south:.3f}..{north:.3f} lat, {west:.1f}..{east:.1f} lng\n")
    for point in result.points:
        output.write(f"{point.lat:10.4f} {point.lng:9.3f}\n")
    output.flush()


def _write_output(result: Terminator, fmt: str, output: TextIO) -> None:
    """Write the terminator in the requested output format."""
    if fmt == "csv":
        _write_csv(result, output)
    elif fmt == "json":
        json.dump([list(point.as_tuple()) for point in result.points], output)
        output.write("\n")
    elif fmt == "geojson":
        json.dump(result.to_geojson(), output, indent=2)
        output.write("\n")
    else:
        _write_text(result, output)


@click.command()
@click.option(
    "--time",
    "time_str",
    default="now",
    help="Instant to compute for: 'now', ISO format (UTC if no offset) or Julian date.",
)
@click.option(
    "--resolution",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_RESOLUTION,
    help=f"Degrees of longitude between samples. Defaults to {DEFAULT_RESOLUTION}.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "csv", "geojson"]),
    default="text",
    help="Output format. Defaults to text.",
)
@click.option(
    "--output",
    type=click.Path(),
    help="Output file path. If omitted, results are printed to stdout.",
)
def terminator(time_str: str, resolution: float, fmt: str, output: Optional[str]) -> None:
    """Compute the day/night terminator curve."""
    try:
        time = parse_time_input(time_str)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--time") from exc

    result = Terminator.compute(time, resolution)
    logger.info(f"Computed {len(result.points)} terminator points for {time.isoformat()}")

    if output:
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output, "w", encoding="utf-8", newline="") as out_stream:
            _write_output(result, fmt, out_stream)
    else:
        _write_output(result, fmt, sys.stdout)
