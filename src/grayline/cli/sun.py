"""CLI command for the solar quantities behind the terminator."""

import json

import click

from ..ephemeris.solar import EphemerisState
from ..space_time.julian import julian_from_datetime
from ..space_time.sidereal import gmst_degrees_from_julian
from ..terminator import subsolar_point
from .common import parse_time_input


@click.command()
@click.option(
    "--time",
    "time_str",
    default="now",
    help="Instant to compute for: 'now', ISO format (UTC if no offset) or Julian date.",
)
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
def sun(time_str: str, as_json: bool) -> None:
    """Show the sun's ephemeris state and subsolar point."""
    try:
        time = parse_time_input(time_str)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--time") from exc

    jd = julian_from_datetime(time)
    state = EphemerisState.from_julian(jd)
    gmst = gmst_degrees_from_julian(jd)
    point = subsolar_point(jd)

    if as_json:
        data = {
            "time": time.isoformat(),
            "julian_date": jd,
            "gmst": gmst,
            "subsolar_point": {"lat": point.lat, "lng": point.lng},
        }
        data.update(state.to_dict())
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Time:               {time.isoformat()}")
    click.echo(f"Julian date:        {jd:.6f}")
    click.echo(f"GMST:               {gmst:.4f}°")
    click.echo(f"Ecliptic longitude: {state.ecliptic_longitude:.4f}°")
    click.echo(f"Obliquity:          {state.obliquity:.4f}°")
    click.echo(f"Declination:        {state.declination:.4f}°")
    click.echo(f"Equation of time:   {state.equation_of_time * 60:.2f} min")
    click.echo(f"Subsolar point:     {point.lat:.3f}, {point.lng:.3f}")
