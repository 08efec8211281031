"""Sample the day/night terminator as a closed lat/lng ring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from ..constants import DEFAULT_RESOLUTION
from ..ephemeris.solar import EphemerisState
from ..logging import get_logger
from ..space_time.julian import julian_from_datetime
from ..space_time.pythonic_datetimes import ensure_utc, utc_now, wrap_longitude
from ..space_time.sidereal import gmst_degrees_from_julian

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeoPoint:
    """A geographic position in degrees."""

    lat: float
    lng: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)


def hour_angle(gmst: float, state: EphemerisState) -> float:
    """Greenwich hour angle of the sun used to place the terminator.

    The equation of time (hours) is added to a degree quantity without
    conversion; the sampled curve depends on that exact arithmetic.
    """
    correction = 0.0053 * math.sin(math.radians(state.true_anomaly)) - 0.0069 * math.sin(
        2 * math.radians(state.apparent_longitude)
    )
    apparent_sidereal_time = gmst + state.equation_of_time - correction
    return apparent_sidereal_time - state.apparent_longitude


def terminator_latitude(lon: float, declination: float) -> float:
    """Latitude of the terminator at hour-angle longitude ``lon``.

    At zero declination the quotient becomes a signed infinity and the
    latitude saturates at +/-90.
    """
    numerator = -math.cos(math.radians(lon))
    denominator = math.tan(math.radians(declination))
    if denominator == 0.0:
        if numerator == 0.0:
            return 0.0
        return math.copysign(90.0, numerator) * math.copysign(1.0, denominator)
    return math.degrees(math.atan(numerator / denominator))


def subsolar_point(julian_date: float) -> GeoPoint:
    """The point on Earth directly beneath the sun."""
    state = EphemerisState.from_julian(julian_date)
    H = hour_angle(gmst_degrees_from_julian(julian_date), state)
    return GeoPoint(state.declination, wrap_longitude(-H))


def compute_curve(time: datetime, resolution: float = DEFAULT_RESOLUTION) -> List[GeoPoint]:
    """Compute the terminator ring for ``time``.

    Samples run from -180 to 180 (inclusive) in ``resolution`` steps; when the
    step does not divide 360 the last sample stops short of 180. Two pole
    points, north when the declination is positive and south otherwise,
    close the ring, and the result is sorted by longitude.

    Args:
        time: Timezone-aware instant
        resolution: Degrees of longitude between samples

    Returns:
        List of GeoPoint sorted by longitude

    Raises:
        ValueError: If resolution is not positive
    """
    if resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")

    jd = julian_from_datetime(time)
    gmst = gmst_degrees_from_julian(jd)
    state = EphemerisState.from_julian(jd)
    H = hour_angle(gmst, state)
    logger.debug(
        f"jd={jd:.6f} gmst={gmst:.6f} declination={state.declination:.6f} hour_angle={H:.6f}"
    )

    # Index the grid so longitudes stay exact multiples of the step
    steps = math.floor(360 / resolution + 1e-9)
    points: List[GeoPoint] = []
    for k in range(steps + 1):
        i = -180.0 + k * resolution
        lon = wrap_longitude(i + H)
        points.append(GeoPoint(terminator_latitude(lon, state.declination), i))

    pole = 90.0 if state.declination > 0 else -90.0
    points.append(GeoPoint(pole, 180.0))
    points.append(GeoPoint(pole, -180.0))

    return sorted(points, key=lambda point: point.lng)


def compute_terminator(
    time: Optional[datetime] = None, resolution: float = DEFAULT_RESOLUTION
) -> List[Tuple[float, float]]:
    """Compute the terminator as ``(latitude, longitude)`` pairs.

    Args:
        time: Instant to compute for. Defaults to now, read once per call.
        resolution: Degrees of longitude between samples

    Returns:
        List of (lat, lng) tuples sorted by longitude
    """
    if time is None:
        time = utc_now()
    return [point.as_tuple() for point in compute_curve(time, resolution)]


@dataclass(frozen=True)
class Terminator:
    """A terminator ring computed for one instant."""

    time: datetime
    points: List[GeoPoint] = field(compare=False)
    resolution: float = DEFAULT_RESOLUTION

    @classmethod
    def compute(
        cls, time: Optional[datetime] = None, resolution: float = DEFAULT_RESOLUTION
    ) -> Terminator:
        time = ensure_utc(time) if time is not None else utc_now()
        return cls(time=time, resolution=resolution, points=compute_curve(time, resolution))

    def set_time(self, time: datetime) -> Terminator:
        """Return a new terminator recomputed for ``time``."""
        return Terminator.compute(time, self.resolution)

    def bounds(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """``((south, west), (north, east))`` of the ring."""
        lats = [point.lat for point in self.points]
        lngs = [point.lng for point in self.points]
        return (min(lats), min(lngs)), (max(lats), max(lngs))

    def to_geojson(self) -> Dict[str, Any]:
        """GeoJSON Feature holding the ring as a closed Polygon."""
        ring = [[point.lng, point.lat] for point in self.points]
        if ring and ring[0] != ring[-1]:
            ring.append(list(ring[0]))
        return {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [ring]},
            "properties": {
                "time": self.time.isoformat(),
                "resolution": self.resolution,
            },
        }
