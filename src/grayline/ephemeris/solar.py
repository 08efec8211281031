"""Low-precision solar ephemeris.

Every quantity here is a pure function of ``T``, Julian centuries since
J2000.0 (see :func:`grayline.space_time.julian.centuries_since_j2000`).
Angles are in degrees; each trigonometric call converts to radians at the
call site. Formulas follow the USNO "approximate solar coordinates" series.
"""

import math
from dataclasses import dataclass

from ..constants import DEGREES_PER_HOUR
from ..space_time.julian import centuries_since_j2000


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def mean_longitude(T: float) -> float:
    """Geometric mean longitude of the sun, in [0, 360)."""
    return (280.46646 + T * (36000.76983 + T * 0.0003032)) % 360


def mean_anomaly(T: float) -> float:
    """Mean anomaly of the sun. Not range-reduced."""
    return 357.52911 + T * (35999.05029 - T * 0.0001537)


def equation_of_center(T: float) -> float:
    M = mean_anomaly(T)
    return (
        (1.914602 - T * (0.004817 + T * 0.000014)) * _sin(M)
        + (0.019993 - T * 0.000101) * _sin(2 * M)
        + 0.000289 * _sin(3 * M)
    )


def ecliptic_longitude(T: float) -> float:
    """Apparent ecliptic longitude of the sun.

    True longitude (mean longitude plus equation of center) corrected for
    nutation and aberration.
    """
    true_longitude = mean_longitude(T) + equation_of_center(T)
    return true_longitude - 0.00569 - 0.00478 * _sin(125.04 - 1934.136 * T)


def apparent_longitude(ecliptic_lon: float, ecliptic_lat: float, obliquity: float) -> float:
    """Longitude used to form the hour angle.

    Returns ``ecliptic_lon`` unchanged. Aberration and nutation are already
    folded into :func:`ecliptic_longitude`, and no right-ascension conversion
    is applied here, so hour angles carry up to ~2.5 degrees of error.
    """
    return ecliptic_lon


def eccentricity(T: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - T * (0.000042037 + T * 0.0000001267)


def mean_obliquity(T: float) -> float:
    """Mean obliquity of the ecliptic, in degrees."""
    seconds = 21.448 - T * (46.8150 + T * (0.00059 - T * 0.001813))
    return 23 + (26 + (seconds / 60)) / 60


def equation_of_time(T: float, ecc: float, obliquity: float) -> float:
    """Equation of time in hours (apparent minus mean solar time)."""
    L0 = math.radians(mean_longitude(T))
    M = math.radians(mean_anomaly(T))

    y = math.tan(math.radians(obliquity / 2))
    y *= y

    etime = (
        y * math.sin(2 * L0)
        - 2 * ecc * math.sin(M)
        + 4 * ecc * y * math.sin(M) * math.cos(2 * L0)
        - 0.5 * y * y * math.sin(4 * L0)
        - 1.25 * ecc * ecc * math.sin(2 * M)
    )
    return math.degrees(etime) / DEGREES_PER_HOUR


def true_anomaly(T: float) -> float:
    return mean_anomaly(T) + equation_of_center(T)


def declination(ecliptic_lon: float, obliquity: float) -> float:
    """Declination of the sun in degrees, taking ecliptic latitude as zero."""
    return math.degrees(math.asin(_sin(obliquity) * _sin(ecliptic_lon)))


@dataclass(frozen=True)
class EphemerisState:
    """Solar quantities for a single instant. Degrees unless noted."""

    centuries: float
    mean_longitude: float
    ecliptic_longitude: float
    apparent_longitude: float
    eccentricity: float
    obliquity: float
    equation_of_time: float  # hours
    true_anomaly: float
    declination: float

    @classmethod
    def from_centuries(cls, T: float) -> "EphemerisState":
        ecliptic_lon = ecliptic_longitude(T)
        ecc = eccentricity(T)
        obliquity = mean_obliquity(T)
        # The sun's ecliptic latitude never exceeds ~1.2 arcseconds
        ecliptic_lat = 0.0
        return cls(
            centuries=T,
            mean_longitude=mean_longitude(T),
            ecliptic_longitude=ecliptic_lon,
            apparent_longitude=apparent_longitude(ecliptic_lon, ecliptic_lat, obliquity),
            eccentricity=ecc,
            obliquity=obliquity,
            equation_of_time=equation_of_time(T, ecc, obliquity),
            true_anomaly=true_anomaly(T),
            declination=declination(ecliptic_lon, obliquity),
        )

    @classmethod
    def from_julian(cls, julian_date: float) -> "EphemerisState":
        return cls.from_centuries(centuries_since_j2000(julian_date))

    def to_dict(self) -> dict:
        return {
            "centuries": self.centuries,
            "mean_longitude": self.mean_longitude,
            "ecliptic_longitude": self.ecliptic_longitude,
            "apparent_longitude": self.apparent_longitude,
            "eccentricity": self.eccentricity,
            "obliquity": self.obliquity,
            "equation_of_time": self.equation_of_time,
            "true_anomaly": self.true_anomaly,
            "declination": self.declination,
        }
