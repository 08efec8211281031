import math
from datetime import datetime

from ..constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_HOUR,
    HOURS_PER_DAY,
    J2000_JD,
    SIDEREAL_DAY_RATIO,
)
from .julian import julian_from_datetime


def gmst_degrees_from_julian(julian_date: float) -> float:
    """
    Calculate Greenwich Mean Sidereal Time for a given Julian Date.

    Uses the USNO approximation, anchored at the preceding 0h UT day boundary.

    Parameters:
    julian_date (float): The Julian Date in UTC.

    Returns:
    float: GMST in degrees (0 ≤ GMST < 360).
    """
    # Step 1: Julian Date at the preceding midnight (day boundary)
    jd0 = math.floor(julian_date - 0.5) + 0.5

    # Step 2: Julian centuries since J2000.0 at the day boundary
    T = (jd0 - J2000_JD) / DAYS_PER_JULIAN_CENTURY

    # Step 3: GMST in hours, advancing at the sidereal rate through the day
    hours_since_jd0 = (julian_date - jd0) * HOURS_PER_DAY
    gmst_hours = (
        6.697374558
        + 2400.051336 * T
        + 0.000025862 * T**2
        + hours_since_jd0 * SIDEREAL_DAY_RATIO
    )

    # Step 4: Normalize to [0, 24) hours and convert to degrees
    return (gmst_hours % HOURS_PER_DAY) * DEGREES_PER_HOUR


def gmst_degrees_from_datetime(dt: datetime) -> float:
    return gmst_degrees_from_julian(julian_from_datetime(dt))


def local_sidereal_time_degrees(julian_date: float, longitude: float) -> float:
    """
    Calculate Local Mean Sidereal Time for a given Julian Date and longitude.

    Parameters:
    julian_date (float): The Julian Date in UTC.
    longitude (float): Observer's longitude in degrees.
                       Positive for East of Prime Meridian,
                       Negative for West.

    Returns:
    float: LMST in degrees (0 ≤ LMST < 360).
    """
    return (gmst_degrees_from_julian(julian_date) + longitude) % 360.0
