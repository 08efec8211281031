"""Julian date conversion module.

Julian dates are derived from Unix milliseconds, which is valid from the
beginning of the Unix epoch (1970-01-01) onward and ignores leap seconds.
Earlier instants still produce a number, it just isn't a meaningful one.
"""

from datetime import datetime, timedelta, timezone

from ..constants import (
    DAYS_PER_JULIAN_CENTURY,
    J2000_JD,
    MILLISECONDS_PER_DAY,
    UNIX_EPOCH_JD,
)
from .pythonic_datetimes import ensure_utc

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def epoch_milliseconds(dt: datetime) -> float:
    """Milliseconds elapsed since the Unix epoch.

    Args:
        dt: Timezone-aware datetime

    Returns:
        float: Milliseconds since 1970-01-01T00:00:00Z, with sub-millisecond
        precision kept as a fraction
    """
    dt = ensure_utc(dt)
    return (dt - UNIX_EPOCH) / _ONE_MILLISECOND


def julian_from_datetime(dt: datetime) -> float:
    """Convert datetime to Julian date.

    Args:
        dt: Datetime to convert (must be timezone-aware)

    Returns:
        float: Julian date
    """
    return epoch_milliseconds(dt) / MILLISECONDS_PER_DAY + UNIX_EPOCH_JD


def julian_to_datetime(jd: float) -> datetime:
    """Convert Julian date to a UTC datetime, rounded to the millisecond.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: Datetime
    """
    millis = round((jd - UNIX_EPOCH_JD) * MILLISECONDS_PER_DAY)
    return UNIX_EPOCH + timedelta(milliseconds=millis)


# Alias for julian_to_datetime
datetime_from_julian = julian_to_datetime


def centuries_since_j2000(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY
