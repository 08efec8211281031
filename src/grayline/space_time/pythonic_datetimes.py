from datetime import datetime, timezone
import pytz


class NaiveDateTimeError(Exception):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Return the current instant as a UTC datetime."""
    return datetime.now(timezone.utc)


def wrap_longitude(lon: float, low: float = -180.0, high: float = 180.0) -> float:
    """Wrap a longitude into the half-open range [low, high).

    Args:
        lon: Longitude to wrap
        low: Lower bound of the range (inclusive)
        high: Upper bound of the range (exclusive)

    Returns:
        float: Wrapped longitude
    """
    span = high - low
    return ((lon - low) % span) + low


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )
