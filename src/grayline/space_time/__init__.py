"""Time scale conversions: Julian dates and sidereal time."""

from .julian import centuries_since_j2000, julian_from_datetime, julian_to_datetime
from .sidereal import gmst_degrees_from_datetime, gmst_degrees_from_julian

__all__ = [
    "centuries_since_j2000",
    "julian_from_datetime",
    "julian_to_datetime",
    "gmst_degrees_from_datetime",
    "gmst_degrees_from_julian",
]
