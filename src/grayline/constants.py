"""Astronomical and calendar constants shared across grayline."""

# Julian Date of the Unix epoch, 1970-01-01T00:00:00Z
UNIX_EPOCH_JD = 2440587.5

# Julian Date of the J2000.0 epoch, 2000-01-01T12:00:00 TT
J2000_JD = 2451545.0

MILLISECONDS_PER_DAY = 86_400_000
DAYS_PER_JULIAN_CENTURY = 36525.0

HOURS_PER_DAY = 24.0
DEGREES_PER_HOUR = 15.0

# Ratio of a mean solar day to a sidereal day
SIDEREAL_DAY_RATIO = 1.00273790935

# Degrees of longitude between terminator samples
DEFAULT_RESOLUTION = 2.0
