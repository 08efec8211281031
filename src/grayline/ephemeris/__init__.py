from .solar import (
    EphemerisState,
    apparent_longitude,
    declination,
    eccentricity,
    ecliptic_longitude,
    equation_of_center,
    equation_of_time,
    mean_anomaly,
    mean_longitude,
    mean_obliquity,
    true_anomaly,
)

__all__ = [
    "EphemerisState",
    "apparent_longitude",
    "declination",
    "eccentricity",
    "ecliptic_longitude",
    "equation_of_center",
    "equation_of_time",
    "mean_anomaly",
    "mean_longitude",
    "mean_obliquity",
    "true_anomaly",
]
