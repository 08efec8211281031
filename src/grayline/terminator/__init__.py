"""Day/night terminator sampling."""

from .sampler import (
    GeoPoint,
    Terminator,
    compute_curve,
    compute_terminator,
    hour_angle,
    subsolar_point,
    terminator_latitude,
)

__all__ = [
    "GeoPoint",
    "Terminator",
    "compute_curve",
    "compute_terminator",
    "hour_angle",
    "subsolar_point",
    "terminator_latitude",
]
