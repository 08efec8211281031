"""Day/night terminator computation."""

from .terminator import GeoPoint, Terminator, compute_curve, compute_terminator

__all__ = [
    "GeoPoint",
    "Terminator",
    "compute_curve",
    "compute_terminator",
]
