"""Tide predictions and height interpolation."""

from beach_windows.tides.interpolator import (
    TideInterpolator,
    cosine_interpolate,
    interpolate_tide_height,
)
from beach_windows.tides.stations import STATIONS, StationTable

__all__ = [
    "TideInterpolator",
    "cosine_interpolate",
    "interpolate_tide_height",
    "STATIONS",
    "StationTable",
]
