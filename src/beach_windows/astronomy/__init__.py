"""Astronomical calculations for sunset timing."""

from beach_windows.astronomy.sun import (
    sun_altitude,
    sunset_hour,
    sunset_time,
)

__all__ = [
    "sun_altitude",
    "sunset_hour",
    "sunset_time",
]
