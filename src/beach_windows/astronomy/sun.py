"""Sunset calculations using astropy.

The Sunset activity scores hours by their distance from the local sunset
hour. Weather sources usually report sunset; this module computes it when
they don't.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from astropy import units as u
from astropy.coordinates import AltAz, EarthLocation, get_sun
from astropy.time import Time

from beach_windows.models.location import Beach, Coordinates

logger = logging.getLogger(__name__)

# Upper limb touching the horizon, including atmospheric refraction
SUNSET_ALTITUDE_DEG = -0.833


def _coords_to_earth_location(coords: Coordinates) -> EarthLocation:
    """Convert our Coordinates to astropy EarthLocation."""
    return EarthLocation(lat=coords.latitude * u.deg, lon=coords.longitude * u.deg)


def sun_altitude(coords: Coordinates, when: datetime) -> float:
    """Sun altitude in degrees above the horizon (negative = below).

    Args:
        coords: Geographic coordinates
        when: Timezone-aware time
    """
    obs_time = Time(when)
    altaz_frame = AltAz(obstime=obs_time, location=_coords_to_earth_location(coords))
    return float(get_sun(obs_time).transform_to(altaz_frame).alt.deg)


def _find_setting_crossing(
    coords: Coordinates,
    start_time: datetime,
    end_time: datetime,
    target_altitude: float,
    tolerance_minutes: float = 1.0,
) -> datetime | None:
    """Find when the sun sinks through a specific altitude.

    Samples every 15 minutes to bracket the crossing, then binary searches
    inside the bracket.

    Returns:
        Time of crossing, or None if the sun doesn't set in the window
    """
    sample_interval = timedelta(minutes=15)
    prev_time = start_time
    prev_alt = sun_altitude(coords, prev_time)

    current = start_time
    while current < end_time:
        current = min(current + sample_interval, end_time)
        curr_alt = sun_altitude(coords, current)

        if prev_alt > target_altitude >= curr_alt:
            low_time = prev_time
            high_time = current
            tolerance = timedelta(minutes=tolerance_minutes)

            while (high_time - low_time) > tolerance:
                mid_time = low_time + (high_time - low_time) / 2
                if sun_altitude(coords, mid_time) > target_altitude:
                    low_time = mid_time
                else:
                    high_time = mid_time

            return low_time + (high_time - low_time) / 2

        prev_alt = curr_alt
        prev_time = current

    return None


def sunset_time(coords: Coordinates, day: date, tz: str | ZoneInfo) -> datetime | None:
    """Local sunset time for a date.

    Args:
        coords: Geographic coordinates
        day: Local calendar date
        tz: IANA timezone name or ZoneInfo

    Returns:
        Timezone-aware local sunset, or None during polar day or night
    """
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    # Sunset always falls between local noon and midnight outside polar regions
    start = datetime.combine(day, time(12), tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time(0), tzinfo=zone)

    crossing = _find_setting_crossing(coords, start, end, SUNSET_ALTITUDE_DEG)
    if crossing is None:
        logger.debug("No sunset at %s on %s", coords, day)
        return None
    return crossing.astimezone(zone)


def sunset_hour(beach: Beach, day: date) -> int | None:
    """Clock hour (0-23) of local sunset at a beach.

    Example:
        sunset_hour(get_beach("kitsilano"), date(2024, 7, 1)) -> 21
    """
    sunset = sunset_time(beach.coordinates, day, beach.timezone)
    return sunset.hour if sunset is not None else None
