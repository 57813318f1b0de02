"""Merge per-source data into hourly condition snapshots.

Any input but the weather may be missing. Each missing input degrades to a
neutral value rather than failing the whole day:
- No tide data: mid tide (half the beach's maximum)
- No water quality sample: UNKNOWN
- No sunset (polar day or night): the static evening rule applies when scoring
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Iterable
from zoneinfo import ZoneInfo

from beach_windows.config import get_settings
from beach_windows.crowd import estimate_crowd
from beach_windows.models.conditions import (
    ConditionSnapshot,
    HourlyWeather,
    WaterQuality,
    WaterStatus,
)
from beach_windows.models.location import Beach
from beach_windows.tides.interpolator import TideInterpolator

logger = logging.getLogger(__name__)


def assemble_snapshots(
    beach: Beach,
    day: date,
    hourly_weather: Iterable[HourlyWeather],
    tides: TideInterpolator | None = None,
    water: WaterQuality | None = None,
    sunset_hour: int | None = None,
    compute_sunset: bool = True,
) -> list[ConditionSnapshot]:
    """Build one snapshot per forecast hour for a beach.

    Args:
        beach: Beach the conditions are for
        day: Local date of the forecast
        hourly_weather: Forecast hours; duplicates keep the first
        tides: Interpolator for the beach's tide station
        water: Latest water quality sample
        sunset_hour: Local sunset hour, if the weather source reported it
        compute_sunset: Compute the sunset hour with astropy when not given.
            Pass False to skip astropy and use the static evening rule

    Returns:
        Snapshots ordered by hour
    """
    settings = get_settings()
    zone = ZoneInfo(beach.timezone)
    max_tide = beach.max_tide_height_m

    if water is None:
        water_status = WaterStatus.UNKNOWN
    else:
        water_status = water.effective_status(day, settings.water_quality_stale_days)
        if water_status != water.status:
            logger.info(
                "Water sample for %s from %s is stale, treating as unknown",
                beach.id,
                water.sample_date,
            )

    if sunset_hour is None and compute_sunset:
        from beach_windows.astronomy.sun import sunset_hour as compute_sunset_hour

        sunset_hour = compute_sunset_hour(beach, day)

    by_hour: dict[int, HourlyWeather] = {}
    for weather in hourly_weather:
        by_hour.setdefault(weather.hour, weather)

    snapshots = []
    for hour in sorted(by_hour):
        weather = by_hour[hour]

        tide_height = tides.interpolate_tide_height(day, hour) if tides is not None else None
        if tide_height is None:
            tide_height = max_tide / 2

        snapshots.append(
            ConditionSnapshot(
                location_id=beach.id,
                timestamp=datetime.combine(day, time(hour), tzinfo=zone),
                temperature_c=weather.temperature_c,
                wind_kmh=weather.wind_kmh,
                uv_index=weather.uv_index,
                water_status=water_status,
                tide_height_m=tide_height,
                max_tide_height_m=max_tide,
                crowd_level=estimate_crowd(day.month, day.weekday(), hour),
                sunset_hour=sunset_hour,
                weather_code=weather.weather_code,
            )
        )

    if tides is not None and day not in tides.dates:
        logger.debug("No tide predictions for %s, assuming mid tide", day)

    return snapshots
