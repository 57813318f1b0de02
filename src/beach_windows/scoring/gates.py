"""Sanity gates that block an hour outright.

A gate fires for conditions that no amount of good weighting should
recommend, e.g. a thunderstorm or swimming in 12 degree weather. Codes are
WMO weather interpretation codes.
"""

from __future__ import annotations

from beach_windows.models.activity import Activity
from beach_windows.models.conditions import ConditionSnapshot

SNOW_CODES = range(71, 78)
THUNDERSTORM_CODES = range(95, 100)
OVERCAST_CODE = 3

MIN_SWIMMING_TEMP_C = 15.0
MIN_SUNBATHING_TEMP_C = 18.0
MAX_SAILING_WIND_KMH = 40.0


def is_rain(code: int) -> bool:
    """Drizzle, rain and rain showers."""
    return 51 <= code <= 67 or 80 <= code <= 82


def check_sanity_gates(activity: Activity, snapshot: ConditionSnapshot) -> str | None:
    """Return a block reason if the hour is unsafe or pointless, else None."""
    code = snapshot.weather_code if snapshot.weather_code is not None else 0
    temp = snapshot.temperature_c

    if code in SNOW_CODES:
        return "Snow conditions are unsafe for beach activities"
    if code in THUNDERSTORM_CODES:
        return "Thunderstorm conditions are dangerous"

    if activity == Activity.SWIMMING:
        if temp < MIN_SWIMMING_TEMP_C:
            return (
                f"Temperature {temp:.1f}°C is too cold for swimming "
                f"(minimum {MIN_SWIMMING_TEMP_C:.0f}°C)"
            )
        if is_rain(code):
            return "Rain makes swimming unsafe and unpleasant"
    elif activity == Activity.SUNBATHING:
        if temp < MIN_SUNBATHING_TEMP_C:
            return (
                f"Temperature {temp:.1f}°C is too cold for sunbathing "
                f"(minimum {MIN_SUNBATHING_TEMP_C:.0f}°C)"
            )
        if code == OVERCAST_CODE:
            return "Overcast conditions are not suitable for sunbathing"
        if is_rain(code):
            return "Rain makes sunbathing impossible"
    elif activity == Activity.SAILING:
        if snapshot.wind_kmh > MAX_SAILING_WIND_KMH:
            return (
                f"Wind speed {snapshot.wind_kmh:.1f} km/h is dangerously high "
                f"for sailing (maximum {MAX_SAILING_WIND_KMH:.0f} km/h)"
            )

    return None
