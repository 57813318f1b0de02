"""Factor scorers.

Each scorer maps one observed condition to a 0.0-1.0 "goodness" value for
an activity profile. They are pure functions; weighting happens in
`beach_windows.scoring.engine`.
"""

from __future__ import annotations

from beach_windows.models.activity import (
    ActivityProfile,
    TidePreference,
    UvPreference,
)
from beach_windows.models.conditions import WaterStatus

# Degrees outside the ideal range over which the temperature score falls to 0
TEMPERATURE_MARGIN_C = 5.0

# UV index at which a HIGH preference saturates
UV_SATURATION = 8.0
# UV index a MODERATE preference likes best, and how far it tolerates
UV_MODERATE_PEAK = 5.0
UV_MODERATE_SPREAD = 5.0

WATER_QUALITY_SCORES: dict[WaterStatus, float] = {
    WaterStatus.SAFE: 1.0,
    WaterStatus.ADVISORY: 0.3,
    WaterStatus.CLOSED: 0.0,
    WaterStatus.UNKNOWN: 0.5,  # Moderate risk, not a failure
}

# Hour distance from sunset -> score
_SUNSET_DISTANCE_SCORES = {0: 1.0, 1: 0.9, 2: 0.5, 3: 0.2}
_SUNSET_FAR = 0.1


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp a value to [low, high]."""
    return max(low, min(high, value))


def score_temperature(temp_c: float, profile: ActivityProfile) -> float:
    """1.0 inside the ideal range, linear decay to 0 within 5 degrees outside."""
    low, high = profile.temp_ideal_range
    if low <= temp_c <= high:
        return 1.0
    if temp_c < low:
        return clamp((temp_c - (low - TEMPERATURE_MARGIN_C)) / TEMPERATURE_MARGIN_C)
    return clamp((high + TEMPERATURE_MARGIN_C - temp_c) / TEMPERATURE_MARGIN_C)


def score_wind(wind_kmh: float, profile: ActivityProfile) -> float:
    """Score wind speed against the ideal range.

    Below the range the score scales with `observed / min`. Above it the
    score decays to 0 over half the range width beyond the maximum.
    """
    low, high = profile.wind_ideal_range
    if low <= wind_kmh <= high:
        return 1.0
    if wind_kmh < low:
        return clamp(wind_kmh / low)
    margin = (high - low) / 2
    if margin <= 0:
        return 0.0
    return clamp((high + margin - wind_kmh) / margin)


def score_water_quality(status: WaterStatus) -> float:
    """Categorical water safety score."""
    return WATER_QUALITY_SCORES[status]


def score_uv(uv_index: float, profile: ActivityProfile) -> float:
    """Score UV index by the profile's UV preference."""
    preference = profile.uv_preference
    if preference == UvPreference.HIGH:
        return clamp(uv_index / UV_SATURATION)
    if preference == UvPreference.MODERATE:
        return 1.0 - clamp(abs(uv_index - UV_MODERATE_PEAK) / UV_MODERATE_SPREAD)
    if preference == UvPreference.LOW:
        return 1.0 - clamp(uv_index / UV_SATURATION)
    return 1.0


def score_tide(height_m: float, max_height_m: float, profile: ActivityProfile) -> float:
    """Score tide height, normalized by the location's maximum tide."""
    preference = profile.tide_preference
    if preference == TidePreference.ANY:
        return 1.0
    if max_height_m <= 0:
        return 0.5
    normalized = clamp(height_m / max_height_m)
    if preference == TidePreference.HIGH:
        return normalized
    if preference == TidePreference.MID:
        return clamp(1.0 - abs(normalized - 0.5) * 2.0)
    return 1.0 - normalized


def score_crowd(crowd_level: float, profile: ActivityProfile) -> float:
    """Crowd-averse profiles (high crowd weight) lose score faster."""
    return clamp(1.0 - clamp(crowd_level) * profile.crowd_weight)


def peace_time_score(hour: int) -> float:
    """Early mornings only: 06:00-07:00 best, 0.2 from mid-morning on."""
    if 6 <= hour <= 7:
        return 1.0
    if hour == 8:
        return 0.8
    if hour in (5, 9):
        return 0.5
    return 0.2


def sunset_time_score(hour: int, sunset_hour: int) -> float:
    """Score an hour by its distance from the day's actual sunset hour."""
    return _SUNSET_DISTANCE_SCORES.get(abs(hour - sunset_hour), _SUNSET_FAR)


def static_sunset_time_score(hour: int) -> float:
    """Fixed evening window, used only when the sunset hour is unknown."""
    if 18 <= hour <= 20:
        return 1.0
    if hour in (17, 21):
        return 0.7
    if hour in (16, 22):
        return 0.3
    return 0.1
