"""Static crowd level heuristic.

The estimate is the product of three independent factors:

    crowd = season(month) * day(weekday) * hour(hour)

A product rather than a sum: a beach only gets packed when season, day and
hour all line up, and any one strongly off-peak factor keeps it quiet.
"""

from __future__ import annotations

from datetime import datetime


def season_factor(month: int) -> float:
    """Summer is busiest, winter is nearly empty."""
    if 6 <= month <= 8:
        return 1.0
    if month in (5, 9):
        return 0.6  # Shoulder season
    if month in (4, 10):
        return 0.3
    return 0.1


def day_factor(weekday: int) -> float:
    """Weekday with Monday = 0 and Sunday = 6, as `datetime.weekday()`."""
    if weekday in (5, 6):
        return 1.0
    if weekday == 4:
        return 0.7  # Friday
    return 0.4


def hour_factor(hour: int) -> float:
    """Afternoon peak, tapering toward morning and evening."""
    if 12 <= hour <= 16:
        return 1.0
    if 10 <= hour <= 11 or 17 <= hour <= 18:
        return 0.7
    if 8 <= hour <= 9 or 19 <= hour <= 20:
        return 0.4
    if 6 <= hour <= 7 or hour == 21:
        return 0.2
    return 0.1


def estimate_crowd(month: int, weekday: int, hour: int) -> float:
    """Estimate the crowd level (0.0-1.0) for a month, weekday and hour.

    Args:
        month: 1-12
        weekday: 0 (Monday) to 6 (Sunday)
        hour: 0-23

    Returns:
        Crowd level where 1.0 is a summer weekend afternoon
    """
    crowd = season_factor(month) * day_factor(weekday) * hour_factor(hour)
    return max(0.0, min(1.0, crowd))


def estimate_crowd_at(when: datetime) -> float:
    """Crowd estimate for a local datetime."""
    return estimate_crowd(when.month, when.weekday(), when.hour)
