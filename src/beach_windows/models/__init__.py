"""Domain models for beach time-window recommendations."""

from beach_windows.models.activity import (
    Activity,
    ActivityProfile,
    TidePreference,
    TimeOfDayRule,
    UvPreference,
    all_profiles,
    get_profile,
)
from beach_windows.models.conditions import (
    ConditionSnapshot,
    HourlyWeather,
    WaterQuality,
    WaterStatus,
)
from beach_windows.models.location import (
    Beach,
    Coordinates,
    all_beaches,
    get_beach,
    max_tide_height,
)
from beach_windows.models.recommendation import (
    ScoreFactors,
    TimeSlotScore,
    TimeWindow,
    WindowRecommendation,
    WindowStatus,
)
from beach_windows.models.tide import TideEvent, TidePrediction, TideState

__all__ = [
    # Activity
    "Activity",
    "ActivityProfile",
    "TidePreference",
    "TimeOfDayRule",
    "UvPreference",
    "all_profiles",
    "get_profile",
    # Conditions
    "ConditionSnapshot",
    "HourlyWeather",
    "WaterQuality",
    "WaterStatus",
    # Location
    "Beach",
    "Coordinates",
    "all_beaches",
    "get_beach",
    "max_tide_height",
    # Recommendation
    "ScoreFactors",
    "TimeSlotScore",
    "TimeWindow",
    "WindowRecommendation",
    "WindowStatus",
    # Tide
    "TideEvent",
    "TidePrediction",
    "TideState",
]
