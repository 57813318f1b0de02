"""Activity models and the fixed activity profile table.

Profiles are plain data: ideal ranges, preference categories and weights.
All behaviour lives in `beach_windows.scoring`, so adding an activity only
means adding a row to `_PROFILES`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Activity(str, Enum):
    """Beach activities a user can ask for recommendations about."""

    SWIMMING = "swimming"
    SUNBATHING = "sunbathing"
    SAILING = "sailing"
    SUNSET = "sunset"
    PEACE = "peace"

    @property
    def label(self) -> str:
        """Human-readable activity name."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str) -> Activity | None:
        """Parse user input into an Activity.

        Matching is case-insensitive and accepts common aliases:
            'swim' -> SWIMMING
            'sun', 'sunbathe' -> SUNBATHING
            'sail' -> SAILING
            'quiet' -> PEACE

        Returns None for anything unrecognised.
        """
        return _ALIASES.get(value.strip().lower())


_LABELS = {
    Activity.SWIMMING: "Swimming",
    Activity.SUNBATHING: "Sunbathing",
    Activity.SAILING: "Sailing",
    Activity.SUNSET: "Sunset",
    Activity.PEACE: "Peace & Quiet",
}

_ALIASES = {
    "swim": Activity.SWIMMING,
    "swimming": Activity.SWIMMING,
    "sun": Activity.SUNBATHING,
    "sunbathing": Activity.SUNBATHING,
    "sunbathe": Activity.SUNBATHING,
    "sail": Activity.SAILING,
    "sailing": Activity.SAILING,
    "sunset": Activity.SUNSET,
    "peace": Activity.PEACE,
    "quiet": Activity.PEACE,
}


class UvPreference(str, Enum):
    """How an activity feels about UV exposure."""

    HIGH = "high"  # More sun is better
    MODERATE = "moderate"  # Peaks around UV 5
    LOW = "low"  # Shade seekers
    ANY = "any"


class TidePreference(str, Enum):
    """Preferred tide level for an activity."""

    HIGH = "high"
    MID = "mid"
    LOW = "low"
    ANY = "any"


class TimeOfDayRule(str, Enum):
    """Time-of-day scoring rule attached to a profile.

    SUNSET is dynamic: it reads the day's sunset hour from the snapshot
    rather than assuming a fixed evening window.
    """

    NONE = "none"
    PEACE = "peace"
    SUNSET = "sunset"


class ActivityProfile(BaseModel):
    """Weights and ideal ranges used to score one activity."""

    model_config = ConfigDict(frozen=True)

    activity: Activity

    # Temperature in Celsius
    temp_weight: float = Field(..., ge=0)
    temp_ideal_range: tuple[float, float]

    water_quality_weight: float = Field(..., ge=0)

    # Wind in km/h
    wind_weight: float = Field(..., ge=0)
    wind_ideal_range: tuple[float, float]

    uv_weight: float = Field(..., ge=0)
    uv_preference: UvPreference = UvPreference.ANY

    tide_weight: float = Field(..., ge=0)
    tide_preference: TidePreference = TidePreference.ANY

    crowd_weight: float = Field(..., ge=0)

    time_rule: TimeOfDayRule = TimeOfDayRule.NONE

    @model_validator(mode="after")
    def validate_ranges(self) -> ActivityProfile:
        """Ensure each ideal range is ordered (min <= max)."""
        for name in ("temp_ideal_range", "wind_ideal_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} must be (min, max), got ({low}, {high})")
        return self

    def factor_weights(self) -> dict[str, float]:
        """Weights keyed by factor name, excluding time of day."""
        return {
            "temperature": self.temp_weight,
            "water_quality": self.water_quality_weight,
            "wind": self.wind_weight,
            "uv": self.uv_weight,
            "tide": self.tide_weight,
            "crowd": self.crowd_weight,
        }


_PROFILES: Mapping[Activity, ActivityProfile] = MappingProxyType(
    {
        Activity.SWIMMING: ActivityProfile(
            activity=Activity.SWIMMING,
            temp_weight=0.3,
            temp_ideal_range=(20.0, 28.0),
            water_quality_weight=0.4,  # Critical
            wind_weight=0.1,
            wind_ideal_range=(0.0, 15.0),
            uv_weight=0.05,
            uv_preference=UvPreference.MODERATE,
            tide_weight=0.15,
            tide_preference=TidePreference.MID,
            crowd_weight=0.1,
        ),
        Activity.SUNBATHING: ActivityProfile(
            activity=Activity.SUNBATHING,
            temp_weight=0.35,
            temp_ideal_range=(24.0, 32.0),
            water_quality_weight=0.0,
            wind_weight=0.25,
            wind_ideal_range=(0.0, 10.0),
            uv_weight=0.25,
            uv_preference=UvPreference.HIGH,
            tide_weight=0.0,
            crowd_weight=0.15,
        ),
        Activity.SAILING: ActivityProfile(
            activity=Activity.SAILING,
            temp_weight=0.1,
            temp_ideal_range=(15.0, 30.0),
            water_quality_weight=0.0,
            wind_weight=0.6,  # Need wind to sail
            wind_ideal_range=(15.0, 25.0),
            uv_weight=0.0,
            tide_weight=0.2,
            tide_preference=TidePreference.HIGH,
            crowd_weight=0.1,
        ),
        Activity.SUNSET: ActivityProfile(
            activity=Activity.SUNSET,
            temp_weight=0.15,
            temp_ideal_range=(15.0, 28.0),
            water_quality_weight=0.0,
            wind_weight=0.1,
            wind_ideal_range=(0.0, 20.0),
            uv_weight=0.0,
            tide_weight=0.0,
            crowd_weight=0.15,
            time_rule=TimeOfDayRule.SUNSET,
        ),
        Activity.PEACE: ActivityProfile(
            activity=Activity.PEACE,
            temp_weight=0.1,
            temp_ideal_range=(12.0, 25.0),
            water_quality_weight=0.0,
            wind_weight=0.1,
            wind_ideal_range=(0.0, 15.0),
            uv_weight=0.1,
            uv_preference=UvPreference.LOW,
            tide_weight=0.0,
            crowd_weight=0.7,  # Highly crowd-averse
            time_rule=TimeOfDayRule.PEACE,
        ),
    }
)


def get_profile(activity: Activity) -> ActivityProfile:
    """Get the shared, read-only profile for an activity."""
    return _PROFILES[activity]


def all_profiles() -> list[ActivityProfile]:
    """All activity profiles in declaration order."""
    return [_PROFILES[activity] for activity in Activity]
