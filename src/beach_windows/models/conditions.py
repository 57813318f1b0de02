"""Per-hour condition models consumed by the scoring engine.

## Units

- Temperature: Celsius
- Wind speed: km/h
- Tide height: metres above chart datum
- Crowd level: 0.0 (empty) to 1.0 (packed)
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WaterStatus(str, Enum):
    """Water safety status reported for a beach."""

    SAFE = "safe"
    ADVISORY = "advisory"
    CLOSED = "closed"
    UNKNOWN = "unknown"  # No data or stale sample


class WaterQuality(BaseModel):
    """Latest water quality sample for a beach."""

    status: WaterStatus = WaterStatus.UNKNOWN
    ecoli_count: int | None = Field(default=None, ge=0, description="E. coli CFU/100mL")
    sample_date: date
    advisory_reason: str | None = None

    def age_days(self, today: date) -> int:
        """Days since the sample was taken."""
        return (today - self.sample_date).days

    def is_stale(self, today: date, max_age_days: int = 2) -> bool:
        """Check if the sample is too old to trust."""
        return self.age_days(today) > max_age_days

    def effective_status(self, today: date, max_age_days: int = 2) -> WaterStatus:
        """Status to score with; stale samples count as UNKNOWN."""
        if self.is_stale(today, max_age_days):
            return WaterStatus.UNKNOWN
        return self.status


class HourlyWeather(BaseModel):
    """Forecast weather for one hour, as delivered by a weather source."""

    hour: int = Field(..., ge=0, le=23)
    temperature_c: float
    wind_kmh: float = Field(..., ge=0)
    uv_index: float = Field(default=0.0, ge=0)
    weather_code: int | None = Field(default=None, description="WMO weather code")


class ConditionSnapshot(BaseModel):
    """Merged conditions for one beach at one hour.

    `sunset_hour` is only read by the dynamic sunset rule. `weather_code`
    is only read by the sanity gates.
    """

    model_config = ConfigDict(frozen=True)

    location_id: str
    timestamp: datetime

    temperature_c: float
    wind_kmh: float = Field(..., ge=0)
    uv_index: float = Field(default=0.0, ge=0)

    water_status: WaterStatus = WaterStatus.UNKNOWN

    tide_height_m: float
    max_tide_height_m: float = Field(..., gt=0)

    crowd_level: float = Field(default=0.0, ge=0, le=1)

    sunset_hour: int | None = Field(default=None, ge=0, le=23)
    weather_code: int | None = None

    @property
    def hour(self) -> int:
        """Clock hour (0-23) of this snapshot."""
        return self.timestamp.hour

    @property
    def tide_fraction(self) -> float:
        """Tide height as a fraction of the location's maximum."""
        return self.tide_height_m / self.max_tide_height_m

    def at_hour(self, hour: int) -> ConditionSnapshot:
        """Copy of this snapshot moved to another hour of the same day."""
        moved = self.timestamp.replace(hour=0, minute=0, second=0, microsecond=0)
        return self.model_copy(update={"timestamp": moved + timedelta(hours=hour)})
