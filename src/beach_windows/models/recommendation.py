"""Recommendation models produced by the scoring engine and window builder."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from beach_windows.models.activity import Activity


class ScoreFactors(BaseModel):
    """Individual factor scores (0.0-1.0) behind a time slot score."""

    temperature: float = Field(..., ge=0, le=1)
    water_quality: float = Field(..., ge=0, le=1)
    wind: float = Field(..., ge=0, le=1)
    uv: float = Field(..., ge=0, le=1)
    tide: float = Field(..., ge=0, le=1)
    crowd: float = Field(..., ge=0, le=1)
    time_of_day: float = Field(..., ge=0, le=1)

    @classmethod
    def zero(cls) -> ScoreFactors:
        """All factors at 0.0, used for blocked slots."""
        return cls(
            temperature=0.0,
            water_quality=0.0,
            wind=0.0,
            uv=0.0,
            tide=0.0,
            crowd=0.0,
            time_of_day=0.0,
        )


class TimeSlotScore(BaseModel):
    """Score for one activity at one beach for one hour."""

    timestamp: datetime
    location_id: str
    activity: Activity
    score: int = Field(..., ge=0, le=100)
    factors: ScoreFactors

    # Sanity gates (snow, thunderstorms, too cold to swim...)
    blocked: bool = False
    block_reason: str | None = None

    @property
    def hour(self) -> int:
        return self.timestamp.hour


class TimeWindow(BaseModel):
    """A contiguous run of good hours presented as one recommendation."""

    start_hour: int = Field(..., ge=0, le=23)
    end_hour: int = Field(..., ge=1, le=24, description="Exclusive end hour")
    peak_hour: int = Field(..., ge=0, le=23)
    score: int = Field(..., ge=0, le=100, description="Score of the peak hour")
    factors: ScoreFactors
    highlights: list[str] = Field(
        default_factory=list, description="Short phrases for the dominant factors"
    )

    @property
    def duration_hours(self) -> int:
        return self.end_hour - self.start_hour

    @property
    def reason(self) -> str:
        """Key factors as a single display string."""
        return ", ".join(self.highlights) if self.highlights else "mixed conditions"

    def contains(self, hour: int) -> bool:
        """Check if an hour falls inside this window."""
        return self.start_hour <= hour < self.end_hour


class WindowStatus(str, Enum):
    """Why a recommendation does or does not have windows."""

    RECOMMENDED = "recommended"
    ALL_PASSED = "all_passed"  # Good hours for today are over
    NONE_SUITABLE = "none_suitable"  # Nothing cleared the floor


class WindowRecommendation(BaseModel):
    """Ranked windows for one activity at one beach."""

    activity: Activity
    location_id: str
    generated_at: datetime
    windows: list[TimeWindow] = Field(default_factory=list)
    all_passed: bool = False
    hourly: list[TimeSlotScore] = Field(
        default_factory=list, description="Every hour that was scored"
    )

    @property
    def status(self) -> WindowStatus:
        if self.windows:
            return WindowStatus.RECOMMENDED
        if self.all_passed:
            return WindowStatus.ALL_PASSED
        return WindowStatus.NONE_SUITABLE

    @property
    def best(self) -> TimeWindow | None:
        """Highest scoring window, if any."""
        return self.windows[0] if self.windows else None

    def as_tuple(self) -> tuple[list[TimeWindow], bool]:
        """(windows, all_passed) pair for callers that only need those."""
        return self.windows, self.all_passed
