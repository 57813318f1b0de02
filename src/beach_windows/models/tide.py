"""Tide prediction models."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TideState(str, Enum):
    """Direction of the tide at a moment in time."""

    RISING = "rising"
    FALLING = "falling"
    HIGH = "high"  # Near a high tide extreme
    LOW = "low"  # Near a low tide extreme


class TidePrediction(BaseModel):
    """A predicted high or low tide extreme."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    time: dt.time
    height_m: float = Field(..., description="Height above chart datum in metres")
    is_high: bool

    @property
    def when(self) -> dt.datetime:
        """Naive local datetime of the event."""
        return dt.datetime.combine(self.date, self.time)

    @property
    def hour(self) -> float:
        """Fractional clock hour of the event (e.g. 8.75 for 08:45)."""
        return self.time.hour + self.time.minute / 60 + self.time.second / 3600


class TideEvent(BaseModel):
    """An upcoming tide extreme, as shown to the user."""

    when: dt.datetime
    height_m: float
    is_high: bool
