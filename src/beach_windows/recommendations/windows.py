"""Time window builder for beach activities.

This module turns a day of per-hour condition snapshots into ranked
recommendation windows. It:
- Scores every remaining hour of the day (06:00-21:00, never in the past)
- Groups adjacent hours that clear the recommendation floor
- Ranks windows by their peak hour and keeps the top few
- Explains each window with short phrases for its dominant factors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from beach_windows.config import get_settings
from beach_windows.models.activity import (
    Activity,
    ActivityProfile,
    TimeOfDayRule,
    get_profile,
)
from beach_windows.models.conditions import ConditionSnapshot
from beach_windows.models.location import Beach
from beach_windows.models.recommendation import (
    TimeSlotScore,
    TimeWindow,
    WindowRecommendation,
)
from beach_windows.scoring.engine import TIME_OF_DAY_WEIGHT, evaluate_time_slot
from beach_windows.scoring.factors import clamp

logger = logging.getLogger(__name__)

# Factor score bands for phrasing: (good, fair); anything lower is poor
GOOD_BAND = 0.75
FAIR_BAND = 0.4

# (good, fair, poor) phrase per factor
_PHRASES: dict[str, tuple[str, str, str]] = {
    "water_quality": ("safe water", "water advisory", "unsafe water"),
    "wind": ("ideal wind", "breezy", "poor wind"),
    "uv": ("good UV", "fair UV", "poor UV"),
    "tide": ("ideal tide", "fair tide", "poor tide"),
    "time_of_day": ("perfect timing", "decent timing", "off-peak timing"),
}

HIGHLIGHT_COUNT = 3


@dataclass
class WindowCandidate:
    """A run of adjacent hours that all cleared the floor."""

    slots: list[TimeSlotScore]
    snapshots: list[ConditionSnapshot]

    @property
    def start_hour(self) -> int:
        return self.slots[0].hour

    @property
    def end_hour(self) -> int:
        # Exclusive: the last hour runs until the top of the next
        return self.slots[-1].hour + 1

    @property
    def peak_index(self) -> int:
        # max() keeps the first of equal scores, i.e. the earliest hour
        return max(range(len(self.slots)), key=lambda i: self.slots[i].score)


def _phrase(
    name: str,
    value: float,
    profile: ActivityProfile,
    snapshot: ConditionSnapshot,
) -> str:
    """Render one factor as a short phrase."""
    if name == "crowd":
        level = snapshot.crowd_level
        if level < 0.3:
            return "low crowds"
        if level < 0.6:
            return "moderate crowds"
        return "busy"

    if name == "temperature":
        if value >= GOOD_BAND:
            return "warm"
        too_cold = snapshot.temperature_c < profile.temp_ideal_range[0]
        if value >= FAIR_BAND:
            return "cool" if too_cold else "hot"
        return "too cold" if too_cold else "too hot"

    good, fair, poor = _PHRASES[name]
    if value >= GOOD_BAND:
        return good
    if value >= FAIR_BAND:
        return fair
    return poor


def describe_factors(
    profile: ActivityProfile,
    slot: TimeSlotScore,
    snapshot: ConditionSnapshot,
    count: int = HIGHLIGHT_COUNT,
) -> list[str]:
    """Phrases for the highest-weighted factors of a scored hour."""
    if slot.blocked and slot.block_reason:
        return [slot.block_reason]

    weights = profile.factor_weights()
    weights["time_of_day"] = TIME_OF_DAY_WEIGHT
    # sorted() is stable, so equal weights keep factor declaration order
    dominant = sorted(
        (name for name, weight in weights.items() if weight > 0),
        key=lambda name: weights[name],
        reverse=True,
    )[:count]

    return [
        _phrase(name, getattr(slot.factors, name), profile, snapshot)
        for name in dominant
    ]


class WindowBuilder:
    """Builds ranked time windows for an activity at one beach.

    Example:
        ```python
        builder = WindowBuilder()
        recommendation = builder.build(
            activity=Activity.SWIMMING,
            location="kitsilano",
            snapshots=snapshots,
            now=datetime.now(),
        )

        if recommendation.best:
            print(f"Go at {recommendation.best.start_hour}:00")
        elif recommendation.all_passed:
            print("Today's good windows have passed")
        ```
    """

    def __init__(
        self,
        min_score: int | None = None,
        max_windows: int | None = None,
        day_start_hour: int | None = None,
        day_end_hour: int | None = None,
    ):
        """Initialize the builder.

        Unset arguments fall back to the application settings.

        Args:
            min_score: Score an hour needs to join a window
            max_windows: Maximum windows to return
            day_start_hour: Earliest hour ever recommended
            day_end_hour: Last hour recommended (inclusive)
        """
        settings = get_settings()
        self.min_score = settings.min_window_score if min_score is None else min_score
        self.max_windows = settings.max_windows if max_windows is None else max_windows
        self.day_start_hour = (
            settings.day_start_hour if day_start_hour is None else day_start_hour
        )
        self.day_end_hour = settings.day_end_hour if day_end_hour is None else day_end_hour

    def build(
        self,
        activity: Activity,
        location: Beach | str,
        snapshots: Iterable[ConditionSnapshot],
        now: datetime,
    ) -> WindowRecommendation:
        """Build the recommendation for the rest of today.

        Args:
            activity: Activity to recommend windows for
            location: Beach or beach id the snapshots belong to
            snapshots: Per-hour conditions for the day
            now: Current local time; earlier hours are never recommended

        Returns:
            WindowRecommendation with up to `max_windows` windows. When empty,
            `all_passed` tells "today is over" apart from "nothing suitable".
        """
        location_id = location.id if isinstance(location, Beach) else location
        profile = get_profile(activity)
        start_hour = max(now.hour, self.day_start_hour)

        hourly: list[tuple[ConditionSnapshot, TimeSlotScore]] = []
        if start_hour <= self.day_end_hour:
            hourly = self._score_hours(profile, snapshots, start_hour)

        candidates = self._find_candidates(hourly)
        windows = [self._to_window(profile, candidate) for candidate in candidates]
        windows.sort(key=lambda w: (-w.score, w.start_hour))
        windows = windows[: self.max_windows]

        all_passed = not windows and now.hour >= self.day_end_hour
        if not windows:
            logger.debug(
                "No %s windows at %s (all_passed=%s)",
                activity.value,
                location_id,
                all_passed,
            )

        return WindowRecommendation(
            activity=activity,
            location_id=location_id,
            generated_at=now,
            windows=windows,
            all_passed=all_passed,
            hourly=[slot for _, slot in hourly],
        )

    def _score_hours(
        self,
        profile: ActivityProfile,
        snapshots: Iterable[ConditionSnapshot],
        start_hour: int,
    ) -> list[tuple[ConditionSnapshot, TimeSlotScore]]:
        """Score each snapshot from start_hour through the end of the day."""
        by_hour: dict[int, ConditionSnapshot] = {}
        for snapshot in snapshots:
            if start_hour <= snapshot.hour <= self.day_end_hour:
                by_hour.setdefault(snapshot.hour, snapshot)

        scored = []
        for hour in sorted(by_hour):
            snapshot = by_hour[hour]
            slot = evaluate_time_slot(profile, snapshot)
            if profile.time_rule == TimeOfDayRule.SUNSET and not slot.blocked:
                slot = _emphasize_timing(slot)
            scored.append((snapshot, slot))
        return scored

    def _find_candidates(
        self,
        hourly: list[tuple[ConditionSnapshot, TimeSlotScore]],
    ) -> list[WindowCandidate]:
        """Group adjacent hours at or above the floor."""
        candidates: list[WindowCandidate] = []
        current: WindowCandidate | None = None

        for snapshot, slot in hourly:
            if slot.score < self.min_score:
                current = None
                continue
            if current is not None and slot.hour == current.slots[-1].hour + 1:
                current.slots.append(slot)
                current.snapshots.append(snapshot)
            else:
                current = WindowCandidate(slots=[slot], snapshots=[snapshot])
                candidates.append(current)

        return candidates

    def _to_window(self, profile: ActivityProfile, candidate: WindowCandidate) -> TimeWindow:
        index = candidate.peak_index
        peak = candidate.slots[index]
        return TimeWindow(
            start_hour=candidate.start_hour,
            end_hour=candidate.end_hour,
            peak_hour=peak.hour,
            score=peak.score,
            factors=peak.factors,
            highlights=describe_factors(profile, peak, candidate.snapshots[index]),
        )


def _emphasize_timing(slot: TimeSlotScore) -> TimeSlotScore:
    """Let sunset timing dominate: scale the score by 0.3 + 0.7 * timing."""
    multiplier = 0.3 + 0.7 * slot.factors.time_of_day
    adjusted = int(clamp(slot.score * multiplier, 0.0, 100.0))
    return slot.model_copy(update={"score": adjusted})


def build_windows(
    activity: Activity,
    location: Beach | str,
    snapshots: Iterable[ConditionSnapshot],
    now: datetime,
) -> WindowRecommendation:
    """Convenience function to build windows with default settings.

    Args:
        activity: Activity to recommend windows for
        location: Beach or beach id
        snapshots: Per-hour conditions for the day
        now: Current local time

    Returns:
        WindowRecommendation; use `.as_tuple()` for `(windows, all_passed)`
    """
    return WindowBuilder().build(activity, location, snapshots, now)
