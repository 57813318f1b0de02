"""Tide height interpolation from sparse high/low predictions.

Tide tables only list the extremes (normally 2-4 per day). Between two
extremes the water level follows roughly half a cosine wave, so heights in
between are estimated with cosine interpolation:

    h(p) = h0 + (h1 - h0) * (1 - cos(pi * p)) / 2

where `p` is the fraction of time elapsed between the two events. This is
monotonic between the extremes and flat at them, which avoids the sharp
direction change a linear interpolation shows at each event.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable

from beach_windows.models.location import POINT_ATKINSON_MAX_TIDE_M
from beach_windows.models.tide import TideEvent, TidePrediction, TideState

logger = logging.getLogger(__name__)

# Within this fraction of the height difference, the tide counts as at an extreme
EXTREME_THRESHOLD = 0.05


def cosine_interpolate(h0: float, h1: float, progress: float) -> float:
    """Interpolate between two heights along half a cosine wave."""
    progress = max(0.0, min(1.0, progress))
    return h0 + (h1 - h0) * (1 - math.cos(progress * math.pi)) / 2


def _hour_to_datetime(day: date, hour: float) -> datetime:
    return datetime.combine(day, time()) + timedelta(hours=hour)


class TideInterpolator:
    """Estimates tide height at arbitrary times for one tide station.

    Example:
        ```python
        tides = TideInterpolator.for_station("point-atkinson")

        height = tides.interpolate_tide_height(date(2026, 1, 1), 11.5)
        if height is None:
            print("No tide data for that day")
        ```
    """

    def __init__(
        self,
        predictions: Iterable[TidePrediction],
        max_tide_height: float = POINT_ATKINSON_MAX_TIDE_M,
    ):
        """Initialize from a collection of predictions.

        Args:
            predictions: High/low predictions in any order
            max_tide_height: Historical maximum for the station, used to
                normalize tide scores
        """
        self.max_tide_height = max_tide_height

        by_day: dict[date, list[TidePrediction]] = defaultdict(list)
        for prediction in predictions:
            by_day[prediction.date].append(prediction)
        self._by_day = {day: sorted(preds, key=lambda p: p.time) for day, preds in by_day.items()}

        for day, preds in self._by_day.items():
            for prev, nxt in zip(preds, preds[1:]):
                if prev.is_high == nxt.is_high:
                    logger.warning(
                        "Tide predictions for %s do not alternate high/low at %s",
                        day,
                        nxt.time,
                    )
                    break

    @classmethod
    def for_station(cls, station: str) -> TideInterpolator:
        """Build an interpolator from the bundled tables for a station."""
        from beach_windows.tides.stations import STATIONS

        if station not in STATIONS:
            raise KeyError(f"Unknown tide station: {station}")
        table = STATIONS[station]
        return cls(table.predictions(), max_tide_height=table.max_height_m)

    @property
    def dates(self) -> list[date]:
        """Dates with at least one prediction."""
        return sorted(self._by_day)

    def predictions_for(self, day: date) -> list[TidePrediction]:
        """Predictions for a date, ordered by time."""
        return list(self._by_day.get(day, []))

    def _all_predictions(self) -> list[TidePrediction]:
        return [p for day in self.dates for p in self._by_day[day]]

    def interpolate_tide_height(self, day: date, hour: float) -> float | None:
        """Estimate the tide height on a date at a (fractional) clock hour.

        At or before the day's first event, or at or after its last event,
        the boundary event's height is returned; there is no extrapolation.

        Returns:
            Height in metres, or None if there are no predictions for the date
        """
        preds = self._by_day.get(day)
        if not preds:
            return None

        if hour <= preds[0].hour:
            return preds[0].height_m
        if hour >= preds[-1].hour:
            return preds[-1].height_m

        for prediction in preds:
            if prediction.hour == hour:
                return prediction.height_m

        for prev, nxt in zip(preds, preds[1:]):
            if prev.hour < hour < nxt.hour:
                span = nxt.hour - prev.hour
                progress = (hour - prev.hour) / span if span > 0 else 0.5
                return cosine_interpolate(prev.height_m, nxt.height_m, progress)

        return preds[-1].height_m

    def height_at(self, when: datetime) -> float | None:
        """Estimate the tide height at a local datetime."""
        hour = when.hour + when.minute / 60 + when.second / 3600
        return self.interpolate_tide_height(when.date(), hour)

    def hourly_heights(self, day: date, start_hour: int = 6, end_hour: int = 21) -> list[float]:
        """Heights for each whole hour in [start_hour, end_hour], or [] without data."""
        if day not in self._by_day:
            return []
        heights = []
        for hour in range(start_hour, end_hour + 1):
            height = self.interpolate_tide_height(day, hour)
            if height is not None:
                heights.append(height)
        return heights

    def _surrounding(self, when: datetime) -> tuple[TidePrediction | None, TidePrediction | None]:
        """Last event at or before `when` and first event after it, across days."""
        prev_event: TidePrediction | None = None
        next_event: TidePrediction | None = None
        for prediction in self._all_predictions():
            if prediction.when <= when:
                prev_event = prediction
            else:
                next_event = prediction
                break
        return prev_event, next_event

    def tide_state(self, when: datetime) -> TideState | None:
        """Whether the tide is rising, falling, or near an extreme.

        Returns None when there is no prediction on either side of `when`.
        """
        prev_event, next_event = self._surrounding(when)

        if prev_event is None and next_event is None:
            return None
        if prev_event is None:
            return TideState.RISING if next_event.is_high else TideState.FALLING
        if next_event is None:
            return TideState.FALLING if prev_event.is_high else TideState.RISING

        total = (next_event.when - prev_event.when).total_seconds()
        elapsed = (when - prev_event.when).total_seconds()
        progress = elapsed / total if total > 0 else 0.5
        height = cosine_interpolate(prev_event.height_m, next_event.height_m, progress)

        threshold = abs(next_event.height_m - prev_event.height_m) * EXTREME_THRESHOLD
        if abs(height - next_event.height_m) < threshold:
            return TideState.HIGH if next_event.is_high else TideState.LOW
        if abs(height - prev_event.height_m) < threshold:
            return TideState.HIGH if prev_event.is_high else TideState.LOW
        return TideState.FALLING if prev_event.is_high else TideState.RISING

    def next_events(self, when: datetime) -> tuple[TideEvent | None, TideEvent | None]:
        """Next high tide and next low tide after `when`."""
        next_high: TideEvent | None = None
        next_low: TideEvent | None = None
        for prediction in self._all_predictions():
            if prediction.when <= when:
                continue
            event = TideEvent(
                when=prediction.when,
                height_m=prediction.height_m,
                is_high=prediction.is_high,
            )
            if prediction.is_high and next_high is None:
                next_high = event
            elif not prediction.is_high and next_low is None:
                next_low = event
            if next_high and next_low:
                break
        return next_high, next_low


def interpolate_tide_height(
    predictions: Iterable[TidePrediction],
    day: date,
    hour: float,
) -> float | None:
    """Convenience function for a one-off interpolation."""
    return TideInterpolator(predictions).interpolate_tide_height(day, hour)
