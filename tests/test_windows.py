"""Tests for the time window builder."""

from datetime import datetime

import pytest

from beach_windows.models.activity import Activity, get_profile
from beach_windows.models.location import get_beach
from beach_windows.models.recommendation import WindowStatus
from beach_windows.recommendations.windows import (
    WindowBuilder,
    build_windows,
    describe_factors,
)
from beach_windows.scoring.engine import evaluate_time_slot


def _at(hour: int) -> datetime:
    return datetime(2024, 7, 15, hour, 0)


@pytest.fixture
def builder() -> WindowBuilder:
    return WindowBuilder()


@pytest.fixture
def mixed_day(make_snapshot):
    """Swimming day with four separate good runs of different quality.

    06-07: 99, 09-10: 89, 12: 79, 14-15: 89; every other hour is blocked.
    """
    temps = {6: 24.0, 7: 24.0, 9: 18.0, 10: 18.0, 12: 16.0, 14: 18.0, 15: 18.0}
    snapshots = []
    for hour in range(6, 22):
        if hour in temps:
            snapshots.append(make_snapshot(hour=hour, temperature_c=temps[hour]))
        else:
            snapshots.append(make_snapshot(hour=hour, weather_code=95))
    return snapshots


class TestEmptyResults:
    """Tests for telling 'too late' apart from 'nothing suitable'."""

    def test_after_day_end_all_passed(self, builder, day_of_snapshots):
        result = builder.build(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(22))
        assert result.windows == []
        assert result.all_passed is True
        assert result.status == WindowStatus.ALL_PASSED

    def test_nothing_suitable_during_day(self, builder, day_of_snapshots):
        result = builder.build(
            Activity.SWIMMING, "kitsilano", day_of_snapshots(weather_code=95), _at(10)
        )
        assert result.windows == []
        assert result.all_passed is False
        assert result.status == WindowStatus.NONE_SUITABLE

    def test_last_hour_with_nothing_suitable_is_all_passed(self, builder, day_of_snapshots):
        result = builder.build(
            Activity.SWIMMING, "kitsilano", day_of_snapshots(weather_code=95), _at(21)
        )
        assert result.windows == []
        assert result.all_passed is True

    def test_no_snapshots(self, builder):
        result = builder.build(Activity.SWIMMING, "kitsilano", [], _at(9))
        assert result.windows == []
        assert result.all_passed is False

    def test_as_tuple(self, builder, day_of_snapshots):
        windows, all_passed = builder.build(
            Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(23)
        ).as_tuple()
        assert windows == []
        assert all_passed is True


class TestWindowGrouping:
    """Tests for grouping adjacent hours into windows."""

    def test_good_day_is_one_window(self, builder, day_of_snapshots):
        result = builder.build(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(6))
        assert len(result.windows) == 1
        window = result.windows[0]
        assert window.start_hour == 6
        assert window.end_hour == 22
        assert window.duration_hours == 16

    def test_past_hours_are_never_recommended(self, builder, day_of_snapshots):
        result = builder.build(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(14))
        assert result.windows[0].start_hour == 14
        assert all(slot.hour >= 14 for slot in result.hourly)

    def test_current_hour_is_included(self, builder, day_of_snapshots):
        result = builder.build(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(21))
        assert len(result.windows) == 1
        assert result.windows[0].start_hour == 21
        assert result.windows[0].end_hour == 22
        assert result.all_passed is False

    def test_early_morning_starts_at_day_start(self, builder, make_snapshot):
        snapshots = [make_snapshot(hour=hour) for hour in range(0, 24)]
        result = builder.build(Activity.SWIMMING, "kitsilano", snapshots, _at(3))
        assert [slot.hour for slot in result.hourly] == list(range(6, 22))

    def test_peak_is_earliest_best_hour(self, builder, day_of_snapshots):
        result = builder.build(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(6))
        assert result.windows[0].peak_hour == 6

    def test_score_at_floor_qualifies(self, day_of_snapshots):
        snapshots = day_of_snapshots()
        score = evaluate_time_slot(Activity.SWIMMING, snapshots[0]).score
        result = WindowBuilder(min_score=score).build(
            Activity.SWIMMING, "kitsilano", snapshots, _at(6)
        )
        assert len(result.windows) == 1

        result = WindowBuilder(min_score=score + 1).build(
            Activity.SWIMMING, "kitsilano", snapshots, _at(6)
        )
        assert result.windows == []

    def test_duplicate_hours_keep_first(self, builder, make_snapshot):
        snapshots = [
            make_snapshot(hour=10),
            make_snapshot(hour=10, weather_code=95),
        ]
        result = builder.build(Activity.SWIMMING, "kitsilano", snapshots, _at(10))
        assert len(result.hourly) == 1
        assert result.hourly[0].blocked is False


class TestRanking:
    """Tests for ranking and truncating windows."""

    def test_ranked_by_score_then_start(self, builder, mixed_day):
        result = builder.build(Activity.SWIMMING, "kitsilano", mixed_day, _at(6))
        assert [(w.start_hour, w.end_hour, w.score) for w in result.windows] == [
            (6, 8, 99),
            (9, 11, 89),
            (14, 16, 89),
        ]

    def test_keeps_top_three(self, builder, mixed_day):
        result = builder.build(Activity.SWIMMING, "kitsilano", mixed_day, _at(6))
        assert len(result.windows) == 3
        assert all(w.start_hour != 12 for w in result.windows)

    def test_max_windows_setting(self, mixed_day):
        result = WindowBuilder(max_windows=1).build(
            Activity.SWIMMING, "kitsilano", mixed_day, _at(6)
        )
        assert len(result.windows) == 1
        assert result.best.start_hour == 6

    def test_scores_descending(self, builder, mixed_day):
        result = builder.build(Activity.SWIMMING, "kitsilano", mixed_day, _at(6))
        scores = [w.score for w in result.windows]
        assert scores == sorted(scores, reverse=True)

    def test_windows_do_not_overlap(self, builder, mixed_day):
        result = builder.build(Activity.SWIMMING, "kitsilano", mixed_day, _at(6))
        ordered = sorted(result.windows, key=lambda w: w.start_hour)
        for earlier, later in zip(ordered, ordered[1:]):
            assert earlier.end_hour <= later.start_hour


class TestTimeOfDayActivities:
    """Tests for activities with a time-of-day rule."""

    def test_sunset_window_centres_on_sunset(self, builder, day_of_snapshots):
        snapshots = day_of_snapshots(sunset_hour=17)
        result = builder.build(Activity.SUNSET, "kitsilano", snapshots, _at(6))
        assert len(result.windows) == 1
        window = result.windows[0]
        assert window.peak_hour == 17
        assert window.start_hour == 15
        assert window.end_hour == 20

    def test_sunset_follows_actual_sunset(self, builder, day_of_snapshots):
        early = builder.build(
            Activity.SUNSET, "kitsilano", day_of_snapshots(sunset_hour=16), _at(6)
        )
        late = builder.build(
            Activity.SUNSET, "kitsilano", day_of_snapshots(sunset_hour=21), _at(6)
        )
        assert early.best.peak_hour == 16
        assert late.best.peak_hour == 21

    def test_peace_peaks_early(self, builder, day_of_snapshots):
        result = builder.build(Activity.PEACE, "kitsilano", day_of_snapshots(), _at(6))
        assert result.best.peak_hour == 6

    def test_peace_and_sunset_differ(self, builder, day_of_snapshots):
        snapshots = day_of_snapshots(sunset_hour=17)
        peace = builder.build(Activity.PEACE, "kitsilano", snapshots, _at(6))
        sunset = builder.build(Activity.SUNSET, "kitsilano", snapshots, _at(6))
        assert peace.best.peak_hour != sunset.best.peak_hour


class TestHighlights:
    """Tests for window explanations."""

    def test_swimming_highlights(self, builder, day_of_snapshots):
        result = builder.build(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(6))
        window = result.windows[0]
        assert window.highlights == ["safe water", "warm", "ideal tide"]
        assert window.reason == "safe water, warm, ideal tide"

    def test_crowd_phrase_leads_for_peace(self, make_snapshot):
        profile = get_profile(Activity.PEACE)
        snapshot = make_snapshot(hour=7, crowd_level=0.7)
        slot = evaluate_time_slot(profile, snapshot)
        assert describe_factors(profile, slot, snapshot)[0] == "busy"

    def test_cold_phrase(self, make_snapshot):
        profile = get_profile(Activity.SWIMMING)
        snapshot = make_snapshot(temperature_c=16.0)
        slot = evaluate_time_slot(profile, snapshot)
        assert "too cold" in describe_factors(profile, slot, snapshot)

    def test_blocked_slot_gives_reason(self, make_snapshot):
        profile = get_profile(Activity.SWIMMING)
        snapshot = make_snapshot(weather_code=95)
        slot = evaluate_time_slot(profile, snapshot)
        assert describe_factors(profile, slot, snapshot) == [slot.block_reason]


class TestBuildWindows:
    """Tests for the convenience function."""

    def test_accepts_beach(self, day_of_snapshots):
        beach = get_beach("kitsilano")
        result = build_windows(Activity.SWIMMING, beach, day_of_snapshots(), _at(6))
        assert result.location_id == "kitsilano"
        assert result.activity == Activity.SWIMMING

    def test_uses_configured_floor(self, monkeypatch, day_of_snapshots):
        from beach_windows.config import get_settings

        monkeypatch.setenv("BEACH_MIN_WINDOW_SCORE", "100")
        get_settings.cache_clear()

        result = build_windows(Activity.SWIMMING, "kitsilano", day_of_snapshots(), _at(6))
        assert result.windows == []
