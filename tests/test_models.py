"""Tests for domain models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from beach_windows.models.activity import (
    Activity,
    ActivityProfile,
    TimeOfDayRule,
    all_profiles,
    get_profile,
)
from beach_windows.models.location import (
    Coordinates,
    all_beaches,
    get_beach,
    max_tide_height,
)
from beach_windows.models.recommendation import (
    ScoreFactors,
    TimeWindow,
    WindowRecommendation,
    WindowStatus,
)


class TestActivity:
    """Tests for the Activity enum."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("swim", Activity.SWIMMING),
            ("Swimming", Activity.SWIMMING),
            ("sun", Activity.SUNBATHING),
            ("SAIL", Activity.SAILING),
            (" sunset ", Activity.SUNSET),
            ("quiet", Activity.PEACE),
        ],
    )
    def test_parse(self, text, expected):
        assert Activity.parse(text) == expected

    def test_parse_unknown(self):
        assert Activity.parse("surfing") is None

    def test_label(self):
        assert Activity.PEACE.label == "Peace & Quiet"


class TestActivityProfiles:
    """Tests for the fixed profile table."""

    def test_every_activity_has_a_profile(self):
        assert [p.activity for p in all_profiles()] == list(Activity)

    def test_weights_non_negative(self):
        for profile in all_profiles():
            assert all(w >= 0 for w in profile.factor_weights().values())

    def test_ranges_ordered(self):
        for profile in all_profiles():
            assert profile.temp_ideal_range[0] <= profile.temp_ideal_range[1]
            assert profile.wind_ideal_range[0] <= profile.wind_ideal_range[1]

    def test_time_rules(self):
        assert get_profile(Activity.SUNSET).time_rule == TimeOfDayRule.SUNSET
        assert get_profile(Activity.PEACE).time_rule == TimeOfDayRule.PEACE
        assert get_profile(Activity.SWIMMING).time_rule == TimeOfDayRule.NONE

    def test_profiles_are_shared_and_frozen(self):
        profile = get_profile(Activity.SWIMMING)
        assert profile is get_profile(Activity.SWIMMING)
        with pytest.raises(ValidationError):
            profile.temp_weight = 1.0

    def test_unordered_range_rejected(self):
        with pytest.raises(ValidationError):
            ActivityProfile(
                activity=Activity.SWIMMING,
                temp_weight=0.3,
                temp_ideal_range=(28.0, 20.0),
                water_quality_weight=0.4,
                wind_weight=0.1,
                wind_ideal_range=(0.0, 15.0),
                uv_weight=0.0,
                tide_weight=0.0,
                crowd_weight=0.1,
            )

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            ActivityProfile(
                activity=Activity.SAILING,
                temp_weight=-0.1,
                temp_ideal_range=(15.0, 30.0),
                water_quality_weight=0.0,
                wind_weight=0.6,
                wind_ideal_range=(15.0, 25.0),
                uv_weight=0.0,
                tide_weight=0.2,
                crowd_weight=0.1,
            )


class TestLocations:
    """Tests for coordinates and the beach registry."""

    def test_coordinates_str(self):
        assert str(get_beach("kitsilano").coordinates) == "49.2743,-123.1544"

    @pytest.mark.parametrize("latitude,longitude", [(91.0, 0.0), (0.0, -181.0)])
    def test_coordinates_out_of_range(self, latitude, longitude):
        with pytest.raises(ValidationError):
            Coordinates(latitude=latitude, longitude=longitude)

    def test_registry(self):
        beaches = all_beaches()
        assert len(beaches) == 12
        assert len({b.id for b in beaches}) == 12
        assert get_beach("kitsilano").name == "Kitsilano Beach"
        assert get_beach("nowhere") is None

    def test_max_tide_height_fallback(self):
        assert max_tide_height("kitsilano") == 4.8
        assert max_tide_height("unknown-beach") == 4.8


class TestConditionSnapshot:
    """Tests for the per-hour snapshot model."""

    def test_tide_fraction(self, make_snapshot):
        assert make_snapshot(tide_height_m=1.2).tide_fraction == pytest.approx(0.25)

    def test_at_hour(self, make_snapshot):
        moved = make_snapshot(hour=9).at_hour(17)
        assert moved.hour == 17
        assert moved.timestamp.date() == datetime(2024, 7, 15).date()

    def test_max_tide_must_be_positive(self, make_snapshot):
        with pytest.raises(ValidationError):
            make_snapshot(max_tide_height_m=0.0)

    def test_crowd_level_bounds(self, make_snapshot):
        with pytest.raises(ValidationError):
            make_snapshot(crowd_level=1.5)


def _window(start: int, end: int, score: int) -> TimeWindow:
    return TimeWindow(
        start_hour=start,
        end_hour=end,
        peak_hour=start,
        score=score,
        factors=ScoreFactors.zero(),
    )


class TestRecommendationModels:
    """Tests for windows and recommendations."""

    def test_window_contains_is_end_exclusive(self):
        window = _window(9, 12, 80)
        assert window.contains(9)
        assert window.contains(11)
        assert not window.contains(12)
        assert window.duration_hours == 3

    def test_reason_without_highlights(self):
        assert _window(9, 10, 50).reason == "mixed conditions"

    def test_status(self):
        now = datetime(2024, 7, 15, 10, 0)
        base = {"activity": Activity.SWIMMING, "location_id": "kitsilano", "generated_at": now}

        recommended = WindowRecommendation(windows=[_window(10, 12, 70)], **base)
        passed = WindowRecommendation(all_passed=True, **base)
        nothing = WindowRecommendation(**base)

        assert recommended.status == WindowStatus.RECOMMENDED
        assert recommended.best.score == 70
        assert passed.status == WindowStatus.ALL_PASSED
        assert nothing.status == WindowStatus.NONE_SUITABLE
        assert nothing.best is None

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            _window(9, 10, 101)
