"""Pytest fixtures for beach window recommendation tests.

This module provides test fixtures that ensure:
1. No upstream data sources are contacted
2. The cache never touches the real user cache directory
3. Isolated test environment with controlled configuration
"""

from datetime import date, datetime, timedelta, timezone
from typing import Callable

import pytest

from beach_windows.cache.manager import CacheManager
from beach_windows.models.conditions import ConditionSnapshot, WaterStatus
from beach_windows.models.tide import TidePrediction


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(tmp_path, monkeypatch):
    """Reset settings before each test and point the cache at a temp dir."""
    from beach_windows.config import get_settings

    monkeypatch.setenv("BEACH_CACHE_DIR", str(tmp_path / "settings-cache"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeClock:
    """Controllable clock for cache expiry tests."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at noon UTC on 2026-01-15."""
    return FakeClock(datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def cache(tmp_path, clock: FakeClock) -> CacheManager:
    """Cache in a temporary directory driven by the fake clock."""
    return CacheManager(tmp_path / "cache", clock=clock)


# =============================================================================
# Condition Fixtures
# =============================================================================


@pytest.fixture
def make_snapshot() -> Callable[..., ConditionSnapshot]:
    """Factory for snapshots with pleasant summer defaults.

    Defaults score Swimming highly: 24°C, light wind, safe water, mid tide.
    """

    def _make(hour: int = 12, **overrides) -> ConditionSnapshot:
        values = {
            "location_id": "kitsilano",
            "timestamp": datetime(2024, 7, 15, hour, 0),
            "temperature_c": 24.0,
            "wind_kmh": 8.0,
            "uv_index": 5.0,
            "water_status": WaterStatus.SAFE,
            "tide_height_m": 2.4,
            "max_tide_height_m": 4.8,
            "crowd_level": 0.2,
            "sunset_hour": None,
            "weather_code": 0,
        }
        values.update(overrides)
        return ConditionSnapshot(**values)

    return _make


@pytest.fixture
def day_of_snapshots(make_snapshot) -> Callable[..., list[ConditionSnapshot]]:
    """Factory for one snapshot per hour from 06:00 through 21:00."""

    def _make(**overrides) -> list[ConditionSnapshot]:
        return [make_snapshot(hour=hour, **overrides) for hour in range(6, 22)]

    return _make


@pytest.fixture
def sample_predictions() -> list[TidePrediction]:
    """A day of alternating tide extremes."""
    day = date(2024, 7, 15)
    rows = [
        (2, 15, 4.5, True),
        (8, 45, 1.2, False),
        (14, 34, 4.3, True),
        (21, 0, 0.8, False),
    ]
    return [
        TidePrediction(
            date=day,
            time=datetime(2024, 7, 15, hour, minute).time(),
            height_m=height,
            is_high=is_high,
        )
        for hour, minute, height, is_high in rows
    ]
