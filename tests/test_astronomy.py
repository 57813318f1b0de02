"""Tests for sunset calculations."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from beach_windows.astronomy.sun import sun_altitude, sunset_hour, sunset_time
from beach_windows.models.location import Coordinates, get_beach
from beach_windows.snapshots import assemble_snapshots
from beach_windows.models.conditions import HourlyWeather

VANCOUVER = Coordinates(latitude=49.2743, longitude=-123.1544)


class TestSunAltitude:
    """Tests for sun position."""

    def test_sun_up_at_local_noon_in_summer(self):
        noon = datetime(2024, 6, 21, 20, 0, tzinfo=timezone.utc)  # 13:00 PDT
        assert sun_altitude(VANCOUVER, noon) > 50

    def test_sun_down_at_local_midnight(self):
        midnight = datetime(2024, 6, 22, 8, 0, tzinfo=timezone.utc)  # 01:00 PDT
        assert sun_altitude(VANCOUVER, midnight) < 0


class TestSunset:
    """Tests for sunset time and hour."""

    def test_summer_solstice_sunset(self):
        """Vancouver sunset on 2024-06-21 is around 21:21 PDT."""
        sunset = sunset_time(VANCOUVER, date(2024, 6, 21), "America/Vancouver")
        assert sunset.tzinfo == ZoneInfo("America/Vancouver")
        assert sunset.hour == 21
        assert 10 <= sunset.minute <= 30

    def test_winter_sunset(self):
        """Vancouver sunset on 2024-12-21 is around 16:16 PST."""
        sunset = sunset_time(VANCOUVER, date(2024, 12, 21), "America/Vancouver")
        assert sunset.hour == 16

    def test_sunset_hour_for_beach(self):
        assert sunset_hour(get_beach("kitsilano"), date(2024, 6, 21)) == 21

    def test_polar_day_has_no_sunset(self):
        svalbard = Coordinates(latitude=78.22, longitude=15.65)
        assert sunset_time(svalbard, date(2024, 6, 21), "Arctic/Longyearbyen") is None


def test_snapshots_use_computed_sunset_by_default():
    weather = [HourlyWeather(hour=18, temperature_c=22.0, wind_kmh=5.0)]
    snapshots = assemble_snapshots(get_beach("kitsilano"), date(2024, 6, 21), weather)
    assert snapshots[0].sunset_hour == 21
