"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every variable is optional and prefixed with `BEACH_`.

## Environment Variables

- BEACH_CACHE_DIR: Directory for cached upstream data (default: ~/.cache/beach-windows)
- BEACH_WEATHER_TTL_HOURS: Weather cache lifetime (default: 1)
- BEACH_TIDES_TTL_HOURS: Tide cache lifetime (default: 24)
- BEACH_WATER_QUALITY_TTL_HOURS: Water quality cache lifetime (default: 24)
- BEACH_MIN_WINDOW_SCORE: Score an hour needs to join a window (default: 40)

## Example .env file

```
BEACH_CACHE_DIR=/var/cache/beach-windows
BEACH_MIN_WINDOW_SCORE=50
```
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_cache_dir() -> Path:
    return Path.home() / ".cache" / "beach-windows"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BEACH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cache
    cache_dir: Path = Field(default_factory=_default_cache_dir)
    weather_ttl_hours: float = Field(default=1, gt=0)
    tides_ttl_hours: float = Field(default=24, gt=0)
    water_quality_ttl_hours: float = Field(default=24, gt=0)

    # Window building
    min_window_score: int = Field(
        default=40,
        ge=0,
        le=100,
        description="Hours scoring at or above this are worth recommending",
    )
    max_windows: int = Field(default=3, ge=1, le=10)
    day_start_hour: int = Field(default=6, ge=0, le=23)
    day_end_hour: int = Field(default=21, ge=0, le=23)

    # Water quality
    water_quality_stale_days: int = Field(default=2, ge=0)

    @field_validator("cache_dir", mode="before")
    @classmethod
    def expand_cache_dir(cls, v: str | Path) -> Path:
        """Expand '~' in the configured cache directory."""
        return Path(v).expanduser()

    @model_validator(mode="after")
    def validate_day_hours(self) -> Settings:
        """Ensure the recommendation day starts before it ends."""
        if self.day_start_hour > self.day_end_hour:
            raise ValueError("day_start_hour must not be after day_end_hour")
        return self

    def ttl_for(self, source: str) -> timedelta:
        """Cache lifetime for a data source name."""
        hours = {
            "weather": self.weather_ttl_hours,
            "tides": self.tides_ttl_hours,
            "water_quality": self.water_quality_ttl_hours,
        }.get(source, self.weather_ttl_hours)
        return timedelta(hours=hours)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
