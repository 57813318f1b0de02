"""File-backed TTL cache for upstream data.

Each entry is one JSON file in the cache directory:

```json
{
  "payload": ...,
  "encoding": "json",
  "captured_at": "2026-01-01T12:00:00Z",
  "ttl_seconds": 3600.0
}
```

Expiry is never stored. It is derived on read as
`now - captured_at > ttl`, so an entry is correct no matter when it was
last checked. Entries are replaced whole on every write, never edited in
place, so concurrent readers see either the old or the new record.

The cache is passive: it never fetches, never retries, and never blocks on
the network. `beach_windows.sources.base.CachedSource` applies the
fetch/fallback contract on top of it.
"""

from __future__ import annotations

import base64
import logging
import os
import re
import tempfile
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSAFE_KEY_CHARS = re.compile(r"[^a-z0-9_.-]")

_JSON_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def cache_key(source: str, location_id: str) -> str:
    """Build a cache key from a data source name and a location id.

    Example:
        cache_key("water_quality", "Kitsilano Beach") -> "water_quality_kitsilano_beach"
    """
    raw = f"{source}_{location_id}".strip().lower().replace(" ", "_")
    return _UNSAFE_KEY_CHARS.sub("-", raw)


class CacheEntry(BaseModel):
    """A persisted cache record."""

    payload: Any
    encoding: Literal["json", "base64"] = "json"
    captured_at: datetime
    ttl_seconds: float = Field(..., ge=0)

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)

    def age(self, now: datetime) -> timedelta:
        return now - self.captured_at

    def is_expired(self, now: datetime) -> bool:
        return self.age(now) > self.ttl

    def decoded_payload(self) -> Any:
        if self.encoding == "base64":
            return base64.b64decode(self.payload)
        return self.payload


@dataclass
class CachedData(Generic[T]):
    """Result of a cache read."""

    payload: T
    captured_at: datetime
    ttl: timedelta
    age: timedelta
    is_expired: bool


class CacheManager:
    """Durable key/value store with time-to-live metadata.

    Example:
        ```python
        cache = CacheManager(Path("~/.cache/beach-windows").expanduser())
        key = cache_key("tides", "kitsilano")

        cache.write(key, tide_info, ttl=timedelta(hours=24))

        cached = cache.read(key, model=TideInfo)
        if cached and cached.is_expired:
            print(f"Showing tides from {cached.age} ago")
        ```
    """

    def __init__(
        self,
        cache_dir: Path | str,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the cache.

        Args:
            cache_dir: Directory holding one JSON file per key (created lazily)
            clock: Returns the current timezone-aware time
        """
        self.cache_dir = Path(cache_dir)
        self._clock = clock

    @classmethod
    def from_settings(cls) -> CacheManager:
        """Create a cache in the configured cache directory."""
        from beach_windows.config import get_settings

        return cls(get_settings().cache_dir)

    def path_for(self, key: str) -> Path:
        """File holding the entry for `key`.

        Raises:
            ValueError: If the key is empty or has characters `cache_key()`
                never produces, such as path separators
        """
        if not key or _UNSAFE_KEY_CHARS.search(key):
            raise ValueError(f"Invalid cache key: {key!r}")
        return self.cache_dir / f"{key}.json"

    def write(self, key: str, payload: Any, ttl: timedelta) -> None:
        """Persist a payload under `key`, replacing any previous entry.

        Args:
            key: Cache key, see `cache_key()`
            payload: A pydantic model, JSON-compatible data, str or bytes
            ttl: How long the entry stays fresh

        Raises:
            ValueError: If the key is invalid, see `path_for()`
            TypeError: If the payload would not read back exactly as written
                (datetimes, tuples, sets, non-string dict keys...)
            OSError: If the cache directory cannot be written
        """
        path = self.path_for(key)

        if isinstance(payload, (bytes, bytearray)):
            encoded: Any = base64.b64encode(bytes(payload)).decode("ascii")
            encoding = "base64"
        elif isinstance(payload, BaseModel):
            encoded = payload.model_dump(mode="json")
            encoding = "json"
        else:
            try:
                encoded = _JSON_ADAPTER.dump_python(payload, mode="json")
            except ValueError as e:
                raise TypeError(f"Cannot cache payload for {key}: {e}") from e
            # datetimes, tuples, non-str keys... would not read back as written
            if encoded != payload:
                raise TypeError(
                    f"Cannot cache payload for {key}: only JSON-native data, "
                    "str, bytes or pydantic models round-trip unchanged"
                )
            encoding = "json"

        entry = CacheEntry(
            payload=encoded,
            encoding=encoding,
            captured_at=self._clock(),
            ttl_seconds=ttl.total_seconds(),
        )

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(entry.model_dump_json(indent=2))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Cached %s (ttl=%s)", key, ttl)

    def read(self, key: str, model: type[BaseModel] | None = None) -> CachedData[Any] | None:
        """Read an entry, fresh or expired.

        Args:
            key: Cache key
            model: Optional pydantic model to validate the payload into

        Returns:
            CachedData with the payload, its age and expiry flag, or None on
            a miss. Unreadable or corrupt entries count as a miss.

        Raises:
            ValueError: If the key is invalid, see `path_for()`
        """
        path = self.path_for(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Failed to read cache entry %s: %s", key, e)
            return None

        try:
            entry = CacheEntry.model_validate_json(raw)
            payload = entry.decoded_payload()
            if model is not None:
                payload = model.model_validate(payload)
        except (ValidationError, ValueError, TypeError) as e:
            logger.warning("Ignoring corrupt cache entry %s: %s", key, e)
            return None

        now = self._clock()
        return CachedData(
            payload=payload,
            captured_at=entry.captured_at,
            ttl=entry.ttl,
            age=entry.age(now),
            is_expired=entry.is_expired(now),
        )

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns True if something was deleted."""
        try:
            self.path_for(key).unlink()
        except FileNotFoundError:
            return False
        return True

    def clear(self) -> int:
        """Remove every entry. Returns the number removed."""
        if not self.cache_dir.exists():
            return 0
        removed = 0
        for path in self.cache_dir.glob("*.json"):
            path.unlink(missing_ok=True)
            removed += 1
        if removed:
            logger.info("Cleared %d cache entries from %s", removed, self.cache_dir)
        return removed
