"""Upstream data source boundary.

Concrete clients (weather, tides, water quality) live outside this package.
This module defines what they must look like and how they use the cache.

## Error Taxonomy

Sources classify their own failures:
- `SourceUnavailableError`: network errors, timeouts, HTTP error statuses
- `SourceParseError`: the upstream answered but the payload is unusable

Both derive from `SourceError`. Only `SourceError` triggers the stale cache
fallback; anything else is a bug and propagates.

## Cache Contract

`CachedSource` wraps a source with the cache:
1. A fresh cache entry is returned without touching the network
2. Otherwise the source is fetched, and the result cached and returned
3. If the fetch fails with `SourceError`, the cached payload is returned
   regardless of expiry, with its age so the UI can show staleness
4. With nothing cached, the original error is raised
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel

from beach_windows.cache.manager import CacheManager, cache_key
from beach_windows.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SourceError(Exception):
    """Base exception for upstream data source errors."""

    def __init__(
        self,
        message: str,
        source: str,
        location_id: str | None = None,
    ):
        super().__init__(message)
        self.source = source
        self.location_id = location_id


class SourceUnavailableError(SourceError):
    """Raised when the upstream cannot be reached or answers with an error."""

    def __init__(
        self,
        source: str,
        location_id: str | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        message = f"{source} is unavailable"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message, source=source, location_id=location_id)
        self.status_code = status_code


class SourceParseError(SourceError):
    """Raised when an upstream payload cannot be parsed."""

    pass


class DataSource(ABC, Generic[T]):
    """Abstract base class for upstream data sources.

    Attributes:
        name: Source name, used in cache keys (e.g. "weather")
        ttl: How long fetched data stays fresh, or None to use the
            configured TTL for `name` (see `Settings.ttl_for`)
        model: Pydantic model the payload is validated into when read back
            from the cache, or None for plain JSON data

    Example:
        ```python
        class WaterQualitySource(DataSource[WaterQuality]):
            name = "water_quality"
            model = WaterQuality

            async def fetch(self, location_id):
                record = await self._client.latest_sample(location_id)
                return parse_sample(record)
        ```
    """

    name: str
    ttl: timedelta | None = None
    model: type[BaseModel] | None = None

    @abstractmethod
    async def fetch(self, location_id: str) -> T:
        """Fetch fresh data for a location.

        Raises:
            SourceError: If the data cannot be retrieved or parsed
        """
        pass


@dataclass
class SourceResult(Generic[T]):
    """Data handed to the engine, with where it came from."""

    payload: T
    from_cache: bool = False
    is_stale: bool = False
    age: timedelta = timedelta(0)


class CachedSource(Generic[T]):
    """Applies the cache contract around a data source.

    Example:
        ```python
        weather = CachedSource(OpenMeteoSource(), CacheManager.from_settings())

        result = await weather.get("kitsilano")
        if result.is_stale:
            print(f"Offline, showing weather from {result.age} ago")
        ```
    """

    def __init__(self, source: DataSource[T], cache: CacheManager | None = None):
        """Initialize the wrapper.

        Args:
            source: Source to fetch from
            cache: Cache to read and write, or None to always fetch
        """
        self.source = source
        self.cache = cache

    @property
    def name(self) -> str:
        return self.source.name

    @property
    def ttl(self) -> timedelta:
        """Freshness of cached data: the source's own TTL, else the configured one."""
        if self.source.ttl is not None:
            return self.source.ttl
        return get_settings().ttl_for(self.source.name)

    def key_for(self, location_id: str) -> str:
        return cache_key(self.source.name, location_id)

    async def get(self, location_id: str, refresh: bool = False) -> SourceResult[T]:
        """Get data for a location, from cache or upstream.

        Args:
            location_id: Location to get data for
            refresh: Skip a fresh cache entry and always try upstream first

        Raises:
            SourceError: If the fetch fails and nothing is cached
        """
        key = self.key_for(location_id)

        if self.cache is not None and not refresh:
            cached = self.cache.read(key, model=self.source.model)
            if cached is not None and not cached.is_expired:
                return SourceResult(payload=cached.payload, from_cache=True, age=cached.age)

        try:
            payload = await self.source.fetch(location_id)
        except SourceError as e:
            if self.cache is not None:
                cached = self.cache.read(key, model=self.source.model)
                if cached is not None:
                    logger.warning(
                        "%s failed for %s, using cached data from %s ago: %s",
                        self.source.name,
                        location_id,
                        cached.age,
                        e,
                    )
                    return SourceResult(
                        payload=cached.payload,
                        from_cache=True,
                        is_stale=cached.is_expired,
                        age=cached.age,
                    )
            raise

        if self.cache is not None:
            try:
                self.cache.write(key, payload, self.ttl)
            except OSError as e:
                logger.warning("Could not cache %s for %s: %s", self.source.name, location_id, e)
            else:
                logger.info("Refreshed %s for %s", self.source.name, location_id)

        return SourceResult(payload=payload)


async def fetch_conditions(
    sources: Mapping[str, CachedSource[Any]],
    location_id: str,
    refresh: bool = False,
) -> dict[str, SourceResult[Any] | None]:
    """Fetch every source for one location concurrently.

    A source that fails with nothing cached yields None for its entry; the
    engine then scores with that factor's neutral default.

    Args:
        sources: Cached sources keyed by name (e.g. "weather", "tides")
        location_id: Location to fetch
        refresh: Bypass fresh cache entries

    Returns:
        Result per source name, or None where no data could be had
    """
    names = list(sources)
    results = await asyncio.gather(
        *(sources[name].get(location_id, refresh=refresh) for name in names),
        return_exceptions=True,
    )

    merged: dict[str, SourceResult[Any] | None] = {}
    for name, result in zip(names, results):
        if isinstance(result, SourceError):
            logger.warning("No %s data for %s: %s", name, location_id, result)
            merged[name] = None
        elif isinstance(result, BaseException):
            raise result
        else:
            merged[name] = result
    return merged
