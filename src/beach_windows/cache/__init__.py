"""TTL cache for upstream data sources."""

from beach_windows.cache.manager import (
    CacheEntry,
    CacheManager,
    CachedData,
    cache_key,
)

__all__ = [
    "CacheEntry",
    "CacheManager",
    "CachedData",
    "cache_key",
]
