"""Upstream data source interface and cache fallback."""

from beach_windows.sources.base import (
    CachedSource,
    DataSource,
    SourceError,
    SourceParseError,
    SourceResult,
    SourceUnavailableError,
    fetch_conditions,
)

__all__ = [
    "CachedSource",
    "DataSource",
    "SourceError",
    "SourceParseError",
    "SourceResult",
    "SourceUnavailableError",
    "fetch_conditions",
]
