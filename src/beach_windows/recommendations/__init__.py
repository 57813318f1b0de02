"""Time window recommendations for beach activities."""

from beach_windows.recommendations.windows import (
    WindowBuilder,
    build_windows,
    describe_factors,
)

__all__ = [
    "WindowBuilder",
    "build_windows",
    "describe_factors",
]
