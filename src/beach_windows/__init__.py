"""Beach Windows: recommends when to go to the beach for an activity.

Scores each hour of the day from weather, water quality, tide and crowd
data against per-activity profiles, then groups good hours into ranked
time windows.

Example:
    ```python
    from beach_windows import Activity, build_windows

    recommendation = build_windows(Activity.SWIMMING, "kitsilano", snapshots, now)
    windows, all_passed = recommendation.as_tuple()
    ```
"""

from beach_windows.crowd import estimate_crowd
from beach_windows.models import (
    Activity,
    ConditionSnapshot,
    TimeSlotScore,
    TimeWindow,
    WindowRecommendation,
    get_beach,
    get_profile,
)
from beach_windows.recommendations import build_windows
from beach_windows.scoring import score_time_slot
from beach_windows.snapshots import assemble_snapshots
from beach_windows.tides import TideInterpolator, interpolate_tide_height

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Activity",
    "ConditionSnapshot",
    "TideInterpolator",
    "TimeSlotScore",
    "TimeWindow",
    "WindowRecommendation",
    "assemble_snapshots",
    "build_windows",
    "estimate_crowd",
    "get_beach",
    "get_profile",
    "interpolate_tide_height",
    "score_time_slot",
]
