"""Factor scorers, sanity gates and the time slot scoring engine."""

from beach_windows.scoring.engine import (
    TIME_OF_DAY_WEIGHT,
    compute_factors,
    evaluate_time_slot,
    score_time_slot,
)
from beach_windows.scoring.factors import (
    peace_time_score,
    score_crowd,
    score_temperature,
    score_tide,
    score_uv,
    score_water_quality,
    score_wind,
    sunset_time_score,
)
from beach_windows.scoring.gates import check_sanity_gates

__all__ = [
    "TIME_OF_DAY_WEIGHT",
    "compute_factors",
    "evaluate_time_slot",
    "score_time_slot",
    "peace_time_score",
    "score_crowd",
    "score_temperature",
    "score_tide",
    "score_uv",
    "score_water_quality",
    "score_wind",
    "sunset_time_score",
    "check_sanity_gates",
]
