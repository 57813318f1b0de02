"""Scoring engine combining factor scores into a 0-100 time slot score.

The score is a weighted mean of the factor scores:

    sum(weight_i * factor_i) + 0.1 * time_of_day
    -------------------------------------------- * 100
             sum(weight_i) + 0.1

truncated to an integer. A factor with weight 0 drops out of both the
numerator and the denominator, so it neither helps nor hurts.
"""

from __future__ import annotations

import logging

from beach_windows.models.activity import (
    Activity,
    ActivityProfile,
    TimeOfDayRule,
    get_profile,
)
from beach_windows.models.conditions import ConditionSnapshot
from beach_windows.models.recommendation import ScoreFactors, TimeSlotScore
from beach_windows.scoring.factors import (
    clamp,
    peace_time_score,
    score_crowd,
    score_temperature,
    score_tide,
    score_uv,
    score_water_quality,
    score_wind,
    static_sunset_time_score,
    sunset_time_score,
)
from beach_windows.scoring.gates import check_sanity_gates

logger = logging.getLogger(__name__)

# Fixed weight of the time-of-day factor for every activity
TIME_OF_DAY_WEIGHT = 0.1


def _resolve_profile(profile: Activity | ActivityProfile) -> ActivityProfile:
    if isinstance(profile, ActivityProfile):
        return profile
    return get_profile(profile)


def score_time_of_day(profile: ActivityProfile, snapshot: ConditionSnapshot) -> float:
    """Apply the profile's time-of-day rule to the snapshot hour."""
    rule = profile.time_rule
    if rule == TimeOfDayRule.PEACE:
        return peace_time_score(snapshot.hour)
    if rule == TimeOfDayRule.SUNSET:
        if snapshot.sunset_hour is None:
            logger.debug(
                "No sunset hour for %s at %s, using static evening window",
                snapshot.location_id,
                snapshot.timestamp,
            )
            return static_sunset_time_score(snapshot.hour)
        return sunset_time_score(snapshot.hour, snapshot.sunset_hour)
    return 1.0


def compute_factors(profile: ActivityProfile, snapshot: ConditionSnapshot) -> ScoreFactors:
    """Compute all seven factor scores for a snapshot."""
    return ScoreFactors(
        temperature=score_temperature(snapshot.temperature_c, profile),
        water_quality=score_water_quality(snapshot.water_status),
        wind=score_wind(snapshot.wind_kmh, profile),
        uv=score_uv(snapshot.uv_index, profile),
        tide=score_tide(snapshot.tide_height_m, snapshot.max_tide_height_m, profile),
        crowd=score_crowd(snapshot.crowd_level, profile),
        time_of_day=score_time_of_day(profile, snapshot),
    )


def combine_factors(profile: ActivityProfile, factors: ScoreFactors) -> int:
    """Weighted mean of factor scores as an integer in [0, 100]."""
    weights = profile.factor_weights()
    weighted_sum = sum(getattr(factors, name) * weight for name, weight in weights.items())
    weighted_sum += factors.time_of_day * TIME_OF_DAY_WEIGHT
    total_weight = sum(weights.values()) + TIME_OF_DAY_WEIGHT

    return int(clamp(weighted_sum / total_weight * 100, 0.0, 100.0))


def score_time_slot(
    profile: Activity | ActivityProfile,
    snapshot: ConditionSnapshot,
) -> TimeSlotScore:
    """Score one (beach, hour, activity) triple.

    Args:
        profile: Activity, or an explicit profile to score with
        snapshot: Conditions for one beach at one hour

    Returns:
        TimeSlotScore with the integer score and its factor breakdown
    """
    profile = _resolve_profile(profile)
    factors = compute_factors(profile, snapshot)

    return TimeSlotScore(
        timestamp=snapshot.timestamp,
        location_id=snapshot.location_id,
        activity=profile.activity,
        score=combine_factors(profile, factors),
        factors=factors,
    )


def evaluate_time_slot(
    profile: Activity | ActivityProfile,
    snapshot: ConditionSnapshot,
) -> TimeSlotScore:
    """Score a time slot after checking the sanity gates.

    A gated hour scores 0 with all factors zeroed and carries the reason.
    """
    profile = _resolve_profile(profile)
    reason = check_sanity_gates(profile.activity, snapshot)
    if reason is None:
        return score_time_slot(profile, snapshot)

    logger.debug(
        "Blocked %s at %s for %s: %s",
        profile.activity.value,
        snapshot.location_id,
        snapshot.timestamp,
        reason,
    )
    return TimeSlotScore(
        timestamp=snapshot.timestamp,
        location_id=snapshot.location_id,
        activity=profile.activity,
        score=0,
        factors=ScoreFactors.zero(),
        blocked=True,
        block_reason=reason,
    )
