"""Water quality classification from E. coli samples and advisories.

Thresholds follow the Vancouver Coastal Health beach guidelines, in
E. coli CFU per 100 mL:
- Above 400: closed
- 200 to 400: advisory
- Below 200: safe

A posted advisory mentioning a closure overrides the count.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from beach_windows.models.conditions import WaterQuality, WaterStatus

logger = logging.getLogger(__name__)

ECOLI_ADVISORY_THRESHOLD = 200
ECOLI_CLOSED_THRESHOLD = 400

_CLOSURE_PATTERN = re.compile(r"\bclos(ed|ure)\b", re.IGNORECASE)


def determine_status(ecoli_count: int | None, advisory: str | None = None) -> WaterStatus:
    """Classify a sample.

    Args:
        ecoli_count: E. coli CFU/100mL, or None if not reported
        advisory: Free-text advisory posted for the beach, if any

    Returns:
        WaterStatus for the sample
    """
    if advisory and _CLOSURE_PATTERN.search(advisory):
        return WaterStatus.CLOSED

    if ecoli_count is None:
        return WaterStatus.UNKNOWN
    if ecoli_count > ECOLI_CLOSED_THRESHOLD:
        return WaterStatus.CLOSED
    if ecoli_count >= ECOLI_ADVISORY_THRESHOLD:
        return WaterStatus.ADVISORY
    return WaterStatus.SAFE


def classify_sample(
    sample_date: date,
    ecoli_count: int | None,
    advisory: str | None = None,
) -> WaterQuality:
    """Build a WaterQuality record from a raw sample."""
    status = determine_status(ecoli_count, advisory)
    logger.debug("Sample from %s: ecoli=%s -> %s", sample_date, ecoli_count, status.value)
    return WaterQuality(
        status=status,
        ecoli_count=ecoli_count,
        sample_date=sample_date,
        advisory_reason=advisory,
    )
