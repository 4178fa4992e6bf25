"""Spacing scale detection.

Candidate base units are tried in order; the first one that exactly divides
at least ``coverage_threshold`` of the distinct values wins, so 4 beats 8 when
both qualify. Without a qualifying candidate the base unit falls back to the
GCD of the distinct values, and ``coverage`` reports the best tried
candidate's coverage (the GCD trivially divides everything, which says
nothing about how regular the scale is).

Values are rounded half up to whole pixels (12.5 -> 13); zero and negative values carry no scale
information and are ignored.
"""

import math
from typing import Sequence

from ..logging_config import get_logger
from ..math.statistics import Statistics
from ..models import SpacingScale

logger = get_logger(__name__)

DEFAULT_CANDIDATES = (4, 6, 8, 10)
DEFAULT_COVERAGE_THRESHOLD = 0.8


def detect(
    values: Sequence[float],
    candidates: Sequence[int] = DEFAULT_CANDIDATES,
    coverage_threshold: float = DEFAULT_COVERAGE_THRESHOLD,
) -> SpacingScale:
    """Infer the spacing base unit from normalized pixel values."""
    rounded = (math.floor(v + 0.5) for v in values)
    distinct = sorted({v for v in rounded if v > 0})
    if not distinct:
        return SpacingScale(base_unit=1, scale=(), coverage=0.0)

    best_coverage = 0.0
    for candidate in candidates:
        coverage = Statistics.divisible_fraction(distinct, candidate)
        if coverage >= coverage_threshold:
            return SpacingScale(
                base_unit=candidate,
                scale=tuple(v for v in distinct if v % candidate == 0),
                coverage=coverage,
            )
        best_coverage = max(best_coverage, coverage)

    base_unit = Statistics.gcd_all(distinct)
    logger.debug(
        f"No candidate reached {coverage_threshold:.0%} coverage; "
        f"falling back to GCD base unit {base_unit}"
    )
    return SpacingScale(base_unit=base_unit, scale=tuple(distinct), coverage=best_coverage)
