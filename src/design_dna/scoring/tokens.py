"""Token confidence scoring.

Score formula:
    base    = clamp(page_count / total_pages, 0, 1)
    density = occurrence_count / page_count
    bonus   = min(max(density - 1, 0) / divisor, cap)     (default divisor 5, cap 0.2)
    value   = min(base + bonus, 1)

Levels:
    low     page_count < min_page_threshold, or value < 0.3
    medium  0.3 <= value < 0.6
    high    value >= 0.6
"""

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..exceptions.analysis import require_non_negative
from ..models import ConfidenceLevel, ConfidenceScore


def confidence_level(
    value: float,
    page_count: int,
    min_page_threshold: int,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> ConfidenceLevel:
    """Three-tier level shared by token and component scores."""
    if page_count < min_page_threshold:
        return ConfidenceLevel.LOW
    if value < thresholds.low_confidence_below:
        return ConfidenceLevel.LOW
    if value < thresholds.medium_confidence_below:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.HIGH


def density_bonus(
    page_count: int, occurrence_count: int, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> float:
    """Uplift for tokens that repeat within the pages they appear on."""
    if page_count <= 0:
        return 0.0
    per_page = occurrence_count / page_count
    if per_page <= 1.0:
        return 0.0
    return min((per_page - 1.0) / thresholds.density_bonus_divisor, thresholds.density_bonus_cap)


def score(
    page_count: int,
    total_pages: int,
    occurrence_count: int,
    min_page_threshold: int,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> ConfidenceScore:
    """Confidence that a token is a deliberate design decision.

    Raises:
        ContractViolationError: If any count or the threshold is negative
    """
    require_non_negative("page_count", page_count)
    require_non_negative("total_pages", total_pages)
    require_non_negative("occurrence_count", occurrence_count)
    require_non_negative("min_page_threshold", min_page_threshold)

    base = page_count / total_pages if total_pages > 0 else 0.0
    base = max(0.0, min(1.0, base))

    value = min(1.0, base + density_bonus(page_count, occurrence_count, thresholds))
    level = confidence_level(value, page_count, min_page_threshold, thresholds)

    percentage = round(base * 100)
    reasoning = (
        f"Appears on {page_count}/{total_pages} pages ({percentage}%) "
        f"with {occurrence_count} total occurrences"
    )
    if page_count < min_page_threshold:
        reasoning += f"; below the {min_page_threshold}-page standard threshold"

    return ConfidenceScore(value=value, level=level, reasoning=reasoning)
