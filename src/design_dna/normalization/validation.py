"""Cross-page validation: promote tokens that recur on enough pages.

Every token is kept; ``is_standard`` marks the ones seen on at least
``min_page_threshold`` distinct pages so callers can choose between
"standards only" and "all, with confidence".
"""

from typing import List, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..exceptions.analysis import require_non_negative
from ..models import T, TokenWithFrequency
from ..scoring.tokens import score


def validate(
    tokens: Sequence[T],
    min_page_threshold: int,
    total_pages: int,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> List[TokenWithFrequency[T]]:
    """Attach page statistics and confidence to each token.

    Results are ordered by page count, then occurrence count, both
    descending; equal tokens keep their input order.

    Raises:
        ContractViolationError: If min_page_threshold or total_pages is negative
    """
    require_non_negative("min_page_threshold", min_page_threshold)
    require_non_negative("total_pages", total_pages)

    results: List[TokenWithFrequency[T]] = []
    for token in tokens:
        page_urls = frozenset(evidence.page_url for evidence in token.evidence)
        occurrence_count = len(token.evidence)
        confidence = score(
            len(page_urls), total_pages, occurrence_count, min_page_threshold, thresholds
        )
        results.append(
            TokenWithFrequency(
                token=token,
                page_urls=page_urls,
                occurrence_count=occurrence_count,
                confidence=confidence,
                is_standard=len(page_urls) >= min_page_threshold,
            )
        )

    results.sort(key=lambda r: (-r.page_count, -r.occurrence_count))
    return results


def standards_only(results: Sequence[TokenWithFrequency[T]]) -> List[TokenWithFrequency[T]]:
    return [r for r in results if r.is_standard]
