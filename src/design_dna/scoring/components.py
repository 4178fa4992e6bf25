"""Component confidence scoring.

    page_coverage = page_count / total_pages
    consistency   = 1 - unique_variant_signatures / instance_count
    density       = min(instance_count / (page_count * expected_per_page), 1)
    value         = min(0.5*page_coverage + 0.3*consistency + 0.2*density, 1)

Uniform components score consistency near 1; fragmented ones near 0. The
level uses the same three-tier mapping as token scores.
"""

from typing import Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..exceptions.analysis import require_non_negative
from ..models import AnalyzedInstance, ComponentConfidenceScore
from .tokens import confidence_level


def variant_consistency(variants: Sequence[AnalyzedInstance]) -> float:
    if not variants:
        return 0.0
    signatures = {analyzed.variant.signature for analyzed in variants}
    return 1.0 - len(signatures) / len(variants)


def score_component(
    page_count: int,
    total_pages: int,
    variants: Sequence[AnalyzedInstance],
    min_page_threshold: int,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> ComponentConfidenceScore:
    require_non_negative("page_count", page_count)
    require_non_negative("total_pages", total_pages)
    require_non_negative("min_page_threshold", min_page_threshold)

    instance_count = len(variants)
    page_coverage = min(page_count / total_pages, 1.0) if total_pages > 0 else 0.0
    consistency = variant_consistency(variants)

    expected = page_count * thresholds.expected_instances_per_page
    density = min(instance_count / expected, 1.0) if expected > 0 else 0.0

    value = min(
        thresholds.component_page_weight * page_coverage
        + thresholds.component_consistency_weight * consistency
        + thresholds.component_density_weight * density,
        1.0,
    )
    level = confidence_level(value, page_count, min_page_threshold, thresholds)

    unique = len({analyzed.variant.signature for analyzed in variants})
    reasoning = (
        f"Found on {page_count}/{total_pages} pages with {instance_count} instances. "
        f"{unique} unique variant(s) (consistency: {consistency * 100:.1f}%)."
    )

    return ComponentConfidenceScore(
        value=value,
        level=level,
        reasoning=reasoning,
        page_count=page_count,
        instance_count=instance_count,
        variant_consistency=consistency,
    )
