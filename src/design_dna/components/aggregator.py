"""Component aggregation across pages.

Process:
    1. Flatten the per-page instance lists
    2. Group by component type (first-seen order)
    3. For each type:
       - collect unique page URLs
       - analyze variants over all instances of the type
       - canonical variant = most frequent (size, emphasis, shape) signature
       - canonical styles = per-property mode across instances
       - score confidence
    4. Sort by confidence value, descending
"""

from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..exceptions.analysis import require_non_negative
from ..logging_config import get_logger
from ..math.statistics import Statistics
from ..models import (
    AggregatedComponent,
    AnalyzedInstance,
    ComponentVariant,
    DetectedComponentInstance,
)
from ..scoring.components import score_component
from .variants import analyze

logger = get_logger(__name__)


def canonical_variant(variants: Sequence[AnalyzedInstance]) -> Optional[ComponentVariant]:
    """Most common variant; ties go to the signature seen first."""
    if not variants:
        return None
    counts = Counter(analyzed.variant for analyzed in variants)
    return counts.most_common(1)[0][0]


def canonical_styles(instances: Sequence[DetectedComponentInstance]) -> Dict[str, str]:
    """Mode of every CSS property that appears on at least one instance."""
    properties = Statistics.unique_in_order(
        prop for instance in instances for prop in instance.computed_styles
    )
    styles: Dict[str, str] = {}
    for prop in properties:
        values = [
            instance.computed_styles[prop]
            for instance in instances
            if instance.computed_styles.get(prop) is not None
        ]
        mode = Statistics.mode(values)
        if mode is not None:
            styles[prop] = mode
    return styles


def aggregate(
    per_page_instances: Mapping[str, Sequence[DetectedComponentInstance]],
    total_pages: int,
    min_page_threshold: Optional[int] = None,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> List[AggregatedComponent]:
    """Merge per-page component instances into one definition per type.

    Args:
        per_page_instances: page URL -> instances detected on that page
        total_pages: Pages analyzed (for coverage)
        min_page_threshold: Pages required before confidence can exceed "low";
            defaults to ``thresholds.min_page_threshold``
        thresholds: Scoring configuration

    Raises:
        ContractViolationError: If total_pages or min_page_threshold is negative
    """
    if min_page_threshold is None:
        min_page_threshold = thresholds.min_page_threshold
    require_non_negative("total_pages", total_pages)
    require_non_negative("min_page_threshold", min_page_threshold)

    by_type: Dict[str, List[DetectedComponentInstance]] = {}
    for instances in per_page_instances.values():
        for instance in instances:
            by_type.setdefault(instance.type, []).append(instance)

    aggregated: List[AggregatedComponent] = []
    for component_type, instances in by_type.items():
        page_urls = frozenset(instance.page_url for instance in instances)
        variants = analyze(instances)
        confidence = score_component(
            len(page_urls), total_pages, variants, min_page_threshold, thresholds
        )

        aggregated.append(
            AggregatedComponent(
                type=component_type,
                instances=tuple(instances),
                page_urls=page_urls,
                variants=tuple(variants),
                canonical_styles=canonical_styles(instances),
                canonical_variant=canonical_variant(variants),
                confidence=confidence,
            )
        )
        logger.debug(
            f"{component_type}: {len(instances)} instance(s) on {len(page_urls)} page(s), "
            f"confidence {confidence.value:.2f} ({confidence.level.value})"
        )

    aggregated.sort(key=lambda c: -c.confidence.value if c.confidence else 0.0)
    return aggregated
