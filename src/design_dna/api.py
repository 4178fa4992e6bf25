"""Clean public API for Design DNA.

Usage:
    from design_dna import normalize, aggregate_components, run

    tokens = normalize(pages)                       # Mapping[url, PageTokens]
    components = aggregate_components(instances)    # Mapping[url, instances]
    result = run(Path("extraction.json"))
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .components.aggregator import aggregate
from .config import NormalizationConfig
from .ingest import load_document
from .logging_config import get_logger
from .models import AggregatedComponent, DetectedComponentInstance, PageTokens
from .normalization.pipeline import NormalizationResult, normalize_pipeline

logger = get_logger(__name__)


@dataclass(frozen=True)
class DesignDNAResult:
    """Everything one run produced; either part may be skipped."""

    tokens: Optional[NormalizationResult] = None
    components: Optional[tuple[AggregatedComponent, ...]] = None


def normalize(
    pages: Mapping[str, PageTokens], config: Optional[NormalizationConfig] = None
) -> NormalizationResult:
    """Normalize and validate per-page design tokens."""
    config = config or NormalizationConfig()
    return normalize_pipeline(pages, config.thresholds)


def aggregate_components(
    pages: Mapping[str, Sequence[DetectedComponentInstance]],
    config: Optional[NormalizationConfig] = None,
    total_pages: Optional[int] = None,
) -> List[AggregatedComponent]:
    """Aggregate per-page component instances into canonical components.

    ``total_pages`` defaults to the number of pages in ``pages``.
    """
    config = config or NormalizationConfig()
    if total_pages is None:
        total_pages = len(pages)
    return aggregate(pages, total_pages, thresholds=config.thresholds)


def run(
    path: Path,
    config: Optional[NormalizationConfig] = None,
    include_tokens: bool = True,
    include_components: bool = True,
) -> DesignDNAResult:
    """Load an extraction document and run the requested analyses.

    Raises:
        InputFormatError: If the document cannot be read
    """
    config = config or NormalizationConfig()
    page_tokens, page_components = load_document(path)
    logger.info(f"Loaded {len(page_tokens)} page(s) from {path}")

    tokens = normalize(page_tokens, config) if include_tokens else None
    components = (
        tuple(aggregate_components(page_components, config, total_pages=len(page_tokens)))
        if include_components
        else None
    )
    return DesignDNAResult(tokens=tokens, components=components)
