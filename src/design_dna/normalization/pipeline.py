"""Full token normalization pipeline.

Pipeline steps:
    1. Flatten tokens from every page
    2. Normalize typography and spacing units (unparseable sizes dropped)
    3. Fold identical tokens from different pages into one token per
       ``merge_key()``, concatenating evidence
    4. Order colors by evidence count and deduplicate them (CIEDE2000)
    5. Detect the spacing scale
    6. Cross-page validate every category
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Hashable, List, Mapping, Sequence, TypeVar

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..logging_config import get_logger
from ..models import (
    ColorCluster,
    DesignToken,
    MotionToken,
    PageTokens,
    RadiusToken,
    ShadowToken,
    SpacingScale,
    SpacingToken,
    T,
    TokenWithFrequency,
    TypographyToken,
)
from . import colors, spacing
from .units import normalize_spacing_tokens, normalize_typography_tokens
from .validation import standards_only, validate

logger = get_logger(__name__)

D = TypeVar("D", bound=DesignToken)


@dataclass(frozen=True)
class ValidatedTokens(Generic[T]):
    all: tuple[TokenWithFrequency[T], ...]
    standards: tuple[TokenWithFrequency[T], ...]


@dataclass(frozen=True)
class NormalizationMetadata:
    total_pages: int
    min_page_threshold: int
    base_font_size: float
    color_delta_e: float


@dataclass(frozen=True)
class NormalizationResult:
    color_clusters: tuple[ColorCluster, ...]
    colors: ValidatedTokens[ColorCluster]
    typography: ValidatedTokens[TypographyToken]
    spacing: ValidatedTokens[SpacingToken]
    spacing_scale: SpacingScale
    radii: ValidatedTokens[RadiusToken]
    shadows: ValidatedTokens[ShadowToken]
    motion: ValidatedTokens[MotionToken]
    metadata: NormalizationMetadata


def merge_tokens(tokens: Sequence[D]) -> List[D]:
    """Fold tokens with the same merge key, keeping the first one's fields."""
    merged: dict[Hashable, D] = {}
    for token in tokens:
        key = token.merge_key()
        existing = merged.get(key)
        if existing is None:
            merged[key] = token
        else:
            merged[key] = replace(existing, evidence=existing.evidence + token.evidence)
    return list(merged.values())


def _validated(
    tokens: Sequence[T], thresholds: ThresholdConfig, total_pages: int
) -> ValidatedTokens[T]:
    results = validate(tokens, thresholds.min_page_threshold, total_pages, thresholds)
    return ValidatedTokens(all=tuple(results), standards=tuple(standards_only(results)))


def normalize_pipeline(
    pages: Mapping[str, PageTokens], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> NormalizationResult:
    """Run the complete normalization pipeline over per-page token lists.

    Args:
        pages: page URL -> tokens extracted from that page
        thresholds: Engine thresholds

    Returns:
        NormalizationResult with every category validated
    """
    total_pages = len(pages)

    all_colors = [t for page in pages.values() for t in page.colors]
    all_typography = [t for page in pages.values() for t in page.typography]
    all_spacing = [t for page in pages.values() for t in page.spacing]
    all_radii = [t for page in pages.values() for t in page.radii]
    all_shadows = [t for page in pages.values() for t in page.shadows]
    all_motion = [t for page in pages.values() for t in page.motion]

    typography = merge_tokens(
        normalize_typography_tokens(all_typography, thresholds.base_font_size)
    )
    spacing_tokens = merge_tokens(
        normalize_spacing_tokens(all_spacing, thresholds.base_font_size)
    )

    # most frequent first so the dominant shade becomes each cluster's canonical
    color_tokens = sorted(merge_tokens(all_colors), key=lambda t: -len(t.evidence))
    clusters = colors.dedupe(color_tokens, thresholds.color_delta_e)

    scale = spacing.detect(
        [t.normalized_value.pixels for t in spacing_tokens if t.normalized_value is not None],
        thresholds.spacing_candidates,
        thresholds.spacing_coverage_threshold,
    )

    logger.debug(
        f"Normalizing {total_pages} page(s): {len(clusters)} color cluster(s) "
        f"from {len(color_tokens)} color(s), spacing base unit {scale.base_unit}"
    )

    return NormalizationResult(
        color_clusters=tuple(clusters),
        colors=_validated(clusters, thresholds, total_pages),
        typography=_validated(typography, thresholds, total_pages),
        spacing=_validated(spacing_tokens, thresholds, total_pages),
        spacing_scale=scale,
        radii=_validated(merge_tokens(all_radii), thresholds, total_pages),
        shadows=_validated(merge_tokens(all_shadows), thresholds, total_pages),
        motion=_validated(merge_tokens(all_motion), thresholds, total_pages),
        metadata=NormalizationMetadata(
            total_pages=total_pages,
            min_page_threshold=thresholds.min_page_threshold,
            base_font_size=thresholds.base_font_size,
            color_delta_e=thresholds.color_delta_e,
        ),
    )
