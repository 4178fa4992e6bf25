"""Token normalization: units, color clusters, spacing scale, cross-page validation."""

from .colors import dedupe
from .pipeline import NormalizationResult, ValidatedTokens, merge_tokens, normalize_pipeline
from .spacing import detect
from .units import (
    normalize_spacing_tokens,
    normalize_typography_tokens,
    normalize_unit,
    parse_pixels,
)
from .validation import standards_only, validate

__all__ = [
    "dedupe",
    "detect",
    "normalize_unit",
    "parse_pixels",
    "normalize_spacing_tokens",
    "normalize_typography_tokens",
    "validate",
    "standards_only",
    "merge_tokens",
    "normalize_pipeline",
    "NormalizationResult",
    "ValidatedTokens",
]
