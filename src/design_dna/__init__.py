"""
Design DNA - Normalization & Confidence Engine

Turns raw, per-page style observations from a crawled site into deduplicated,
unit-normalized, cross-page-validated design tokens and component variants,
each with a confidence score.
"""

__version__ = "0.1.0"

from .api import DesignDNAResult, aggregate_components, normalize, run
from .config import NormalizationConfig, ThresholdConfig, load_config

__all__ = [
    "normalize",  # Token pipeline
    "aggregate_components",  # Component pipeline
    "run",  # Load a document and run both
    "DesignDNAResult",
    "NormalizationConfig",
    "ThresholdConfig",
    "load_config",
]
