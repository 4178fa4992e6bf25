"""Confidence scoring for tokens and components."""

from .components import score_component
from .tokens import confidence_level, score

__all__ = ["score", "confidence_level", "score_component"]
