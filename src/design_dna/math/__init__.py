"""Mathematical utilities for design token normalization."""

from .color import DeltaE
from .ranking import RankBucketer
from .statistics import Statistics

__all__ = [
    "DeltaE",
    "RankBucketer",
    "Statistics",
]
