"""Component variant analysis and cross-page aggregation."""

from .aggregator import aggregate
from .variants import analyze

__all__ = ["aggregate", "analyze"]
