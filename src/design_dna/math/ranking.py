"""Rank-based bucketing for ordinal variant dimensions.

Values are bucketed by the rank of their *distinct* value, so ties always
share a bucket and the outcome does not depend on input order:

    bucket(rank) = floor(rank * L / k)                 when k >= L
    bucket(rank) = round(rank * (L - 1) / (k - 1))     when 2 <= k < L
    bucket       = middle label                        when k == 1

where k is the number of distinct values and L the number of labels. With the
size labels (small, medium, large) this gives tertiles for three or more
distinct values, a small/large median split for two, and medium for one.
"""

from typing import Dict, List, Optional, Sequence


class RankBucketer:
    """Assign ordinal labels to numeric values by rank fraction."""

    def __init__(self, labels: Sequence[str]):
        if not labels:
            raise ValueError("RankBucketer requires at least one label")
        self.labels = tuple(labels)

    @property
    def default_label(self) -> str:
        return self.labels[(len(self.labels) - 1) // 2]

    def thresholds(self, values: Sequence[float]) -> Dict[float, str]:
        """Map each distinct value to its label."""
        distinct = sorted(set(values))
        k = len(distinct)
        n_labels = len(self.labels)

        if k == 0:
            return {}
        if k == 1:
            return {distinct[0]: self.default_label}

        mapping: Dict[float, str] = {}
        for rank, value in enumerate(distinct):
            if k >= n_labels:
                index = (rank * n_labels) // k
            else:
                # Python's round() is banker's rounding; add 0.5 and floor instead
                index = int(rank * (n_labels - 1) / (k - 1) + 0.5)
            mapping[value] = self.labels[index]
        return mapping

    def assign(self, values: Sequence[Optional[float]]) -> List[str]:
        """Label every value; ``None`` (no signal) gets the default label."""
        mapping = self.thresholds([v for v in values if v is not None])
        return [self.default_label if v is None else mapping[v] for v in values]
