"""Color deduplication by CIEDE2000 perceptual distance.

Greedy single pass over colors in input order (callers pass them sorted by
descending frequency). Each color joins the cluster whose canonical is
nearest when that distance is below the threshold, otherwise it opens a new
cluster and becomes its canonical. Colors only chain through canonicals, so
the result is order-dependent and not globally optimal.

Any CSS color syntax is accepted; values are compared and reported as
lowercase sRGB hex, so "rgb(26, 115, 232)" and "#1A73E8" land in one cluster
under "#1a73e8".
"""

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
from coloraide import Color

from ..exceptions.analysis import require_positive
from ..logging_config import get_logger
from ..math.color import DeltaE
from ..models import ColorCluster, ColorToken, TokenEvidence

logger = get_logger(__name__)

DEFAULT_DELTA_E_THRESHOLD = 2.3


@dataclass
class _ClusterAccumulator:
    canonical: str
    color: Color
    variants: List[str] = field(default_factory=list)
    evidence: List[TokenEvidence] = field(default_factory=list)

    def freeze(self) -> ColorCluster:
        return ColorCluster(
            canonical=self.canonical,
            variants=tuple(self.variants),
            evidence=tuple(self.evidence),
            occurrences=len(self.evidence),
        )


def dedupe(
    colors: Sequence[ColorToken], threshold_delta_e: float = DEFAULT_DELTA_E_THRESHOLD
) -> List[ColorCluster]:
    """Cluster perceptually similar colors.

    Args:
        colors: Color tokens, most frequent first
        threshold_delta_e: Merge when CIEDE2000 distance is strictly below this

    Returns:
        Clusters in first-seen order. Unparseable colors are skipped.
    """
    require_positive("threshold_delta_e", threshold_delta_e)

    clusters: List[_ClusterAccumulator] = []

    for color in colors:
        parsed = DeltaE.parse(color.value)
        if parsed is None:
            logger.debug(f"Skipping unparseable color {color.value!r}")
            continue
        hex_value = DeltaE.to_hex(parsed)

        if clusters:
            distances = DeltaE.ciede2000(parsed, [c.color for c in clusters])
            nearest = int(np.argmin(distances))
            if distances[nearest] < threshold_delta_e:
                cluster = clusters[nearest]
                if hex_value not in cluster.variants:
                    cluster.variants.append(hex_value)
                cluster.evidence.extend(color.evidence)
                logger.debug(
                    f"Merged {hex_value} into {cluster.canonical} "
                    f"(dE00={float(distances[nearest]):.2f})"
                )
                continue

        clusters.append(
            _ClusterAccumulator(
                canonical=hex_value,
                color=parsed,
                variants=[hex_value],
                evidence=list(color.evidence),
            )
        )

    return [cluster.freeze() for cluster in clusters]
