"""Variant analysis for detected components.

Instances are grouped by component type; each group gets its own
distributions, so buttons never influence how cards are bucketed.

Dimensions:
    size      rank-bucketed top padding (small / medium / large)
    emphasis  primary (solid background), secondary (outlined),
              ghost (text color only), tertiary (no visual signal)
    shape     pill (radius >= half the height, or >= 50%),
              rounded (radius > 0), square (radius 0 or unknown)
"""

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, List, Optional, Sequence

from ..logging_config import get_logger
from ..math.ranking import RankBucketer
from ..models import (
    AnalyzedInstance,
    ComponentVariant,
    DetectedComponentInstance,
    VariantDimension,
)
from ..normalization.units import parse_pixels
from .styles import is_transparent, style_value

logger = get_logger(__name__)

SIZE_LABELS = ("small", "medium", "large")
EMPHASIS_LABELS = ("primary", "secondary", "tertiary", "ghost")
SHAPE_LABELS = ("rounded", "pill", "square")

_SIZE_BUCKETER = RankBucketer(SIZE_LABELS)


def _dimension(name: str, labels: Sequence[str], assigned: Sequence[str]) -> VariantDimension:
    distribution = {label: 0 for label in labels}
    for label in assigned:
        distribution[label] += 1
    return VariantDimension(
        name=name,
        values=tuple(label for label in labels if distribution[label] > 0),
        distribution=MappingProxyType(distribution),
    )


def size_padding(instance: DetectedComponentInstance) -> Optional[float]:
    """Representative spacing for the size dimension: top padding in px."""
    return parse_pixels(style_value(instance.computed_styles, "paddingTop"))


def classify_sizes(group: Sequence[DetectedComponentInstance]) -> List[str]:
    return _SIZE_BUCKETER.assign([size_padding(instance) for instance in group])


def classify_emphasis(instance: DetectedComponentInstance) -> str:
    styles = instance.computed_styles

    if not is_transparent(style_value(styles, "backgroundColor")):
        return "primary"

    border_width = parse_pixels(style_value(styles, "borderTopWidth"))
    if border_width is None:
        border_width = parse_pixels(style_value(styles, "borderWidth"))
    border_color = style_value(styles, "borderTopColor") or style_value(styles, "borderColor")
    # an unknown border color still counts; only an explicitly invisible one does not
    border_visible = border_color is None or not is_transparent(border_color)
    if border_width and border_width > 0 and border_visible:
        return "secondary"

    if not is_transparent(style_value(styles, "color")):
        return "ghost"

    return "tertiary"


def classify_shape(instance: DetectedComponentInstance) -> str:
    styles = instance.computed_styles
    radius_text = style_value(styles, "borderRadius") or "0"
    # "8px 8px 0 0" -> first corner
    first_corner = radius_text.split()[0] if radius_text.split() else "0"

    if first_corner.endswith("%"):
        try:
            percent = float(first_corner[:-1])
        except ValueError:
            return "square"
        if percent >= 50:
            return "pill"
        return "rounded" if percent > 0 else "square"

    radius = parse_pixels(first_corner)
    if radius is None or radius <= 0:
        return "square"

    height = parse_pixels(style_value(styles, "height"))
    if height is not None and height > 0 and radius >= height / 2:
        return "pill"
    return "rounded"


def _analyze_group(group: Sequence[DetectedComponentInstance]) -> List[AnalyzedInstance]:
    sizes = classify_sizes(group)
    emphases = [classify_emphasis(instance) for instance in group]
    shapes = [classify_shape(instance) for instance in group]

    dimensions = (
        _dimension("size", SIZE_LABELS, sizes),
        _dimension("emphasis", EMPHASIS_LABELS, emphases),
        _dimension("shape", SHAPE_LABELS, shapes),
    )

    return [
        AnalyzedInstance(
            instance=instance,
            variant=ComponentVariant(size=size, emphasis=emphasis, shape=shape),
            dimensions=dimensions,
        )
        for instance, size, emphasis, shape in zip(group, sizes, emphases, shapes)
    ]


def analyze(instances: Sequence[DetectedComponentInstance]) -> List[AnalyzedInstance]:
    """Classify every instance along size, emphasis and shape.

    Returns one AnalyzedInstance per input, in input order.
    """
    if not instances:
        return []

    by_type: Dict[str, List[int]] = defaultdict(list)
    for index, instance in enumerate(instances):
        by_type[instance.type].append(index)

    analyzed: List[Optional[AnalyzedInstance]] = [None] * len(instances)
    for component_type, indices in by_type.items():
        group = [instances[i] for i in indices]
        for index, result in zip(indices, _analyze_group(group)):
            analyzed[index] = result
        logger.debug(f"Analyzed {len(group)} {component_type} instance(s)")

    return [result for result in analyzed if result is not None]
