"""Unit normalization: CSS length strings to a common pixel baseline.

Accepted forms:
    "0"            -> 0 px (unitless zero only)
    "<n>px"        -> n px
    "<n>rem"       -> n * base_font_size
    "<n>em"        -> n * base_font_size (no cascade resolution)

``auto``, ``inherit``, ``normal``, ``calc(...)``, any other unit and any
malformed string are unparseable and yield ``None``: no signal, never an error.
"""

import re
from dataclasses import replace
from typing import List, Optional, Sequence

from ..exceptions.analysis import require_positive
from ..logging_config import get_logger
from ..models import NormalizedValue, SpacingToken, TypographyToken, Unit

logger = get_logger(__name__)

DEFAULT_BASE_FONT_SIZE = 16.0

_LENGTH_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))(px|rem|em)$", re.IGNORECASE)
_ZERO_RE = re.compile(r"^[+-]?0*\.?0+$")


def normalize_unit(
    value: str, base_font_size: float = DEFAULT_BASE_FONT_SIZE
) -> Optional[NormalizedValue]:
    """Convert a CSS size string to pixels.

    Args:
        value: CSS value such as "1.5rem" or "12px"
        base_font_size: Root font size in px for rem/em

    Returns:
        NormalizedValue, or None when the value carries no usable signal

    Raises:
        ContractViolationError: If base_font_size is not positive
    """
    require_positive("base_font_size", base_font_size)

    if not isinstance(value, str):
        return None
    text = value.strip()

    if _ZERO_RE.match(text):
        return NormalizedValue(pixels=0.0, original=value, unit=Unit.PX)

    match = _LENGTH_RE.match(text)
    if not match:
        return None

    number = float(match.group(1))
    unit = Unit(match.group(2).lower())

    if unit is Unit.PX:
        return NormalizedValue(pixels=number, original=value, unit=unit)

    return NormalizedValue(
        pixels=number * base_font_size,
        original=value,
        unit=unit,
        base_font_size=base_font_size,
    )


def parse_pixels(value: Optional[str], base_font_size: float = DEFAULT_BASE_FONT_SIZE) -> Optional[float]:
    """Pixels for a CSS size, or None if unparseable."""
    if value is None:
        return None
    normalized = normalize_unit(value, base_font_size)
    return normalized.pixels if normalized is not None else None


def normalize_spacing_tokens(
    tokens: Sequence[SpacingToken], base_font_size: float = DEFAULT_BASE_FONT_SIZE
) -> List[SpacingToken]:
    """Attach a NormalizedValue to each spacing token; drop unparseable ones."""
    result: List[SpacingToken] = []
    for token in tokens:
        normalized = normalize_unit(token.value, base_font_size)
        if normalized is None:
            logger.debug(f"Skipping unparseable spacing value {token.value!r}")
            continue
        result.append(replace(token, normalized_value=normalized))
    return result


def normalize_typography_tokens(
    tokens: Sequence[TypographyToken], base_font_size: float = DEFAULT_BASE_FONT_SIZE
) -> List[TypographyToken]:
    """Attach a normalized font size to each typography token; drop unparseable ones."""
    result: List[TypographyToken] = []
    for token in tokens:
        normalized = normalize_unit(token.size, base_font_size)
        if normalized is None:
            logger.debug(f"Skipping unparseable font size {token.size!r} ({token.family})")
            continue
        result.append(replace(token, normalized_size=normalized))
    return result
