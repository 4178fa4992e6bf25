"""Computed-style lookups shared by the component modules.

The extractor reports camelCase property names (``paddingTop``); hand-written
fixtures often use CSS names (``padding-top``). Both are accepted.
"""

import re
from typing import Mapping, Optional

from ..math.color import DeltaE

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

TRANSPARENT_KEYWORDS = {"", "transparent", "initial", "inherit", "none", "unset"}


def kebab_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def style_value(styles: Mapping[str, str], name: str) -> Optional[str]:
    """Value of a camelCase style property, falling back to its CSS name."""
    value = styles.get(name)
    if value is None:
        value = styles.get(kebab_case(name))
    return value.strip() if isinstance(value, str) else None


def is_transparent(color: Optional[str]) -> bool:
    if color is None:
        return True
    text = color.strip().lower()
    if text in TRANSPARENT_KEYWORDS:
        return True
    parsed = DeltaE.parse(text)
    # var(), calc() and other unresolved values count as painted
    if parsed is None:
        return False
    return DeltaE.is_clear(parsed)
