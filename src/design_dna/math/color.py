"""Perceptual color distance on top of coloraide.

Any CSS color a browser reports as a computed style is accepted: hex,
``rgb()``/``rgba()``, ``hsl()``/``hsla()``, named colors, ``transparent`` and
the CSS Color 4 spaces. Distances are CIEDE2000 (Sharma, Wu & Dalal 2005,
kL = kC = kH = 1) measured in CIE LAB with the D65 white point.

Calibration:
    < 1.0: not perceptible by human eyes
    1.0-2.3: perceptible on close inspection (2.3 ~ just noticeable difference)
    2.3-10: perceptible at a glance
    > 50: colors are closer to opposite than similar
"""

from typing import Optional, Sequence

import numpy as np
from coloraide import Color

LAB_SPACE = "lab-d65"


class DeltaE:
    """Color parsing and CIEDE2000 distance calculations."""

    @staticmethod
    def parse(value: Optional[str]) -> Optional[Color]:
        """Parse a CSS color string. Returns None for anything that is not a color."""
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return Color(value.strip())
        except ValueError:
            return None

    @staticmethod
    def to_hex(color: Color) -> str:
        """Lowercase sRGB hex (``#rrggbb``, or ``#rrggbbaa`` when translucent)."""
        return color.convert("srgb").to_string(hex=True).lower()

    @staticmethod
    def is_clear(color: Color) -> bool:
        """True when the color is fully transparent."""
        return color.get("alpha") == 0

    @staticmethod
    def ciede2000(color: Color, others: Sequence[Color]) -> np.ndarray:
        """Distances from ``color`` to each of ``others``, in order."""
        return np.array(
            [color.delta_e(other, method="2000", space=LAB_SPACE) for other in others],
            dtype=float,
        )

    @staticmethod
    def between(first: str, second: str) -> Optional[float]:
        """CIEDE2000 distance between two CSS colors, None if either is unparseable."""
        a = DeltaE.parse(first)
        b = DeltaE.parse(second)
        if a is None or b is None:
            return None
        return float(a.delta_e(b, method="2000", space=LAB_SPACE))
