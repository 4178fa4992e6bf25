"""Small discrete statistics: mode and greatest common divisor."""

import math
from collections import Counter
from functools import reduce
from typing import Hashable, Iterable, List, Optional, Sequence, TypeVar

H = TypeVar("H", bound=Hashable)


class Statistics:
    """Discrete statistics used when choosing canonical values."""

    @staticmethod
    def mode(values: Sequence[H]) -> Optional[H]:
        """Most frequent value; ties go to the value seen first. None if empty."""
        if not values:
            return None
        # Counter.most_common orders equal counts by first insertion
        return Counter(values).most_common(1)[0][0]

    @staticmethod
    def gcd_all(values: Iterable[int]) -> int:
        """Greatest common divisor of all values (0 for an empty input)."""
        return reduce(math.gcd, (abs(int(v)) for v in values), 0)

    @staticmethod
    def divisible_fraction(values: Sequence[int], divisor: int) -> float:
        """Fraction of values exactly divisible by divisor."""
        if not values or divisor == 0:
            return 0.0
        return sum(1 for v in values if v % divisor == 0) / len(values)

    @staticmethod
    def unique_in_order(values: Iterable[H]) -> List[H]:
        return list(dict.fromkeys(values))
