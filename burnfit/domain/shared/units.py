"""Physical units used across the domain.

Distinct types for calories, masses, lengths and durations so that a value
in grams cannot be passed where minutes are expected.
"""

import math
from typing import NewType

Kilocalories = NewType("Kilocalories", float)
Kilograms = NewType("Kilograms", float)
Centimeters = NewType("Centimeters", float)
Grams = NewType("Grams", float)
Minutes = NewType("Minutes", int)


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from -inf.

    Python's built-in round() uses banker's rounding (round(2.5) == 2);
    every rounding in the domain goes through this helper instead.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(6.3)
        6
    """
    return int(math.floor(value + 0.5))
