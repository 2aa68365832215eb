"""Rounding used for every reported money/percentage figure."""

import math


def round2(value: float) -> float:
    """Round to 2 decimals, halves towards +inf (not banker's rounding)."""
    return math.floor(value * 100 + 0.5) / 100
