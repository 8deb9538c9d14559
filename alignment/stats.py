"""
Numeric helpers shared by the scorers and the synthesis engine.
"""
import math

import numpy as np


def round_half_up(x: float) -> int:
    """Round to the nearest integer with .5 always going up (2.5 → 3, -2.5 → -2)."""
    return int(math.floor(x + 0.5))


def clamp(x: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, x))


def mean(values) -> float:
    if len(values) == 0:
        raise ValueError("mean of an empty sequence")
    return float(np.mean(values))


def population_std_dev(values) -> float:
    """Standard deviation over the whole population (divide by N, not N-1)."""
    if len(values) == 0:
        raise ValueError("standard deviation of an empty sequence")
    return float(np.std(values, ddof=0))
