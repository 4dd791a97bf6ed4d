"""
Standardized Epanechnikov (parabolic) kernel.
"""
from __future__ import annotations

import math
from typing import Any, Tuple

from ..convert import to_float
from ..rng import RandomSource
from .base import Kernel

SQRT_5 = math.sqrt(5.0)
THREE_QUARTERS = 0.75


def min_2(x1: float, x2: float, x3: float) -> Tuple[float, float]:
    """Pick the two smallest of three numbers, the smallest of the first pair first."""
    if x1 > x2:
        x1, x2 = x2, x1
    return x1, (x3 if x2 > x3 else x2)


class Epanechnikov(Kernel):
    """
    Parabolic kernel over `location ± √5·bandwidth`.

    Scaling the unit support by √5 gives the kernel a standard deviation of
    `bandwidth`.
    """

    def density(self, at: Any) -> float:
        bandwidth = to_float(self.bandwidth)
        normalized = (to_float(at) - to_float(self.location)) / bandwidth / SQRT_5
        if -1.0 <= normalized <= 1.0:
            return THREE_QUARTERS / SQRT_5 * (1.0 - normalized * normalized) / bandwidth
        return 0.0

    def sample(self, rng: RandomSource) -> float:
        x1, x2 = min_2(rng.uniform(), rng.uniform(), rng.uniform())
        abs_normalized = x1 if rng.boolean() else x2
        normalized = abs_normalized if rng.boolean() else -abs_normalized
        return to_float(self.location) + to_float(self.bandwidth) * normalized * SQRT_5
