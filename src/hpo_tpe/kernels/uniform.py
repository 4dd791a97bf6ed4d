"""
Uniform kernel, also known as the boxcar function.
"""
from __future__ import annotations

import math
from typing import Any

from ..convert import to_float
from ..rng import RandomSource
from .base import Kernel

SQRT_3 = math.sqrt(3.0)
DOUBLE_SQRT_3 = 2.0 * SQRT_3


class Uniform(Kernel):
    """
    Normalized uniform kernel over `location ± √3·bandwidth`.

    The half-width of √3 standard deviations gives the box a standard
    deviation equal to `bandwidth`.
    """

    @classmethod
    def with_bounds(cls, low: Any, high: Any) -> "Uniform":
        """Build the kernel whose box spans exactly `[low, high]`."""
        low, high = to_float(low), to_float(high)
        return cls((low + high) / 2.0, (high - low) / DOUBLE_SQRT_3)

    @property
    def bounds(self):
        location, bandwidth = to_float(self.location), to_float(self.bandwidth)
        return location - SQRT_3 * bandwidth, location + SQRT_3 * bandwidth

    def density(self, at: Any) -> float:
        normalized = (to_float(at) - to_float(self.location)) / to_float(self.bandwidth) / SQRT_3
        if -1.0 <= normalized <= 1.0:
            return 1.0 / (DOUBLE_SQRT_3 * to_float(self.bandwidth))
        return 0.0

    def sample(self, rng: RandomSource) -> float:
        normalized = rng.uniform() * DOUBLE_SQRT_3 - SQRT_3
        return to_float(self.location) + to_float(self.bandwidth) * normalized
