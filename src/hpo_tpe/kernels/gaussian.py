"""
Gaussian kernel.
"""
from __future__ import annotations

import math
from typing import Any

from scipy.stats import norm

from ..convert import to_float
from ..rng import RandomSource
from .base import Kernel


class Gaussian(Kernel):
    """Normal distribution with mean `location` and standard deviation `bandwidth`."""

    def density(self, at: Any) -> float:
        return float(norm.pdf(to_float(at), loc=to_float(self.location), scale=to_float(self.bandwidth)))

    def sample(self, rng: RandomSource) -> float:
        # Box-Muller; `1 - u` keeps the logarithm's argument in (0, 1].
        u1 = 1.0 - rng.uniform()
        u2 = rng.uniform()
        normalized = math.sqrt(-2.0 * math.log(u1)) * math.cos(math.tau * u2)
        return to_float(self.location) + to_float(self.bandwidth) * normalized
