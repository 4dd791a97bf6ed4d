"""
Discrete kernel based on the binomial distribution.
"""
from __future__ import annotations

import math
from typing import Any, Tuple

import numpy as np
from scipy.stats import binom

from ..convert import round_half_up, to_float, to_int
from ..rng import RandomSource
from .base import Kernel


# Upper bound on the number of experiments, keeps the CDF table small.
MAX_TRIALS = 10_000


def derive_parameters(location: int, bandwidth: float) -> Tuple[int, float, int]:
    """
    Invert `(location, bandwidth)` into binomial `(n, p, shift)`.

    When the variance is below the mean, solve `n·p = location` and
    `n·p·(1 - p) = bandwidth²` directly. A binomial cannot have a variance
    above its mean, so otherwise fall back to a symmetric `p = 0.5`
    distribution shifted to be centred at `location`. `n` never exceeds
    `MAX_TRIALS`; when it is clamped, the mean is kept and the spread shrinks.
    The direct solution is only used while `p` stays below 1, which keeps
    the standard deviation positive.
    """
    variance = bandwidth * bandwidth
    if 0 < variance < location <= MAX_TRIALS:
        p = 1.0 - variance / location
        n = max(1, round_half_up(location / p))
        if n > MAX_TRIALS:
            n = MAX_TRIALS
            p = location / n
        if p < 1.0:
            return n, p, 0
    half_n = min(max(1, round_half_up(2.0 * variance)), MAX_TRIALS // 2)
    return 2 * half_n, 0.5, location - half_n


class Binomial(Kernel):
    """
    Binomial kernel for integer parameters.

    The probability mass is divided by the standard deviation, so the density
    is on the same scale as the continuous kernels.

    Attributes:
        n (int): Number of independent experiments.
        p (float): Experiment success rate.
        shift (int): Offset added to every sample.
    """

    discrete = True

    def __init__(self, location: Any = 0, bandwidth: Any = 1.0):
        super().__init__(to_int(location), to_float(bandwidth))
        self.n, self.p, self.shift = derive_parameters(self.location, self.bandwidth)
        self._cdf = None

    @classmethod
    def from_distribution(cls, n: int, p: float, shift: int = 0) -> "Binomial":
        """Build the kernel from explicit distribution parameters."""
        if n < 1 or not 0.0 < p < 1.0:
            raise ValueError(f"Invalid binomial parameters: n={n}, p={p}")
        kernel = cls.__new__(cls)
        kernel.n, kernel.p, kernel.shift = to_int(n), float(p), to_int(shift)
        kernel.location = kernel.shift + kernel.n * kernel.p
        kernel.bandwidth = kernel.std()
        kernel._cdf = None
        return kernel

    def pmf(self, at: int) -> float:
        return float(binom.pmf(at, self.n, self.p))

    def std(self) -> float:
        return math.sqrt(self.n * self.p * (1.0 - self.p))

    def inverse_cdf(self, cdf: float) -> int:
        """Smallest `k` whose cumulative mass reaches `cdf`, not counting the shift."""
        if self._cdf is None:
            self._cdf = binom.cdf(np.arange(self.n + 1), self.n, self.p)
        index = int(np.searchsorted(self._cdf, cdf, side="left"))
        return min(index, self.n)

    def density(self, at: Any) -> float:
        value = to_float(at)
        if not value.is_integer():
            return 0.0
        return self.pmf(int(value) - self.shift) / self.std()

    def sample(self, rng: RandomSource) -> int:
        return self.shift + self.inverse_cdf(rng.uniform())

    def __repr__(self) -> str:
        return f"Binomial(n={self.n}, p={self.p:.6f}, shift={self.shift})"
