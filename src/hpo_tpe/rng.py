"""
The randomness capability consumed by kernels, estimators and optimizers.
"""
from __future__ import annotations

from typing import Optional, Union

import numpy as np


class RandomSource:
    """
    Thin adapter over `numpy.random.RandomState`.

    Exposes exactly the three draws the optimizer needs: a uniform real in
    `[0, 1)`, a fair boolean, and a uniform integer in an inclusive range.
    """

    def __init__(self, state: Optional[np.random.RandomState] = None):
        self.state = state if state is not None else np.random.RandomState()

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "RandomSource":
        return cls(np.random.RandomState(seed))

    def uniform(self) -> float:
        return float(self.state.random_sample())

    def boolean(self) -> bool:
        return bool(self.state.randint(0, 2))

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in `[low, high]`, both ends included."""
        if high < low:
            raise ValueError(f"Empty integer range: [{low}, {high}]")
        return int(self.state.randint(low, high + 1))


RandomLike = Union[None, int, np.random.RandomState, RandomSource]


def ensure_random_source(rng: RandomLike = None) -> RandomSource:
    """Accept a seed, a `RandomState`, a `RandomSource` or `None` (fresh entropy)."""
    if isinstance(rng, RandomSource):
        return rng
    if isinstance(rng, np.random.RandomState):
        return RandomSource(rng)
    if rng is None or isinstance(rng, (int, np.integer)):
        return RandomSource.from_seed(None if rng is None else int(rng))
    raise TypeError(f"Unsupported random source: {type(rng).__name__}")
