"""
A simple random sampling optimizer.
"""
from __future__ import annotations
from typing import Any

from ..configuration import validate_range
from ..convert import is_integral_type, to_float
from ..rng import RandomLike, ensure_random_source
from .base import BaseOptimizer


class RandomSampler(BaseOptimizer):
    """
    Suggests parameter values uniformly at random from the range.

    This sampler is useful for establishing a baseline to compare the TPE
    optimizer against.
    """
    def __init__(self, low: Any, high: Any):
        self.low, self.high = validate_range(low, high)
        self.integer = is_integral_type(low) and is_integral_type(high)

    def ask(self, rng: RandomLike = None) -> Any:
        rng = ensure_random_source(rng)
        if self.integer:
            return rng.integer(self.low, self.high)
        low, high = to_float(self.low), to_float(self.high)
        return low + (high - low) * rng.uniform()

    def tell(self, parameter: Any, metric: Any) -> None:
        """
        This method is a no-op for the RandomSampler, as it does not learn
        from past results.
        """
        pass
