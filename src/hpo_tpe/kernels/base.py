"""
Defines the base interface for all kernels.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..convert import to_float
from ..rng import RandomSource


class Kernel(ABC):
    """
    Abstract base class for a shiftable, scalable unit kernel.

    A kernel instance is centred at `location` and spread by `bandwidth`,
    which is the standard deviation of the corresponding distribution.
    """

    # Discrete kernels take integer locations and sample integers.
    discrete = False

    def __init__(self, location: Any = 0.0, bandwidth: Any = 1.0):
        if not to_float(bandwidth) > 0.0:
            raise ValueError(f"Kernel bandwidth must be positive, got {bandwidth!r}")
        self.location = location
        self.bandwidth = bandwidth

    @classmethod
    def new(cls, location: Any, bandwidth: Any) -> "Kernel":
        """Build a kernel centred at `location` with the given bandwidth."""
        return cls(location, bandwidth)

    @abstractmethod
    def density(self, at: Any) -> float:
        """
        Evaluate the density at a point.

        Returns:
            The density, exactly `0.0` outside the kernel's support.
        """
        pass

    @abstractmethod
    def sample(self, rng: RandomSource) -> Any:
        """
        Draw one value distributed according to the kernel.

        Args:
            rng: The randomness capability to draw from.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(location={self.location!r}, bandwidth={self.bandwidth!r})"
