"""
Defines the base interface for all optimizers.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..rng import RandomLike


class BaseOptimizer(ABC):
    """
    Abstract base class for all optimizers.

    This class defines a standard interface for suggesting a new parameter
    value (`ask`) and reporting the metric of a completed trial (`tell`).
    """

    @abstractmethod
    def ask(self, rng: RandomLike = None) -> Any:
        """
        Suggest a new parameter value to evaluate.

        Args:
            rng: Random source, seed, or None for fresh entropy.

        Returns:
            The parameter value to try.
        """
        pass

    @abstractmethod
    def tell(self, parameter: Any, metric: Any) -> None:
        """
        Report the result of a completed trial back to the optimizer.

        Args:
            parameter: The parameter value that was evaluated.
            metric: The observed metric, the lower the better.
        """
        pass
