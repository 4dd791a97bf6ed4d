"""
Kernel density estimator.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from ..rng import RandomSource
from .component import Component


class KernelDensityEstimator:
    """
    Unweighted mixture of components.

    It models the "good" and "bad" parameter distributions inside the
    optimizer, but works standalone as well. Components may be produced lazily,
    so the source must be re-iterable: it is walked once per call.
    """

    def __init__(self, components: Iterable[Component]):
        if iter(components) is components:
            raise TypeError("Components must be re-iterable, got a one-shot iterator")
        self.components = components

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def density(self, at: Any) -> float:
        """
        Mean of the component densities at the point, `0.0` without components.
        """
        n_components = 0
        total = 0.0
        for component in self.components:
            n_components += 1
            total += component.density(at)
        if n_components == 0:
            return 0.0
        return total / n_components

    def select(self, rng: RandomSource) -> Optional[Component]:
        """
        Pick a component uniformly at random in a single pass.

        Reservoir sampling: the `i`-th component (0-based) replaces the held
        one when `rng.integer(0, i)` draws zero.
        """
        selected = None
        for i, component in enumerate(self.components):
            if rng.integer(0, i) == 0:
                selected = component
        return selected

    def sample(self, rng: RandomSource) -> Optional[Any]:
        """
        Sample a point from a randomly selected component.

        Returns:
            The sampled point, or None if the estimator has no components.
        """
        component = self.select(rng)
        if component is None:
            return None
        return component.sample(rng)
