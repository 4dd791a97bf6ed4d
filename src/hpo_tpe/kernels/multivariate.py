"""
Multivariate kernel: a tuple of independent kernels, one per parameter.

The inner kernels do not model any relationship between the parameters.
Placed at the observed trials, they still keep the "good" combinations of
values together, which separate one-dimensional estimators would not.
"""
from __future__ import annotations

import math
from typing import Any, Tuple, Type

from ..rng import RandomSource
from .base import Kernel


class Multivariate(Kernel):
    """
    Applies its inner kernels element-wise to tuples of values.

    Use `Multivariate.of(...)` to get the kernel class for a given combination
    of inner kernels; that class can be passed anywhere a kernel class is
    expected, such as `Component`. `location` and `bandwidth` are tuples with
    one entry per inner kernel.

    The density is the product of the inner densities, i.e. the joint density
    of independent variables.
    """

    kernels: Tuple[Type[Kernel], ...] = ()

    def __init__(self, location: Any, bandwidth: Any):
        if not self.kernels:
            raise TypeError("Choose the inner kernels with Multivariate.of(...)")
        location, bandwidth = tuple(location), tuple(bandwidth)
        if not len(location) == len(bandwidth) == len(self.kernels):
            raise ValueError(
                f"Expected {len(self.kernels)} locations and bandwidths, "
                f"got {len(location)} and {len(bandwidth)}"
            )
        self.location = location
        self.bandwidth = bandwidth
        self.inner = tuple(kernel.new(l, b) for kernel, l, b in zip(self.kernels, location, bandwidth))

    @classmethod
    def of(cls, *kernels: Type[Kernel]) -> Type["Multivariate"]:
        """Build the multivariate kernel class over the given inner kernel classes."""
        if not kernels:
            raise ValueError("A multivariate kernel needs at least one inner kernel")
        name = "Multivariate[" + ", ".join(kernel.__name__ for kernel in kernels) + "]"
        return type(name, (cls,), {"kernels": tuple(kernels)})

    @classmethod
    def from_kernels(cls, *instances: Kernel) -> "Multivariate":
        """Combine already built kernels, e.g. `Uniform.with_bounds(...)`."""
        multivariate = cls.of(*(type(instance) for instance in instances))
        kernel = multivariate.__new__(multivariate)
        kernel.inner = tuple(instances)
        kernel.location = tuple(instance.location for instance in instances)
        kernel.bandwidth = tuple(instance.bandwidth for instance in instances)
        return kernel

    def densities(self, at: Any) -> Tuple[float, ...]:
        return tuple(kernel.density(value) for kernel, value in zip(self.inner, at))

    def density(self, at: Any) -> float:
        return math.prod(self.densities(at))

    def sample(self, rng: RandomSource) -> Tuple[Any, ...]:
        return tuple(kernel.sample(rng) for kernel in self.inner)
