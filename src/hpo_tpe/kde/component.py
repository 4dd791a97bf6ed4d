"""
Kernel density estimator components and the adaptive bandwidth rule.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Type

from ..convert import round_half_up, to_float
from ..kernels.base import Kernel
from ..kernels.uniform import DOUBLE_SQRT_3
from ..rng import RandomSource
from .windowing import Full, LeftMiddle, Middle, MiddleRight, Triple, triples


@dataclass(frozen=True)
class Component:
    """
    A single KDE component: a kernel shifted to `location` and scaled by `bandwidth`.

    Attributes:
        kernel: The kernel class, instantiated once with the location and bandwidth.
        location: Centre of the kernel.
        bandwidth: Strictly positive spread of the kernel.
    """
    kernel: Type[Kernel]
    location: Any
    bandwidth: Any
    instance: Kernel = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "instance", self.kernel.new(self.location, self.bandwidth))

    @classmethod
    def with_bounds(cls, kernel: Type[Kernel], low: Any, high: Any) -> "Component":
        """
        Centre the component in `[low, high]` with the bandwidth of a uniform
        distribution over that range.

        A discrete kernel gets the midpoint rounded half-up.
        """
        low, high = to_float(low), to_float(high)
        if not low < high:
            raise ValueError(f"Invalid bounds: [{low}, {high}]")
        location = (low + high) / 2.0
        if kernel.discrete:
            location = round_half_up(location)
        return cls(kernel, location, (high - low) / DOUBLE_SQRT_3)

    @classmethod
    def from_window(cls, kernel: Type[Kernel], window: Triple, low: Any, high: Any,
                    multiplier: float = 1.0) -> Optional["Component"]:
        """
        Build the component centred at the window's middle value.

        Returns:
            The component, or None for windows without a middle value.
        """
        adaptive = adaptive_bandwidth(window, low, high)
        if adaptive is None:
            return None
        location, bandwidth = adaptive
        bandwidth = bandwidth * multiplier
        if not to_float(bandwidth) > 0.0:
            raise ValueError(
                f"Degenerate bandwidth {bandwidth!r} at {location!r}: check the range [{low}, {high}]"
            )
        return cls(kernel, location, bandwidth)

    def density(self, at: Any) -> float:
        return self.instance.density(at)

    def sample(self, rng: RandomSource) -> Any:
        return self.instance.sample(rng)


def adaptive_bandwidth(window: Triple, low: Any, high: Any) -> Optional[Tuple[Any, Any]]:
    """
    Derive `(location, bandwidth)` from the distances to the neighbours.

    The bandwidth is the larger distance to a neighbour; a missing neighbour is
    replaced with the corresponding range bound.
    """
    if isinstance(window, Full):
        x = window.middle
        return x, max(window.right - x, x - window.left)
    if isinstance(window, LeftMiddle):
        x = window.middle
        return x, max(x - window.left, high - x)
    if isinstance(window, MiddleRight):
        x = window.middle
        return x, max(window.right - x, x - low)
    if isinstance(window, Middle):
        x = window.middle
        return x, max(high - x, x - low)
    return None


class AdaptiveComponents:
    """
    Lazy, re-iterable sequence of components built over ascending values.

    Each iteration pulls a fresh ascending sequence from `values`, windows it
    and yields one component per value.

    Args:
        kernel: Kernel class of every component.
        values: Zero-argument callable returning an ascending iterator.
        low: Lower range bound, stands in for a missing left neighbour.
        high: Upper range bound, stands in for a missing right neighbour.
        multiplier: Positive factor applied to every bandwidth.
    """

    def __init__(self, kernel: Type[Kernel], values: Callable[[], Iterable[Any]],
                 low: Any, high: Any, multiplier: float = 1.0):
        if not multiplier > 0:
            raise ValueError(f"Bandwidth multiplier must be positive, got {multiplier!r}")
        self.kernel = kernel
        self.values = values
        self.low = low
        self.high = high
        self.multiplier = multiplier

    @classmethod
    def from_values(cls, kernel: Type[Kernel], values: Iterable[Any], low: Any, high: Any,
                    multiplier: float = 1.0) -> "AdaptiveComponents":
        ordered = sorted(values)
        return cls(kernel, lambda: iter(ordered), low, high, multiplier)

    def __iter__(self) -> Iterator[Component]:
        for window in triples(self.values()):
            component = Component.from_window(self.kernel, window, self.low, self.high, self.multiplier)
            if component is not None:
                yield component
