from .component import AdaptiveComponents, Component, adaptive_bandwidth
from .estimator import KernelDensityEstimator
from .windowing import Full, Left, LeftMiddle, Middle, MiddleRight, Right, Triple, triples

__all__ = [
    "AdaptiveComponents",
    "Component",
    "adaptive_bandwidth",
    "KernelDensityEstimator",
    "Triple",
    "Right",
    "MiddleRight",
    "Full",
    "LeftMiddle",
    "Left",
    "Middle",
    "triples",
]
