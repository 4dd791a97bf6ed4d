from .base import BaseOptimizer
from .random import RandomSampler
from .tpe import TPEOptimizer

__all__ = ["BaseOptimizer", "RandomSampler", "TPEOptimizer"]
