"""
Kernels for the kernel density estimator.

These model the "good" and "bad" parameter distributions, and may be used on
their own as well.
"""
from .base import Kernel
from .binomial import Binomial
from .epanechnikov import Epanechnikov
from .gaussian import Gaussian
from .multivariate import Multivariate
from .uniform import Uniform

__all__ = ["Kernel", "Uniform", "Gaussian", "Epanechnikov", "Binomial", "Multivariate"]
