# hpo_tpe/__init__.py

__version__ = "0.1.0"

# Expose the core user-facing classes
from .configuration import OptimizerSettings
from .core import Trial, TrialLedger
from .exceptions import CandidatesExhaustedError, ConversionError, HPOError, LedgerInvariantError
from .kde import AdaptiveComponents, Component, KernelDensityEstimator
from .kernels import Binomial, Epanechnikov, Gaussian, Kernel, Multivariate, Uniform
from .optimizers import BaseOptimizer, RandomSampler, TPEOptimizer
from .rng import RandomSource, ensure_random_source
from .study import Study, StudyTrial, configure_logging

__all__ = [
    "OptimizerSettings",
    "Trial",
    "TrialLedger",
    "HPOError",
    "CandidatesExhaustedError",
    "ConversionError",
    "LedgerInvariantError",
    "AdaptiveComponents",
    "Component",
    "KernelDensityEstimator",
    "Kernel",
    "Uniform",
    "Gaussian",
    "Epanechnikov",
    "Binomial",
    "Multivariate",
    "BaseOptimizer",
    "RandomSampler",
    "TPEOptimizer",
    "RandomSource",
    "ensure_random_source",
    "Study",
    "StudyTrial",
    "configure_logging",
]
