"""
A Tree-structured Parzen Estimator (TPE) optimizer for a single parameter.
"""
from __future__ import annotations

import dataclasses
import logging
import math
from numbers import Real
from typing import Any, List, Optional, Type

from ..configuration import OptimizerSettings, validate_range
from ..convert import is_integral_type, round_half_up, to_float
from ..core import Trial, TrialLedger
from ..exceptions import CandidatesExhaustedError, LedgerInvariantError
from ..kde import AdaptiveComponents, Component, KernelDensityEstimator
from ..kernels.base import Kernel
from ..rng import RandomLike, RandomSource, ensure_random_source
from .base import BaseOptimizer

logger = logging.getLogger(__name__)


class TPEOptimizer(BaseOptimizer):
    """
    A Tree-structured Parzen Estimator (TPE) optimizer.

    Observed trials are split into the best `cutoff` fraction ("good") and the
    rest ("bad"). Each class is modelled with a kernel density estimator whose
    components sit on the trial parameters, with bandwidths derived from the
    distances to the neighbouring trials. New candidates are drawn mostly from
    the good estimator and ranked by the ratio of the good and bad densities.

    The metric is minimized.

    Args:
        low: Lower bound of the parameter range. Integer bounds make the
            parameter integer-valued.
        high: Upper bound of the parameter range.
        prior: Prior belief about where good parameter values are. It is mixed
            into both estimators and proposes candidates while there is little data.
        kernel: Kernel class of the trial components.
        cutoff: Fraction of trials considered "good".
        n_candidates: Number of candidates drawn per proposal.
        bandwidth_multiplier: Factor applied to every adaptive bandwidth.
    """

    def __init__(self, low: Any, high: Any, prior: Component, kernel: Type[Kernel],
                 cutoff: float = 0.1, n_candidates: int = 25, bandwidth_multiplier: float = 1.0):
        self.low, self.high = validate_range(low, high)
        self.integer = is_integral_type(low) and is_integral_type(high)
        self.prior = prior
        self.kernel = kernel
        self.settings = OptimizerSettings(cutoff, n_candidates, bandwidth_multiplier)
        self.good_trials = TrialLedger()
        self.bad_trials = TrialLedger()
        self._next_tag = 0

    # --- Settings ---

    @property
    def cutoff(self) -> float:
        return self.settings.cutoff

    @property
    def n_candidates(self) -> int:
        return self.settings.n_candidates

    @property
    def bandwidth_multiplier(self) -> float:
        return self.settings.bandwidth_multiplier

    def set_cutoff(self, cutoff: float) -> "TPEOptimizer":
        """Set the ratio of good trials. Takes effect from the next feedback."""
        self.settings = dataclasses.replace(self.settings, cutoff=cutoff)
        return self

    def set_n_candidates(self, n_candidates: int) -> "TPEOptimizer":
        self.settings = dataclasses.replace(self.settings, n_candidates=n_candidates)
        return self

    def set_bandwidth_multiplier(self, bandwidth_multiplier: float) -> "TPEOptimizer":
        self.settings = dataclasses.replace(self.settings, bandwidth_multiplier=bandwidth_multiplier)
        return self

    # --- Feedback ---

    def __len__(self) -> int:
        return len(self.good_trials) + len(self.bad_trials)

    def __contains__(self, parameter: Any) -> bool:
        return parameter in self.good_trials or parameter in self.bad_trials

    def feed_back(self, parameter: Any, metric: Any) -> None:
        """
        Record the metric observed for a parameter, the lower the better.

        Normally the parameter comes from `new_trial`, but any value may be fed
        back. A parameter that was already fed back is ignored.

        Raises:
            ValueError: If the metric is NaN.
        """
        if isinstance(metric, Real) and math.isnan(metric):
            raise ValueError(f"Metric for parameter {parameter!r} is NaN")
        if parameter in self:
            logger.debug("Ignoring repeated feedback for parameter %r", parameter)
            return

        trial = Trial(parameter, metric, tag=self._next_tag)
        self._next_tag += 1
        n_expected_good = round_half_up(self.cutoff * (len(self) + 1))

        if self._ranks_as_good(trial):
            self.good_trials.insert(trial)
        else:
            self.bad_trials.insert(trial)

        while len(self.good_trials) > n_expected_good:
            moved = self.good_trials.pop_worst()
            self.bad_trials.insert(moved)
            logger.debug("Moved trial %r from good to bad", moved)
        while len(self.good_trials) < n_expected_good:
            moved = self.bad_trials.pop_best()
            self.good_trials.insert(moved)
            logger.debug("Moved trial %r from bad to good", moved)

        self._check_invariants(n_expected_good)

    def _ranks_as_good(self, trial: Trial) -> bool:
        worst_good = self.good_trials.worst()
        if worst_good is not None:
            return trial <= worst_good
        best_bad = self.bad_trials.best()
        return best_bad is None or trial <= best_bad

    def _check_invariants(self, n_expected_good: int) -> None:
        self.good_trials.check()
        self.bad_trials.check()
        if len(self.good_trials) != n_expected_good:
            raise LedgerInvariantError(
                f"Expected {n_expected_good} good trials, got {len(self.good_trials)}"
            )
        worst_good, best_bad = self.good_trials.worst(), self.bad_trials.best()
        if worst_good is not None and best_bad is not None and worst_good > best_bad:
            raise LedgerInvariantError(f"Worst good trial {worst_good!r} ranks after best bad trial {best_bad!r}")

    def tell(self, parameter: Any, metric: Any) -> None:
        self.feed_back(parameter, metric)

    # --- Estimators ---

    def _estimator(self, ledger: TrialLedger) -> KernelDensityEstimator:
        components = AdaptiveComponents(
            self.kernel, ledger.iter_parameters, self.low, self.high, self.bandwidth_multiplier
        )
        return KernelDensityEstimator(components)

    def good_kde(self) -> KernelDensityEstimator:
        return self._estimator(self.good_trials)

    def bad_kde(self) -> KernelDensityEstimator:
        return self._estimator(self.bad_trials)

    # --- Proposal ---

    def new_trial(self, rng: RandomLike = None) -> Any:
        """
        Generate a parameter value for a new trial.

        After evaluating the target function with it, feed the metric back
        with `feed_back`.

        Raises:
            CandidatesExhaustedError: If every drawn candidate was already tried.
        """
        rng = ensure_random_source(rng)
        good_kde, bad_kde = self.good_kde(), self.bad_kde()

        candidates = self._candidates(rng, good_kde)
        if not candidates:
            raise CandidatesExhaustedError(
                f"None of {self.n_candidates} candidates is untried in [{self.low}, {self.high}]"
            )

        best_candidate, best_score = None, -math.inf
        for candidate in candidates:
            score = self._score(candidate, good_kde, bad_kde)
            if score > best_score:
                best_candidate, best_score = candidate, score
        logger.debug("Picked %r (score %.6g) out of %d candidates", best_candidate, best_score, len(candidates))
        return best_candidate

    def ask(self, rng: RandomLike = None) -> Any:
        return self.new_trial(rng)

    def _candidates(self, rng: RandomSource, good_kde: KernelDensityEstimator) -> List[Any]:
        n_good = len(self.good_trials)
        candidates, seen = [], set()
        for _ in range(self.n_candidates):
            if n_good < 2 or rng.integer(0, n_good) == 0:
                candidate = self.prior.sample(rng)
            else:
                candidate = good_kde.sample(rng)
                if candidate is None:
                    candidate = self.prior.sample(rng)
            candidate = self._clamp(candidate)
            if candidate in seen or candidate in self:
                continue
            seen.add(candidate)
            candidates.append(candidate)
        return candidates

    def _clamp(self, value: Any) -> Any:
        if self.integer:
            return round_half_up(min(max(to_float(value), self.low), self.high))
        return min(max(to_float(value), to_float(self.low)), to_float(self.high))

    def _score(self, at: Any, good_kde: KernelDensityEstimator, bad_kde: KernelDensityEstimator) -> float:
        n_good, n_bad = len(self.good_trials), len(self.bad_trials)
        prior_density = self.prior.density(at)
        good_density = (prior_density + good_kde.density(at) * n_good) / (n_good + 1)
        bad_density = (prior_density + bad_kde.density(at) * n_bad) / (n_bad + 1)
        if bad_density > 0.0:
            return good_density / bad_density
        return math.inf if good_density > 0.0 else 0.0

    def acquisition(self, at: Any) -> float:
        """Ratio of the smoothed good and bad densities at a point."""
        return self._score(at, self.good_kde(), self.bad_kde())

    # --- Inspection ---

    def best_trial(self) -> Optional[Trial]:
        """The best trial so far, or None before any feedback."""
        best = self.good_trials.best()
        return best if best is not None else self.bad_trials.best()

    @property
    def trials(self) -> List[Trial]:
        """All trials from the best to the worst."""
        return list(self.good_trials) + list(self.bad_trials)
