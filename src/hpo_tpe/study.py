"""
The user-facing ask/evaluate/tell loop around an optimizer.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import pandas as pd

from .exceptions import CandidatesExhaustedError
from .optimizers.base import BaseOptimizer
from .rng import RandomLike, ensure_random_source

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Print study progress to stderr.

    The library only emits records; call this from an application or script
    to attach a stream handler to the package logger. Calling it again only
    updates the level.
    """
    package_logger = logging.getLogger(__name__.rpartition(".")[0])
    if not package_logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        package_logger.addHandler(h)
    package_logger.setLevel(level)
    return package_logger


@dataclass
class StudyTrial:
    """Represents a single evaluation of a parameter value."""
    trial_id: int
    parameter: Any
    value: Optional[float] = None
    state: str = "RUNNING"  # RUNNING, COMPLETE, FAILED


class Study:
    """
    Runs an optimizer against an objective function and keeps the history.

    Args:
        optimizer: The optimizer to ask for parameters and tell results to.
        direction: 'minimize' or 'maximize'. The optimizer always minimizes,
            so maximized values are fed back negated.
    """
    def __init__(self, optimizer: BaseOptimizer, direction: str = 'minimize'):
        if direction not in ('minimize', 'maximize'):
            raise ValueError(f"Unknown direction: {direction}")
        self.optimizer = optimizer
        self.direction = direction
        self.trials: List[StudyTrial] = []

    def optimize(self, objective: Callable[[Any], float], n_trials: int,
                 rng: RandomLike = None) -> Optional[StudyTrial]:
        """
        Runs the optimization loop for a given number of trials.

        A failing objective marks its trial as FAILED and the loop goes on.
        The loop ends early once the optimizer runs out of untried candidates.

        Args:
            objective: A function that takes a parameter value and returns a score.
            n_trials: The number of trials to run.
            rng: Random source shared by all proposals.

        Returns:
            The best completed trial, or None.
        """
        rng = ensure_random_source(rng)
        logger.info("Starting optimization study with %d trials (optimizer=%s, direction=%s)",
                    n_trials, self.optimizer.__class__.__name__, self.direction)

        for _ in range(n_trials):
            try:
                parameter = self.optimizer.ask(rng)
            except CandidatesExhaustedError as e:
                logger.info("Stopping after %d trials, no untried candidates left: %s", len(self.trials), e)
                break

            trial = StudyTrial(trial_id=len(self.trials), parameter=parameter)
            self.trials.append(trial)

            try:
                value = float(objective(parameter))
            except Exception as e:
                trial.state = "FAILED"
                logger.warning("Trial #%d failed: %s", trial.trial_id, e)
                continue
            if math.isnan(value):
                trial.state = "FAILED"
                logger.warning("Trial #%d returned NaN", trial.trial_id)
                continue

            trial.value = value
            trial.state = "COMPLETE"
            self.optimizer.tell(parameter, value if self.direction == 'minimize' else -value)
            logger.info("Trial #%d finished. Parameter: %r. Value: %.6f. Best value: %.6f",
                        trial.trial_id, parameter, value, self.best_trial.value)

        best = self.best_trial
        if best is not None:
            logger.info("Best trial #%d: parameter=%r value=%.6f", best.trial_id, best.parameter, best.value)
        return best

    @property
    def best_trial(self) -> Optional[StudyTrial]:
        """The best completed trial according to the study direction."""
        completed = [t for t in self.trials if t.state == "COMPLETE"]
        if not completed:
            return None
        if self.direction == 'maximize':
            return max(completed, key=lambda t: t.value)
        return min(completed, key=lambda t: t.value)

    def trials_dataframe(self) -> pd.DataFrame:
        """Returns the trial history as a pandas DataFrame."""
        if not self.trials:
            return pd.DataFrame(columns=['trial_id', 'parameter', 'value', 'state'])
        return pd.DataFrame([
            {
                'trial_id': t.trial_id,
                'parameter': t.parameter,
                'value': t.value,
                'state': t.state,
            }
            for t in self.trials
        ])
