"""
The trial ledger: a duplicate-free collection of trials kept in two
synchronized orderings, by metric and by parameter.
"""
from __future__ import annotations

from typing import Any, Iterator, Optional

from sortedcontainers import SortedKeyList, SortedList

from ..exceptions import LedgerInvariantError
from .trial import Trial


class TrialLedger:
    """
    Trials sorted by `(metric, tag)` and, independently, by parameter.

    Both orderings are private sorted containers and are only mutated together
    inside the methods below, so they always hold the same set of trials.
    Lookups, insertions and removals take logarithmic time.
    """

    def __init__(self):
        self._by_metric = SortedKeyList(key=lambda trial: trial.sort_key)
        self._parameters = SortedList()

    def __len__(self) -> int:
        return len(self._by_metric)

    def __bool__(self) -> bool:
        return bool(self._by_metric)

    def __iter__(self) -> Iterator[Trial]:
        """Iterate trials from the best to the worst."""
        return iter(list(self._by_metric))

    def __contains__(self, parameter: Any) -> bool:
        return self.contains(parameter)

    def __repr__(self) -> str:
        return f"TrialLedger(n_trials={len(self)})"

    def contains(self, parameter: Any) -> bool:
        return parameter in self._parameters

    def insert(self, trial: Trial) -> bool:
        """
        Add a trial to both orderings.

        Returns:
            False, leaving the ledger untouched, if the parameter is already present.
        """
        if trial.parameter in self._parameters:
            return False
        self._parameters.add(trial.parameter)
        self._by_metric.add(trial)
        return True

    def best(self) -> Optional[Trial]:
        return self._by_metric[0] if self._by_metric else None

    def worst(self) -> Optional[Trial]:
        return self._by_metric[-1] if self._by_metric else None

    def pop_best(self) -> Optional[Trial]:
        return self._pop(0)

    def pop_worst(self) -> Optional[Trial]:
        return self._pop(-1)

    def _pop(self, index: int) -> Optional[Trial]:
        if not self._by_metric:
            return None
        trial = self._by_metric.pop(index)
        if trial.parameter not in self._parameters:
            raise LedgerInvariantError(f"Parameter {trial.parameter!r} is missing from the parameter ordering")
        self._parameters.remove(trial.parameter)
        return trial

    def iter_parameters(self) -> Iterator[Any]:
        """Ascending parameter values. Every call starts a fresh pass."""
        return iter(list(self._parameters))

    def check(self) -> None:
        """Verify that both orderings hold the same number of trials."""
        if len(self._parameters) != len(self._by_metric):
            raise LedgerInvariantError(
                f"Orderings diverged: {len(self._by_metric)} by metric, {len(self._parameters)} by parameter"
            )
