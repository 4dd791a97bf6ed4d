"""
Optimizer settings and range validation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .convert import to_float


@dataclass(frozen=True)
class OptimizerSettings:
    """
    Caller-supplied settings of the TPE optimizer, validated on construction.

    Attributes:
        cutoff: Fraction of trials considered "good", strictly between 0 and 1.
        n_candidates: Number of candidates drawn per proposal.
        bandwidth_multiplier: Positive factor applied to every adaptive bandwidth.
    """
    cutoff: float = 0.1
    n_candidates: int = 25
    bandwidth_multiplier: float = 1.0

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(errors))

    def validate(self):
        errors = []
        if not 0.0 < self.cutoff < 1.0:
            errors.append(f"cutoff must be in (0, 1), got {self.cutoff!r}")
        if isinstance(self.n_candidates, bool) or not isinstance(self.n_candidates, int) or self.n_candidates < 1:
            errors.append(f"n_candidates must be a positive integer, got {self.n_candidates!r}")
        if not self.bandwidth_multiplier > 0.0:
            errors.append(f"bandwidth_multiplier must be positive, got {self.bandwidth_multiplier!r}")
        return errors


def validate_range(low: Any, high: Any) -> Tuple[Any, Any]:
    """Reject degenerate or inverted parameter ranges."""
    if not to_float(low) < to_float(high):
        raise ValueError(f"Parameter range must have low < high, got [{low!r}, {high!r}]")
    return low, high
