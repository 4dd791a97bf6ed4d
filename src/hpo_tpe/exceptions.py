"""
Exception types raised by the TPE optimizer.
"""


class HPOError(Exception):
    """Base class for recoverable errors raised by the library."""
    pass


class CandidatesExhaustedError(HPOError):
    """
    Raised when no untried candidate survives filtering.

    This is an expected condition: the range may be too narrow, the candidate
    budget too small, or the optimization has converged.
    """
    pass


class ConversionError(HPOError, ValueError):
    """Raised when a value cannot be represented in the requested numeric type."""
    pass


class LedgerInvariantError(AssertionError):
    """
    Raised when the trial ledgers end up in an inconsistent state.

    It signals a defect in the feedback or rebalancing logic and is never
    caught by the library.
    """
    pass
