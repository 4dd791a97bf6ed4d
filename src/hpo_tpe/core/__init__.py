from .ledger import TrialLedger
from .trial import Trial

__all__ = ["Trial", "TrialLedger"]
