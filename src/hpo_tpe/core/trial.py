from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Trial:
    """
    A single observation fed back to the optimizer.

    Trials are ordered by metric, the lower the better. Among equal metrics the
    trial with the smaller tag, that is the one fed back earlier, comes first.

    Attributes:
        parameter: The evaluated parameter value.
        metric: The observed value of the target function.
        tag: Insertion sequence number, distinguishes trials with equal metrics.
    """
    parameter: Any
    metric: Any
    tag: int = 0

    @property
    def sort_key(self) -> Tuple[Any, int]:
        return (self.metric, self.tag)

    def __lt__(self, other: "Trial") -> bool:
        return self.sort_key < other.sort_key

    def __le__(self, other: "Trial") -> bool:
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "Trial") -> bool:
        return self.sort_key > other.sort_key

    def __ge__(self, other: "Trial") -> bool:
        return self.sort_key >= other.sort_key
