"""
Best solution update events.

An UpdateRecord is captured once, at the moment a trial reports a new best solution.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpdateRecord:
    """
    Snapshot of a single improvement during one trial.

    Attributes:
        time: Milliseconds elapsed since the trial was started
        value: Evaluation value of the newly found best solution
        solution: The new best solution (opaque, owned by the producing trial)
    """

    time: int
    value: float
    solution: Any = None

    def __post_init__(self):
        """Validate the update time."""
        if self.time < 0:
            raise ValueError(f"Update time must be non-negative, got {self.time}")

    def __repr__(self) -> str:
        return f"UpdateRecord(time={self.time}, value={self.value:.6g})"
