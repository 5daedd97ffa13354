"""
Results of a single search run.

This module defines the RunResult class, which stores the time series of best
solution updates reported by one trial, together with the final best solution.
"""

from typing import Any, Callable, Dict, List, Optional
import numpy as np

from .update import UpdateRecord


class RunResult:
    """
    Ordered, append-only time series of best solution updates for one trial.

    Each update appends an elapsed time (ms) and an evaluation value; the stored
    best solution is overwritten, so it always equals the solution of the most
    recent update. Intermediate solutions are not retained.

    Time values are expected to be non-decreasing in append order. This is a
    contract of the producing trial and is not checked here.

    Attributes:
        _times: Update times in milliseconds since the trial started
        _values: Evaluation values of the successive best solutions
        _best_solution: Solution of the most recent update (None if no updates)
    """

    def __init__(self):
        """Create an empty run result."""
        self._times: List[int] = []
        self._values: List[float] = []
        self._best_solution: Optional[Any] = None
        self._has_best_solution = False

    def update_best_solution(self, time: int, value: float, solution: Any) -> None:
        """
        Register a new best solution.

        Args:
            time: Milliseconds elapsed since the trial started (stored as int, fractions
                of a millisecond are dropped)
            value: Evaluation value of the new best solution (stored as float; NaN and
                infinite values are kept but can not be exported to JSON)
            solution: The new best solution
        """
        self._times.append(int(time))
        self._values.append(float(value))
        self._best_solution = solution
        self._has_best_solution = True

    def add_update(self, update: UpdateRecord) -> None:
        """Register a captured update record."""
        self.update_best_solution(update.time, update.value, update.solution)

    @property
    def num_updates(self) -> int:
        """Get the number of registered updates."""
        return len(self._times)

    def __len__(self) -> int:
        return len(self._times)

    @property
    def best_solution(self) -> Optional[Any]:
        """Get the final best solution, or None if no update was registered."""
        return self._best_solution

    def has_best_solution(self) -> bool:
        """Check whether at least one update has been registered."""
        return self._has_best_solution

    @property
    def times(self) -> np.ndarray:
        """Get the update times (read-only array)."""
        return self._read_only(np.array(self._times, dtype=np.int64))

    @property
    def values(self) -> np.ndarray:
        """Get the values of the successive best solutions (read-only array)."""
        return self._read_only(np.array(self._values, dtype=np.float64))

    @staticmethod
    def _read_only(array: np.ndarray) -> np.ndarray:
        array.setflags(write=False)
        return array

    def copy(self) -> "RunResult":
        """
        Copy this run result.

        The update times and values are copied, the best solution is not:
        the copy refers to the same solution object.

        Returns:
            New, independent RunResult
        """
        run = RunResult()
        run._times = list(self._times)
        run._values = list(self._values)
        run._best_solution = self._best_solution
        run._has_best_solution = self._has_best_solution
        return run

    __copy__ = copy

    def to_dict(self, solution_converter: Optional[Callable[[Any], Any]] = None) -> Dict[str, Any]:
        """
        Convert to a JSON-compatible dictionary.

        Args:
            solution_converter: Optional function converting the best solution to a
                JSON value. If omitted, the solution is not included.

        Returns:
            Dictionary with "times", "values" and, if a converter is given, "best.solution"
        """
        data: Dict[str, Any] = {
            "times": list(self._times),
            "values": list(self._values),
        }
        if solution_converter is not None:
            data["best.solution"] = (
                solution_converter(self._best_solution) if self._has_best_solution else None
            )
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RunResult):
            return NotImplemented
        return (
            self._times == other._times
            and self._values == other._values
            and self._has_best_solution == other._has_best_solution
            and self._best_solution == other._best_solution
        )

    def __repr__(self) -> str:
        final = f"{self._values[-1]:.4f}" if self._values else "None"
        return f"RunResult(updates={self.num_updates}, final_value={final})"
