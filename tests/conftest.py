"""
Shared test configuration and search doubles.

Ensures the repository root is on sys.path so that 'import src.*' works, and
provides small search implementations that follow the contracts used by the
experiment driver.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
import pytest

# Ensure project root is on sys.path so 'import src.*' works
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from src.permutation.neighbourhoods import SingleSwapNeighbourhood  # noqa: E402


@dataclass(frozen=True)
class SimpleEvaluation:
    """Evaluation holding a single value."""

    value: float


class ItemData:
    """Data set of n items with IDs 0..n-1."""

    def __init__(self, n: int):
        self.n = n

    def get_ids(self) -> List[int]:
        return list(range(self.n))


class DisplacementObjective:
    """Sum of the distances between each item's position and its ID."""

    def __init__(self, minimizing: bool = True):
        self.minimizing = minimizing

    def evaluate(self, solution, data) -> SimpleEvaluation:
        return SimpleEvaluation(float(sum(abs(pos - item) for pos, item in enumerate(solution.order))))

    def evaluate_move(self, move, solution, evaluation, data) -> SimpleEvaluation:
        neighbour = solution.copy()
        move.apply(neighbour)
        return self.evaluate(neighbour, data)

    def is_minimizing(self) -> bool:
        return self.minimizing


class ScriptedSearch:
    """
    Search that reports a fixed sequence of best solution updates.

    Each update is a (time, value, solution) triple; the elapsed runtime reported to
    listeners is the time of the update being reported.
    """

    def __init__(
        self,
        problem: Any,
        updates: Sequence[Tuple[int, float, Any]] = (),
        fail_on_start: bool = False,
        fail_on_dispose: bool = False
    ):
        self.problem = problem
        self.updates = list(updates)
        self.fail_on_start = fail_on_start
        self.fail_on_dispose = fail_on_dispose
        self.listeners: List[Any] = []
        self.started = False
        self.disposed = False
        self._runtime = 0

    def add_listener(self, listener) -> None:
        self.listeners.append(listener)

    def start(self) -> None:
        self.started = True
        if self.fail_on_start:
            raise RuntimeError("search failed")
        for time, value, solution in self.updates:
            self._runtime = time
            for listener in self.listeners:
                listener.new_best_solution(self, solution, SimpleEvaluation(value), None)

    def dispose(self) -> None:
        self.disposed = True
        if self.fail_on_dispose:
            raise RuntimeError("dispose failed")

    def get_elapsed_runtime(self) -> int:
        return self._runtime


class RandomDescentSearch:
    """
    Randomized first-improvement descent over permutations, used as a realistic trial.

    Every step takes 1 ms of simulated time. Improvements follow the optimization
    direction of the problem.
    """

    def __init__(self, problem, steps: int = 60, seed: Optional[int] = None, neighbourhood=None):
        self.problem = problem
        self.steps = steps
        self.rng = np.random.default_rng(seed)
        self.neighbourhood = neighbourhood or SingleSwapNeighbourhood()
        self.listeners: List[Any] = []
        self.disposed = False
        self._clock = 0

    def add_listener(self, listener) -> None:
        self.listeners.append(listener)

    def _improves(self, new, current) -> bool:
        if self.problem.is_minimizing():
            return new.value < current.value
        return new.value > current.value

    def _report(self, solution, evaluation) -> None:
        for listener in self.listeners:
            listener.new_best_solution(self, solution.copy(), evaluation, None)

    def start(self) -> None:
        self._clock = 0
        current = self.problem.create_random_solution(self.rng)
        current_eval = self.problem.evaluate(current)
        self._report(current, current_eval)
        for _ in range(self.steps):
            self._clock += 1
            move = self.neighbourhood.get_random_move(current, self.rng)
            if move is None:
                break
            neighbour = current.copy()
            move.apply(neighbour)
            neighbour_eval = self.problem.evaluate(neighbour)
            if self._improves(neighbour_eval, current_eval):
                current, current_eval = neighbour, neighbour_eval
                self._report(current, current_eval)

    def dispose(self) -> None:
        self.disposed = True

    def get_elapsed_runtime(self) -> int:
        return self._clock


@pytest.fixture
def scripted_search_cls():
    """The ScriptedSearch class."""
    return ScriptedSearch


@pytest.fixture
def random_descent_cls():
    """The RandomDescentSearch class."""
    return RandomDescentSearch


@pytest.fixture
def item_data():
    """Data set of 8 items."""
    return ItemData(8)


@pytest.fixture
def displacement_objective_cls():
    """The DisplacementObjective class."""
    return DisplacementObjective


@pytest.fixture
def simple_evaluation_cls():
    """The SimpleEvaluation class."""
    return SimpleEvaluation
