"""
Search listener that records best solution updates into a RunResult.
"""

import logging
from numbers import Real
from typing import Any, List

from ..core.run_result import RunResult
from ..core.update import UpdateRecord

logger = logging.getLogger(__name__)


class RunResultListener:
    """
    Tracks the best solution updates of a single search run.

    Every notification is captured as an UpdateRecord holding the elapsed runtime
    of the search, the evaluation value and the new best solution, and applied to
    a fresh RunResult.
    """

    def __init__(self):
        self.run = RunResult()
        self.updates: List[UpdateRecord] = []

    def new_best_solution(self, search, solution: Any, evaluation: Any, validation: Any = None) -> None:
        """Register a new best solution reported by the search."""
        update = UpdateRecord(
            time=search.get_elapsed_runtime(),
            value=_evaluation_value(evaluation),
            solution=solution
        )
        self.updates.append(update)
        self.run.add_update(update)
        logger.debug(f"New best solution at {update.time} ms: {update.value}")


def _evaluation_value(evaluation: Any) -> float:
    if isinstance(evaluation, Real):
        return float(evaluation)
    return float(evaluation.value)
