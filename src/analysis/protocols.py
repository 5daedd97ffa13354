"""
Contracts of the external optimization framework used by the analysis.

The analysis only relies on the operations listed here and never inspects the
concrete type of a problem, search or solution.
"""

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Evaluation(Protocol):
    """Evaluation of a solution, reduced to a single scalar value."""

    @property
    def value(self) -> float:
        ...


@runtime_checkable
class SearchListener(Protocol):
    """Callback notified by a search, on the search's own thread, when its best solution improves."""

    def new_best_solution(self, search: "Search", solution: Any, evaluation: Any, validation: Any) -> None:
        ...


@runtime_checkable
class Search(Protocol):
    """One trial of a search algorithm applied to a problem."""

    def add_listener(self, listener: SearchListener) -> None:
        """Register a listener before the search is started."""
        ...

    def start(self) -> None:
        """Run the search until its own stop criteria are satisfied (blocking)."""
        ...

    def dispose(self) -> None:
        """Release all resources held by the search."""
        ...

    def get_elapsed_runtime(self) -> int:
        """Milliseconds elapsed since the search was started."""
        ...


# Creates a fresh search for the given problem
SearchFactory = Callable[[Any], Search]
