"""
Results store for search analyses.

This module defines the ResultsStore class, which collects the results of all
search runs performed during an analysis, organized per problem and per search.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .exceptions import UnknownIDError
from .run_result import RunResult

logger = logging.getLogger(__name__)


class ResultsStore:
    """
    Hierarchical collection of search run results.

    Results are stored as a mapping problem ID -> search ID -> list of runs. Runs of
    the same (problem, search) pair are kept in registration order. Problem and
    search IDs are iterated in the order in which they were first registered.

    Attributes:
        _results: Nested mapping from problem ID to search ID to list of runs
    """

    def __init__(self):
        """Create an empty results store."""
        self._results: Dict[str, Dict[str, List[RunResult]]] = {}

    def register_search_run(self, problem_id: str, search_id: str, run: RunResult) -> None:
        """
        Register the results of a search run.

        If no runs were registered before for this combination of problem and search,
        new entries are created. Else, the run is appended to the existing runs. A
        reference to the given run is stored, it is not copied.

        Args:
            problem_id: ID of the problem that was solved
            search_id: ID of the applied search
            run: Results of the search run
        """
        if run is None:
            raise ValueError("Search run can not be None.")

        searches = self._results.setdefault(problem_id, {})
        searches.setdefault(search_id, []).append(run)

    def merge(self, other: "ResultsStore") -> "ResultsStore":
        """
        Merge the given results into this store.

        A copy of every run in `other` is registered in this store, in the order in
        which the runs appear in `other`. The other store is not modified.

        Args:
            other: Results to merge into this store

        Returns:
            This store, for chaining
        """
        # Snapshot first so that merging a store into itself terminates
        snapshot = [
            (problem_id, search_id, list(runs))
            for problem_id, searches in other._results.items()
            for search_id, runs in searches.items()
        ]
        n_runs = 0
        for problem_id, search_id, runs in snapshot:
            for run in runs:
                self.register_search_run(problem_id, search_id, run.copy())
                n_runs += 1

        logger.debug(f"Merged {n_runs} runs from {len(snapshot)} (problem, search) pairs")
        return self

    def num_problems(self) -> int:
        """Get the number of analyzed problems."""
        return len(self._results)

    def get_problem_ids(self) -> Tuple[str, ...]:
        """Get the IDs of the analyzed problems."""
        return tuple(self._results)

    def num_searches(self, problem_id: str) -> int:
        """Get the number of searches applied to the problem with the given ID."""
        return len(self._get_searches(problem_id))

    def get_search_ids(self, problem_id: str) -> Tuple[str, ...]:
        """Get the IDs of the searches applied to the problem with the given ID."""
        return tuple(self._get_searches(problem_id))

    def num_runs(self, problem_id: str, search_id: str) -> int:
        """Get the number of runs of the given search when solving the given problem."""
        return len(self._get_runs(problem_id, search_id))

    def get_run(self, problem_id: str, search_id: str, i: int) -> RunResult:
        """
        Get the results of the i-th run of the given search when solving the given problem.

        Args:
            problem_id: ID of the problem
            search_id: ID of the search
            i: Run index, in [0, num_runs)

        Returns:
            The registered run

        Raises:
            UnknownIDError: If the problem or search ID is unknown
            IndexError: If the run index is out of range
        """
        runs = self._get_runs(problem_id, search_id)
        if not 0 <= i < len(runs):
            raise IndexError(
                f"Run index {i} out of range [0, {len(runs)}) "
                f"for search {search_id} applied to problem {problem_id}."
            )
        return runs[i]

    def iter_runs(self) -> Iterable[Tuple[str, str, RunResult]]:
        """Iterate over all (problem ID, search ID, run) triples in storage order."""
        for problem_id, searches in self._results.items():
            for search_id, runs in searches.items():
                for run in runs:
                    yield problem_id, search_id, run

    def is_empty(self) -> bool:
        """Check if no runs have been registered."""
        return len(self._results) == 0

    def to_dict(self, solution_converter: Optional[Callable[[Any], Any]] = None) -> Dict[str, Any]:
        """
        Convert the results to a nested dictionary of JSON-compatible values.

        Args:
            solution_converter: Optional converter to include the best solution of each run

        Returns:
            Dictionary problem ID -> search ID -> list of run dictionaries
        """
        from ..export.json_export import results_to_dict

        return results_to_dict(self, solution_converter)

    def write_json(
        self,
        path: Union[str, Path],
        solution_converter: Optional[Callable[[Any], Any]] = None
    ) -> None:
        """
        Write the results to a JSON file, overwriting it if it already exists.

        The best solution of each run is only stored if a solution converter is given.

        Args:
            path: Output file path
            solution_converter: Optional function converting a solution to a JSON value
        """
        from ..export.json_export import write_json

        write_json(self, path, solution_converter)

    def _get_searches(self, problem_id: str) -> Dict[str, List[RunResult]]:
        if problem_id not in self._results:
            raise UnknownIDError(problem_id, "problem")
        return self._results[problem_id]

    def _get_runs(self, problem_id: str, search_id: str) -> List[RunResult]:
        searches = self._get_searches(problem_id)
        if search_id not in searches:
            raise UnknownIDError(search_id, "search", problem_id=problem_id)
        return searches[search_id]

    def __repr__(self) -> str:
        n_runs = sum(len(runs) for searches in self._results.values() for runs in searches.values())
        return f"ResultsStore(problems={self.num_problems()}, runs={n_runs})"


def merge_all(stores: Iterable[ResultsStore]) -> ResultsStore:
    """
    Combine several results stores into a new one.

    Useful when independent parts of an analysis were run separately (e.g. one
    process per problem) and their results have to be put back together.

    Args:
        stores: Results stores to combine, merged in the given order

    Returns:
        New ResultsStore holding copies of all runs
    """
    combined = ResultsStore()
    for store in stores:
        combined.merge(store)
    return combined
