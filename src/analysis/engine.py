"""
Experiment driver for search analyses.

This module runs a set of searches on a set of problems, repeating every search
several times because most searches are randomized, and collects the best
solution updates of every run in a ResultsStore.
"""

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Dict, Iterator, Optional, Tuple

from ..core.exceptions import DuplicateIDError, UnknownIDError
from ..core.results import ResultsStore
from ..utils.analysis_logger import AnalysisLogger, LoggingAnalysisLogger, NullAnalysisLogger
from .config import AnalysisConfig, check_positive
from .listener import RunResultListener
from .protocols import Search, SearchFactory

logger = logging.getLogger(__name__)


class Experiment:
    """
    Applies several searches to several problems and records their progress.

    Every search is applied to every problem. For each (problem, search) pair, a
    number of burn-in runs is executed first, to warm up the interpreter and any
    caches; their results are discarded. Then the measured runs are executed, each
    with a fresh search instance, and the best solution updates of each run are
    registered in the results. Everything runs sequentially on the calling thread.

    By default every search is run 10 times after 1 burn-in run. Both can be set
    globally and per search.

    Example usage:
        ```python
        experiment = (
            Experiment()
            .add_problem("tsp-50", problem)
            .add_search("random", lambda p: RandomSearch(p))
            .add_search("steepest", lambda p: SteepestDescent(p))
            .set_num_runs(1, search_id="steepest")
        )
        results = experiment.run()
        results.write_json("results.json")
        ```
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        analysis_logger: Optional[AnalysisLogger] = None
    ):
        """
        Initialize the experiment.

        Args:
            config: Run counts and logging settings (defaults to AnalysisConfig()).
                The experiment works on its own copy, so changing run counts never
                affects the given configuration.
            analysis_logger: Sink receiving progress events. If omitted, progress is
                logged at config.log_level when config.log_progress is set, and
                discarded otherwise.
        """
        if config is None:
            config = AnalysisConfig()
        self.config = replace(
            config,
            search_num_runs=dict(config.search_num_runs),
            search_num_burn_in=dict(config.search_num_burn_in)
        )

        if analysis_logger is None:
            if self.config.log_progress:
                analysis_logger = LoggingAnalysisLogger(level=getattr(logging, self.config.log_level))
            else:
                analysis_logger = NullAnalysisLogger()
        self.analysis_logger = analysis_logger

        self._problems: Dict[str, Any] = {}
        self._searches: Dict[str, SearchFactory] = {}

    # ------------------------------------------------------------------
    # Problems and searches
    # ------------------------------------------------------------------

    def add_problem(self, problem_id: str, problem: Any) -> "Experiment":
        """
        Add a problem to be analyzed.

        Args:
            problem_id: Unique problem ID
            problem: The problem, passed to every search factory

        Returns:
            This experiment, for chaining
        """
        if problem is None:
            raise ValueError("Problem can not be None.")
        if problem_id in self._problems:
            raise DuplicateIDError(problem_id, "problem")
        self._problems[problem_id] = problem
        return self

    def add_search(self, search_id: str, search_factory: SearchFactory) -> "Experiment":
        """
        Add a search to be applied to all analyzed problems.

        A factory is required instead of a search because a new search instance is
        created for every run.

        Args:
            search_id: Unique search ID
            search_factory: Function creating a search for a given problem

        Returns:
            This experiment, for chaining
        """
        if search_factory is None:
            raise ValueError("Search factory can not be None.")
        if search_id in self._searches:
            raise DuplicateIDError(search_id, "search")
        self._searches[search_id] = search_factory
        return self

    def get_problem_ids(self) -> Tuple[str, ...]:
        """Get the IDs of the added problems, in the order in which they were added."""
        return tuple(self._problems)

    def get_search_ids(self) -> Tuple[str, ...]:
        """Get the IDs of the added searches, in the order in which they were added."""
        return tuple(self._searches)

    # ------------------------------------------------------------------
    # Run counts
    # ------------------------------------------------------------------

    def get_num_runs(self, search_id: Optional[str] = None) -> int:
        """
        Get the number of measured runs.

        Args:
            search_id: If given, the run count of this search: its specific count if
                set, else the global count

        Returns:
            Number of runs
        """
        if search_id is None:
            return self.config.num_runs
        self._check_search(search_id)
        return self.config.search_num_runs.get(search_id, self.config.num_runs)

    def set_num_runs(self, n: int, search_id: Optional[str] = None) -> "Experiment":
        """
        Set the number of measured runs, globally or for a single search.

        Args:
            n: Strictly positive number of runs
            search_id: If given, only this search is affected

        Returns:
            This experiment, for chaining
        """
        if search_id is not None:
            self._check_search(search_id)
        n = check_positive(n, "Number of runs")
        if search_id is None:
            self.config.num_runs = n
        else:
            self.config.search_num_runs[search_id] = n
        return self

    def get_num_burn_in(self, search_id: Optional[str] = None) -> int:
        """
        Get the number of burn-in runs.

        Args:
            search_id: If given, the burn-in count of this search: its specific count
                if set, else the global count

        Returns:
            Number of burn-in runs
        """
        if search_id is None:
            return self.config.num_burn_in
        self._check_search(search_id)
        return self.config.search_num_burn_in.get(search_id, self.config.num_burn_in)

    def set_num_burn_in(self, n: int, search_id: Optional[str] = None) -> "Experiment":
        """
        Set the number of burn-in runs, globally or for a single search.

        Args:
            n: Strictly positive number of burn-in runs
            search_id: If given, only this search is affected

        Returns:
            This experiment, for chaining
        """
        if search_id is not None:
            self._check_search(search_id)
        n = check_positive(n, "Number of burn-in runs")
        if search_id is None:
            self.config.num_burn_in = n
        else:
            self.config.search_num_burn_in[search_id] = n
        return self

    def _check_search(self, search_id: str) -> None:
        if search_id not in self._searches:
            raise UnknownIDError(search_id, "search")

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def run(self, results: Optional[ResultsStore] = None) -> ResultsStore:
        """
        Run the experiment.

        Problems are processed one by one, in the order in which they were added; for
        each problem, all searches are applied in the order in which they were added.
        Any error raised while creating, running or disposing a search aborts the
        whole experiment.

        Args:
            results: Store to register the runs in (a new one is created if omitted).
                Runs registered before an error remain available in this store.

        Returns:
            Results of all measured runs
        """
        self._validate_overrides()
        if results is None:
            results = ResultsStore()

        problem_ids = self.get_problem_ids()
        search_ids = self.get_search_ids()

        logger.info(f"Starting analysis: {len(problem_ids)} problems x {len(search_ids)} searches")
        self.analysis_logger.analysis_started(problem_ids, search_ids)

        for problem_id, problem in self._problems.items():
            self.analysis_logger.problem_started(problem_id)
            for search_id, search_factory in self._searches.items():
                self._burn_in(problem_id, problem, search_id, search_factory)
                self._measure(problem_id, problem, search_id, search_factory, results)
            self.analysis_logger.problem_finished(problem_id)

        self.analysis_logger.analysis_finished()
        logger.info(f"Analysis complete: {results}")

        return results

    def _burn_in(self, problem_id: str, problem: Any, search_id: str, search_factory: SearchFactory) -> None:
        """Execute the burn-in runs of a search, discarding their results."""
        n_burn_in = self.get_num_burn_in(search_id)
        for i in range(1, n_burn_in + 1):
            self.analysis_logger.burn_in_started(problem_id, search_id, i, n_burn_in)
            with _created_search(search_factory, problem) as search:
                search.start()
            self.analysis_logger.burn_in_finished(problem_id, search_id, i, n_burn_in)

    def _measure(
        self,
        problem_id: str,
        problem: Any,
        search_id: str,
        search_factory: SearchFactory,
        results: ResultsStore
    ) -> None:
        """Execute the measured runs of a search and register their results."""
        n_runs = self.get_num_runs(search_id)
        for i in range(1, n_runs + 1):
            self.analysis_logger.run_started(problem_id, search_id, i, n_runs)
            listener = RunResultListener()
            with _created_search(search_factory, problem) as search:
                search.add_listener(listener)
                search.start()
            results.register_search_run(problem_id, search_id, listener.run)
            self.analysis_logger.run_finished(problem_id, search_id, i, n_runs, listener.run.num_updates)

    def _validate_overrides(self) -> None:
        """Check that all search specific run counts refer to added searches."""
        for overrides in (self.config.search_num_runs, self.config.search_num_burn_in):
            for search_id in overrides:
                self._check_search(search_id)


@contextmanager
def _created_search(search_factory: SearchFactory, problem: Any) -> Iterator[Search]:
    """
    Create a search for the given problem and dispose it afterwards.

    If the search fails, it is still disposed, and the failure of the search is
    raised even if disposing fails as well.
    """
    search = search_factory(problem)
    try:
        yield search
    except BaseException:
        try:
            search.dispose()
        except Exception as e:
            logger.warning(f"Error while disposing failed search: {e}")
        raise
    search.dispose()
