"""
Fixtures for unit tests.
"""

import pytest
from src.core.run_result import RunResult
from src.core.results import ResultsStore


@pytest.fixture
def sample_run():
    """Create a run with three updates."""
    run = RunResult()
    run.update_best_solution(10, 0.312, ["a"])
    run.update_best_solution(246, 0.377, ["a", "b"])
    run.update_best_solution(366, 0.396, ["a", "b", "c"])
    return run


@pytest.fixture
def sample_results():
    """Create a store with 2 problems, 2 searches and uneven run counts."""
    results = ResultsStore()
    for p in range(2):
        for s in range(2):
            for r in range(s + 1):
                run = RunResult()
                run.update_best_solution(r, p + s + r * 0.1, (p, s, r))
                results.register_search_run(f"problem-{p}", f"search-{s}", run)
    return results
