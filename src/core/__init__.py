"""
Core data structures for the search-analysis framework.

This package defines the update records, per-run results and the hierarchical
results store that collects them.
"""

from .exceptions import AnalysisError, UnknownIDError, DuplicateIDError, SolutionModificationError
from .update import UpdateRecord
from .run_result import RunResult
from .results import ResultsStore, merge_all

__all__ = [
    "AnalysisError",
    "UnknownIDError",
    "DuplicateIDError",
    "SolutionModificationError",
    "UpdateRecord",
    "RunResult",
    "ResultsStore",
    "merge_all",
]
