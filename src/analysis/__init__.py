"""
Analysis module for the search-analysis framework.

This module contains the experiment driver that applies a set of searches to a set
of problems, repeating each search several times, and records the progress of every
run in a ResultsStore.
"""

from .engine import Experiment
from .config import AnalysisConfig
from .listener import RunResultListener
from .protocols import Evaluation, Search, SearchFactory, SearchListener

__all__ = [
    "Experiment",
    "AnalysisConfig",
    "RunResultListener",
    "Evaluation",
    "Search",
    "SearchFactory",
    "SearchListener",
]
