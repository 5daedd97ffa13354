"""
Utility modules for the search-analysis framework.

This package provides cross-cutting concerns such as progress reporting.
"""

from .analysis_logger import (
    AnalysisLogger,
    NullAnalysisLogger,
    LoggingAnalysisLogger,
    ANALYSIS_MARKER
)

__all__ = [
    "AnalysisLogger",
    "NullAnalysisLogger",
    "LoggingAnalysisLogger",
    "ANALYSIS_MARKER",
]
