"""
Exception types raised by the search-analysis framework.
"""

from typing import Optional


class AnalysisError(Exception):
    """Base class for all errors raised by this package."""


class UnknownIDError(AnalysisError, LookupError):
    """
    Raised when a problem or search identifier is not known.

    Attributes:
        identifier: The identifier that could not be resolved
        level: Which level of the hierarchy the identifier belongs to ("problem" or "search")
    """

    def __init__(self, identifier: str, level: str, problem_id: Optional[str] = None):
        self.identifier = identifier
        self.level = level
        self.problem_id = problem_id

        if level == "search" and problem_id is not None:
            message = f"Unknown search ID {identifier} for problem {problem_id}."
        else:
            message = f"Unknown {level} ID {identifier}."
        super().__init__(message)

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message
        return self.args[0]


class DuplicateIDError(AnalysisError, ValueError):
    """
    Raised when a problem or search is registered under an identifier that is already taken.

    Attributes:
        identifier: The duplicate identifier
        level: "problem" or "search"
    """

    def __init__(self, identifier: str, level: str):
        self.identifier = identifier
        self.level = level
        super().__init__(f"Duplicate {level} ID: {identifier}.")


class SolutionModificationError(AnalysisError, IndexError):
    """Raised when a solution can not be modified as requested."""

    def __init__(self, message: str, solution=None):
        self.solution = solution
        super().__init__(message)
