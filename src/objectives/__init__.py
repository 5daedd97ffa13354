"""
Objective wrappers.
"""

from .normalized import NormalizedEvaluation, NormalizedObjective

__all__ = ["NormalizedEvaluation", "NormalizedObjective"]
