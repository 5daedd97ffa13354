"""
Permutation solutions, moves, neighbourhoods and problems.
"""

from .solution import PermutationSolution
from .moves import SingleSwapMove, ReverseSubsequenceMove
from .neighbourhoods import SingleSwapNeighbourhood, ReverseSubsequenceNeighbourhood
from .problem import PermutationProblem

__all__ = [
    "PermutationSolution",
    "SingleSwapMove",
    "ReverseSubsequenceMove",
    "SingleSwapNeighbourhood",
    "ReverseSubsequenceNeighbourhood",
    "PermutationProblem",
]
