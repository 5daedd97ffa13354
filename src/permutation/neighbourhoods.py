"""
Neighbourhoods of permutation solutions.

A neighbourhood generates moves for a given solution, either one at random or all
possible moves at once. Random moves are drawn from a numpy Generator.
"""

from typing import List, Optional, Tuple
import numpy as np

from .moves import ReverseSubsequenceMove, SingleSwapMove
from .solution import PermutationSolution


def _random_positions(n: int, rng: np.random.Generator) -> Tuple[int, int]:
    """Pick two distinct random positions in [0, n)."""
    i = int(rng.integers(n))
    j = int(rng.integers(n - 1))
    if j >= i:
        j += 1
    return i, j


class SingleSwapNeighbourhood:
    """Neighbourhood that swaps two items of a permutation."""

    def get_random_move(self, solution: PermutationSolution, rng: np.random.Generator) -> Optional[SingleSwapMove]:
        """Generate a random swap move, or None if the permutation has fewer than two items."""
        if solution.size() < 2:
            return None
        i, j = _random_positions(solution.size(), rng)
        return SingleSwapMove(i, j)

    def get_all_moves(self, solution: PermutationSolution) -> List[SingleSwapMove]:
        """Generate all swap moves, each pair of positions once."""
        n = solution.size()
        return [SingleSwapMove(i, j) for i in range(n) for j in range(i + 1, n)]

    def __str__(self) -> str:
        return "Single swap (permutation)"


class ReverseSubsequenceNeighbourhood:
    """Neighbourhood that reverses a subsequence of a permutation."""

    def get_random_move(
        self,
        solution: PermutationSolution,
        rng: np.random.Generator
    ) -> Optional[ReverseSubsequenceMove]:
        """Generate a random reversal, or None if the permutation has fewer than two items."""
        if solution.size() < 2:
            return None
        i, j = _random_positions(solution.size(), rng)
        return ReverseSubsequenceMove(i, j)

    def get_all_moves(self, solution: PermutationSolution) -> List[ReverseSubsequenceMove]:
        """Generate all reversals: every ordered pair of distinct positions (wrap-around included)."""
        n = solution.size()
        return [ReverseSubsequenceMove(i, j) for i in range(n) for j in range(n) if i != j]

    def __str__(self) -> str:
        return "Reverse subsequence (permutation)"
