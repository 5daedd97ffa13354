"""
Moves that modify a permutation solution in place.
"""

from dataclasses import dataclass

from .solution import PermutationSolution


@dataclass(frozen=True)
class SingleSwapMove:
    """Swaps the items at two positions."""

    i: int
    j: int

    def apply(self, solution: PermutationSolution) -> None:
        solution.swap(self.i, self.j)

    def undo(self, solution: PermutationSolution) -> None:
        # a swap is its own inverse
        solution.swap(self.i, self.j)


@dataclass(frozen=True)
class ReverseSubsequenceMove:
    """Reverses the subsequence between two positions (both inclusive, wrapping around if from_pos > to_pos)."""

    from_pos: int
    to_pos: int

    def apply(self, solution: PermutationSolution) -> None:
        solution.reverse(self.from_pos, self.to_pos)

    def undo(self, solution: PermutationSolution) -> None:
        solution.reverse(self.from_pos, self.to_pos)
