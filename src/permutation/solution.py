"""
Permutation solutions.

A PermutationSolution is an ordered sequence of unique integer IDs, e.g. a tour
or a schedule. It can be modified in place by swapping two positions or by
reversing a subsequence, which is what the permutation moves do.
"""

from typing import Iterable, List, Tuple

from ..core.exceptions import SolutionModificationError


class PermutationSolution:
    """
    Ordered sequence of unique integer IDs.

    Attributes:
        _order: The IDs, in order
    """

    def __init__(self, order: Iterable[int]):
        """
        Create a permutation solution.

        Args:
            order: IDs in the desired order; can not be empty, contain None or contain duplicates
        """
        if order is None:
            raise ValueError("Error while creating permutation solution: list of IDs can not be None.")
        order = list(order)
        if any(item is None for item in order):
            raise ValueError("Error while creating permutation solution: list of IDs can not contain None.")
        if not order:
            raise ValueError("Error while creating permutation solution: list of IDs can not be empty.")
        if len(set(order)) < len(order):
            raise ValueError("Error while creating permutation solution: list of IDs can not contain duplicates.")

        self._order: List[int] = order

    @classmethod
    def _unchecked(cls, order: List[int]) -> "PermutationSolution":
        solution = cls.__new__(cls)
        solution._order = list(order)
        return solution

    @property
    def order(self) -> Tuple[int, ...]:
        """Get the IDs in their current order."""
        return tuple(self._order)

    def size(self) -> int:
        """Get the number of items in the permutation."""
        return len(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def swap(self, i: int, j: int) -> None:
        """
        Swap the items at positions i and j.

        Raises:
            SolutionModificationError: If a position is outside [0, size)
        """
        self._check_position(i)
        self._check_position(j)
        self._order[i], self._order[j] = self._order[j], self._order[i]

    def reverse(self, from_pos: int, to_pos: int) -> None:
        """
        Reverse the subsequence from position from_pos to position to_pos (both inclusive).

        If from_pos is larger than to_pos the subsequence wraps around: it runs from
        from_pos to the end and continues at the start up to to_pos.

        Raises:
            SolutionModificationError: If a position is outside [0, size)
        """
        self._check_position(from_pos)
        self._check_position(to_pos)

        n = len(self._order)
        length = (to_pos - from_pos) % n + 1
        positions = [(from_pos + k) % n for k in range(length)]
        items = [self._order[p] for p in positions]
        for p, item in zip(positions, reversed(items)):
            self._order[p] = item

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos < len(self._order):
            raise SolutionModificationError(
                "Error while modifying permutation solution: positions should be positive "
                f"and smaller than the number of items in the permutation ({len(self._order)}), got {pos}.",
                self
            )

    def copy(self) -> "PermutationSolution":
        """Create a deep copy of this solution."""
        return PermutationSolution._unchecked(self._order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermutationSolution):
            return NotImplemented
        return self._order == other._order

    def __hash__(self) -> int:
        return hash(tuple(self._order))

    def __str__(self) -> str:
        return "Permutation solution: {" + ", ".join(str(item) for item in self._order) + "}"

    def __repr__(self) -> str:
        return f"PermutationSolution({self._order})"
