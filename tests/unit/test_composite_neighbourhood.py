"""
Unit tests for CompositeNeighbourhood.
"""

import numpy as np
import pytest
from src.neighbourhoods import CompositeNeighbourhood
from src.permutation import (
    PermutationSolution,
    ReverseSubsequenceMove,
    ReverseSubsequenceNeighbourhood,
    SingleSwapMove,
    SingleSwapNeighbourhood,
)


class _EmptyNeighbourhood:
    """Neighbourhood that never produces a move."""

    def get_random_move(self, solution, rng):
        return None

    def get_all_moves(self, solution):
        return []


class TestCompositeNeighbourhood:
    """Test cases for CompositeNeighbourhood."""

    @pytest.mark.parametrize("neighs, weights, message", [
        (None, [1.0], "can not be None"),
        ([SingleSwapNeighbourhood()], None, "can not be None"),
        ([SingleSwapNeighbourhood()], [1.0, 2.0], "same size"),
        ([], [], "At least one"),
        ([None], [1.0], "can not contain None"),
        ([SingleSwapNeighbourhood()], [0.0], "strictly positive"),
        ([SingleSwapNeighbourhood()], [-1.0], "strictly positive"),
    ])
    def test_invalid_arguments(self, neighs, weights, message):
        """Test that invalid neighbourhood and weight lists are rejected."""
        with pytest.raises(ValueError, match=message):
            CompositeNeighbourhood(neighs, weights)

    def test_random_moves_from_all_neighbourhoods(self):
        """Test that random moves are drawn from every contained neighbourhood."""
        composite = CompositeNeighbourhood(
            [SingleSwapNeighbourhood(), ReverseSubsequenceNeighbourhood()],
            [1.0, 1.0]
        )
        sol = PermutationSolution(range(6))
        rng = np.random.default_rng(0)

        kinds = {type(composite.get_random_move(sol, rng)) for _ in range(200)}

        assert kinds == {SingleSwapMove, ReverseSubsequenceMove}

    def test_weights_bias_selection(self):
        """Test that a heavier neighbourhood is selected more often."""
        composite = CompositeNeighbourhood(
            [SingleSwapNeighbourhood(), ReverseSubsequenceNeighbourhood()],
            [9.0, 1.0]
        )
        sol = PermutationSolution(range(6))
        rng = np.random.default_rng(7)

        swaps = sum(
            isinstance(composite.get_random_move(sol, rng), SingleSwapMove)
            for _ in range(1000)
        )

        assert 800 < swaps < 980

    def test_neighbourhood_without_move_is_skipped(self):
        """Test that neighbourhoods producing no move are ignored in the selection."""
        composite = CompositeNeighbourhood([_EmptyNeighbourhood(), SingleSwapNeighbourhood()], [100.0, 1.0])
        sol = PermutationSolution(range(4))
        rng = np.random.default_rng(3)

        for _ in range(50):
            assert isinstance(composite.get_random_move(sol, rng), SingleSwapMove)

    def test_no_move_available(self):
        """Test that None is returned if no neighbourhood produces a move."""
        composite = CompositeNeighbourhood(
            [SingleSwapNeighbourhood(), ReverseSubsequenceNeighbourhood()],
            [1.0, 2.0]
        )

        assert composite.get_random_move(PermutationSolution([1]), np.random.default_rng(0)) is None

    def test_all_moves(self):
        """Test that all moves are the concatenation of all contained moves."""
        composite = CompositeNeighbourhood(
            [SingleSwapNeighbourhood(), ReverseSubsequenceNeighbourhood()],
            [1.0, 1.0]
        )
        sol = PermutationSolution(range(4))

        moves = composite.get_all_moves(sol)

        assert len(moves) == 6 + 12
        assert moves[:6] == SingleSwapNeighbourhood().get_all_moves(sol)
