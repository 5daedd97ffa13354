"""
Unit tests for normalized objectives.
"""

import pytest
from src.objectives import NormalizedEvaluation, NormalizedObjective
from src.permutation import PermutationSolution, SingleSwapMove


class TestNormalizedEvaluation:
    """Test cases for NormalizedEvaluation."""

    @pytest.mark.parametrize("raw, expected", [
        (10.0, 0.0),
        (20.0, 1.0),
        (15.0, 0.5),
        (25.0, 1.5),
        (5.0, -0.5),
    ])
    def test_value(self, simple_evaluation_cls, raw, expected):
        """Test linear mapping of [min, max] to [0, 1], without truncation."""
        evaluation = NormalizedEvaluation(simple_evaluation_cls(raw), 10.0, 20.0)

        assert evaluation.value == pytest.approx(expected)

    def test_unnormalized_evaluation(self, simple_evaluation_cls):
        """Test access to the wrapped evaluation."""
        raw = simple_evaluation_cls(12.0)

        assert NormalizedEvaluation(raw, 0.0, 1.0).unnormalized_evaluation is raw


class TestNormalizedObjective:
    """Test cases for NormalizedObjective."""

    def test_requires_objective(self):
        """Test that a wrapped objective is required."""
        with pytest.raises(ValueError, match="can not be None"):
            NormalizedObjective(None, 0.0, 1.0)

    def test_evaluate(self, item_data, displacement_objective_cls):
        """Test that evaluations are normalized."""
        objective = NormalizedObjective(displacement_objective_cls(), 0.0, 32.0)
        sol = PermutationSolution([1, 0, 2, 3, 4, 5, 6, 7])

        evaluation = objective.evaluate(sol, item_data)

        assert evaluation.value == pytest.approx(2.0 / 32.0)
        assert evaluation.unnormalized_evaluation.value == 2.0

    def test_evaluate_move(self, item_data, displacement_objective_cls):
        """Test that move evaluations unwrap the current evaluation and normalize the result."""
        objective = NormalizedObjective(displacement_objective_cls(), 0.0, 32.0)
        sol = PermutationSolution(range(8))
        current = objective.evaluate(sol, item_data)

        evaluation = objective.evaluate_move(SingleSwapMove(0, 7), sol, current, item_data)

        assert isinstance(evaluation, NormalizedEvaluation)
        assert evaluation.unnormalized_evaluation.value == 14.0
        assert evaluation.value == pytest.approx(14.0 / 32.0)
        assert sol.order == tuple(range(8))

    def test_evaluate_move_receives_unwrapped_evaluation(self, item_data, simple_evaluation_cls):
        """Test that the wrapped objective never sees a normalized evaluation."""
        seen = []

        class _Objective:
            def evaluate(self, solution, data):
                return simple_evaluation_cls(4.0)

            def evaluate_move(self, move, solution, evaluation, data):
                seen.append(evaluation)
                return simple_evaluation_cls(2.0)

            def is_minimizing(self):
                return False

        objective = NormalizedObjective(_Objective(), 0.0, 8.0)
        current = objective.evaluate(None, item_data)

        assert objective.evaluate_move(None, None, current, item_data).value == pytest.approx(0.25)
        assert seen == [simple_evaluation_cls(4.0)]

    @pytest.mark.parametrize("minimizing", [True, False])
    def test_direction(self, displacement_objective_cls, minimizing):
        """Test that the optimization direction is inherited."""
        objective = NormalizedObjective(displacement_objective_cls(minimizing), 0.0, 1.0)

        assert objective.is_minimizing() is minimizing
        assert objective.unnormalized_objective.is_minimizing() is minimizing
