"""
Normalized objectives.

A NormalizedObjective wraps an objective and linearly maps its values from a given
interval [min, max] to [0, 1], which makes values of different problems comparable
when results are analyzed together.
"""

from typing import Any


class NormalizedEvaluation:
    """
    Evaluation whose value is normalized to [0, 1] with respect to an interval [min, max].

    Values outside the interval are mapped outside [0, 1] and are not truncated.
    """

    def __init__(self, evaluation: Any, min_value: float, max_value: float):
        """
        Args:
            evaluation: Wrapped, unnormalized evaluation (exposing value)
            min_value: Value mapped to 0
            max_value: Value mapped to 1
        """
        self.evaluation = evaluation
        self.min_value = min_value
        self.max_value = max_value

    @property
    def value(self) -> float:
        return (self.evaluation.value - self.min_value) / (self.max_value - self.min_value)

    @property
    def unnormalized_evaluation(self) -> Any:
        return self.evaluation

    def __repr__(self) -> str:
        return f"NormalizedEvaluation(value={self.value:.4f}, min={self.min_value}, max={self.max_value})"


class NormalizedObjective:
    """Objective wrapper that normalizes all evaluations to [0, 1]."""

    def __init__(self, objective: Any, min_value: float, max_value: float):
        """
        Args:
            objective: Wrapped objective, providing evaluate(solution, data),
                evaluate_move(move, solution, evaluation, data) and is_minimizing()
            min_value: Value mapped to 0
            max_value: Value mapped to 1
        """
        if objective is None:
            raise ValueError("Error while initializing normalized objective: wrapped objective can not be None.")
        self.objective = objective
        self.min_value = min_value
        self.max_value = max_value

    @property
    def unnormalized_objective(self) -> Any:
        return self.objective

    def evaluate(self, solution: Any, data: Any) -> NormalizedEvaluation:
        """Evaluate a solution and normalize the result."""
        return NormalizedEvaluation(self.objective.evaluate(solution, data), self.min_value, self.max_value)

    def evaluate_move(
        self,
        move: Any,
        current_solution: Any,
        current_evaluation: NormalizedEvaluation,
        data: Any
    ) -> NormalizedEvaluation:
        """
        Evaluate a move using the delta evaluation of the wrapped objective.

        The current evaluation is unwrapped before it is passed to the wrapped
        objective, and the result is normalized again.
        """
        evaluation = self.objective.evaluate_move(
            move,
            current_solution,
            current_evaluation.unnormalized_evaluation,
            data
        )
        return NormalizedEvaluation(evaluation, self.min_value, self.max_value)

    def is_minimizing(self) -> bool:
        return self.objective.is_minimizing()
