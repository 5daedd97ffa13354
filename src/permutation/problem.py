"""
Permutation problems.
"""

from typing import Any
import numpy as np

from .solution import PermutationSolution


class PermutationProblem:
    """
    Problem whose solutions are permutations of all item IDs of the data.

    The data must provide get_ids(), returning the IDs of all items. Random solutions
    are created by shuffling these IDs. The objective must provide
    evaluate(solution, data) and is_minimizing().
    """

    def __init__(self, data: Any, objective: Any):
        """
        Create a permutation problem.

        Args:
            data: Problem data exposing get_ids()
            objective: Objective used to evaluate solutions
        """
        if data is None:
            raise ValueError("Error while creating permutation problem: data is required, can not be None.")
        if objective is None:
            raise ValueError("Error while creating permutation problem: objective is required, can not be None.")
        self.data = data
        self.objective = objective

    def create_random_solution(self, rng: np.random.Generator) -> PermutationSolution:
        """Create a random permutation of all item IDs."""
        ids = list(self.data.get_ids())
        order = [ids[k] for k in rng.permutation(len(ids))]
        return PermutationSolution(order)

    def evaluate(self, solution: PermutationSolution):
        """Evaluate a solution with the objective of this problem."""
        return self.objective.evaluate(solution, self.data)

    def is_minimizing(self) -> bool:
        return self.objective.is_minimizing()
