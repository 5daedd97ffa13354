"""
Composite neighbourhood combining several neighbourhoods with weights.
"""

from typing import Any, List, Optional, Sequence
import numpy as np


class CompositeNeighbourhood:
    """
    Neighbourhood that draws its moves from several contained neighbourhoods.

    A random move is obtained by asking every contained neighbourhood for a random
    move and picking one of the produced moves with roulette selection, using the
    weights of the neighbourhoods that were able to produce a move. All moves are
    the concatenation of the moves of all contained neighbourhoods.
    """

    def __init__(self, neighbourhoods: Sequence[Any], weights: Sequence[float]):
        """
        Create a composite neighbourhood.

        Args:
            neighbourhoods: Contained neighbourhoods (at least one)
            weights: Strictly positive weight of each neighbourhood
        """
        if neighbourhoods is None:
            raise ValueError("Neighbourhood list can not be None.")
        if weights is None:
            raise ValueError("Neighbourhood weight list can not be None.")
        if len(neighbourhoods) != len(weights):
            raise ValueError("Neighbourhood and weight list should be of the same size.")
        if not neighbourhoods:
            raise ValueError("At least one neighbourhood should be specified.")
        if any(neigh is None for neigh in neighbourhoods):
            raise ValueError("Neighbourhood list can not contain None.")
        if any(w is None for w in weights):
            raise ValueError("Neighbourhood weight list can not contain None.")
        if any(w <= 0 for w in weights):
            raise ValueError("All weights should be strictly positive.")

        self.neighbourhoods = list(neighbourhoods)
        self.weights = [float(w) for w in weights]

    def get_random_move(self, solution: Any, rng: np.random.Generator) -> Optional[Any]:
        """
        Generate a random move.

        Returns:
            A move from one of the contained neighbourhoods, or None if none of them
            can produce a move for this solution
        """
        moves = []
        move_weights = []
        for neigh, weight in zip(self.neighbourhoods, self.weights):
            move = neigh.get_random_move(solution, rng)
            if move is not None:
                moves.append(move)
                move_weights.append(weight)

        if not moves:
            return None

        # Roulette selection
        probs = np.array(move_weights) / np.sum(move_weights)
        return moves[rng.choice(len(moves), p=probs)]

    def get_all_moves(self, solution: Any) -> List[Any]:
        """Generate all moves of all contained neighbourhoods."""
        return [move for neigh in self.neighbourhoods for move in neigh.get_all_moves(solution)]
