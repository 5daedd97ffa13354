#!/usr/bin/env python3
"""
Basic example of analyzing searches with the search-analysis framework.

This script demonstrates how to:
1. Define permutation problems (with a plain and a normalized objective)
2. Wrap a search algorithm in a factory so that every run gets a fresh instance
3. Configure run counts globally and per search
4. Run the experiment and write the results to JSON

Usage:
    python examples/basic_analysis.py --output results.json
    python examples/basic_analysis.py --config config/analysis.yaml --output results.json
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

# Add repository root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.analysis import AnalysisConfig, Experiment
from src.export import permutation_to_json
from src.neighbourhoods import CompositeNeighbourhood
from src.objectives import NormalizedObjective
from src.permutation import (
    PermutationProblem,
    ReverseSubsequenceNeighbourhood,
    SingleSwapNeighbourhood,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class Cities:
    """Random cities in the unit square."""

    def __init__(self, n: int, seed: int = 0):
        rng = np.random.default_rng(seed)
        self.coords = rng.random((n, 2))

    def get_ids(self):
        return list(range(len(self.coords)))


class TourLength:
    """Length of the closed tour visiting all cities in the order of the permutation."""

    def evaluate(self, solution, data):
        tour = data.coords[list(solution.order)]
        return _Length(float(np.linalg.norm(tour - np.roll(tour, -1, axis=0), axis=1).sum()))

    def evaluate_move(self, move, solution, evaluation, data):
        neighbour = solution.copy()
        move.apply(neighbour)
        return self.evaluate(neighbour, data)

    def is_minimizing(self):
        return True


class _Length:
    def __init__(self, value):
        self.value = value


class RandomDescent:
    """
    Random descent: repeatedly applies a random move and keeps it if it improves the
    current solution, until a time limit is reached.
    """

    def __init__(self, problem, neighbourhood, max_runtime_ms: int = 200):
        self.problem = problem
        self.neighbourhood = neighbourhood
        self.max_runtime_ms = max_runtime_ms
        self.rng = np.random.default_rng()
        self.listeners = []
        self._start = None

    def add_listener(self, listener):
        self.listeners.append(listener)

    def get_elapsed_runtime(self) -> int:
        return int((time.perf_counter() - self._start) * 1000)

    def start(self):
        self._start = time.perf_counter()
        current = self.problem.create_random_solution(self.rng)
        current_eval = self.problem.evaluate(current)
        self._notify(current, current_eval)

        while self.get_elapsed_runtime() < self.max_runtime_ms:
            move = self.neighbourhood.get_random_move(current, self.rng)
            if move is None:
                break
            move_eval = self.problem.objective.evaluate_move(move, current, current_eval, self.problem.data)
            if move_eval.value < current_eval.value:
                move.apply(current)
                current_eval = move_eval
                self._notify(current, current_eval)

    def _notify(self, solution, evaluation):
        for listener in self.listeners:
            listener.new_best_solution(self, solution.copy(), evaluation, None)

    def dispose(self):
        self.listeners.clear()


def main():
    parser = argparse.ArgumentParser(description="Analyze random descent on random TSP instances")
    parser.add_argument("--config", type=str, default=None, help="Analysis configuration (YAML)")
    parser.add_argument("--output", type=str, default="results.json", help="Where to write the results")
    parser.add_argument("--cities", type=int, default=30, help="Number of cities per instance")
    args = parser.parse_args()

    config = AnalysisConfig.from_yaml(args.config) if args.config else AnalysisConfig(num_runs=5)
    config.log_progress = True

    # Tour lengths of both instances are scaled to [0, 1] using a rough upper bound
    upper_bound = float(args.cities)
    tsp_small = PermutationProblem(Cities(args.cities, seed=1), TourLength())
    tsp_normalized = PermutationProblem(
        Cities(args.cities, seed=2),
        NormalizedObjective(TourLength(), 0.0, upper_bound)
    )

    swap = SingleSwapNeighbourhood()
    reverse = ReverseSubsequenceNeighbourhood()
    mixed = CompositeNeighbourhood([swap, reverse], [1.0, 3.0])

    experiment = (
        Experiment(config)
        .add_problem("tsp-1", tsp_small)
        .add_problem("tsp-2-normalized", tsp_normalized)
        .add_search("descent-swap", lambda p: RandomDescent(p, swap))
        .add_search("descent-2opt", lambda p: RandomDescent(p, reverse))
        .add_search("descent-mixed", lambda p: RandomDescent(p, mixed))
        .set_num_runs(1, search_id="descent-swap")
    )

    results = experiment.run()
    results.write_json(args.output, permutation_to_json)

    for problem_id, search_id, run in results.iter_runs():
        logger.info(f"{problem_id} / {search_id}: {run}")


if __name__ == "__main__":
    main()
