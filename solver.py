from candidates import CandidateIndex
from greedy_heuristic import NearestNeighborConstructor
from instance import TSPInstance
from output import HISTORY_COLUMNS, TSPSolution
from tour import Tour
from two_opt import TwoOptSolver

import time
import pandas as pd
from typing import Optional


class TSPSolver:
    """
    Nearest neighbor tour followed by candidate-restricted 2-opt
    """

    DEFAULT_MAX_NEIGHBORS = CandidateIndex.DEFAULT_MAX_NEIGHBORS

    def __init__(self,
                 instance: TSPInstance,
                 max_neighbors: int = DEFAULT_MAX_NEIGHBORS,
                 tolerance: float = TwoOptSolver.DEFAULT_TOLERANCE,
                 neighbor_pruning: bool = False,
                 verbose: bool = False):
        """
        Args:
            instance: TSP instance
            max_neighbors: candidates kept per city, clamped to n - 1
            tolerance: minimum gain of an accepted 2-opt move
            neighbor_pruning: early exit in the candidate scan
            verbose: print progress
        """
        self.instance = instance
        self.max_neighbors = max_neighbors
        self.tolerance = tolerance
        self.neighbor_pruning = neighbor_pruning
        self.verbose = verbose

    def solve(self, time_limit: Optional[float] = None, max_passes: Optional[int] = None) -> TSPSolution:
        """
        Run the whole pipeline

        Args:
            time_limit: wall-clock budget of the 2-opt phase in seconds
            max_passes: maximum number of 2-opt passes

        Returns:
            the improved tour and its statistics
        """
        total_start = time.perf_counter()
        timing = {}

        t0 = time.perf_counter()
        candidates = CandidateIndex.build(self.instance, self.max_neighbors)
        timing["candidates"] = time.perf_counter() - t0

        t0 = time.perf_counter()
        order, initial_length = NearestNeighborConstructor(self.instance).build()
        tour = Tour.from_order(self.instance, order)
        timing["initial_tour"] = time.perf_counter() - t0

        if self.verbose:
            print(f"Instance {self.instance.name or 'unnamed'}: {self.instance.n} cities, k = {candidates.k}")
            print(f"Initial tour cost: {initial_length:.2f}")

        t0 = time.perf_counter()
        local_search = TwoOptSolver(self.instance, candidates,
                                    tolerance=self.tolerance,
                                    neighbor_pruning=self.neighbor_pruning,
                                    verbose=self.verbose)
        history = local_search.improve(tour, time_limit=time_limit, max_passes=max_passes)
        timing["local_search"] = time.perf_counter() - t0
        timing["total"] = time.perf_counter() - total_start

        solution = TSPSolution(
            order=tour.order(),
            initial_length=initial_length,
            length=tour.length(),
            history=pd.DataFrame(history, columns=HISTORY_COLUMNS),
            timing=timing,
        )

        if self.verbose:
            print(f"Final tour cost: {solution.length:.2f} "
                  f"({100 * solution.improvement:.1f}% better than nearest neighbor)")
            print("Total runtime = ", timing["total"])

        return solution
