from candidates import CandidateIndex
from instance import TSPInstance
from tour import Tour

import time
from typing import Dict, List, Optional


class TwoOptSolver:
    """
    2-opt local search restricted to candidate lists.

    A move removes the edges (a, b) and (c, d), where b follows a and d
    follows c, and adds (a, c) and (b, d). Only the candidates c of each
    node a are tried, which keeps a pass at O(n * k) evaluations.
    """

    DEFAULT_TOLERANCE = 1e-9

    def __init__(self,
                 instance: TSPInstance,
                 candidates: CandidateIndex,
                 tolerance: float = DEFAULT_TOLERANCE,
                 neighbor_pruning: bool = False,
                 verbose: bool = False):
        """
        Args:
            instance: TSP instance
            candidates: candidate lists of the instance
            tolerance: minimum gain for a move to be accepted
            neighbor_pruning: stop scanning the candidates of a once d(a, c) >= d(a, b)
            verbose: print one line per pass
        """
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        self.instance = instance
        self.candidates = candidates
        self.tolerance = tolerance
        self.neighbor_pruning = neighbor_pruning
        self.verbose = verbose

    def two_opt_pass(self, tour: Tour) -> int:
        """
        One scan over all nodes, first improving move per node.
        Returns the number of accepted moves.
        """
        dist = self.instance.distance
        succ = tour.succ
        tolerance = self.tolerance
        pruning = self.neighbor_pruning
        moves = 0

        for a in range(len(succ)):
            b = succ[a]
            d_ab = dist(a, b)
            for c, d_ac in zip(self.candidates.neighbors(a), self.candidates.lengths(a)):
                if pruning and d_ac >= d_ab:
                    break
                d = succ[c]
                if c == a or c == b or d == a:
                    continue

                delta = d_ab + dist(c, d) - d_ac - dist(b, d)
                if delta > tolerance:
                    tour.two_opt_move(a, b, c, d)
                    moves += 1
                    break  # the edge out of a changed, go to the next node

        return moves

    def improve(self,
                tour: Tour,
                time_limit: Optional[float] = None,
                max_passes: Optional[int] = None) -> List[Dict]:
        """
        Repeat passes until one of them makes no move (local optimum).

        Args:
            tour: tour improved in place
            time_limit: wall-clock budget in seconds, checked between passes
            max_passes: maximum number of passes

        Returns:
            one record per pass: pass number, accepted moves, tour length, elapsed seconds
        """
        t0 = time.perf_counter()
        history = []
        passes = 0

        while True:
            if max_passes is not None and passes >= max_passes:
                break
            if time_limit is not None and (time.perf_counter() - t0) > time_limit:
                if self.verbose:
                    print(f"Time limit of {time_limit}s reached after {passes} passes")
                break

            moves = self.two_opt_pass(tour)
            passes += 1
            length = tour.length()
            history.append({
                "pass": passes,
                "moves": moves,
                "length": length,
                "elapsed": time.perf_counter() - t0,
            })

            if self.verbose:
                print(f"Pass {passes}: {moves} moves, tour length = {length:.2f}")

            if moves == 0:
                break

        return history
