from instance import TSPInstance

import numpy as np
from typing import List, Tuple


class CandidateIndex:
    """
    k nearest neighbors of every node, sorted by ascending distance.
    Read-only once built.
    """

    DEFAULT_MAX_NEIGHBORS = 20

    def __init__(self, neighbors: List[List[int]], lengths: List[List[float]], k: int):
        self._neighbors = neighbors
        self._lengths = lengths
        self.k = k

    @classmethod
    def build(cls, instance: TSPInstance, k: int = DEFAULT_MAX_NEIGHBORS) -> "CandidateIndex":
        """
        Precompute the k nearest nodes for all nodes.
        Ties on the rounded distance go to the lower node index.
        """
        if k < 0:
            raise ValueError(f"Number of candidates must be non-negative, got {k}")

        n = instance.n
        k = min(k, max(n - 1, 0))
        neighbors = [[] for _ in range(n)]
        lengths = [[] for _ in range(n)]

        if k == 0:
            return cls(neighbors, lengths, k)

        for i in range(n):
            distances = instance.distances_from(i)
            distances[i] = np.inf  # never list itself
            # stable sort keeps ascending index order among equal distances
            idx = np.argsort(distances, kind="stable")[:k]
            neighbors[i] = idx.tolist()
            lengths[i] = distances[idx].tolist()

        return cls(neighbors, lengths, k)

    def neighbors(self, i: int) -> List[int]:
        return self._neighbors[i]

    def lengths(self, i: int) -> List[float]:
        return self._lengths[i]

    def __getitem__(self, i: int) -> List[Tuple[int, float]]:
        return list(zip(self._neighbors[i], self._lengths[i]))

    def __len__(self) -> int:
        return len(self._neighbors)

    def __repr__(self) -> str:
        return f"CandidateIndex(n={len(self)}, k={self.k})"


def build_candidate_index(instance: TSPInstance, k: int = CandidateIndex.DEFAULT_MAX_NEIGHBORS) -> CandidateIndex:
    return CandidateIndex.build(instance, k)
