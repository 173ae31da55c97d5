from instance import TSPInstance

import numpy as np
from typing import List, Tuple


class NearestNeighborConstructor:
    """
    Greedy nearest neighbor construction of an initial tour.
    Scans every unvisited node, so a complete tour is produced whatever the candidate lists look like.
    """

    def __init__(self, instance: TSPInstance):
        self.instance = instance

    def build(self, start: int = 0) -> Tuple[List[int], float]:
        """
        Returns the visiting order and the length of the closed tour
        """
        n = self.instance.n
        if n == 0:
            return [], 0.0
        if n == 1:
            return [start], 0.0

        visited = np.zeros(n, dtype=bool)
        visited[start] = True
        tour = [start]
        cost = 0.0
        current = start

        while len(tour) < n:
            # only distances from the last city matter
            dist_to_unvisited = self.instance.distances_from(current)
            dist_to_unvisited[visited] = np.inf
            nearest = int(np.argmin(dist_to_unvisited))  # first minimum, i.e. lowest index

            cost += float(dist_to_unvisited[nearest])
            visited[nearest] = True
            tour.append(nearest)
            current = nearest

        cost += self.instance.distance(tour[-1], tour[0])  # close
        return tour, cost


def nearest_neighbor_tour(instance: TSPInstance, start: int = 0) -> Tuple[List[int], float]:
    return NearestNeighborConstructor(instance).build(start)
