import numpy as np

from greedy_heuristic import NearestNeighborConstructor, nearest_neighbor_tour
from instance import TSPInstance


def test_square_gives_perimeter(square):
    order, length = NearestNeighborConstructor(square).build()
    assert order == [0, 1, 2, 3]
    assert length == 40.0


def test_permutation_and_length(random_instance):
    order, length = nearest_neighbor_tour(random_instance)
    assert order[0] == 0
    assert sorted(order) == list(range(random_instance.n))
    assert length == random_instance.tour_length(order)


def test_always_picks_nearest_unvisited(random_instance):
    order, _ = nearest_neighbor_tour(random_instance)
    visited = {order[0]}
    for current, nxt in zip(order, order[1:]):
        remaining = [j for j in range(random_instance.n) if j not in visited]
        best = min(remaining, key=lambda j: (random_instance.distance(current, j), j))
        assert nxt == best
        visited.add(nxt)


def test_degenerate_instances():
    assert nearest_neighbor_tour(TSPInstance(np.empty((0, 2)))) == ([], 0.0)
    assert nearest_neighbor_tour(TSPInstance(np.array([[3.0, 4.0]]))) == ([0], 0.0)


def test_two_cities():
    order, length = nearest_neighbor_tour(TSPInstance(np.array([[0, 0], [3, 4]])))
    assert order == [0, 1]
    assert length == 10.0
