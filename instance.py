import math
import numpy as np
from typing import List, Optional, Sequence


EDGE_WEIGHT_TYPES = ("EUC_2D", "CEIL_2D")


class TSPInstance:
    """
    Euclidean Travelling Salesman Problem instance
    """

    def __init__(
        self,
        coords: np.ndarray,             # shape (n, 2)
        ids: Optional[Sequence[int]] = None,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        edge_weight_type: str = "EUC_2D",
    ):
        coords = np.array(coords, dtype=float)
        if coords.size == 0:
            coords = coords.reshape(0, 2)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Coordinates must have shape (n, 2), got {coords.shape}")
        if not np.all(np.isfinite(coords)):
            raise ValueError("Coordinates must be finite numbers")
        if edge_weight_type not in EDGE_WEIGHT_TYPES:
            raise ValueError(f"Unsupported edge weight type: {edge_weight_type}")

        coords.setflags(write=False)  # set once at load
        self.coords = coords
        self.n = coords.shape[0]
        self.name = name
        self.comment = comment
        self.edge_weight_type = edge_weight_type

        if ids is None:
            ids = range(1, self.n + 1)
        self.ids: List[int] = [int(i) for i in ids]
        if len(self.ids) != self.n:
            raise ValueError(f"Expected {self.n} node ids, got {len(self.ids)}")

        # plain floats for the scalar hot path
        self._xs = coords[:, 0].tolist()
        self._ys = coords[:, 1].tolist()

    def distance(self, i: int, j: int) -> float:
        """
        Rounded Euclidean distance between nodes i and j (0-based indexing).
        """
        dx = self._xs[i] - self._xs[j]
        dy = self._ys[i] - self._ys[j]
        dist = math.sqrt(dx * dx + dy * dy)

        if self.edge_weight_type == "CEIL_2D":
            return float(math.ceil(dist))

        return float(math.floor(dist + 0.5))

    def distances_from(self, i: int) -> np.ndarray:
        """
        Distances from node i to every node, same rounding as distance()
        """
        dx = self.coords[i, 0] - self.coords[:, 0]
        dy = self.coords[i, 1] - self.coords[:, 1]
        dist = np.sqrt(dx * dx + dy * dy)

        if self.edge_weight_type == "CEIL_2D":
            return np.ceil(dist)

        return np.floor(dist + 0.5)

    def tour_length(self, order: Sequence[int]) -> float:
        """
        Length of the closed tour visiting the nodes in the given order
        """
        n = len(order)
        if n < 2:
            return 0.0
        return sum(self.distance(order[k], order[(k + 1) % n]) for k in range(n))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"TSPInstance(name={self.name!r}, n={self.n}, edge_weight_type={self.edge_weight_type})"
