from graphviz import Digraph
import numpy as np
import pandas as pd
from typing import Dict, List, Optional


HISTORY_COLUMNS = ["pass", "moves", "length", "elapsed"]


class TSPSolution:
    """
    Result of a run:
    - A Hamiltonian cycle passing exactly once through each city (0-based, not closed)
    - The length of the greedy tour and of the improved tour
    - One row per 2-opt pass in `history`
    """

    def __init__(self, order: List[int],
                 initial_length: float,
                 length: float,
                 history: Optional[pd.DataFrame] = None,
                 timing: Optional[Dict[str, float]] = None):

        self.order = list(order)
        self.initial_length = initial_length
        self.length = length
        self.history = history if history is not None else pd.DataFrame(columns=HISTORY_COLUMNS)
        self.timing = timing or {}

        # Validate the solution upon creation
        self._validate()

    def _validate(self):
        """
        Validate that the solution is well-formed
        """
        # each city appears once
        if sorted(self.order) != list(range(len(self.order))):
            raise ValueError("Tour must visit each city exactly once (Hamiltonian cycle)")

        if self.length < 0 or self.initial_length < 0:
            raise ValueError("Tour lengths must be non-negative")

    @property
    def n(self) -> int:
        return len(self.order)

    @property
    def passes(self) -> int:
        return len(self.history)

    @property
    def moves(self) -> int:
        if self.history.empty:
            return 0
        return int(self.history["moves"].sum())

    @property
    def improvement(self) -> float:
        """
        Relative gain of the local search over the greedy tour
        """
        if self.initial_length == 0:
            return 0.0
        return (self.initial_length - self.length) / self.initial_length

    def __repr__(self) -> str:
        return (f"TSPSolution(n={self.n}, initial_length={self.initial_length:.2f}, "
                f"length={self.length:.2f}, passes={self.passes})")

    def __str__(self) -> str:
        tour_str = " => ".join(map(str, self.order[:10])) + (" ..." if self.n > 10 else "")
        return (f"TSP Solution:\n"
                f"  Tour: {tour_str}\n"
                f"  Initial length: {self.initial_length:.2f}\n"
                f"  Optimized length: {self.length:.2f}\n"
                f"  Improvement: {100 * self.improvement:.1f}%\n"
                f"  Passes: {self.passes} ({self.moves} moves)")

    def to_graph(self, coords: np.ndarray, scale: float = 5, padding: float = 0.5) -> Digraph:
        """
        Build a graphviz drawing of the tour with cities at their coordinates
        """
        dot = Digraph(
            comment="TSP Solution",
            engine="neato"
            )

        dot.graph_attr.update({
            "pad": f"{padding},{padding}"  # left/right and top/bottom padding
            })

        # normalizing coordinates
        coords = np.asarray(coords, dtype=float).copy()
        if len(coords):
            mins = coords.min(axis=0)
            graph_scale = np.max(coords.max(axis=0) - mins)
            if graph_scale > 0:
                coords -= mins  # avoiding blank space on the left
                coords /= graph_scale

        for city in range(coords.shape[0]):
            x, y = coords[city]
            dot.node(
                str(city),
                label=str(city),
                pos=f"{x * scale},{y * scale}!",
                shape="circle",
                width=f"{scale * 0.3 / 5}",  # 0.3 at scale=5
                fixedsize="true"
                )

        for k in range(self.n if self.n > 1 else 0):
            A = self.order[k]
            B = self.order[(k + 1) % self.n]
            dot.edge(str(A), str(B), penwidth=f"{scale * 2 / 5}")  # 2 at scale=5

        # double circle on starting node of the tour
        if self.n:
            dot.node(str(self.order[0]), shape="doublecircle")

        return dot

    def display(self, coords: np.ndarray, scale: float = 5, padding: float = 0.5, path: str = None):
        """
        Render the tour to a png file (needs the graphviz binaries)
        """
        if not path:
            path = "solution"
        return self.to_graph(coords, scale, padding).render(path, format="png", cleanup=True)
