import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Sequence


def plot_tour(coords: np.ndarray, order: Sequence[int], ax=None, title: str = None):
    """
    Draw the closed tour over the city coordinates
    """
    if ax is None:
        _, ax = plt.subplots()

    coords = np.asarray(coords, dtype=float)
    ax.scatter(coords[:, 0], coords[:, 1], s=12, color="black", zorder=2)

    if len(order) > 1:
        closed = list(order) + [order[0]]
        ax.plot(coords[closed, 0], coords[closed, 1], linewidth=1, zorder=1)
        ax.scatter(coords[order[0], 0], coords[order[0], 1], s=40, color="red", zorder=3, label="start")

    ax.set_aspect("equal")
    if title:
        ax.set_title(title)
    return ax


def plot_history(history: pd.DataFrame, ax=None):
    """
    Tour length after each 2-opt pass
    """
    if ax is None:
        _, ax = plt.subplots()

    ax.plot(history["pass"], history["length"], marker="o", label="2-opt")

    ax.set_xlabel("Pass")
    ax.set_ylabel("Tour length")
    ax.legend()
    ax.grid(True)
    return ax
