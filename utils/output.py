# plain text serialization of a solution: console summary and TSPLIB .tour files

from instance import TSPInstance
from output import TSPSolution

from typing import List, Optional


def format_solution(solution: TSPSolution, ids: Optional[List[int]] = None) -> str:
    """
    Three lines: initial length, optimized length and the visiting order.
    With `ids` the order is printed with the TSPLIB node ids instead of 0-based indices.
    """
    order = solution.order if ids is None else [ids[city] for city in solution.order]
    return (f"Initial tour length: {solution.initial_length:.2f}\n"
            f"Optimized tour length: {solution.length:.2f}\n"
            + " ".join(map(str, order)))


def write_tour_file(solution: TSPSolution, instance: TSPInstance, path: str) -> None:
    """
    Write the tour in TSPLIB TOUR format
    """
    name = instance.name or "tour"
    lines = [
        f"NAME : {name}.tour",
        f"COMMENT : Length = {solution.length:.0f}",
        "TYPE : TOUR",
        f"DIMENSION : {instance.n}",
        "TOUR_SECTION",
    ]
    lines.extend(str(instance.ids[city]) for city in solution.order)
    lines.extend(["-1", "EOF"])

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
