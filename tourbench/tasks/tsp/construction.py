# tourbench/tasks/tsp/construction.py

from typing import List, Tuple

import numpy as np

from .distance import DistanceModel
from .errors import InvalidInstance


def build_initial_tour(model: DistanceModel, start: int = 0) -> Tuple[List[int], float]:
    """
    Construct a tour using the nearest neighbor heuristic.

    Every step scans all unvisited nodes, not only the candidate list, since
    late in the construction no candidate may be left unvisited. Among equally
    near nodes the lowest index is taken, so the result is deterministic.

    Returns:
        (order, length) where order is a permutation of range(n) starting at
        `start` and length includes the closing edge back to `start`
    """
    n = len(model)
    if n == 0:
        raise InvalidInstance("Cannot build a tour over 0 nodes")
    if not 0 <= start < n:
        raise InvalidInstance(f"Start node {start} out of range for {n} nodes")

    visited = np.zeros(n, dtype=bool)
    order = [start]
    visited[start] = True
    current = start
    length = 0.0

    for _ in range(1, n):
        dists = model.row(current)
        dists[visited] = np.inf
        best_next = int(np.argmin(dists))  # first minimum = lowest index
        length += dists[best_next]
        visited[best_next] = True
        order.append(best_next)
        current = best_next

    length += model.distance(current, start)  # close
    return order, float(length)
