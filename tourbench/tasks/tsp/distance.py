# tourbench/tasks/tsp/distance.py

import math

import numpy as np


class DistanceModel:
    """
    Rounded Euclidean distance between nodes (TSPLIB EUC_2D).

    Lengths are rounded to the nearest integer with ties away from zero,
    i.e. floor(d + 0.5). The scalar and the vectorised paths use the same
    arithmetic so candidate lengths always agree with `distance`.
    """

    def __init__(self, coords: np.ndarray):
        self.coords = coords
        self.n = len(coords)
        # plain floats keep the scalar path free of numpy overhead
        self._xs = [float(x) for x in coords[:, 0]] if self.n else []
        self._ys = [float(y) for y in coords[:, 1]] if self.n else []

    def distance(self, i: int, j: int) -> int:
        dx = self._xs[i] - self._xs[j]
        dy = self._ys[i] - self._ys[j]
        return math.floor(math.sqrt(dx * dx + dy * dy) + 0.5)

    __call__ = distance

    def row(self, i: int) -> np.ndarray:
        """Distances from node i to every node, as float64."""
        diff = self.coords - self.coords[i]
        return np.floor(np.sqrt(diff[:, 0] * diff[:, 0] + diff[:, 1] * diff[:, 1]) + 0.5)

    def __len__(self) -> int:
        return self.n
