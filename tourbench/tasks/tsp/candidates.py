# tourbench/tasks/tsp/candidates.py

import logging
from typing import List, NamedTuple

import numpy as np

from .distance import DistanceModel
from .errors import AllocationError, InvalidInstance

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES = 20


class CandidateEdge(NamedTuple):
    to: int
    length: float
    alpha: int = 0  # reserved for alpha-nearness filtering, unused by 2-opt


class CandidateSet:
    """
    The k nearest neighbours of every node.

    Rows of `to` and `length` are sorted ascending by length, ties by
    destination index. The arrays are read-only once built.
    """

    def __init__(self, to: np.ndarray, length: np.ndarray):
        self.to = to
        self.length = length
        self.alpha = np.zeros(to.shape, dtype=np.int32)
        for arr in (self.to, self.length, self.alpha):
            arr.flags.writeable = False
        # python lists for the hot loop of the local search
        self._rows = [list(zip(r_to.tolist(), r_len.tolist())) for r_to, r_len in zip(to, length)]

    @property
    def k(self) -> int:
        return self.to.shape[1]

    def __len__(self) -> int:
        return self.to.shape[0]

    def neighbors(self, i: int) -> List[tuple]:
        """(to, length) pairs of node i, nearest first."""
        return self._rows[i]

    def edges(self, i: int) -> List[CandidateEdge]:
        return [CandidateEdge(int(t), float(l), int(a))
                for t, l, a in zip(self.to[i], self.length[i], self.alpha[i])]


def _nearest(row: np.ndarray, k: int) -> np.ndarray:
    """Indices of the k smallest entries of row, ascending, ties by index."""
    threshold = np.partition(row, k - 1)[k - 1]
    below = np.flatnonzero(row < threshold)
    at = np.flatnonzero(row == threshold)[:k - len(below)]
    picks = np.concatenate((below, at))
    return picks[np.lexsort((picks, row[picks]))]


def build_candidates(model: DistanceModel, k: int = DEFAULT_CANDIDATES) -> CandidateSet:
    """
    Build the candidate set: for each node, its k nearest other nodes.

    The capacity adapts to min(k, n - 1) so small instances get every other
    node instead of a partially filled list.

    Raises:
        InvalidInstance: fewer than 2 nodes, or k < 1
        AllocationError: the n x k storage cannot be allocated
    """
    n = len(model)
    if n < 2:
        raise InvalidInstance(f"Candidate lists need at least 2 nodes, got {n}")
    if k < 1:
        raise InvalidInstance(f"Candidate list size must be >= 1, got {k}")

    k = min(k, n - 1)
    try:
        to = np.empty((n, k), dtype=np.int64)
        length = np.empty((n, k), dtype=np.float64)
    except MemoryError as e:
        raise AllocationError(f"Failed to allocate {n}x{k} candidate edges") from e

    for i in range(n):
        row = model.row(i)
        row[i] = np.inf
        picks = _nearest(row, k)
        to[i] = picks
        length[i] = row[picks]

    logger.debug(f"Built {k} candidates for each of {n} nodes")
    return CandidateSet(to, length)
