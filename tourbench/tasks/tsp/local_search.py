# tourbench/tasks/tsp/local_search.py

import enum
import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from .candidates import CandidateSet
from .distance import DistanceModel
from .tour import Tour

logger = logging.getLogger(__name__)

EPSILON = 1e-9


class SearchState(enum.Enum):
    SCANNING = "scanning"
    CONVERGED = "converged"


@dataclass
class SearchStats:
    passes: int = 0
    moves: int = 0
    converged: bool = False
    elapsed_ms: float = 0.0


class TwoOptSearch:
    """
    First-improvement 2-opt guided by candidate lists.

    For every node a (in index order) with b = succ(a), and every candidate c
    of a with d = succ(c), the exchange of edges (a,b),(c,d) for (a,c),(b,d)
    is applied as soon as it shortens the tour by more than `epsilon`.
    Passes repeat until one accepts no move.
    """

    def __init__(
        self,
        model: DistanceModel,
        candidates: Optional[CandidateSet],
        tour: Tour,
        epsilon: float = EPSILON,
    ):
        self.model = model
        self.candidates = candidates
        self.tour = tour
        self.epsilon = epsilon
        self.state = SearchState.SCANNING
        self.stats = SearchStats()

    def _gain(self, a: int, b: int, c: int, d: int, len_ac: float) -> float:
        dist = self.model.distance
        return dist(a, b) + dist(c, d) - len_ac - dist(b, d)

    def run_pass(self) -> int:
        """One sweep over all nodes. Returns the number of accepted moves."""
        succ = self.tour.succ
        moves = 0
        for a in range(self.tour.n):
            for c, len_ac in self.candidates.neighbors(a):
                b = succ[a]
                d = succ[c]
                if c == a or c == b or d == a:
                    continue
                if self._gain(a, b, c, d, len_ac) > self.epsilon:
                    self.tour.reverse_segment(b, c)
                    moves += 1
        self.stats.passes += 1
        self.stats.moves += moves
        return moves

    def find_improving_move(self) -> Optional[Tuple[int, int, int, int, float]]:
        """First improving (a, b, c, d, gain) without applying it, or None."""
        if self.tour.n <= 3 or self.candidates is None:
            return None
        succ = self.tour.succ
        for a in range(self.tour.n):
            b = succ[a]
            for c, len_ac in self.candidates.neighbors(a):
                d = succ[c]
                if c == a or c == b or d == a:
                    continue
                gain = self._gain(a, b, c, d, len_ac)
                if gain > self.epsilon:
                    return a, b, c, d, gain
        return None

    def run(self, time_limit_ms: Optional[float] = None, max_passes: Optional[int] = None) -> SearchStats:
        """
        Repeat passes until convergence.

        The time budget and pass cap are checked between passes; stopping on
        either leaves a valid, possibly unconverged tour.
        """
        start_time = time.perf_counter()
        deadline = None if time_limit_ms is None else start_time + time_limit_ms / 1000.0

        # no non-degenerate 2-opt move exists on 3 or fewer nodes
        if self.tour.n <= 3:
            self.state = SearchState.CONVERGED

        while self.state is SearchState.SCANNING:
            if max_passes is not None and self.stats.passes >= max_passes:
                logger.warning(f"2-opt stopped after {self.stats.passes} passes without converging")
                break
            if deadline is not None and time.perf_counter() >= deadline:
                logger.warning(f"2-opt time budget of {time_limit_ms} ms exhausted after {self.stats.passes} passes")
                break
            moves = self.run_pass()
            logger.debug(f"Pass {self.stats.passes}: {moves} moves")
            if moves == 0:
                self.state = SearchState.CONVERGED

        self.stats.converged = self.state is SearchState.CONVERGED
        self.stats.elapsed_ms += (time.perf_counter() - start_time) * 1000
        return self.stats
