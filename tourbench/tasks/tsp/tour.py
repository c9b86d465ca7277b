# tourbench/tasks/tsp/tour.py

from typing import List, Sequence

from .distance import DistanceModel
from .errors import InvariantViolation


class Tour:
    """
    A closed tour stored as two parallel arrays indexed by node:
    succ[i] is the node visited after i, pred[i] the one before it.
    """

    def __init__(self, n: int, shorter_arc: bool = True):
        self.n = n
        self.shorter_arc = shorter_arc
        self.succ = list(range(n))
        self.pred = list(range(n))

    @classmethod
    def from_order(cls, order: Sequence[int], shorter_arc: bool = True) -> "Tour":
        tour = cls(len(order), shorter_arc=shorter_arc)
        tour.initialize(order)
        return tour

    def initialize(self, order: Sequence[int]) -> None:
        """Link `order` into a cycle, wrapping from the last node to the first."""
        order = [int(v) for v in order]
        if sorted(order) != list(range(self.n)):
            raise InvariantViolation(f"Order is not a permutation of {self.n} nodes")
        for k, i in enumerate(order):
            j = order[(k + 1) % self.n]
            self.succ[i] = j
            self.pred[j] = i

    def successor(self, i: int) -> int:
        return self.succ[i]

    def predecessor(self, i: int) -> int:
        return self.pred[i]

    def reverse_segment(self, b: int, c: int) -> None:
        """
        Turn a -> b ... c -> d into a -> c ... b -> d, where a = pred(b) and
        d = succ(c).

        With `shorter_arc` the arcs b..c and d..a are walked in lockstep and
        whichever ends first is reversed; both give the same undirected cycle.
        """
        succ = self.succ
        a = self.pred[b]
        d = succ[c]
        if a == c:
            raise InvariantViolation(f"Segment {b}..{c} spans the whole tour")
        if not self.shorter_arc:
            self._reverse_path(b, c)
            return

        p, q = b, d
        for _ in range(self.n):
            if p == c:
                self._reverse_path(b, c)
                return
            if q == a:
                self._reverse_path(d, a)
                return
            p = succ[p]
            q = succ[q]
        raise InvariantViolation(f"{c} is not reachable from {b}")

    def _reverse_path(self, first: int, last: int) -> None:
        succ, pred = self.succ, self.pred
        before = pred[first]
        after = succ[last]
        p = first
        for _ in range(self.n):
            nxt = succ[p]
            succ[p], pred[p] = pred[p], nxt
            if p == last:
                break
            p = nxt
        else:
            raise InvariantViolation(f"{last} is not reachable from {first}")

        # reconnect
        succ[before] = last
        pred[last] = before
        succ[first] = after
        pred[after] = first

    def total_length(self, model: DistanceModel) -> float:
        """Sum of edge lengths along the cycle, O(n)."""
        if self.n == 0:
            return 0.0
        length = 0.0
        start = curr = 0
        while True:
            nxt = self.succ[curr]
            length += model.distance(curr, nxt)
            curr = nxt
            if curr == start:
                break
        return length

    def order(self, start: int = 0) -> List[int]:
        """Visiting order obtained by following successors from `start`."""
        if self.n == 0:
            return []
        order = [start]
        curr = self.succ[start]
        while curr != start:
            order.append(curr)
            if len(order) > self.n:
                raise InvariantViolation("Successor chain does not close into a cycle")
            curr = self.succ[curr]
        return order

    def validate(self) -> None:
        """Check that succ/pred are inverse and form one Hamiltonian cycle."""
        for i in range(self.n):
            if self.pred[self.succ[i]] != i or self.succ[self.pred[i]] != i:
                raise InvariantViolation(f"Adjacency of node {i} is inconsistent")
        if len(self.order()) != self.n:
            raise InvariantViolation("Tour splits into more than one cycle")

    def __len__(self) -> int:
        return self.n
