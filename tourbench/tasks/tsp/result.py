# tourbench/tasks/tsp/result.py

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass
class TourResult:
    initial_length: float
    optimized_length: float
    order: List[int]
    passes: int = 0
    moves: int = 0
    converged: bool = True
    elapsed_ms: float = 0.0
    candidates: int = 0
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Solver dict format: 'solution' (tour), 'objective' (length), 'meta'."""
        meta = {
            'initial_objective': self.initial_length,
            'elapsed_ms': self.elapsed_ms,
            'method': 'nearest_neighbor_2opt_candidates',
            'candidates': self.candidates,
            '2opt_passes': self.passes,
            '2opt_moves': self.moves,
            'converged': self.converged,
        }
        meta.update(self.meta)
        return {
            'solution': list(self.order),
            'objective': self.optimized_length,
            'meta': meta,
        }

    def as_record(self) -> dict:
        return asdict(self)

    def format_report(self, ids: Optional[Sequence[int]] = None) -> str:
        """Lengths followed by the whitespace-separated visiting order."""
        nodes = self.order if ids is None else [int(ids[i]) for i in self.order]
        lines = [
            f"Initial tour length: {self.initial_length:.2f}",
            f"Optimized tour length: {self.optimized_length:.2f}",
            " ".join(str(v) for v in nodes),
        ]
        if not self.converged:
            lines.insert(2, f"(stopped before convergence after {self.passes} passes)")
        return "\n".join(lines)
