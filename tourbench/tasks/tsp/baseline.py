# tourbench/tasks/tsp/baseline.py

import logging
import time
from dataclasses import fields
from typing import Optional

from .candidates import DEFAULT_CANDIDATES, build_candidates
from .config import SolverConfig
from .construction import build_initial_tour
from .instance import Instance
from .local_search import TwoOptSearch
from .result import TourResult
from .tour import Tour

logger = logging.getLogger(__name__)


def solve(
    instance: dict,
    time_limit_ms: Optional[float] = None,
    candidates: int = DEFAULT_CANDIDATES,
    **kwargs
) -> dict:
    """
    TSP baseline: Nearest neighbor construction + candidate-list 2-opt.

    Args:
        instance: dict with keys:
            - 'coords': np.ndarray of shape (n, 2)
            - 'edge_weight_type': str (only 'EUC_2D')
            - 'dimension': int
        time_limit_ms: Wall-clock limit for 2-opt, None to run to convergence
        candidates: Candidate list size K
        **kwargs: other SolverConfig fields (max_passes, start_node, ...);
            unknown keys such as a seed are ignored, the search is deterministic

    Returns:
        dict with 'solution' (tour), 'objective' (length), 'meta'
    """
    known = {f.name for f in fields(SolverConfig)}
    config = SolverConfig(
        candidates=candidates,
        time_limit_ms=time_limit_ms,
        **{k: v for k, v in kwargs.items() if k in known}
    )
    return solve_instance(Instance.from_dict(instance), config).to_dict()


def solve_instance(inst: Instance, config: Optional[SolverConfig] = None) -> TourResult:
    """Run the whole pipeline on one instance."""
    config = config or SolverConfig()
    model = inst.distance
    n = inst.n
    start_time = time.perf_counter()

    # Phase 1: Nearest neighbor construction
    order, initial_length = build_initial_tour(model, config.start_node)
    tour = Tour.from_order(order, shorter_arc=config.shorter_arc)
    logger.info(f"Initial tour length: {initial_length:.2f} ({n} nodes)")

    if n < 2:
        return TourResult(
            initial_length=initial_length,
            optimized_length=initial_length,
            order=order,
            elapsed_ms=(time.perf_counter() - start_time) * 1000,
        )

    # Phase 2: 2-opt over candidate lists
    cand = build_candidates(model, config.candidates)
    search = TwoOptSearch(model, cand, tour, epsilon=config.epsilon)
    stats = search.run(time_limit_ms=config.time_limit_ms, max_passes=config.max_passes)

    optimized_length = tour.total_length(model)
    logger.info(
        f"Optimized tour length: {optimized_length:.2f} "
        f"({stats.moves} moves in {stats.passes} passes, converged={stats.converged})"
    )

    return TourResult(
        initial_length=initial_length,
        optimized_length=optimized_length,
        order=tour.order(config.start_node),
        passes=stats.passes,
        moves=stats.moves,
        converged=stats.converged,
        elapsed_ms=(time.perf_counter() - start_time) * 1000,
        candidates=cand.k,
    )
