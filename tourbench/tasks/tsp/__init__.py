from .baseline import solve, solve_instance
from .candidates import CandidateEdge, CandidateSet, build_candidates
from .config import SolverConfig
from .construction import build_initial_tour
from .distance import DistanceModel
from .errors import AllocationError, InvalidInstance, InvariantViolation, TourError
from .instance import Instance
from .local_search import SearchState, SearchStats, TwoOptSearch
from .result import TourResult
from .tour import Tour
from .tsplib import parse_tsplib, read_tsplib

__all__ = [
    "solve",
    "solve_instance",
    "CandidateEdge",
    "CandidateSet",
    "build_candidates",
    "SolverConfig",
    "build_initial_tour",
    "DistanceModel",
    "AllocationError",
    "InvalidInstance",
    "InvariantViolation",
    "TourError",
    "Instance",
    "SearchState",
    "SearchStats",
    "TwoOptSearch",
    "TourResult",
    "Tour",
    "parse_tsplib",
    "read_tsplib",
]
