# tourbench/tasks/tsp/errors.py

"""Exceptions raised by the TSP engine."""


class TourError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInstance(TourError, ValueError):
    """The instance (or its configuration) cannot be solved."""


class AllocationError(TourError, MemoryError):
    """Storage for nodes or candidate lists could not be obtained."""


class InvariantViolation(TourError, AssertionError):
    """The tour adjacency became inconsistent. Always a programming error."""
