# tourbench/tasks/tsp/instance.py

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .distance import DistanceModel
from .errors import AllocationError, InvalidInstance


@dataclass(eq=False)
class Instance:
    """
    A Euclidean TSP instance: the context shared by every component of a run.

    Attributes:
        coords: float array of shape (n, 2)
        ids: external (1-based, TSPLIB) node ids, one per row of coords
        name: optional instance name
    """
    coords: np.ndarray
    ids: np.ndarray
    name: str = ""
    distance: DistanceModel = field(init=False, repr=False)

    def __post_init__(self):
        self.distance = DistanceModel(self.coords)

    @property
    def n(self) -> int:
        return len(self.coords)

    @classmethod
    def from_points(
        cls,
        points: Sequence[Sequence[float]],
        ids: Optional[Sequence[int]] = None,
        name: str = "",
    ) -> "Instance":
        """Validate raw points and build an instance from them."""
        try:
            coords = np.array(points, dtype=np.float64)
        except MemoryError as e:
            raise AllocationError(f"Failed to allocate memory for {len(points)} nodes") from e
        except (TypeError, ValueError) as e:
            raise InvalidInstance(f"Malformed coordinate data: {e}") from e

        if coords.size == 0:
            raise InvalidInstance("Instance has no nodes")
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise InvalidInstance(f"Coordinates must have shape (n, 2), got {coords.shape}")
        if not np.all(np.isfinite(coords)):
            raise InvalidInstance("Coordinates must be finite numbers")

        n = len(coords)
        if ids is None:
            ids = np.arange(1, n + 1)
        else:
            ids = np.asarray(ids, dtype=np.int64)
            if ids.shape != (n,):
                raise InvalidInstance(f"Expected {n} node ids, got {ids.size}")

        return cls(coords=coords, ids=ids, name=name)

    @classmethod
    def from_dict(cls, instance: dict) -> "Instance":
        """
        Build from the solver dict format.

        Args:
            instance: dict with keys:
                - 'coords': array-like of shape (n, 2)
                - 'edge_weight_type': str, only 'EUC_2D' is supported (optional)
                - 'dimension': int (optional, checked against coords)
        """
        edge_type = instance.get('edge_weight_type', 'EUC_2D')
        if edge_type != 'EUC_2D':
            raise InvalidInstance(f"Unsupported edge weight type: {edge_type}")

        inst = cls.from_points(instance['coords'], instance.get('ids'), instance.get('name', ""))

        dimension = instance.get('dimension')
        if dimension is not None and int(dimension) != inst.n:
            raise InvalidInstance(f"Dimension {dimension} != {inst.n} coordinate rows")
        return inst
