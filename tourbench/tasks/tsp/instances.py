# tourbench/tasks/tsp/instances.py

import numpy as np

from .errors import InvalidInstance

DISTRIBUTIONS = ('uniform', 'clustered', 'circular', 'grid')
CLASSIC = ('square', 'pentagon', 'star', 'line')


def generate_random_instance(n: int, seed: int, distribution: str = 'uniform') -> dict:
    """Generate a random TSP instance in the solver dict format."""
    if n < 1:
        raise InvalidInstance(f"Instance needs at least one node, got {n}")
    rng = np.random.default_rng(seed)

    if distribution == 'uniform':
        coords = rng.uniform(0, 1000, size=(n, 2))
    elif distribution == 'clustered':
        # 3-5 gaussian clusters
        n_clusters = rng.integers(3, 6)
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        coords = centers[np.arange(n) % n_clusters] + rng.normal(0, 50, size=(n, 2))
    elif distribution == 'circular':
        angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
        radius = 400
        coords = np.column_stack([
            500 + radius * np.cos(angles) + rng.normal(0, 20, n),
            500 + radius * np.sin(angles) + rng.normal(0, 20, n)
        ])
    elif distribution == 'grid':
        side = int(np.ceil(np.sqrt(n)))
        idx = np.arange(n)
        coords = np.column_stack([
            (idx % side) * (1000 / side) + rng.uniform(-20, 20, n),
            (idx // side) * (1000 / side) + rng.uniform(-20, 20, n)
        ])
    else:
        raise InvalidInstance(f"Unknown distribution: {distribution}")

    return {
        'coords': coords,
        'edge_weight_type': 'EUC_2D',
        'dimension': n,
        'distribution': distribution,
        'name': f"{distribution}_{n}_{seed}",
    }


def generate_classic_instance(name: str) -> dict:
    """Small geometric instances whose optimal tours are easy to see."""
    if name == 'square':
        # 4 corners, optimal is the perimeter 4000
        coords = np.array([
            [0, 0], [1000, 0], [1000, 1000], [0, 1000]
        ], dtype=float)
    elif name == 'pentagon':
        angles = np.linspace(0, 2 * np.pi, 5, endpoint=False)
        coords = np.column_stack([
            500 + 500 * np.cos(angles),
            500 + 500 * np.sin(angles)
        ])
    elif name == 'star':
        # 10 points alternating between two radii
        angles = 2 * np.pi * np.arange(10) / 10
        r = np.where(np.arange(10) % 2 == 0, 500, 200)
        coords = np.column_stack([500 + r * np.cos(angles), 500 + r * np.sin(angles)])
    elif name == 'line':
        coords = np.column_stack([
            np.linspace(0, 1000, 20),
            np.full(20, 500.0)
        ])
    else:
        raise InvalidInstance(f"Unknown classic instance: {name}")

    return {
        'coords': coords,
        'edge_weight_type': 'EUC_2D',
        'dimension': len(coords),
        'name': name
    }
