# tourbench/tasks/tsp/tsplib.py

"""Reader for the small TSPLIB subset the engine needs (EUC_2D coordinates)."""

import re
from pathlib import Path
from typing import Union

from .errors import InvalidInstance
from .instance import Instance

_HEADER = re.compile(r"^\s*([A-Z_]+)\s*:\s*(.*?)\s*$")


def parse_tsplib(text: str, name: str = "") -> Instance:
    lines = text.splitlines()

    header = {}
    coord_idx = None
    for idx, ln in enumerate(lines):
        if ln.strip().upper().startswith("NODE_COORD_SECTION"):
            coord_idx = idx
            break
        m = _HEADER.match(ln)
        if m:
            header[m.group(1)] = m.group(2)

    if 'DIMENSION' not in header:
        raise InvalidInstance("DIMENSION missing before NODE_COORD_SECTION")
    if coord_idx is None:
        raise InvalidInstance("NODE_COORD_SECTION missing")
    try:
        dimension = int(header['DIMENSION'])
    except ValueError as e:
        raise InvalidInstance(f"Bad DIMENSION: {header['DIMENSION']!r}") from e
    if dimension < 1:
        raise InvalidInstance(f"DIMENSION must be >= 1, got {dimension}")

    edge_type = header.get('EDGE_WEIGHT_TYPE', 'EUC_2D').upper()
    if edge_type != 'EUC_2D':
        raise InvalidInstance(f"Unsupported EDGE_WEIGHT_TYPE: {edge_type}")

    ids, points = [], []
    for ln in lines[coord_idx + 1:]:
        if len(points) == dimension:
            break
        stripped = ln.strip()
        if stripped.upper() == "EOF":
            break
        if not stripped:
            continue
        parts = stripped.split()
        if len(parts) < 3:
            raise InvalidInstance(f"Error reading node coordinates: {stripped!r}")
        try:
            ids.append(int(parts[0]))
            points.append((float(parts[1]), float(parts[2])))
        except ValueError as e:
            raise InvalidInstance(f"Error reading node coordinates: {stripped!r}") from e

    if len(points) != dimension:
        raise InvalidInstance(f"Expected {dimension} nodes, found {len(points)}")

    return Instance.from_points(points, ids=ids, name=header.get('NAME', name))


def read_tsplib(path: Union[str, Path]) -> Instance:
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise InvalidInstance(f"Failed to open {path}: {e}") from e
    return parse_tsplib(text, name=path.stem)
