# tourbench/tasks/tsp/config.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .candidates import DEFAULT_CANDIDATES
from .errors import InvalidInstance
from .local_search import EPSILON

ENV_PREFIX = "TOURBENCH_"


@dataclass
class SolverConfig:
    candidates: int = DEFAULT_CANDIDATES   # K, clamped to n - 1 per instance
    time_limit_ms: Optional[float] = None  # wall-clock budget for 2-opt
    max_passes: Optional[int] = None
    start_node: int = 0
    epsilon: float = EPSILON
    shorter_arc: bool = True

    def __post_init__(self):
        if self.candidates < 1:
            raise InvalidInstance(f"Candidate list size must be >= 1, got {self.candidates}")
        if self.time_limit_ms is not None and self.time_limit_ms < 0:
            raise InvalidInstance(f"Time limit must be >= 0, got {self.time_limit_ms}")
        if self.max_passes is not None and self.max_passes < 0:
            raise InvalidInstance(f"Max passes must be >= 0, got {self.max_passes}")

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None, **overrides) -> "SolverConfig":
        """
        Read defaults from TOURBENCH_* environment variables, loading a .env
        file first if one exists. Keyword overrides that are not None win.
        """
        if env_file is not None:
            env_path = Path(env_file)
            if env_path.exists():
                load_dotenv(env_path)
        else:
            load_dotenv(find_dotenv(usecwd=True))

        values = {
            'candidates': _env_number("CANDIDATES", int),
            'time_limit_ms': _env_number("TIME_LIMIT_MS", float),
            'max_passes': _env_number("MAX_PASSES", int),
        }
        values.update(overrides)
        return cls(**{k: v for k, v in values.items() if v is not None})


def _env_number(name: str, cast):
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return cast(raw)
    except ValueError as e:
        raise InvalidInstance(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from e
