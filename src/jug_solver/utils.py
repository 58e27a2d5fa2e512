# src/jug_solver/utils.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import numpy as np

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    tomllib = None  # type: ignore


@dataclass
class SolutionResult:
    """Outcome of one target query."""

    target: int
    capacities: Tuple[int, int]
    path: Optional[np.ndarray] = None
    meta: Optional[Dict[str, Any]] = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def moves(self) -> int:
        """Number of moves in the solution, -1 if there is none."""
        if self.path is None:
            return -1
        return int(self.path.shape[0]) - 1


def format_path(path: Iterable[Sequence[int]], target: int) -> str:
    """Header with the target and path length, then one position per line."""
    rows = [f"({int(a)}, {int(b)})" for a, b in path]
    header = f"---------------- {target} ({len(rows)}) ----------------"
    return "\n".join([header, *rows])


def format_unreachable(target: int, capacity_x: int, capacity_y: int) -> str:
    return (
        f"Cannot get volume {target} from jug of volume "
        f"{capacity_x} and {capacity_y}."
    )


def format_result(result: SolutionResult) -> str:
    if result.found:
        return format_path(result.path, result.target)
    return format_unreachable(result.target, *result.capacities)


def load_params(path: str | os.PathLike[str]) -> Dict[str, Any]:
    """
    Load solver parameters from JSON or TOML.
    """
    path = str(path)
    with open(path, "rb") as fh:
        data = fh.read()
    suffix = Path(path).suffix.lower()
    if suffix in {".json", ""}:
        return json.loads(data.decode("utf-8"))
    if suffix in {".toml", ".tml"}:
        if tomllib is None:
            raise RuntimeError("tomllib is unavailable; cannot parse TOML files")
        return tomllib.loads(data.decode("utf-8"))
    raise ValueError(f"Unsupported parameter file format: {suffix}")
