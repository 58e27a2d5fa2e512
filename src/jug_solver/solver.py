from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import numpy as np

from . import utils
from .engine import CoprimeLatticeSolver
from .lattice import Position


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two capacities.
    Returns 1 when either argument is non-positive, meaning "no reduction".
    """
    if a <= 0 or b <= 0:
        return 1
    return math.gcd(a, b)


@dataclass
class JugConfig:
    """A pair of jug capacities and the volumes to measure with them."""
    capacity_x: int
    capacity_y: int
    targets: List[int] = field(default_factory=list)

    @property
    def max_volume(self) -> int:
        return self.capacity_x + self.capacity_y

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "JugConfig":
        """
        Build a config from a params mapping (e.g. one job of a JSON/TOML
        file). `targets` may be the string "all" for every volume from 0 to
        X + Y.
        """
        capacity_x = int(params["capacity_x"])
        capacity_y = int(params["capacity_y"])
        targets: Union[str, Sequence[int]] = params.get("targets", [])
        if isinstance(targets, str):
            if targets != "all":
                raise ValueError(f"Unknown targets specifier: {targets!r}")
            targets = range(capacity_x + capacity_y + 1)
        return cls(capacity_x, capacity_y, [int(t) for t in targets])


class WaterJugSolver:
    """
    Solves the two-jug puzzle for arbitrary non-negative capacities.

    The problem (X, Y, target) is divided by d = gcd(X, Y) and handed to a
    single `CoprimeLatticeSolver` for (X/d, Y/d). Its paths are scaled back by
    d. The engine keeps its search state between calls, so asking for many
    targets costs little more than asking for the hardest one.
    """

    def __init__(self, capacity_x: int, capacity_y: int) -> None:
        self.capacity_x = int(capacity_x)
        self.capacity_y = int(capacity_y)
        self.max_volume = self.capacity_x + self.capacity_y
        self.divisor = gcd(self.capacity_x, self.capacity_y)
        self.engine = CoprimeLatticeSolver(
            self.capacity_x // self.divisor, self.capacity_y // self.divisor
        )

    @classmethod
    def from_config(cls, config: JugConfig) -> "WaterJugSolver":
        return cls(config.capacity_x, config.capacity_y)

    @property
    def capacities(self) -> tuple:
        return self.capacity_x, self.capacity_y

    def is_measurable(self, target: int) -> bool:
        """Whether `target` passes the range and divisibility checks."""
        if target < 0 or target > self.max_volume:
            return False
        return self.divisor == 1 or target % self.divisor == 0

    def solve(self, target: int) -> Optional[List[Position]]:
        """
        Shortest sequence of positions from (0, 0) to a position holding
        `target` in total, or None if the volume cannot be measured.
        """
        target = int(target)
        if not self.is_measurable(target):
            return None
        path = self.engine.solve(target // self.divisor)
        if path is None:
            return None
        if self.divisor != 1:
            d = self.divisor
            path = [(a * d, b * d) for a, b in path]
        return path

    def solve_many(self, targets: Iterable[int]) -> List[utils.SolutionResult]:
        """Solve each target in order and wrap the outcomes."""
        results = []
        for target in targets:
            path = self.solve(target)
            results.append(
                utils.SolutionResult(
                    target=int(target),
                    capacities=self.capacities,
                    path=None if path is None else np.asarray(path, dtype=np.int64),
                    meta={"divisor": self.divisor},
                )
            )
        return results

    def min_moves_by_volume(self) -> Dict[int, int]:
        """Minimal number of moves for every measurable volume."""
        return {
            volume * self.divisor: moves
            for volume, moves in self.engine.min_moves_by_volume().items()
        }


__all__ = ["JugConfig", "WaterJugSolver", "gcd"]
