"""
Resumable breadth-first search over the canonical lattice of a coprime jug
pair.

The engine keeps every state it has visited, together with the whole BFS
queue, for its entire lifetime. A query first re-scans the queue for a state
with the requested total, and only when none is known does it resume the
search from where the previous query stopped. Over the lifetime of an engine
at most 2 * (X + Y) states are ever expanded.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
from numba import njit

from .lattice import (
    MAX_SUCCESSORS,
    Position,
    canonical_positions,
    lattice_size,
    state_index,
    successors,
)

UNVISITED = -1
NOT_FOUND = -1

###############################################################################
# Search kernels
###############################################################################


@njit(cache=True)
def _find_cached(
    positions: np.ndarray, frontier: np.ndarray, n_frontier: int, target: int
) -> int:
    """Index of the first discovered state whose total equals target."""
    for k in range(n_frontier):
        idx = frontier[k]
        if positions[idx, 0] + positions[idx, 1] == target:
            return idx
    return NOT_FOUND


@njit(cache=True)
def _resume_search(
    positions: np.ndarray,
    depth: np.ndarray,
    prev: np.ndarray,
    frontier: np.ndarray,
    n_frontier: int,
    cursor: int,
    x_cap: int,
    y_cap: int,
    target: int,
) -> Tuple[int, int, int]:
    """
    Expand queued states until one of their successors sums to `target` or
    the queue runs dry.

    Returns (solution index or NOT_FOUND, new frontier length, new cursor).
    The node on which a match is found is always expanded completely.
    """
    out = np.empty((MAX_SUCCESSORS, 2), dtype=np.int64)
    solution = NOT_FOUND
    while solution == NOT_FOUND and cursor < n_frontier:
        src = frontier[cursor]
        cursor += 1
        a = positions[src, 0]
        b = positions[src, 1]
        n_next = successors(a, b, x_cap, y_cap, out)
        for m in range(n_next):
            dest = state_index(out[m, 0], out[m, 1], x_cap, y_cap)
            if depth[dest] != UNVISITED:
                continue
            depth[dest] = depth[src] + 1
            prev[dest, 0] = a
            prev[dest, 1] = b
            frontier[n_frontier] = dest
            n_frontier += 1
            if solution == NOT_FOUND and out[m, 0] + out[m, 1] == target:
                solution = dest
    return solution, n_frontier, cursor


###############################################################################
# Engine
###############################################################################


class CoprimeLatticeSolver:
    """
    Owns the visited-state table and the BFS queue of one jug pair.

    Capacities are expected to be coprime; with a common divisor d only the
    multiples of d are reachable and other targets simply come back as
    unreachable. Internally the smaller jug is treated as jug 1, positions
    handed back to the caller are in the caller's jug order.
    """

    def __init__(self, capacity_x: int, capacity_y: int) -> None:
        if capacity_x < 0 or capacity_y < 0:
            raise ValueError(
                f"Jug capacities must be non-negative, got ({capacity_x}, {capacity_y})"
            )
        self.capacity_x = int(capacity_x)
        self.capacity_y = int(capacity_y)
        self._flipped = self.capacity_x > self.capacity_y
        self.x_cap = min(self.capacity_x, self.capacity_y)
        self.y_cap = max(self.capacity_x, self.capacity_y)

        n = lattice_size(self.x_cap, self.y_cap)
        self.positions = canonical_positions(self.x_cap, self.y_cap)
        self.depth = np.full(n, UNVISITED, dtype=np.int64)
        self.prev = np.zeros((n, 2), dtype=np.int64)
        self.frontier = np.empty(n, dtype=np.int64)

        origin = state_index(0, 0, self.x_cap, self.y_cap)
        self.depth[origin] = 0
        self.frontier[0] = origin
        self.n_frontier = 1
        self.cursor = 0

    # ------------------------------------------------------------------ state
    @property
    def capacities(self) -> Tuple[int, int]:
        return self.capacity_x, self.capacity_y

    @property
    def size(self) -> int:
        return self.depth.shape[0]

    @property
    def discovered(self) -> int:
        return self.n_frontier

    @property
    def expanded(self) -> int:
        return self.cursor

    @property
    def exhausted(self) -> bool:
        return self.cursor >= self.n_frontier

    def _to_internal(self, pos: Position) -> Position:
        a, b = int(pos[0]), int(pos[1])
        return (b, a) if self._flipped else (a, b)

    def _to_external(self, a: int, b: int) -> Position:
        return (int(b), int(a)) if self._flipped else (int(a), int(b))

    def depth_of(self, pos: Position) -> int:
        """BFS depth of a canonical position, or -1 if not visited yet."""
        a, b = self._to_internal(pos)
        if not (0 <= a <= self.x_cap and 0 <= b <= self.y_cap):
            raise ValueError(f"{pos} lies outside capacities {self.capacities}")
        if a not in (0, self.x_cap) and b not in (0, self.y_cap):
            raise ValueError(f"{pos} is not a canonical position")
        return int(self.depth[state_index(a, b, self.x_cap, self.y_cap)])

    # ------------------------------------------------------------------ search
    def _resume(self, target: int) -> int:
        solution, self.n_frontier, self.cursor = _resume_search(
            self.positions,
            self.depth,
            self.prev,
            self.frontier,
            self.n_frontier,
            self.cursor,
            self.x_cap,
            self.y_cap,
            target,
        )
        return solution

    def _backtrack(self, index: int) -> List[Position]:
        a, b = self.positions[index]
        path = [self._to_external(a, b)]
        while self.depth[index] > 0:
            a, b = self.prev[index]
            path.append(self._to_external(a, b))
            index = state_index(a, b, self.x_cap, self.y_cap)
        path.reverse()
        return path

    def solve(self, target: int) -> Optional[List[Position]]:
        """
        Shortest path from (0, 0) to a position holding `target` in total.

        Returns the list of positions (both ends included), or None if no
        position with that total is reachable.
        """
        target = int(target)
        solution = _find_cached(self.positions, self.frontier, self.n_frontier, target)
        if solution == NOT_FOUND:
            solution = self._resume(target)
        if solution == NOT_FOUND:
            return None
        return self._backtrack(solution)

    def explore_all(self) -> None:
        """Run the search until every reachable state is visited."""
        self._resume(NOT_FOUND)

    def min_moves_by_volume(self) -> Dict[int, int]:
        """
        Minimal number of moves for every reachable total. Completes the
        search first.
        """
        self.explore_all()
        moves: Dict[int, int] = {}
        for idx in self.frontier[: self.n_frontier]:
            total = int(self.positions[idx, 0] + self.positions[idx, 1])
            if total not in moves:
                moves[total] = int(self.depth[idx])
        return moves


__all__ = ["CoprimeLatticeSolver", "UNVISITED"]
