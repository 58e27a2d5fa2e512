"""
Canonical state lattice of a two-jug system.

Every position reachable from the empty state has at least one jug either
empty or full, so the reachable part of the X x Y grid collapses to its
boundary: exactly 2 * (X + Y) positions. They are stored in a flat table in
the following order:

    (0, 0), (0, 1), ..., (0, Y)         # Y + 1
    (X, 0), (X, 1), ..., (X, Y)         # Y + 1
    (1, 0), (2, 0), ..., (X - 1, 0)     # X - 1
    (1, Y), (2, Y), ..., (X - 1, Y)     # X - 1

When one capacity is zero that jug is both empty and full at once, the
duplicate blocks are dropped and the table holds the X + Y + 1 levels of the
other jug.

The index and move kernels are compiled with `@numba.njit` so the search loop
in `engine.py` can run entirely in nopython mode.
"""

from __future__ import annotations

from typing import Set, Tuple

import numpy as np
from numba import njit

Position = Tuple[int, int]

# Upper bound on the successors of one canonical position
# (one jug-1 move, one jug-2 move, one transfer).
MAX_SUCCESSORS = 3


def lattice_size(x_cap: int, y_cap: int) -> int:
    """Number of canonical positions for capacities (x_cap, y_cap)."""
    if x_cap == 0 or y_cap == 0:
        # A zero jug is always both empty and full: only the other jug's levels.
        return x_cap + y_cap + 1
    return 2 * (x_cap + y_cap)


@njit(cache=True)
def state_index(i: int, j: int, x_cap: int, y_cap: int) -> int:
    """Map a canonical position (i, j) to its slot in the flat state table."""
    if i == 0:
        return j
    if i == x_cap:
        return y_cap + 1 + j
    if j == 0:
        return 2 * y_cap + 1 + i
    return 2 * y_cap + x_cap + i


def canonical_positions(x_cap: int, y_cap: int) -> np.ndarray:
    """
    Returns an (N, 2) int64 array whose row k is the position with index k.
    This is the inverse of `state_index`.
    """
    j = np.arange(y_cap + 1, dtype=np.int64)
    i = np.arange(1, x_cap, dtype=np.int64)
    blocks = [np.column_stack((np.zeros_like(j), j))]
    if x_cap > 0:
        blocks.append(np.column_stack((np.full_like(j, x_cap), j)))
        blocks.append(np.column_stack((i, np.zeros_like(i))))
        if y_cap > 0:
            blocks.append(np.column_stack((i, np.full_like(i, y_cap))))
    return np.concatenate(blocks).astype(np.int64).reshape(-1, 2)


@njit(cache=True)
def other_end(a: int, b: int, x_cap: int, y_cap: int) -> Tuple[int, int]:
    """
    Position reached by pouring one jug into the other.

    Both jugs are never partially filled at the same time, so from a canonical
    position there is only one pour that changes anything. Returns (-1, -1)
    for the empty and the full position, where no pour applies.
    Assumes x_cap <= y_cap.
    """
    total = a + b
    if total == 0 or total == x_cap + y_cap:
        return -1, -1

    if total <= x_cap:
        if a == 0:
            return b, 0  # jug 2 -> jug 1
        return 0, a  # jug 1 -> jug 2
    if a == 0 or b == y_cap:
        return x_cap, total - x_cap  # jug 2 fills jug 1
    if total <= y_cap:
        return 0, total  # jug 1 empties into jug 2
    return total - y_cap, y_cap  # jug 1 fills jug 2


@njit(cache=True)
def successors(a: int, b: int, x_cap: int, y_cap: int, out: np.ndarray) -> int:
    """
    Write the successors of canonical position (a, b) into `out` (shape
    (MAX_SUCCESSORS, 2)) and return how many were written.

    A partially filled jug is never filled or emptied directly: both results
    have jug 1 and jug 2 at an extreme, so they sit at depth at most 2, which
    is never more than depth(partial) + 1.
    """
    n = 0
    if a == 0:
        out[n, 0] = x_cap
        out[n, 1] = b
        n += 1
    elif a == x_cap:
        out[n, 0] = 0
        out[n, 1] = b
        n += 1
    if b == 0:
        out[n, 0] = a
        out[n, 1] = y_cap
        n += 1
    elif b == y_cap:
        out[n, 0] = a
        out[n, 1] = 0
        n += 1
    if a + b != 0 and a + b != x_cap + y_cap:
        c, d = other_end(a, b, x_cap, y_cap)
        out[n, 0] = c
        out[n, 1] = d
        n += 1
    return n


def is_canonical(pos: Position, x_cap: int, y_cap: int) -> bool:
    a, b = pos
    if not (0 <= a <= x_cap and 0 <= b <= y_cap):
        return False
    return a in (0, x_cap) or b in (0, y_cap)


def legal_moves(pos: Position, x_cap: int, y_cap: int) -> Set[Position]:
    """
    All positions one unrestricted move away from `pos`: fill or empty either
    jug, or pour either jug into the other. Moves that change nothing are left
    out.
    """
    a, b = pos
    pour_ab = min(a, y_cap - b)
    pour_ba = min(b, x_cap - a)
    candidates = {
        (x_cap, b),
        (0, b),
        (a, y_cap),
        (a, 0),
        (a - pour_ab, b + pour_ab),
        (a + pour_ba, b - pour_ba),
    }
    candidates.discard((a, b))
    return candidates


def is_legal_move(src: Position, dest: Position, x_cap: int, y_cap: int) -> bool:
    return tuple(dest) in legal_moves(tuple(src), x_cap, y_cap)


__all__ = [
    "MAX_SUCCESSORS",
    "Position",
    "canonical_positions",
    "is_canonical",
    "is_legal_move",
    "lattice_size",
    "legal_moves",
    "other_end",
    "state_index",
]
