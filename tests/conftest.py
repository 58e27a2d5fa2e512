from collections import deque

import pytest

from jug_solver.lattice import is_legal_move, legal_moves


def brute_force_depths(capacity_x, capacity_y):
    """Plain BFS over the full X x Y grid with every legal move."""
    depths = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        pos = queue.popleft()
        for nxt in legal_moves(pos, capacity_x, capacity_y):
            if nxt not in depths:
                depths[nxt] = depths[pos] + 1
                queue.append(nxt)
    return depths


def brute_force_min_moves(capacity_x, capacity_y):
    """Minimal number of moves for every reachable total volume."""
    best = {}
    for (a, b), d in brute_force_depths(capacity_x, capacity_y).items():
        best[a + b] = min(best.get(a + b, d), d)
    return best


def assert_valid_path(path, capacity_x, capacity_y, target):
    assert path[0] == (0, 0)
    assert sum(path[-1]) == target
    for src, dest in zip(path, path[1:]):
        assert is_legal_move(src, dest, capacity_x, capacity_y), (src, dest)


@pytest.fixture
def reference():
    class Reference:
        depths = staticmethod(brute_force_depths)
        min_moves = staticmethod(brute_force_min_moves)
        check_path = staticmethod(assert_valid_path)

    return Reference
