"""Grid algorithms: zigzag diagonal traversal, point connection cost, city lookup."""

from __future__ import annotations

import heapq
import math
from typing import Sequence

CITY = -1


def diagonal_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in zigzag diagonal order.

    The walk starts at the top-left corner, moves right, then runs down-left
    and up-right along alternating anti-diagonals. Raises ``ValueError`` for
    an empty or ragged matrix.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix must have at least one row and one column")
    n_rows = len(matrix)
    n_cols = len(matrix[0])
    if any(len(row) != n_cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")

    result: list[int] = []
    for d in range(n_rows + n_cols - 1):
        rows = range(max(0, d - n_cols + 1), min(d, n_rows - 1) + 1)
        if d % 2 == 0:
            rows = reversed(rows)
        result.extend(matrix[r][d - r] for r in rows)
    return result


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Return the minimum total Manhattan distance that connects all ``points``.

    Uses Prim's algorithm with a binary heap.
    """
    coords = [(x, y) for x, y in points]
    n = len(coords)
    if n == 0:
        return 0

    in_tree = [False] * n
    min_dist = [math.inf] * n
    heap = [(0, 0)]
    total = 0
    used = 0

    while used < n:
        cost, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        total += cost
        used += 1

        ux, uy = coords[u]
        for v, (vx, vy) in enumerate(coords):
            if in_tree[v]:
                continue
            dist = abs(ux - vx) + abs(uy - vy)
            if dist < min_dist[v]:
                min_dist[v] = dist
                heapq.heappush(heap, (dist, v))
    return total


def find_cities(grid: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return ``(row, column)`` of every city cell (value ``-1``) in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == CITY
    ]