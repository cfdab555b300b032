"""Breadth-first search over open squares of a grid."""

from __future__ import annotations

from collections import deque

from advent2024.grid import Grid, Point


def bfs(grid: Grid, start: Point, end: Point) -> dict[Point, Point] | None:
    """Search from ``start`` to ``end`` through '.' squares.

    Returns the parent of every discovered point, or None when ``end``
    cannot be reached.
    """
    queue = deque([start])
    explored = {start}
    parents: dict[Point, Point] = {}

    while queue:
        current = queue.popleft()
        if current == end:
            return parents

        for edge in grid.adjacent_points(current):
            if grid[edge] != "." or edge in explored:
                continue
            explored.add(edge)
            parents[edge] = current
            queue.append(edge)

    return None