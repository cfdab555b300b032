"""Falling bytes: shortest escape from a corrupting memory grid."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent2024.common import check, parse_int, split
from advent2024.grid import Grid, Point
from advent2024.search import bfs

_GRID_SIZE = 71
_NUM_BYTES = 1024


@dataclass
class ParsedInput:
    """The positions where bytes fall, in the order they fall."""

    byte_positions: list[Point] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Parse ``x,y`` lines into points."""
    positions = []
    for line in text.splitlines():
        parts = split(line, ",")
        check(len(parts) == 2, "Unexpected line split result")
        positions.append(Point(parse_int(parts[0]), parse_int(parts[1])))
    return ParsedInput(positions)


def bfs_path(parents: dict[Point, Point], end: Point) -> list[Point]:
    """The points leading up to ``end``, from the search start onwards.

    ``end`` itself is not included, so the length equals the number of steps.
    """
    check(end in parents, "End point was not reached")
    path = []
    current = parents[end]
    while current in parents:
        path.append(current)
        current = parents[current]
    path.append(current)
    path.reverse()
    return path


def _corrupted_grid(input: ParsedInput, grid_size: int, num_bytes_fall: int) -> Grid:
    check(
        num_bytes_fall < len(input.byte_positions),
        "Cannot simulate beyond end of input byte positions",
    )
    grid = Grid.filled(".", grid_size, grid_size)
    for point in input.byte_positions[:num_bytes_fall]:
        grid[point] = "#"
    return grid


def puzzle_part1(input: ParsedInput, grid_size: int, num_bytes_fall: int) -> int:
    """Fewest steps from the top-left to the bottom-right after some bytes fall."""
    grid = _corrupted_grid(input, grid_size, num_bytes_fall)
    start = Point(0, 0)
    end = Point(grid.width - 1, grid.height - 1)

    parents = bfs(grid, start, end)
    check(parents is not None, "Failed to find a path")
    return len(bfs_path(parents, end))


def part1(input: ParsedInput) -> int:
    return puzzle_part1(input, _GRID_SIZE, _NUM_BYTES)


def puzzle_part2(input: ParsedInput, grid_size: int, num_bytes_fall: int) -> Point:
    """The first byte whose fall cuts the exit off from the start."""
    grid = _corrupted_grid(input, grid_size, num_bytes_fall)
    start = Point(0, 0)
    end = Point(grid.width - 1, grid.height - 1)

    parents = bfs(grid, start, end)
    check(parents is not None, "Failed to find a path")

    for point in input.byte_positions[num_bytes_fall:]:
        grid[point] = "#"
        if point in parents:
            parents = bfs(grid, start, end)
            if parents is None:
                return point

    raise ValueError("No bytes will block the exit")


def part2(input: ParsedInput) -> Point:
    return puzzle_part2(input, _GRID_SIZE, _NUM_BYTES)