"""Race condition: counting shortcuts through walls of a single-track race."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from advent2024.grid import Grid, Point, parse_grid
from advent2024.search import bfs

_WORTHWHILE_SAVING = 100


@dataclass
class ParsedInput:
    """The racetrack grid."""

    grid: Grid


def parse_input(text: str) -> ParsedInput:
    """Parse the racetrack text into a grid."""
    return ParsedInput(parse_grid(text))


def squares_within_radius(grid: Grid, origin: Point, radius: int) -> list[Point]:
    """Points on the grid within Manhattan ``radius`` of ``origin``, excluding it."""
    return [
        point
        for dy in range(-radius, radius + 1)
        for dx in range(-radius, radius + 1)
        if abs(dx) + abs(dy) <= radius
        for point in (Point(origin.x + dx, origin.y + dy),)
        if point != origin and grid.get(point) is not None
    ]


def _race_times(grid: Grid) -> dict[Point, int]:
    track = grid.copy()
    start = track.find("S")
    end = track.find("E")
    track[start] = "."
    track[end] = "."

    parents = bfs(track, start, end)
    if parents is None:
        raise RuntimeError("Could not find path")

    path = [end]
    current = parents[end]
    while current != start:
        path.append(current)
        current = parents[current]
    path.append(current)
    path.reverse()

    return {point: time for time, point in enumerate(path)}


def cheat_savings(input: ParsedInput, max_cheat_dist: int) -> dict[int, int]:
    """How many cheats save each amount of time, ordered by the saving."""
    times = _race_times(input.grid)
    savings: Counter[int] = Counter()

    for point, time in times.items():
        for destination in squares_within_radius(input.grid, point, max_cheat_dist):
            new_time = times.get(destination)
            if new_time is None:
                continue
            distance = abs(point.x - destination.x) + abs(point.y - destination.y)
            saving = new_time - time - distance
            if saving > 0:
                savings[saving] += 1

    return dict(sorted(savings.items()))


def do_puzzle(input: ParsedInput, max_cheat_dist: int) -> int:
    """Number of cheats saving at least 100 picoseconds."""
    return sum(
        count
        for saving, count in cheat_savings(input, max_cheat_dist).items()
        if saving >= _WORTHWHILE_SAVING
    )


def part1(input: ParsedInput) -> int:
    return do_puzzle(input, 2)


def part2(input: ParsedInput) -> int:
    return do_puzzle(input, 20)