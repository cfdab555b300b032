"""Reindeer maze: cheapest route where each turn costs a thousand steps."""

from __future__ import annotations

import heapq
import itertools
from collections import defaultdict
from dataclasses import dataclass

from advent2024.common import check
from advent2024.grid import Direction, Grid, Point, Vector, parse_grid

_STEP_COST = 1
_TURN_COST = 1000


@dataclass
class ParsedInput:
    """The maze grid."""

    grid: Grid


@dataclass(frozen=True)
class PointWithDirection:
    """A maze square together with the direction it was entered in."""

    point: Point = Point(0, 0)
    direction: Vector = Vector(0, 0)


def parse_input(text: str) -> ParsedInput:
    """Parse the maze text into a grid."""
    return ParsedInput(parse_grid(text))


def _move_cost(step: Vector, facing: Vector) -> int:
    return _STEP_COST if step == facing else _STEP_COST + _TURN_COST


def point_costs(input: ParsedInput, start: Point) -> dict[Point, int]:
    """Cheapest known cost to each square, searching until the end is settled.

    The facing direction at each square is taken from the single predecessor
    that gave it its best cost; the start faces east.
    """
    grid = input.grid
    distances: dict[Point, int] = {start: 0}
    previous: dict[Point, Point] = {}
    visited: set[Point] = set()
    order = itertools.count(1)
    heap: list[tuple[int, int, Point]] = [(0, 0, start)]
    facing = Vector.from_direction(Direction.East)

    while heap:
        cost, _, current = heapq.heappop(heap)
        if current in visited:
            continue
        if grid[current] == "E":
            break

        if current in previous:
            facing = current - previous[current]

        for adjacent in grid.adjacent_points(current):
            if grid[adjacent] == "#":
                continue
            step = adjacent - current
            check(abs(step.dx) <= 1 and abs(step.dy) <= 1, "Invalid direction vector")
            total = cost + _move_cost(step, facing)
            known = distances.get(adjacent)
            if known is None or total < known:
                distances[adjacent] = total
                previous[adjacent] = current
                if adjacent not in visited:
                    heapq.heappush(heap, (total, next(order), adjacent))

        visited.add(current)

    return distances


def shortest_path_subgraph(
    input: ParsedInput, start: Point
) -> tuple[dict[PointWithDirection, list[PointWithDirection]], list[PointWithDirection]]:
    """Search over (square, direction) states from ``start`` facing east.

    Returns every state's predecessors on equally cheap routes, and the end
    states reached at the lowest cost (empty when the end is unreachable).
    """
    grid = input.grid
    origin = PointWithDirection(start, Vector.from_direction(Direction.East))
    distances: dict[PointWithDirection, int] = {origin: 0}
    previous: defaultdict[PointWithDirection, list[PointWithDirection]] = defaultdict(list)
    visited: set[PointWithDirection] = set()
    order = itertools.count(1)
    heap: list[tuple[int, int, PointWithDirection]] = [(0, 0, origin)]
    end_cost: int | None = None

    while heap:
        cost, _, current = heapq.heappop(heap)
        if current in visited:
            continue
        if grid[current.point] == "E":
            end_cost = cost
            break

        for adjacent in grid.adjacent_points(current.point):
            if grid[adjacent] == "#":
                continue
            step = adjacent - current.point
            check(abs(step.dx) <= 1 and abs(step.dy) <= 1, "Invalid direction vector")
            candidate = PointWithDirection(adjacent, step)
            total = cost + _move_cost(step, current.direction)
            known = distances.get(candidate)
            if known is None or total < known:
                distances[candidate] = total
                previous[candidate] = [current]
                if candidate not in visited:
                    heapq.heappush(heap, (total, next(order), candidate))
            elif total == known:
                previous[candidate].append(current)

        visited.add(current)

    ends = (
        []
        if end_cost is None
        else [
            state
            for state, cost in distances.items()
            if cost == end_cost and grid[state.point] == "E"
        ]
    )
    return dict(previous), ends


def part1(input: ParsedInput) -> int:
    """Lowest score of any route from S to E."""
    start = input.grid.find("S")
    end = input.grid.find("E")
    costs = point_costs(input, start)
    check(end in costs, "Could not reach maze end")
    return costs[end]


def part2(input: ParsedInput) -> int:
    """Number of squares lying on at least one cheapest route."""
    start = input.grid.find("S")
    previous, ends = shortest_path_subgraph(input, start)
    check(bool(ends), "Could not reach maze end")

    seen = set(ends)
    stack = list(ends)
    while stack:
        state = stack.pop()
        for parent in previous.get(state, ()):
            if parent not in seen:
                seen.add(parent)
                stack.append(parent)

    return len({state.point for state in seen})