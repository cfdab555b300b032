"""Points, vectors, compass directions and a rectangular character grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from advent2024.common import check


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Vector:
    """A displacement on the grid."""

    dx: int
    dy: int

    @staticmethod
    def from_direction(direction: Direction) -> Vector:
        """Return the unit vector for a compass direction (north is -y)."""
        return _DIRECTION_UNITS[direction]

    def square_magnitude(self) -> int:
        return self.dx * self.dx + self.dy * self.dy

    def rotate_90deg_clockwise(self) -> Vector:
        return Vector(-self.dy, self.dx)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    def __mul__(self, factor: int) -> Vector:
        return Vector(self.dx * factor, self.dy * factor)

    def __truediv__(self, divisor: int) -> Vector:
        return Vector(_trunc_div(self.dx, divisor), _trunc_div(self.dy, divisor))


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int = 0
    y: int = 0

    def __add__(self, vector: Vector) -> Point:
        if not isinstance(vector, Vector):
            return NotImplemented
        return Point(self.x + vector.dx, self.y + vector.dy)

    def __sub__(self, other: Point | Vector) -> Vector | Point:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.dx, self.y - other.dy)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    """The four compass directions."""

    North = 0
    East = 1
    South = 2
    West = 3

    def __str__(self) -> str:
        return self.name


_DIRECTION_UNITS = {
    Direction.North: Vector(0, -1),
    Direction.East: Vector(1, 0),
    Direction.South: Vector(0, 1),
    Direction.West: Vector(-1, 0),
}

DIRECTIONS = tuple(Direction)
DIRECTION_VECTORS = tuple(_DIRECTION_UNITS[d] for d in DIRECTIONS)


class Grid:
    """A rectangular grid of characters, stored row by row."""

    def __init__(self, squares: list[str], width: int) -> None:
        check(width > 0, "Grid width must be positive")
        self.squares = list(squares)
        self.width = width
        self.height = len(self.squares) // width

    @staticmethod
    def filled(fill: str, width: int, height: int) -> Grid:
        """Create a ``width`` x ``height`` grid of ``fill``."""
        return Grid([fill] * (width * height), width)

    def _in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def _index(self, point: Point) -> int:
        check(self._in_bounds(point), "grid bounds check failure")
        return point.y * self.width + point.x

    def get(self, point: Point) -> str | None:
        """Return the square at ``point``, or None when it is off the grid."""
        if not self._in_bounds(point):
            return None
        return self.squares[point.y * self.width + point.x]

    def __getitem__(self, point: Point) -> str:
        return self.squares[self._index(point)]

    def set(self, point: Point, value: str) -> None:
        self.squares[self._index(point)] = value

    def __setitem__(self, point: Point, value: str) -> None:
        self.set(point, value)

    def with_mutation(self, point: Point, value: str) -> Grid:
        """Return a copy of the grid with one square changed."""
        copy = self.copy()
        copy.set(point, value)
        return copy

    def copy(self) -> Grid:
        return Grid(self.squares, self.width)

    def adjacent_points(self, point: Point) -> list[Point]:
        """Neighbours on the grid, in north, east, south, west order."""
        candidates = (point + vector for vector in DIRECTION_VECTORS)
        return [p for p in candidates if self._in_bounds(p)]

    def point_at(self, index: int) -> Point:
        """Return the point for a row-major index into the squares."""
        return Point(index % self.width, index // self.width)

    def find(self, char: str) -> Point:
        """Return the first point holding ``char``; raise ValueError if absent."""
        try:
            return self.point_at(self.squares.index(char))
        except ValueError:
            raise ValueError(f"{char!r} is not in the grid") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self.squares)

    def __len__(self) -> int:
        return len(self.squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.squares == other.squares

    def __str__(self) -> str:
        rows = (
            "".join(self.squares[start : start + self.width])
            for start in range(0, len(self.squares), self.width)
        )
        return "".join(row + "\n" for row in rows)


def parse_grid(text: str) -> Grid:
    """Build a grid from lines of text; the first line sets the width."""
    lines = text.splitlines()
    check(bool(lines) and bool(lines[0]), "Failed to read first line")
    return Grid(list("".join(lines)), len(lines[0]))