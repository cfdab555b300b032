import pytest

from advent2024.common import PuzzleAssertionError
from advent2024.grid import (
    DIRECTION_VECTORS,
    Direction,
    Grid,
    Point,
    Vector,
    parse_grid,
)


def test_point_vector_arithmetic_round_trip():
    a = Point(3, 5)
    b = Point(-1, 7)
    vector = b - a
    assert a + vector == b
    assert b - vector == a
    assert a + (-vector) == a - vector


def test_point_str():
    assert str(Point(2, 9)) == "(2, 9)"


def test_vector_from_direction():
    assert Vector.from_direction(Direction.North) == Vector(0, -1)
    assert Vector.from_direction(Direction.East) == Vector(1, 0)
    assert DIRECTION_VECTORS[0] == Vector.from_direction(Direction.North)


def test_rotation_clockwise():
    north = Vector.from_direction(Direction.North)
    assert north.rotate_90deg_clockwise() == Vector.from_direction(Direction.East)
    v = Vector(2, -3)
    rotated = v
    for _ in range(4):
        rotated = rotated.rotate_90deg_clockwise()
    assert rotated == v
    assert v.rotate_90deg_clockwise().square_magnitude() == v.square_magnitude()


def test_square_magnitude():
    assert Vector(3, 4).square_magnitude() == 25


def test_vector_scale_and_truncating_division():
    v = Vector(-4, 7)
    assert (v * 3) / 3 == v
    assert Vector(-3, 5) / 2 == Vector(-1, 2)


def test_direction_str():
    west = Direction.West
    assert str(west) == "West"
    assert Vector.from_direction(west) == Vector(-1, 0)
    assert DIRECTION_VECTORS[3] == Vector.from_direction(west)


def test_parse_grid_and_render():
    text = "#.\n.S\n"
    grid = parse_grid(text)
    assert grid.width == 2
    assert grid.height == 2
    assert grid.get(Point(1, 1)) == "S"
    assert grid.get(Point(2, 0)) is None
    assert grid.get(Point(0, -1)) is None
    assert str(grid) == text


def test_parse_grid_empty_fails():
    with pytest.raises(PuzzleAssertionError):
        parse_grid("")


def test_find():
    grid = parse_grid("..\n.S\n")
    assert grid.find("S") == Point(1, 1)
    with pytest.raises(ValueError):
        grid.find("X")


def test_set_and_with_mutation():
    grid = Grid.filled(".", 3, 2)
    assert grid.width == 3 and grid.height == 2
    assert list(grid) == ["."] * 6
    changed = grid.with_mutation(Point(2, 1), "#")
    assert changed[Point(2, 1)] == "#"
    assert grid[Point(2, 1)] == "."
    grid.set(Point(0, 0), "#")
    assert grid.get(Point(0, 0)) == "#"


def test_set_out_of_bounds_fails():
    grid = Grid.filled(".", 2, 2)
    with pytest.raises(PuzzleAssertionError):
        grid.set(Point(5, 0), "#")
    with pytest.raises(PuzzleAssertionError):
        grid[Point(-1, 0)]


def test_adjacent_points_order_and_bounds():
    grid = Grid.filled(".", 2, 2)
    assert grid.adjacent_points(Point(0, 0)) == [Point(1, 0), Point(0, 1)]
    big = Grid.filled(".", 3, 3)
    assert big.adjacent_points(Point(1, 1)) == [
        Point(1, 0),
        Point(2, 1),
        Point(1, 2),
        Point(0, 1),
    ]


def test_point_at_matches_iteration_order():
    grid = parse_grid("abc\ndef\n")
    for index, char in enumerate(grid):
        assert grid[grid.point_at(index)] == char


def test_grid_equality():
    assert parse_grid("ab\ncd") == Grid(list("abcd"), 2)
    assert parse_grid("ab\ncd") != Grid(list("abcd"), 4)