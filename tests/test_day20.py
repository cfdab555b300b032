import pytest

from advent2024.day20 import (
    cheat_savings,
    do_puzzle,
    parse_input,
    part1,
    squares_within_radius,
)
from advent2024.grid import Grid, Point

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


def test_squares_within_radius_one():
    grid = Grid.filled(".", 5, 5)
    assert squares_within_radius(grid, Point(2, 2), 1) == [
        Point(2, 1),
        Point(1, 2),
        Point(3, 2),
        Point(2, 3),
    ]


def test_squares_within_radius_clipped_at_corner():
    grid = Grid.filled(".", 5, 5)
    assert squares_within_radius(grid, Point(0, 0), 2) == [
        Point(1, 0),
        Point(2, 0),
        Point(0, 1),
        Point(1, 1),
        Point(0, 2),
    ]


def test_example_savings_radius_two():
    assert cheat_savings(parse_input(EXAMPLE), 2) == {
        2: 14,
        4: 14,
        6: 2,
        8: 4,
        10: 2,
        12: 3,
        20: 1,
        36: 1,
        38: 1,
        40: 1,
        64: 1,
    }


def test_example_savings_radius_twenty():
    savings = cheat_savings(parse_input(EXAMPLE), 20)
    at_least_50 = {saving: count for saving, count in savings.items() if saving >= 50}
    assert at_least_50 == {
        50: 32,
        52: 31,
        54: 29,
        56: 39,
        58: 25,
        60: 23,
        62: 20,
        64: 19,
        66: 12,
        68: 14,
        70: 12,
        72: 22,
        74: 4,
        76: 3,
    }


def test_example_part1_has_no_large_cheats():
    assert part1(parse_input(EXAMPLE)) == 0


def test_input_grid_left_unchanged():
    parsed = parse_input(EXAMPLE)
    do_puzzle(parsed, 2)
    assert parsed.grid.find("S") == Point(1, 3)
    assert parsed.grid.find("E") == Point(5, 7)


def test_no_path_raises():
    parsed = parse_input("#####\n#S#E#\n#####\n")
    with pytest.raises(RuntimeError):
        do_puzzle(parsed, 2)