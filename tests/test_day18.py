import pytest

from advent2024.common import PuzzleAssertionError
from advent2024.day18 import (
    ParsedInput,
    bfs_path,
    parse_input,
    puzzle_part1,
    puzzle_part2,
)
from advent2024.grid import Point

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_parse_input():
    parsed = parse_input("1,2\n3,4\n")
    assert parsed.byte_positions == [Point(1, 2), Point(3, 4)]


def test_parse_input_rejects_bad_line():
    with pytest.raises(PuzzleAssertionError):
        parse_input("1,2,3\n")


def test_example_part1():
    assert puzzle_part1(parse_input(EXAMPLE), 7, 12) == 22


def test_example_part2():
    assert puzzle_part2(parse_input(EXAMPLE), 7, 12) == Point(6, 1)


def test_bfs_path_excludes_end():
    parents = {Point(1, 0): Point(0, 0), Point(2, 0): Point(1, 0)}
    assert bfs_path(parents, Point(2, 0)) == [Point(0, 0), Point(1, 0)]


def test_small_grid_part1():
    parsed = ParsedInput([Point(1, 0), Point(1, 1), Point(2, 2)])
    assert puzzle_part1(parsed, 3, 1) == 4


def test_part1_cannot_simulate_all_bytes():
    parsed = ParsedInput([Point(1, 0), Point(1, 1)])
    with pytest.raises(PuzzleAssertionError):
        puzzle_part1(parsed, 3, 2)


def test_part1_no_path():
    parsed = ParsedInput([Point(1, 0), Point(0, 1), Point(2, 2)])
    with pytest.raises(PuzzleAssertionError):
        puzzle_part1(parsed, 3, 2)


def test_part2_nothing_blocks():
    parsed = ParsedInput([Point(1, 1), Point(2, 0)])
    with pytest.raises(ValueError):
        puzzle_part2(parsed, 3, 1)