"""Keypad conundrum: typing door codes through a chain of directional keypads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache

from advent2024.common import check, parse_int
from advent2024.grid import Point


class DpadInput(Enum):
    """A button on a directional keypad."""

    Up = "^"
    Activate = "A"
    Left = "<"
    Down = "v"
    Right = ">"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParsedInput:
    """The door codes to type."""

    codes: list[str] = field(default_factory=list)


_DIGIT_POSITIONS = {
    "7": Point(0, 0),
    "8": Point(1, 0),
    "9": Point(2, 0),
    "4": Point(0, 1),
    "5": Point(1, 1),
    "6": Point(2, 1),
    "1": Point(0, 2),
    "2": Point(1, 2),
    "3": Point(2, 2),
    "0": Point(1, 3),
    "A": Point(2, 3),
}
_NUMPAD_GAP = Point(0, 3)

_DPAD_POSITIONS = {
    DpadInput.Up: Point(1, 0),
    DpadInput.Activate: Point(2, 0),
    DpadInput.Left: Point(0, 1),
    DpadInput.Down: Point(1, 1),
    DpadInput.Right: Point(2, 1),
}
_DPAD_GAP = Point(0, 0)


def parse_input(text: str) -> ParsedInput:
    """Parse one four-character code per line."""
    codes = []
    for line in text.splitlines():
        check(len(line) == 4, "Invalid code length")
        codes.append(line)
    return ParsedInput(codes)


def code_string(inputs: list[DpadInput]) -> str:
    """The button presses written as their symbols."""
    return "".join(button.value for button in inputs)


def dpad_input(start: Point, end: Point, avoid: Point) -> list[DpadInput]:
    """Presses that move an arm from ``start`` to ``end`` and press it.

    Leftward moves go horizontal first, otherwise vertical first, unless that
    order would pass over the ``avoid`` gap.
    """
    vector = end - start
    x_move = DpadInput.Right if vector.dx > 0 else DpadInput.Left
    y_move = DpadInput.Down if vector.dy > 0 else DpadInput.Up
    dx_unit = 1 if vector.dx > 0 else -1
    dy_unit = 1 if vector.dy > 0 else -1

    x_first_is_safe = start.y != avoid.y or end.x != avoid.x
    y_first_is_safe = start.x != avoid.x or end.y != avoid.y
    prefer_x_first = x_move is DpadInput.Left

    check(x_first_is_safe or y_first_is_safe, "no safe direction")

    horizontal = [(x_move, dx_unit, 0)] * abs(vector.dx)
    vertical = [(y_move, 0, dy_unit)] * abs(vector.dy)
    if (x_first_is_safe and prefer_x_first) or not y_first_is_safe:
        steps = horizontal + vertical
    else:
        steps = vertical + horizontal

    inputs = []
    x, y = start.x, start.y
    for button, step_x, step_y in steps:
        x += step_x
        y += step_y
        check(Point(x, y) != avoid, "illegal cursor move")
        inputs.append(button)

    inputs.append(DpadInput.Activate)
    return inputs


def dpad_input_for_code(code: str) -> list[DpadInput]:
    """Directional presses that make the numeric keypad arm type ``code``."""
    cursor = _DIGIT_POSITIONS["A"]
    directions: list[DpadInput] = []
    for digit in code:
        target = _DIGIT_POSITIONS[digit]
        directions.extend(dpad_input(cursor, target, _NUMPAD_GAP))
        cursor = target
    return directions


def _pairs(moves: list[DpadInput]):
    return zip([DpadInput.Activate, *moves], moves)


@lru_cache(maxsize=None)
def pair_complexity(start: DpadInput, end: DpadInput, robot_num: int) -> int:
    """Our presses needed for robot ``robot_num`` to go from ``start`` to ``end`` and press."""
    moves = dpad_input(_DPAD_POSITIONS[start], _DPAD_POSITIONS[end], _DPAD_GAP)
    if robot_num == 1:
        return len(moves)
    return sum(
        pair_complexity(previous, current, robot_num - 1) for previous, current in _pairs(moves)
    )


def code_complexity(code: str, num_dpad_robots: int) -> int:
    """Length of the shortest press sequence we type to enter ``code``."""
    directions = dpad_input_for_code(code)
    return sum(
        pair_complexity(previous, current, num_dpad_robots)
        for previous, current in _pairs(directions)
    )


def code_number(code: str) -> int:
    """The numeric part of a code, i.e. everything but its last character."""
    return parse_int(code[:-1])


def puzzle(input: ParsedInput, num_dpad_robots: int) -> int:
    """Sum of press count times numeric part over all codes."""
    return sum(
        code_complexity(code, num_dpad_robots) * code_number(code) for code in input.codes
    )


def part1(input: ParsedInput) -> int:
    return puzzle(input, 2)


def part2(input: ParsedInput) -> int:
    return puzzle(input, 25)