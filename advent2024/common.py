"""Shared helpers: puzzle days, input loading, number parsing and assertions."""

from __future__ import annotations

import re
import time
from collections.abc import Callable, Iterable
from datetime import timedelta
from enum import IntEnum
from pathlib import Path

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"-?[0-9]+")


class Day(IntEnum):
    """A puzzle day of the calendar."""

    Day01 = 1
    Day02 = 2
    Day03 = 3
    Day04 = 4
    Day05 = 5
    Day06 = 6
    Day07 = 7
    Day08 = 8
    Day09 = 9
    Day10 = 10
    Day11 = 11
    Day12 = 12
    Day13 = 13
    Day14 = 14
    Day15 = 15
    Day16 = 16
    Day17 = 17
    Day18 = 18
    Day19 = 19
    Day20 = 20
    Day21 = 21
    Day22 = 22
    Day23 = 23
    Day24 = 24
    Day25 = 25


class PuzzleAssertionError(AssertionError):
    """Raised when an internal consistency check of a puzzle fails."""


def check(condition: object, message: str) -> None:
    """Raise PuzzleAssertionError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise PuzzleAssertionError(message)


def read_input(day: Day | int, filename: str, root: str | Path | None = None) -> str:
    """Read ``day<NN>/<filename>`` below ``root`` (the working directory by default)."""
    base = Path.cwd() if root is None else Path(root)
    path = base / f"day{int(day):02d}" / filename
    try:
        text = path.read_text()
    except FileNotFoundError:
        raise FileNotFoundError(f"Failed to open file: {path}") from None
    if not text:
        raise ValueError(f"File was empty at: {path}")
    return text


def example_input(day: Day | int, number: int | None = None, root: str | Path | None = None) -> str:
    """Read an example input: ``example.txt`` or ``example<number>.txt``."""
    filename = "example.txt" if number is None else f"example{number}.txt"
    return read_input(day, filename, root)


def real_input(day: Day | int, root: str | Path | None = None) -> str:
    """Read the real puzzle input, ``input.txt``."""
    return read_input(day, "input.txt", root)


def parse_int(text: str) -> int:
    """Parse the leading 32-bit integer of ``text``; raise ValueError on failure."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"Failed to parse number: {text!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"Number out of range: {text!r}")
    return value


def try_parse_int(text: str) -> int | None:
    """Like parse_int, but return None instead of raising."""
    try:
        return parse_int(text)
    except ValueError:
        return None


def ctoi(char: str) -> int | None:
    """Return the value of a decimal digit character, or None."""
    if len(char) == 1 and "0" <= char <= "9":
        return ord(char) - ord("0")
    return None


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [part for part in text.split(separator) if part]


def join(separator: str, items: Iterable[object]) -> str:
    """Join the string forms of ``items`` with ``separator``."""
    return separator.join(str(item) for item in items)


def time_execution(label: str, func: Callable[[], object]) -> timedelta:
    """Run ``func``, print how long it took and return the elapsed time."""
    start = time.perf_counter()
    func()
    elapsed = timedelta(seconds=time.perf_counter() - start)
    micros = elapsed // timedelta(microseconds=1)
    print(f"Executed '{label}' in {micros}µs")
    return elapsed