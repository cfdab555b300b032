"""Timed runs of a day's parser and both parts against its real input."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Generic, TypeVar

from advent2024.common import Day, real_input

Input = TypeVar("Input")


@dataclass(frozen=True)
class PuzzleRunResult:
    """How long each stage of a puzzle run took."""

    day: Day
    parse_time: timedelta
    part_1_time: timedelta
    part_2_time: timedelta


@dataclass(frozen=True)
class Puzzle(Generic[Input]):
    """A day's parser and its two parts."""

    day: Day
    parse_input: Callable[[str], Input]
    part1: Callable[[Input], Any]
    part2: Callable[[Input], Any]

    def run(self, root: str | Path | None = None) -> PuzzleRunResult:
        """Parse the real input below ``root`` and run both parts, timing each."""
        start = time.perf_counter()
        parsed = self.parse_input(real_input(self.day, root))
        parsed_at = time.perf_counter()
        self.part1(parsed)
        part1_done = time.perf_counter()
        self.part2(parsed)
        part2_done = time.perf_counter()

        return PuzzleRunResult(
            day=self.day,
            parse_time=timedelta(seconds=parsed_at - start),
            part_1_time=timedelta(seconds=part1_done - parsed_at),
            part_2_time=timedelta(seconds=part2_done - part1_done),
        )