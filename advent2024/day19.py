"""Linen layout: building striped patterns out of available towels."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class ParsedInput:
    """The available towels and the patterns to build."""

    towels: set[str] = field(default_factory=set)
    patterns: list[str] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Parse a comma-separated towel line, a blank line, then one pattern per line."""
    lines = text.splitlines()
    first = lines[0] if lines else ""
    towels = {piece.replace(" ", "") for piece in first.split(",")}
    towels.discard("")
    return ParsedInput(towels, lines[2:])


def can_compose(pattern: str, towels: Iterable[str]) -> bool:
    """Whether ``pattern`` can be made by concatenating towels."""
    towel_set = set(towels)
    possible = [True] + [False] * len(pattern)
    for end in range(1, len(pattern) + 1):
        possible[end] = any(
            possible[start] and pattern[start:end] in towel_set for start in range(end)
        )
    return possible[len(pattern)]


def count_compositions(towels: Iterable[str], pattern: str) -> int:
    """Number of distinct towel sequences that make ``pattern``."""
    towel_list = [towel for towel in towels if towel]
    ways = [0] * (len(pattern) + 1)
    ways[len(pattern)] = 1
    for start in range(len(pattern) - 1, -1, -1):
        ways[start] = sum(
            ways[start + len(towel)] for towel in towel_list if pattern.startswith(towel, start)
        )
    return ways[0]


def part1(input: ParsedInput) -> int:
    """Number of patterns that can be made at all."""
    return sum(1 for pattern in input.patterns if can_compose(pattern, input.towels))


def part2(input: ParsedInput) -> int:
    """Total number of ways to make every pattern."""
    return sum(count_compositions(input.towels, pattern) for pattern in input.patterns)