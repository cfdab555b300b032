"""Monkey market: pseudorandom secret numbers and banana prices."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from advent2024.common import check, parse_int

_PRUNE_MODULUS = 16777216


@dataclass
class ParsedInput:
    """Each buyer's initial secret number."""

    initial_numbers: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ChangeSequence:
    """Four consecutive price changes."""

    change1: int
    change2: int
    change3: int
    change4: int

    @staticmethod
    def create(collection: Sequence[int]) -> ChangeSequence:
        """Build a sequence from exactly four changes."""
        check(len(collection) == 4, "invalid collection size")
        return ChangeSequence(*collection)

    def __str__(self) -> str:
        return f"{self.change1},{self.change2},{self.change3},{self.change4}"


def parse_input(text: str) -> ParsedInput:
    """Parse one secret number per line."""
    return ParsedInput([parse_int(line) for line in text.splitlines()])


def mix_number(a: int, b: int) -> int:
    return a ^ b


def prune_number(a: int) -> int:
    return a % _PRUNE_MODULUS


def advance_number_once(number: int) -> int:
    """The next secret number in the sequence."""
    result = prune_number(mix_number(number, number * 64))
    result = prune_number(mix_number(result, result // 32))
    return prune_number(mix_number(result, result * 2048))


def advance_number(number: int, iterations: int) -> int:
    """The secret number after ``iterations`` steps."""
    for _ in range(iterations):
        number = advance_number_once(number)
    return number


def advance_number_and_track_changes(init_number: int, iterations: int) -> dict[ChangeSequence, int]:
    """The price at the first occurrence of every four-change sequence."""
    previous = init_number
    changes: deque[int] = deque(maxlen=4)
    values: dict[ChangeSequence, int] = {}

    for _ in range(iterations):
        number = advance_number_once(previous)
        price = number % 10
        changes.append(price - previous % 10)
        if len(changes) == 4:
            values.setdefault(ChangeSequence.create(list(changes)), price)
        previous = number

    return values


def part1(input: ParsedInput) -> int:
    """Sum of every buyer's 2000th secret number."""
    return sum(advance_number(number, 2000) for number in input.initial_numbers)


def part2(input: ParsedInput) -> int:
    """Most bananas obtainable with a single change sequence."""
    totals: Counter[ChangeSequence] = Counter()
    for number in input.initial_numbers:
        totals.update(advance_number_and_track_changes(number, 2000))
    check(bool(totals), "failed to find max element")
    return max(totals.values())