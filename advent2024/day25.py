"""Code chronicle: which keys fit which locks."""

from __future__ import annotations

from dataclasses import dataclass, field

_PIN_COUNT = 5
_MAX_HEIGHT = 5


@dataclass(frozen=True)
class Lock:
    """Pin heights measured from the top."""

    pin1: int
    pin2: int
    pin3: int
    pin4: int
    pin5: int

    @property
    def pins(self) -> tuple[int, ...]:
        return (self.pin1, self.pin2, self.pin3, self.pin4, self.pin5)


@dataclass(frozen=True)
class Key:
    """Pin heights measured from the bottom."""

    pin1: int
    pin2: int
    pin3: int
    pin4: int
    pin5: int

    @property
    def pins(self) -> tuple[int, ...]:
        return (self.pin1, self.pin2, self.pin3, self.pin4, self.pin5)


@dataclass
class ParsedInput:
    """All locks and keys of the input."""

    locks: list[Lock] = field(default_factory=list)
    keys: list[Key] = field(default_factory=list)


def parse_schematic(schematic: str) -> Lock | Key:
    """Parse one schematic; a filled top row makes it a lock, otherwise a key."""
    lines = schematic.splitlines()
    first = lines[0] if lines else ""
    if len(first) < _PIN_COUNT:
        raise ValueError("Schematic is too narrow")

    heights = [0] * len(first)
    for line in lines[1:]:
        for column, char in enumerate(line[: len(heights)]):
            if char == "#":
                heights[column] += 1

    pins = heights[:_PIN_COUNT]
    if all(char == "#" for char in first):
        return Lock(*pins)
    # The key's full bottom row is counted above, so take it back off.
    return Key(*(height - 1 for height in pins))


def parse_input(text: str) -> ParsedInput:
    """Parse blank-line separated schematics."""
    parsed = ParsedInput()
    block: list[str] = []
    for line in [*text.splitlines(), ""]:
        if line:
            block.append(line)
            continue
        if block:
            item = parse_schematic("\n".join(block))
            if isinstance(item, Lock):
                parsed.locks.append(item)
            else:
                parsed.keys.append(item)
            block = []
    return parsed


def part1(input: ParsedInput) -> int:
    """Number of key/lock pairs whose pins do not overlap."""
    return sum(
        1
        for key in input.keys
        for lock in input.locks
        if all(k + l <= _MAX_HEIGHT for k, l in zip(key.pins, lock.pins))
    )