"""A three-bit computer and a search for the input that makes it print itself."""

from __future__ import annotations

import dataclasses
import re
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum

from advent2024.common import check, join, parse_int, split

_REGISTER_RE = re.compile(r"Register \w: (\d+)")
_PROGRAM_RE = re.compile(r"Program: (\d+,.*)")


class Opcode(IntEnum):
    """The eight instructions of the machine."""

    Adv = 0
    Bxl = 1
    Bst = 2
    Jnz = 3
    Bxc = 4
    Out = 5
    Bdv = 6
    Cdv = 7


@dataclass
class Computer:
    """Three registers, a program of 3-bit numbers and the output it produced."""

    register_a: int
    register_b: int
    register_c: int
    program: list[int]
    output: list[int] = field(default_factory=list, init=False)

    def execute(self, register_a: int | None = None) -> list[int]:
        """Run the program from the start, optionally setting register A first."""
        if register_a is not None:
            self.register_a = register_a
        self.output = []

        pointer = 0
        while pointer + 1 < len(self.program):
            try:
                opcode = Opcode(self.program[pointer])
            except ValueError:
                raise ValueError("Invalid opcode") from None
            operand = self.program[pointer + 1]
            jump = self._step(opcode, operand)
            pointer = pointer + 2 if jump is None else jump

        return list(self.output)

    def format_output(self) -> str:
        """The output as comma-separated digits."""
        return join(",", self.output)

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.register_a
        if operand == 5:
            return self.register_b
        if operand == 6:
            return self.register_c
        raise ValueError("Operand out of range!")

    def _divide(self, operand: int) -> int:
        return self.register_a >> self._combo(operand)

    def _step(self, opcode: Opcode, operand: int) -> int | None:
        match opcode:
            case Opcode.Adv:
                self.register_a = self._divide(operand)
            case Opcode.Bxl:
                self.register_b ^= operand
            case Opcode.Bst:
                self.register_b = self._combo(operand) % 8
            case Opcode.Jnz:
                if self.register_a != 0:
                    return operand
            case Opcode.Bxc:
                self.register_b ^= self.register_c
            case Opcode.Out:
                self.output.append(self._combo(operand) % 8)
            case Opcode.Bdv:
                self.register_b = self._divide(operand)
            case Opcode.Cdv:
                self.register_c = self._divide(operand)
        return None


@dataclass
class ParsedInput:
    """The computer described by the puzzle input."""

    computer: Computer


def parse_register_line(line: str) -> int:
    """Parse a ``Register X: N`` line."""
    match = _REGISTER_RE.search(line)
    check(match is not None, "Regex did not match")
    return parse_int(match.group(1))


def parse_program_line(line: str) -> list[int]:
    """Parse a ``Program: a,b,c,...`` line."""
    match = _PROGRAM_RE.search(line)
    check(match is not None, "Regex did not match")
    return [parse_int(part) for part in split(match.group(1), ",")]


def parse_input(text: str) -> ParsedInput:
    """Parse three register lines, a blank line and the program line."""
    lines = text.splitlines()
    lines += [""] * (5 - len(lines))
    register_a, register_b, register_c = (parse_register_line(line) for line in lines[:3])
    program = parse_program_line(lines[4])
    return ParsedInput(Computer(register_a, register_b, register_c, program))


def part1(input: ParsedInput) -> str:
    """Run the program and return its output; the input is left untouched."""
    computer = dataclasses.replace(input.computer)
    computer.execute()
    return computer.format_output()


def part2(input: ParsedInput) -> int:
    """Lowest value of register A that makes the program output itself.

    Register A is built three bits at a time: each new low triple controls the
    first output digit, so the program is matched from its last digit back.
    """
    computer = dataclasses.replace(input.computer)
    program = computer.program

    candidates: deque[int] = deque([0])
    solutions: set[int] = set()

    for target in reversed(program):
        next_candidates: deque[int] = deque()
        while candidates:
            value = candidates.popleft()
            for bits in range(8):
                test_value = (value << 3) | bits
                output = computer.execute(test_value)
                if output == program:
                    solutions.add(test_value)
                    continue
                if output and output[0] == target:
                    next_candidates.append(test_value)
        candidates = next_candidates

    check(bool(solutions), "No solutions found")
    return min(solutions)