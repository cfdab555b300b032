"""Crossed wires: simulating a gate circuit and untangling a ripple-carry adder."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from advent2024.common import check, parse_int

_OPERATION_RE = re.compile(r"([a-z0-9]+) (AND|OR|XOR) ([a-z0-9]+) -> ([a-z0-9]+)")

# Output wires found swapped by inspecting the renamed circuit of the real input.
_SWAPPED_OUTPUTS = (("z12", "qdg"), ("z19", "vvf"), ("fgn", "dck"), ("z37", "nvh"))


class LogicGate(Enum):
    """The gate types a wire operation can use."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    @staticmethod
    def parse(value: str) -> LogicGate:
        """Parse a gate name; raise ValueError for anything else."""
        try:
            return LogicGate(value)
        except ValueError:
            raise ValueError(f"Invalid logic gate: {value!r}") from None

    def apply(self, a: bool, b: bool) -> bool:
        if self is LogicGate.AND:
            return a and b
        if self is LogicGate.OR:
            return a or b
        return a != b

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Wire:
    """A named wire with its initial signal, if it has one."""

    name: str
    value: bool | None = None


@dataclass(eq=False)
class WireOperation:
    """A gate reading two wires and driving a third."""

    wire_1: Wire
    wire_2: Wire
    wire_3: Wire
    gate: LogicGate

    def __str__(self) -> str:
        return f"{self.wire_1.name} {self.gate} {self.wire_2.name} -> {self.wire_3.name}"


@dataclass
class ParsedInput:
    """All wires by name and the gates connecting them."""

    wires: dict[str, Wire] = field(default_factory=dict)
    wire_operations: list[WireOperation] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Parse initial wire values, a blank line, then gate lines."""
    lines = iter(text.splitlines())
    wires: dict[str, Wire] = {}

    for line in lines:
        if not line:
            break
        check(len(line) > 5 and line[5] in "01", "failed to get wire initial state")
        name = line[:3]
        wires[name] = Wire(name, line[5] == "1")

    def wire(name: str) -> Wire:
        return wires.setdefault(name, Wire(name))

    operations = []
    for line in lines:
        match = _OPERATION_RE.search(line)
        check(match is not None, "regex did not match")
        first, gate, second, output = match.groups()
        operations.append(
            WireOperation(wire(first), wire(second), wire(output), LogicGate.parse(gate))
        )

    return ParsedInput(wires, operations)


def part1(input: ParsedInput) -> int:
    """The number formed by the z wires once the circuit settles (z00 is bit 0)."""
    values: dict[Wire, bool | None] = {wire: wire.value for wire in input.wires.values()}
    z_wires = sorted(
        (wire for wire in input.wires.values() if wire.name.startswith("z")),
        key=lambda wire: wire.name,
    )

    while any(values.get(wire) is None for wire in z_wires):
        progressed = False
        for operation in input.wire_operations:
            a = values.get(operation.wire_1)
            b = values.get(operation.wire_2)
            if a is None or b is None:
                continue
            if values.get(operation.wire_3) is None:
                progressed = True
            values[operation.wire_3] = operation.gate.apply(a, b)
        if not progressed:
            raise RuntimeError("Circuit cannot drive every z wire")

    return sum(int(bool(values[wire])) << bit for bit, wire in enumerate(z_wires))


def walk_tree(
    operation: WireOperation, operations_by_output_wire: dict[str, WireOperation]
) -> list[WireOperation]:
    """``operation`` followed by the operations feeding it, depth first."""
    found = [operation]
    for source in (operation.wire_1, operation.wire_2):
        parent = operations_by_output_wire.get(source.name)
        if parent is not None:
            found.extend(walk_tree(parent, operations_by_output_wire))
    return found


def rename_carry(operations: list[WireOperation]) -> None:
    """Rename carry wires, given XOR/AND wires are already named, in dependency order."""
    for operation in operations:
        names = (operation.wire_1.name, operation.wire_2.name)
        operand_1, operand_2 = min(names), max(names)

        if (
            operand_1.startswith("CARRY")
            and operand_2.startswith("XOR")
            and operation.gate is LogicGate.AND
        ):
            number_1 = operand_1[5:7]
            number_2 = operand_2[3:5]
            check(parse_int(number_1) == parse_int(number_2) - 1, "inconsistent N")
            operation.wire_3.name = "CARRY_INTERMEDIATE" + number_2

        if (
            operand_1.startswith("AND")
            and operand_2.startswith("CARRY_INTERMEDIATE")
            and operation.gate is LogicGate.OR
        ):
            number_1 = operand_1[3:5]
            number_2 = operand_2[18:20]
            check(parse_int(number_1) == parse_int(number_2), "inconsistent N")
            operation.wire_3.name = "CARRY" + number_1


def swap_output_wires(
    operations: list[WireOperation], wire_1_name: str, wire_2_name: str
) -> None:
    """Exchange the output wires of the operations driving the two named wires."""
    first = next((op for op in operations if op.wire_3.name == wire_1_name), None)
    check(first is not None, "could not find wire_1")
    second = next((op for op in operations if op.wire_3.name == wire_2_name), None)
    check(second is not None, "could not find wire_2")
    first.wire_3, second.wire_3 = second.wire_3, first.wire_3


def part2(input: ParsedInput) -> list[WireOperation]:
    """Repair the known swapped outputs and rename wires by their adder role.

    The operations are returned, and printed, in dependency order.
    """
    operations_by_output_wire: dict[str, WireOperation] = {}
    for operation in input.wire_operations:
        check(
            operation.wire_3.name not in operations_by_output_wire,
            "output wire was not unique",
        )
        operations_by_output_wire[operation.wire_3.name] = operation

    z_operations = sorted(
        (op for op in input.wire_operations if op.wire_3.name.startswith("z")),
        key=lambda op: op.wire_3.name,
    )

    in_order: list[WireOperation] = []
    already_added: set[str] = set()
    for operation in z_operations:
        for op in reversed(walk_tree(operation, operations_by_output_wire)):
            text = str(op)
            if text in already_added:
                continue
            in_order.append(op)
            already_added.add(text)

    for first, second in _SWAPPED_OUTPUTS:
        swap_output_wires(in_order, first, second)

    for operation in in_order:
        names = (operation.wire_1.name, operation.wire_2.name)
        operand_1, operand_2 = min(names), max(names)
        if operand_1.startswith("x") and operand_2.startswith("y"):
            operation.wire_3.name = str(operation.gate) + operand_1[1:3]

    and_00 = next((op for op in in_order if op.wire_3.name == "AND00"), None)
    check(and_00 is not None, "failed to get AND00")
    and_00.wire_3.name = "CARRY00"

    rename_carry(in_order)

    for operation in in_order:
        print(operation)

    return in_order