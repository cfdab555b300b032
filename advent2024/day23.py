"""LAN party: triangles and the largest clique in a network of computers."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent2024.common import join


@dataclass(eq=False)
class Computer:
    """A named computer and the computers it is directly connected to."""

    name: str
    connections: list[Computer] = field(default_factory=list, repr=False)
    connection_names: set[str] = field(default_factory=set, repr=False)

    def add_connection(self, other: Computer) -> None:
        """Record a direct link to ``other``."""
        self.connections.append(other)
        self.connection_names.add(other.name)

    def is_connected_to(self, name: str) -> bool:
        return name in self.connection_names


@dataclass
class ParsedInput:
    """The network links as pairs of computer names."""

    connections: list[tuple[str, str]] = field(default_factory=list)


def parse_input(text: str) -> ParsedInput:
    """Parse ``ab-cd`` lines into name pairs."""
    return ParsedInput([(line[0:2], line[3:5]) for line in text.splitlines()])


def populate_connections(input: ParsedInput) -> dict[str, Computer]:
    """Build every computer with its links in both directions."""
    computers: dict[str, Computer] = {}
    for first_name, second_name in input.connections:
        first = computers.setdefault(first_name, Computer(first_name))
        second = computers.setdefault(second_name, Computer(second_name))
        first.add_connection(second)
        second.add_connection(first)
    return computers


def connected_triplets(computers: dict[str, Computer]) -> set[tuple[str, str, str]]:
    """Every set of three mutually connected computers, as sorted name tuples."""
    triplets: set[tuple[str, str, str]] = set()
    for first in computers.values():
        for second in first.connections:
            for third in second.connections:
                if first.is_connected_to(third.name):
                    triplets.add(tuple(sorted((first.name, second.name, third.name))))
    return triplets


def maximum_clique(computers: dict[str, Computer]) -> list[str]:
    """The names of a largest set of mutually connected computers, sorted."""
    neighbours = {name: computer.connection_names for name, computer in computers.items()}
    best: set[str] = set()

    def expand(r: set[str], p: set[str], x: set[str]) -> None:
        nonlocal best
        if not p and not x:
            if len(r) > len(best):
                best = r
            return
        pivot = max(p | x, key=lambda v: len(neighbours[v] & p))
        for v in list(p - neighbours[pivot]):
            expand(r | {v}, p & neighbours[v], x & neighbours[v])
            p.remove(v)
            x.add(v)

    expand(set(), set(computers), set())
    return sorted(best)


def part1(input: ParsedInput) -> int:
    """Number of triangles holding a computer whose name starts with 't'."""
    triplets = connected_triplets(populate_connections(input))
    return sum(1 for triplet in triplets if any(name.startswith("t") for name in triplet))


def part2(input: ParsedInput) -> str:
    """The LAN party password: the largest clique's names, sorted and comma-joined."""
    return join(",", maximum_clique(populate_connections(input)))