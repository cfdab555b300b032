import pytest

from advent2024.common import PuzzleAssertionError
from advent2024.day17 import (
    Computer,
    Opcode,
    ParsedInput,
    parse_input,
    parse_program_line,
    parse_register_line,
    part1,
    part2,
)

EXAMPLE = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n"

EXAMPLE2 = "Register A: 2024\nRegister B: 0\nRegister C: 0\n\nProgram: 0,3,5,4,3,0\n"


def test_parse_input():
    computer = parse_input(EXAMPLE).computer
    assert (computer.register_a, computer.register_b, computer.register_c) == (729, 0, 0)
    assert computer.program == [0, 1, 5, 4, 3, 0]


def test_parse_register_line():
    assert parse_register_line("Register B: 42") == 42


def test_parse_register_line_rejects_garbage():
    with pytest.raises(PuzzleAssertionError):
        parse_register_line("Register A: x")


def test_parse_program_line():
    assert parse_program_line("Program: 2,4,1,5") == [2, 4, 1, 5]


def test_parse_input_too_short():
    with pytest.raises(PuzzleAssertionError):
        parse_input("Register A: 1\nRegister B: 0\nRegister C: 0\n")


def test_part1_example():
    assert part1(parse_input(EXAMPLE)) == "4,6,3,5,6,3,5,2,1,0"


def test_part1_does_not_change_input():
    parsed = parse_input(EXAMPLE)
    part1(parsed)
    assert parsed.computer.register_a == 729
    assert parsed.computer.output == []


def test_part2_example():
    assert part2(parse_input(EXAMPLE2)) == 117440


def test_part1_then_part2_on_same_input():
    parsed = parse_input(EXAMPLE2)
    assert part1(parsed) == "5,7,3,0"
    assert part2(parsed) == 117440


def test_solution_reproduces_program():
    computer = parse_input(EXAMPLE2).computer
    assert computer.execute(117440) == [0, 3, 5, 4, 3, 0]


def test_bst_uses_register_c():
    computer = Computer(0, 0, 9, [2, 6])
    computer.execute()
    assert computer.register_b == 1


def test_out_sequence():
    computer = Computer(10, 0, 0, [5, 0, 5, 1, 5, 4])
    assert computer.execute() == [0, 1, 2]
    assert computer.format_output() == "0,1,2"


def test_loop_until_a_is_zero():
    computer = Computer(2024, 0, 0, [0, 1, 5, 4, 3, 0])
    assert computer.execute() == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert computer.register_a == 0


def test_bxl():
    computer = Computer(0, 29, 0, [1, 7])
    computer.execute()
    assert computer.register_b == 26


def test_bxc():
    computer = Computer(0, 2024, 43690, [4, 0])
    computer.execute()
    assert computer.register_b == 44354


def test_bdv_and_cdv():
    computer = Computer(64, 0, 0, [6, 2, 7, 3])
    computer.execute()
    assert computer.register_b == 16
    assert computer.register_c == 8
    assert computer.register_a == 64


def test_execute_override_register_a():
    computer = Computer(1, 0, 0, [5, 4])
    assert computer.execute(13) == [5]
    assert computer.register_a == 13


def test_invalid_combo_operand():
    with pytest.raises(ValueError):
        Computer(0, 0, 0, [5, 7]).execute()


def test_invalid_opcode():
    with pytest.raises(ValueError):
        Computer(0, 0, 0, [8, 0]).execute()


def test_opcode_values():
    assert Opcode(3) is Opcode.Jnz
    assert Opcode.Cdv == 7


def test_part2_without_solution():
    parsed = ParsedInput(Computer(0, 0, 0, [5, 0]))
    with pytest.raises(PuzzleAssertionError):
        part2(parsed)