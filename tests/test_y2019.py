from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc.errors import IntcodeError, NoSolutionError, ParseError
from aoc.types import Point
from aoc.y2019 import day01, day02, day03


@pytest.mark.parametrize("mass, fuel", [(12, 2), (14, 2), (1969, 654), (100756, 33583), (5, 0)])
def test_fuel_for(mass, fuel):
    assert day01.fuel_for(mass) == fuel


def test_fuel_for_fuel():
    assert day01.total_fuel_for(14) == 2
    assert day01.total_fuel_for(1969) == 966
    assert day01.total_fuel_for(100756) == 50346
    assert day01.part1("12\n14\n1969\n100756\n") == 2 + 2 + 654 + 33583


def test_intcode_example():
    memory = [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50]
    assert day02.run_intcode(memory) == 3500
    assert memory[3] == 70


def test_intcode_small_programs():
    assert day02.run_intcode([1, 0, 0, 0, 99]) == 2
    assert day02.run_intcode([1, 1, 1, 4, 99, 5, 6, 0, 99]) == 30
    # write target outside memory
    assert day02.run_intcode([1, 0, 0, 50, 99]) is None
    # operand read outside memory
    assert day02.run_intcode([1, 50, 0, 0, 99]) is None


def test_intcode_bad_opcode():
    with pytest.raises(IntcodeError):
        day02.run_intcode([7, 0, 0, 0, 99])


def test_intcode_noun_verb_search():
    # mem[0] = mem[noun] * mem[verb]; 13 * 17 = 221 only at noun=9, verb=10
    program = "2,0,0,0,99,0,0,0,0,13,17"
    assert day02.part2(program, target=221) == 910


def test_intcode_noun_verb_search_exhausted():
    with pytest.raises(NoSolutionError):
        day02.part2("1,0,0,0,99", target=12345)


def test_parse_lines():
    lines = day03.parse_lines("R3,U1,L2,D1")
    assert lines == [
        day03.Line.between(Point(0, 0), Point(3, 0)),
        day03.Line.between(Point(3, 0), Point(3, 1)),
        day03.Line.between(Point(3, 1), Point(1, 1)),
        day03.Line.between(Point(1, 1), Point(1, 0)),
    ]
    assert lines[2].start == Point(1, 1)


@pytest.mark.parametrize(
    "wires, distance, steps",
    [
        ("R8,U5,L5,D3\nU7,R6,D4,L4", 6, 30),
        ("R75,D30,R83,U83,L12,D49,R71,U7,L72\nU62,R66,U55,R34,D71,R55,D58,R83", 159, 610),
        ("R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51\nU98,R91,D20,R16,D67,R40,U7,R15,U6,R7", 135, 410),
    ],
)
def test_crossed_wires(wires, distance, steps):
    assert day03.part1(wires) == distance
    assert day03.part2(wires) == steps


def test_crossed_wires_bad_direction():
    with pytest.raises(ParseError):
        day03.part1("X8,U5\nU7,R6")
