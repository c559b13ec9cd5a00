"""2020 day 8: Handheld Halting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..errors import NoSolutionError, ParseError

OPCODES = ("nop", "acc", "jmp")


class Outcome(Enum):
    LOOP = "loop"
    TERMINATED = "terminated"
    FAILURE = "failure"


@dataclass(frozen=True)
class Instruction:
    op: str
    arg: int

    @classmethod
    def parse(cls, line: str) -> "Instruction":
        op, _, arg = line.strip().partition(" ")
        if op not in OPCODES:
            raise ParseError(f"invalid opcode {op!r}")
        try:
            return cls(op, int(arg))
        except ValueError as exc:
            raise ParseError(f"invalid argument {arg!r}") from exc


def parse_input(text: str) -> List[Instruction]:
    return [Instruction.parse(line) for line in text.splitlines() if line.strip()]


def run(program: List[Instruction]) -> Tuple[Outcome, int]:
    """Run until an instruction repeats or the pointer leaves the program.

    Landing exactly one past the last instruction is a normal termination;
    any other out-of-range pointer is a failure.
    """

    visited = [False] * len(program)
    ip = 0
    acc = 0
    while True:
        if ip == len(program):
            return Outcome.TERMINATED, acc
        if not 0 <= ip < len(program):
            return Outcome.FAILURE, acc
        if visited[ip]:
            return Outcome.LOOP, acc
        visited[ip] = True

        instr = program[ip]
        if instr.op == "acc":
            acc += instr.arg
            ip += 1
        elif instr.op == "jmp":
            ip += instr.arg
        else:
            ip += 1


def part1(text: str) -> int:
    outcome, acc = run(parse_input(text))
    if outcome is not Outcome.LOOP:
        raise NoSolutionError(f"program did not loop ({outcome.value})")
    return acc


def part2(text: str) -> int:
    program = parse_input(text)
    swap = {"nop": "jmp", "jmp": "nop"}
    for i, instr in enumerate(program):
        if instr.op not in swap:
            continue
        program[i] = Instruction(swap[instr.op], instr.arg)
        outcome, acc = run(program)
        if outcome is Outcome.TERMINATED:
            return acc
        program[i] = instr
    raise NoSolutionError("no single nop/jmp swap terminates the program")
