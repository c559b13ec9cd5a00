"""2019 day 2: 1202 Program Alarm.

A minimal Intcode machine: opcodes 1 (add) and 2 (multiply) read two operands
by address and store at a third, advancing four cells; 99 halts.
"""

from __future__ import annotations

from typing import List, Optional

from ..constants import INTCODE_TARGET
from ..errors import IntcodeError, NoSolutionError
from ..strtools import comma_nums

ADD = 1
MUL = 2
HALT = 99


def run_intcode(memory: List[int]) -> Optional[int]:
    """Execute ``memory`` in place and return the value left at address 0.

    ``None`` is returned when the program reads or writes outside memory.
    """

    size = len(memory)
    for ip in range(0, size, 4):
        opcode = memory[ip]
        if opcode == HALT:
            break
        if ip + 3 >= size:
            return None
        left, right, out = memory[ip + 1 : ip + 4]
        if not (0 <= left < size and 0 <= right < size and 0 <= out < size):
            return None
        if opcode == ADD:
            memory[out] = memory[left] + memory[right]
        elif opcode == MUL:
            memory[out] = memory[left] * memory[right]
        else:
            raise IntcodeError(f"invalid opcode {opcode} at address {ip}")
    return memory[0] if memory else None


def run_with(program: List[int], noun: int, verb: int) -> Optional[int]:
    memory = list(program)
    memory[1] = noun
    memory[2] = verb
    return run_intcode(memory)


def part1(text: str) -> Optional[int]:
    return run_with(comma_nums(text), 12, 2)


def part2(text: str, target: int = INTCODE_TARGET) -> int:
    program = comma_nums(text)
    for noun in range(len(program)):
        for verb in range(len(program)):
            try:
                output = run_with(program, noun, verb)
            except IntcodeError:
                continue
            if output == target:
                return 100 * noun + verb
    raise NoSolutionError(f"no noun/verb pair produces {target}")
