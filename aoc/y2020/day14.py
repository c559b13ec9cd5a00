"""2020 day 14: Docking Data."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import product
from typing import Dict, Iterator, List, Tuple, Union

from ..errors import ParseError

MEM_RE = re.compile(r"^mem\[(\d+)\]\s*=\s*(\d+)$")
MASK_RE = re.compile(r"^mask\s*=\s*([01X]{36})$")


@dataclass(frozen=True)
class Mask:
    ones: int = 0
    zeros: int = 0
    floating: Tuple[int, ...] = ()

    @classmethod
    def parse(cls, mask: str) -> "Mask":
        ones = zeros = 0
        floating = []
        for i, bit in enumerate(reversed(mask)):
            if bit == "1":
                ones |= 1 << i
            elif bit == "0":
                zeros |= 1 << i
            else:
                floating.append(1 << i)
        return cls(ones, zeros, tuple(floating))

    def apply(self, value: int) -> int:
        return (value & ~self.zeros) | self.ones

    def decode(self, address: int) -> Iterator[int]:
        """Every address produced by the floating bits."""

        address |= self.ones
        for bits in product((0, 1), repeat=len(self.floating)):
            out = address
            for bit, flag in zip(self.floating, bits):
                out = out | bit if flag else out & ~bit
            yield out


@dataclass(frozen=True)
class Write:
    address: int
    value: int


Instruction = Union[Mask, Write]


@dataclass
class Computer:
    mask: Mask = field(default_factory=Mask)
    memory: Dict[int, int] = field(default_factory=dict)

    def write_masked(self, address: int, value: int) -> None:
        self.memory[address] = self.mask.apply(value)

    def write_decoded(self, address: int, value: int) -> None:
        for target in self.mask.decode(address):
            self.memory[target] = value


def parse_input(text: str) -> List[Instruction]:
    program: List[Instruction] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        mask = MASK_RE.match(line)
        if mask is not None:
            program.append(Mask.parse(mask.group(1)))
            continue
        mem = MEM_RE.match(line)
        if mem is None:
            raise ParseError(f"invalid instruction {line!r}")
        program.append(Write(int(mem.group(1)), int(mem.group(2))))
    return program


def _run(text: str, decoder: bool) -> int:
    computer = Computer()
    for instr in parse_input(text):
        if isinstance(instr, Mask):
            computer.mask = instr
        elif decoder:
            computer.write_decoded(instr.address, instr.value)
        else:
            computer.write_masked(instr.address, instr.value)
    return sum(computer.memory.values())


def part1(text: str) -> int:
    return _run(text, decoder=False)


def part2(text: str) -> int:
    return _run(text, decoder=True)
