"""2020 day 18: Operation Order.

Expressions are evaluated with precedence climbing over a configurable
precedence table. Part one gives ``+`` and ``*`` equal precedence (strict left
to right); part two makes ``+`` bind tighter than ``*``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Union

from ..errors import ParseError

OPERATORS: Dict[str, Callable[[int, int], int]] = {"+": operator.add, "*": operator.mul}
FLAT = {"+": 1, "*": 1}
ADDITION_FIRST = {"+": 2, "*": 1}


@dataclass(frozen=True)
class Token:
    kind: str
    value: Union[int, str]


def tokenize(expr: str) -> Iterator[Token]:
    i = 0
    while i < len(expr):
        ch = expr[i]
        if ch.isspace():
            i += 1
        elif ch.isdigit():
            start = i
            while i < len(expr) and expr[i].isdigit():
                i += 1
            yield Token("num", int(expr[start:i]))
        elif ch in OPERATORS:
            yield Token("op", ch)
            i += 1
        elif ch in "()":
            yield Token(ch, ch)
            i += 1
        else:
            raise ParseError(f"unexpected character {ch!r} in {expr!r}")


class _Parser:
    def __init__(self, tokens: List[Token], precedence: Dict[str, int]) -> None:
        self.tokens = tokens
        self.precedence = precedence
        self.pos = 0

    def peek(self) -> Union[Token, None]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise ParseError("unexpected end of expression")
        self.pos += 1
        return tok

    def operand(self) -> int:
        tok = self.take()
        if tok.kind == "num":
            return int(tok.value)
        if tok.kind == "(":
            value = self.expression(0)
            if self.take().kind != ")":
                raise ParseError("unbalanced parentheses")
            return value
        raise ParseError(f"expected a number, got {tok.value!r}")

    def expression(self, min_prec: int) -> int:
        left = self.operand()
        while True:
            tok = self.peek()
            if tok is None or tok.kind != "op" or self.precedence[str(tok.value)] < min_prec:
                return left
            self.take()
            prec = self.precedence[str(tok.value)]
            right = self.expression(prec + 1)
            left = OPERATORS[str(tok.value)](left, right)


def evaluate(expr: str, precedence: Dict[str, int] = FLAT) -> int:
    parser = _Parser(list(tokenize(expr)), precedence)
    value = parser.expression(0)
    if parser.peek() is not None:
        raise ParseError(f"trailing input in {expr!r}")
    return value


def part1(text: str) -> int:
    return sum(evaluate(line) for line in text.splitlines() if line.strip())


def part2(text: str) -> int:
    return sum(evaluate(line, ADDITION_FIRST) for line in text.splitlines() if line.strip())
