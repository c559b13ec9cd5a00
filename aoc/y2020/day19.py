"""2020 day 19: Monster Messages."""

from __future__ import annotations

import re
from typing import Dict, List, Pattern, Tuple

from ..errors import ParseError
from ..strtools import blocks, split_once


def parse_rules(text: str) -> Dict[str, str]:
    rules = {}
    for line in text.splitlines():
        name, rule = split_once(line, ":")
        if not rule:
            raise ParseError(f"invalid rule {line!r}")
        rules[name.strip()] = rule.strip()
    return rules


def build_regex(rules: Dict[str, str], root: str) -> str:
    """Expand rule ``root`` into an equivalent regular expression."""

    cache: Dict[str, str] = {}

    def expand(name: str) -> str:
        if name in cache:
            return cache[name]
        try:
            rule = rules[name]
        except KeyError:
            raise ParseError(f"rule {name} not found") from None
        if rule.startswith('"'):
            out = re.escape(rule.strip('"'))
        else:
            alternatives = ["".join(expand(ref) for ref in chain.split()) for chain in rule.split("|")]
            out = alternatives[0] if len(alternatives) == 1 else "(?:" + "|".join(alternatives) + ")"
        cache[name] = out
        return out

    return expand(root)


def _split_input(text: str) -> Tuple[Dict[str, str], List[str]]:
    sections = blocks(text)
    if len(sections) != 2:
        raise ParseError("expected rules and messages separated by a blank line")
    return parse_rules(sections[0]), [msg.strip() for msg in sections[1].splitlines()]


def part1(text: str) -> int:
    rules, messages = _split_input(text)
    pattern = re.compile(build_regex(rules, "0"))
    return sum(1 for msg in messages if pattern.fullmatch(msg))


def _matches_looping(msg: str, rule42: Pattern, rule31: Pattern) -> bool:
    """Match ``8: 42 | 42 8`` and ``11: 42 31 | 42 11 31`` as used by rule 0.

    The message must be ``42{n} 31{m}`` with ``n > m >= 1``.
    """

    pos = 0
    count42 = 0
    while True:
        match = rule42.match(msg, pos)
        if match is None:
            break
        pos = match.end()
        count42 += 1
    count31 = 0
    while True:
        match = rule31.match(msg, pos)
        if match is None:
            break
        pos = match.end()
        count31 += 1
    return pos == len(msg) and 1 <= count31 < count42


def part2(text: str) -> int:
    rules, messages = _split_input(text)
    rule42 = re.compile(build_regex(rules, "42"))
    rule31 = re.compile(build_regex(rules, "31"))
    return sum(1 for msg in messages if _matches_looping(msg, rule42, rule31))
