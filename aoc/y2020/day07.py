"""2020 day 7: Handy Haversacks."""

from __future__ import annotations

from collections import deque
from functools import lru_cache
from typing import Dict, List, Set, Tuple

from ..errors import ParseError
from ..strtools import split_once

TARGET = "shiny gold"

BagGraph = Dict[str, List[Tuple[int, str]]]


def parse_input(text: str) -> BagGraph:
    """Map each bag colour to the ``(count, colour)`` pairs it must contain."""

    graph: BagGraph = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        outer, rule = split_once(line, " bags contain ")
        if not rule:
            raise ParseError(f"invalid line {line!r}")
        contents: List[Tuple[int, str]] = []
        for item in rule.rstrip(".").split(", "):
            if item == "no other bags":
                continue
            item = item.rstrip("s")
            if not item.endswith(" bag"):
                raise ParseError(f"invalid contained bag {item!r}")
            count, _, inner = item[: -len(" bag")].partition(" ")
            if not count.isdigit() or not inner:
                raise ParseError(f"invalid contained bag {item!r}")
            contents.append((int(count), inner))
        graph[outer] = contents

    for outer, contents in graph.items():
        for _, inner in contents:
            if inner not in graph:
                raise ParseError(f"{outer} contains unknown bag {inner!r}")
    return graph


def containers_of(graph: BagGraph, bag: str) -> Set[str]:
    """Every bag that eventually holds ``bag``."""

    parents: Dict[str, Set[str]] = {}
    for outer, contents in graph.items():
        for _, inner in contents:
            parents.setdefault(inner, set()).add(outer)

    found: Set[str] = set()
    queue = deque([bag])
    while queue:
        for outer in parents.get(queue.popleft(), ()):
            if outer not in found:
                found.add(outer)
                queue.append(outer)
    return found


def bags_inside(graph: BagGraph, bag: str) -> int:
    """Total number of bags nested inside ``bag``."""

    @lru_cache(maxsize=None)
    def count(colour: str) -> int:
        return sum(n * (1 + count(inner)) for n, inner in graph[colour])

    return count(bag)


def part1(text: str) -> int:
    return len(containers_of(parse_input(text), TARGET))


def part2(text: str) -> int:
    graph = parse_input(text)
    if TARGET not in graph:
        raise ParseError(f"no rule for {TARGET} bags")
    return bags_inside(graph, TARGET)
