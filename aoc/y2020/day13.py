"""2020 day 13: Shuttle Search."""

from __future__ import annotations

from math import gcd
from typing import List, Tuple

from ..errors import NoSolutionError, ParseError
from ..strtools import split_once


def _schedule(text: str) -> Tuple[str, List[Tuple[int, int]]]:
    earliest, buses = split_once(text.strip(), "\n")
    schedule = []
    for offset, bus in enumerate(buses.strip().split(",")):
        if bus == "x":
            continue
        try:
            schedule.append((offset, int(bus)))
        except ValueError as exc:
            raise ParseError(f"invalid bus id {bus!r}") from exc
    if not schedule:
        raise ParseError("no buses in service")
    return earliest, schedule


def wait_time(time: int, bus: int) -> int:
    return -time % bus


def part1(text: str) -> int:
    earliest, schedule = _schedule(text)
    try:
        time = int(earliest)
    except ValueError as exc:
        raise ParseError(f"invalid timestamp {earliest!r}") from exc
    bus = min((bus for _, bus in schedule), key=lambda bus: wait_time(time, bus))
    return bus * wait_time(time, bus)


def earliest_alignment(schedule: List[Tuple[int, int]]) -> int:
    """Smallest ``t`` with ``(t + offset) % bus == 0`` for every bus.

    Sieves one bus at a time, stepping by the product of the buses already
    aligned. This only works when the bus ids are pairwise coprime.
    """

    timestamp, step = 0, 1
    for offset, bus in schedule:
        if gcd(step, bus) != 1:
            raise NoSolutionError(f"bus {bus} is not coprime with the others")
        while (timestamp + offset) % bus:
            timestamp += step
        step *= bus
    return timestamp


def part2(text: str) -> int:
    _, schedule = _schedule(text)
    return earliest_alignment(schedule)
