"""2019 day 1: The Tyranny of the Rocket Equation."""

from __future__ import annotations

from ..strtools import to_nums


def fuel_for(mass: int) -> int:
    """Fuel needed to lift ``mass``; tiny masses need none."""

    return max(mass // 3 - 2, 0)


def total_fuel_for(mass: int) -> int:
    """Fuel for ``mass`` plus the fuel needed to carry that fuel."""

    total = 0
    fuel = fuel_for(mass)
    while fuel > 0:
        total += fuel
        fuel = fuel_for(fuel)
    return total


def part1(text: str) -> int:
    return sum(fuel_for(mass) for mass in to_nums(text))


def part2(text: str) -> int:
    return sum(total_fuel_for(mass) for mass in to_nums(text))
