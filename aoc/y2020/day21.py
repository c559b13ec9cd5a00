"""2020 day 21: Allergen Assessment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Set

from ..errors import NoSolutionError, ParseError
from ..strtools import split_once


@dataclass(frozen=True)
class Recipe:
    ingredients: FrozenSet[str]
    allergens: FrozenSet[str]

    @classmethod
    def parse(cls, line: str) -> "Recipe":
        ingredients, allergens = split_once(line.strip(), " (contains ")
        if allergens and not allergens.endswith(")"):
            raise ParseError(f"invalid recipe {line!r}")
        return cls(
            frozenset(ingredients.split()),
            frozenset(a.strip() for a in allergens.rstrip(")").split(",") if a.strip()),
        )


def parse_input(text: str) -> List[Recipe]:
    return [Recipe.parse(line) for line in text.splitlines() if line.strip()]


def candidates(recipes: List[Recipe]) -> Dict[str, Set[str]]:
    """Map each allergen to the ingredients present in every recipe listing it."""

    found: Dict[str, Set[str]] = {}
    for recipe in recipes:
        for allergen in recipe.allergens:
            if allergen in found:
                found[allergen] &= recipe.ingredients
            else:
                found[allergen] = set(recipe.ingredients)
    return found


def part1(text: str) -> int:
    recipes = parse_input(text)
    suspicious = set().union(*candidates(recipes).values())
    return sum(len(recipe.ingredients - suspicious) for recipe in recipes)


def resolve(options: Dict[str, Set[str]]) -> Dict[str, str]:
    """Pin allergens with a single candidate until every allergen is known."""

    options = {allergen: set(ingredients) for allergen, ingredients in options.items()}
    resolved: Dict[str, str] = {}
    while options:
        known = [(a, next(iter(i))) for a, i in options.items() if len(i) == 1]
        if not known:
            raise NoSolutionError(f"cannot pin allergens {sorted(options)}")
        for allergen, ingredient in known:
            resolved[allergen] = ingredient
            del options[allergen]
            for rest in options.values():
                rest.discard(ingredient)
    return resolved


def part2(text: str) -> str:
    resolved = resolve(candidates(parse_input(text)))
    return ",".join(resolved[allergen] for allergen in sorted(resolved))
