"""Public package interface for the Advent of Code solutions."""

from .cli import main
from .harness import AOC, Day, Part
from .registry import get_year

__all__ = ["AOC", "Day", "Part", "get_year", "main"]
