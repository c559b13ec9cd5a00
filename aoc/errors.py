"""aoc.errors
=============

Exception hierarchy shared by the harness and the individual solvers. Solvers
raise these; :class:`aoc.harness.Part` turns them into displayable strings.
"""

from __future__ import annotations


class AocError(Exception):
    """Base class for every error raised by this package."""


class ParseError(AocError):
    """Puzzle input did not match the expected format."""


class NoSolutionError(AocError):
    """A search over the input finished without finding an answer."""


class IntcodeError(AocError):
    """The Intcode machine hit an invalid opcode."""


class UnknownYearError(AocError, KeyError):
    """No solutions are registered for the requested year."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownDayError(AocError, KeyError):
    """The requested day is not registered for a year."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownPartError(AocError, KeyError):
    """The requested part is not registered for a day."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


__all__ = [
    "AocError",
    "ParseError",
    "NoSolutionError",
    "IntcodeError",
    "UnknownYearError",
    "UnknownDayError",
    "UnknownPartError",
]
