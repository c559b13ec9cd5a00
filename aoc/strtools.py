"""aoc.strtools
================

Small string helpers shared by the puzzle parsers.
"""

from __future__ import annotations

from typing import List, Tuple

from .errors import ParseError


def split_once(text: str, delimiter: str) -> Tuple[str, str]:
    """Split ``text`` into exactly two substrings at the first ``delimiter``.

    If the delimiter does not occur, ``(text, "")`` is returned. An empty
    delimiter matches at the start, giving ``("", text)``.
    """

    if not delimiter:
        return "", text
    head, found, tail = text.partition(delimiter)
    if not found:
        return text, ""
    return head, tail


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise ParseError(f"invalid integer {token!r}") from exc


def to_nums(text: str) -> List[int]:
    """Parse one integer per line, ignoring blank lines."""

    return [_parse_int(line.strip()) for line in text.splitlines() if line.strip()]


def comma_nums(text: str) -> List[int]:
    """Parse a single comma separated list of integers."""

    stripped = text.strip()
    if not stripped:
        return []
    return [_parse_int(token.strip()) for token in stripped.split(",")]


def blocks(text: str) -> List[str]:
    """Return the blank-line separated groups of ``text``."""

    groups: List[str] = []
    current: List[str] = []
    for line in text.splitlines():
        if line.strip():
            current.append(line.rstrip())
        elif current:
            groups.append("\n".join(current))
            current = []
    if current:
        groups.append("\n".join(current))
    return groups


__all__ = ["split_once", "to_nums", "comma_nums", "blocks"]
