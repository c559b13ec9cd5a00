"""2020 day 25: Combo Breaker."""

from __future__ import annotations

from typing import List, Tuple

from ..constants import HANDSHAKE_MODULUS, HANDSHAKE_SUBJECT
from ..errors import NoSolutionError, ParseError
from ..strtools import to_nums


def find_loop_size(public_keys: List[int], subject: int = HANDSHAKE_SUBJECT) -> Tuple[int, int]:
    """Return ``(public key, loop size)`` for whichever key is cracked first."""

    value = 1
    for loop_size in range(1, HANDSHAKE_MODULUS):
        value = value * subject % HANDSHAKE_MODULUS
        if value in public_keys:
            return value, loop_size
    raise NoSolutionError("cannot find private key")


def part1(text: str) -> int:
    keys = to_nums(text)
    if len(keys) != 2:
        raise ParseError(f"expected 2 public keys, found {len(keys)}")
    cracked, loop_size = find_loop_size(keys)
    other = keys[1] if cracked == keys[0] else keys[0]
    return pow(other, loop_size, HANDSHAKE_MODULUS)
