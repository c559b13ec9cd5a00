"""2020 day 22: Crab Combat."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Set, Tuple

from ..errors import ParseError
from ..strtools import blocks

Deck = Deque[int]


def parse_input(text: str) -> Tuple[Deck, Deck]:
    players = blocks(text)
    if len(players) != 2:
        raise ParseError(f"expected 2 players, found {len(players)}")
    decks = []
    for player in players:
        try:
            decks.append(deque(int(line) for line in player.splitlines()[1:]))
        except ValueError as exc:
            raise ParseError("invalid card") from exc
    return decks[0], decks[1]


def score(deck: Iterable[int]) -> int:
    cards = list(deck)
    return sum(card * (len(cards) - i) for i, card in enumerate(cards))


def play_combat(p1: Deck, p2: Deck) -> Deck:
    """Play plain Combat and return the winner's deck."""

    while p1 and p2:
        a, b = p1.popleft(), p2.popleft()
        if a > b:
            p1.extend((a, b))
        else:
            p2.extend((b, a))
    return p1 or p2


def play_recursive(p1: Deck, p2: Deck) -> Tuple[int, Deck]:
    """Play Recursive Combat; return ``(winner, winning deck)``.

    A repeated configuration within one game ends it in player 1's favour.
    Sub-games are played with copies of the next ``n`` cards of each deck.
    """

    seen: Set[Tuple[Tuple[int, ...], Tuple[int, ...]]] = set()
    while p1 and p2:
        state = (tuple(p1), tuple(p2))
        if state in seen:
            return 1, p1
        seen.add(state)

        a, b = p1.popleft(), p2.popleft()
        if len(p1) >= a and len(p2) >= b:
            sub1, sub2 = deque(list(p1)[:a]), deque(list(p2)[:b])
            if max(sub1) > max(sub2):
                # player 1 holds the highest card and can never lose it
                winner = 1
            else:
                winner, _ = play_recursive(sub1, sub2)
        else:
            winner = 1 if a > b else 2

        if winner == 1:
            p1.extend((a, b))
        else:
            p2.extend((b, a))
    return (1, p1) if p1 else (2, p2)


def part1(text: str) -> int:
    return score(play_combat(*parse_input(text)))


def part2(text: str) -> int:
    _, deck = play_recursive(*parse_input(text))
    return score(deck)
