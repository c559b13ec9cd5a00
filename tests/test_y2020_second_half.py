from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from aoc.errors import NoSolutionError, ParseError
from aoc.y2020 import (
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)

DATA = Path(__file__).resolve().parent / "data"


# ---------------------------------------------------------------------------
# Days 13-16
# ---------------------------------------------------------------------------
def test_shuttle_search():
    text = "939\n7,13,x,x,59,x,31,19"
    assert day13.part1(text) == 295
    assert day13.part2(text) == 1068781


@pytest.mark.parametrize(
    "buses, expected",
    [("17,x,13,19", 3417), ("67,7,59,61", 754018), ("67,x,7,59,61", 779210), ("1789,37,47,1889", 1202161486)],
)
def test_shuttle_alignment(buses, expected):
    assert day13.part2("0\n" + buses) == expected


def test_shuttle_alignment_requires_coprime_ids():
    with pytest.raises(NoSolutionError):
        day13.part2("0\n4,6")


def test_docking_mask():
    text = """
    mask = XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X
    mem[8] = 11
    mem[7] = 101
    mem[8] = 0"""
    assert day14.part1(text) == 165


def test_docking_decoder():
    text = """
    mask = 000000000000000000000000000000X1001X
    mem[42] = 100
    mask = 00000000000000000000000000000000X0XX
    mem[26] = 1"""
    assert day14.part2(text) == 208


def test_docking_mask_decode_addresses():
    mask = day14.Mask.parse("000000000000000000000000000000X1001X")
    assert sorted(mask.decode(42)) == [26, 27, 58, 59]
    assert mask.apply(0) == 0b10010


@pytest.mark.parametrize(
    "start, expected",
    [("0,3,6", 436), ("1,3,2", 1), ("2,1,3", 10), ("1,2,3", 27), ("2,3,1", 78), ("3,2,1", 438), ("3,1,2", 1836)],
)
def test_memory_game(start, expected):
    assert day15.part1(start) == expected


def test_memory_game_early_turns():
    assert day15.play([0, 3, 6], 4) == 0
    assert day15.play([0, 3, 6], 2) == 3
    assert day15.play([0, 3, 6], 10) == 0


@pytest.mark.slow
def test_memory_game_long():
    assert day15.part2("0,3,6") == 175594


TICKETS = """class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12"""

TICKET_FIELDS = """class: 0-1 or 4-19
departure row: 0-5 or 8-19
departure seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9"""


def test_ticket_error_rate():
    assert day16.part1(TICKETS) == 71


def test_ticket_field_solver():
    fields, _, nearby = day16.parse_input(TICKETS)
    assert day16.solve_fields(fields, nearby) == [1, 0, 2]
    fields, _, nearby = day16.parse_input(TICKET_FIELDS)
    assert day16.solve_fields(fields, nearby) == [1, 0, 2]


def test_ticket_departure_product():
    # columns hold row=11, class=12, seat=13
    assert day16.part2(TICKET_FIELDS) == 11 * 13


def test_ticket_field_solver_ambiguous():
    text = "a: 1-5 or 7-9\nb: 1-5 or 7-9\n\nyour ticket:\n1,2\n\nnearby tickets:\n3,4"
    fields, _, nearby = day16.parse_input(text)
    with pytest.raises(NoSolutionError):
        day16.solve_fields(fields, nearby)


def test_ticket_length_must_match_fields():
    text = "a: 1-5 or 7-9\n\nyour ticket:\n1,2\n\nnearby tickets:\n3"
    with pytest.raises(ParseError):
        day16.parse_input(text)


# ---------------------------------------------------------------------------
# Days 17-20
# ---------------------------------------------------------------------------
def test_conway_cubes():
    assert day17.part1(".#.\n..#\n###") == 112
    assert day17.part2(".#.\n..#\n###") == 848


def test_conway_cubes_single_step_grows():
    active = np.zeros((1, 3, 3), dtype=bool)
    active[0, 1, :] = True
    out = day17.step(active)
    assert out.shape == (3, 5, 5)
    assert int(out.sum()) == 9


@pytest.mark.parametrize(
    "expr, flat, addition_first",
    [
        ("1 + 2 * 3 + 4 * 5 + 6", 71, 231),
        ("1 + (2 * 3) + (4 * (5 + 6))", 51, 51),
        ("2 * 3 + (4 * 5)", 26, 46),
        ("5 + (8 * 3 + 9 + 3 * 4 * 3)", 437, 1445),
        ("5 * 9 * (7 * 3 * 3 + 9 * 3 + (8 + 6 * 4))", 12240, 669060),
        ("((2 + 4 * 9) * (6 + 9 * 8 + 6) + 6) + 2 + 4 * 2", 13632, 23340),
    ],
)
def test_operation_order(expr, flat, addition_first):
    assert day18.evaluate(expr) == flat
    assert day18.evaluate(expr, day18.ADDITION_FIRST) == addition_first


def test_expression_lexer():
    tokens = [tok.value for tok in day18.tokenize("2 * 3 + (4 * 5)")]
    assert tokens == [2, "*", 3, "+", "(", 4, "*", 5, ")"]


@pytest.mark.parametrize("expr", ["1 +", "(1 + 2", "1 + 2)", "1 $ 2"])
def test_operation_order_malformed(expr):
    with pytest.raises(ParseError):
        day18.evaluate(expr)


MESSAGES = '''0: 4 1 5
1: 2 3 | 3 2
2: 4 4 | 5 5
3: 4 5 | 5 4
4: "a"
5: "b"

ababbb
bababa
abbbab
aaabbb
aaaabbb'''


def test_monster_messages():
    assert day19.part1(MESSAGES) == 2


def test_monster_messages_looping_rules():
    text = (DATA / "2020_day19_example2.txt").read_text()
    assert day19.part1(text) == 3
    assert day19.part2(text) == 12


def test_jigsaw_corners():
    text = (DATA / "2020_day20_example.txt").read_text()
    assert day20.part1(text) == 20899048083289


def test_jigsaw_sea_monsters():
    text = (DATA / "2020_day20_example.txt").read_text()
    image = day20.assemble(day20.parse_input(text))
    assert image.shape == (24, 24)
    assert day20.part2(text) == 273


def test_jigsaw_bad_header():
    with pytest.raises(ParseError):
        day20.parse_input("Tyle 1:\n#.\n.#")


# ---------------------------------------------------------------------------
# Days 21-25
# ---------------------------------------------------------------------------
RECIPES = """mxmxvkd kfcds sqjhc nhms (contains dairy, fish)
    trh fvjkl sbzzf mxmxvkd (contains dairy)
    sqjhc fvjkl (contains soy)
    sqjhc mxmxvkd sbzzf (contains fish)"""


def test_allergens():
    assert day21.part1(RECIPES) == 5
    assert day21.part2(RECIPES) == "mxmxvkd,sqjhc,fvjkl"


def test_allergens_unresolvable():
    with pytest.raises(NoSolutionError):
        day21.resolve({"dairy": {"a", "b"}, "fish": {"a", "b"}})


DECKS = "Player 1:\n9\n2\n6\n3\n1\n\nPlayer 2:\n5\n8\n4\n7\n10"


def test_crab_combat():
    assert day22.part1(DECKS) == 306
    assert day22.part2(DECKS) == 291


def test_recursive_combat_terminates_on_repeat():
    winner, _ = day22.play_recursive(*day22.parse_input("Player 1:\n43\n19\n\nPlayer 2:\n2\n29\n14"))
    assert winner == 1


def test_crab_cups():
    assert day23.part1("389125467", moves=10) == "92658374"
    assert day23.part1("389125467") == "67384529"


def test_crab_cups_bad_labels():
    with pytest.raises(ParseError):
        day23.part1("3891")


@pytest.mark.slow
def test_crab_cups_million():
    assert day23.part2("389125467") == 149245887792


HEX_TILES = """sesenwnenenewseeswwswswwnenewsewsw
neeenesenwnwwswnenewnwwsewnenwseswesw
seswneswswsenwwnwse
nwnwneseeswswnenewneswwnewseswneseene
swweswneswnenwsewnwneneseenw
eesenwseswswnenwswnwnwsewwnwsene
sewnenenenesenwsewnenwwwse
wenwwweseeeweswwwnwwe
wsweesenenewnwwnwsenewsenwwsesesenwne
neeswseenwwswnwswswnw
nenwswwsewswnenenewsenwsenwnesesenew
enewnwewneswsewnwswenweswnenwsenwsw
sweneswneswneneenwnewenewwneswswnese
swwesenesewenwneswnwwneseswwne
enesenwswwswneneswsenwnewswseenwsese
wnwnesenesenenwwnenwsewesewsesesew
nenewswnwewswnenesenwnesewesw
eneswnwswnwsenenwnwnwwseeswneewsenese
neswnwewnwnwseenwseesewsenwsweewe
wseweeenwnesenwwwswnew"""


def test_lobby_layout():
    assert day24.part1(HEX_TILES) == 10
    assert day24.part2(HEX_TILES, days=1) == 15
    assert day24.part2(HEX_TILES, days=10) == 37
    assert day24.part2(HEX_TILES) == 2208


def test_lobby_layout_reference_tile():
    assert day24.locate("nwwswee") == (0, 0)
    with pytest.raises(ParseError):
        day24.locate("nex")


def test_combo_breaker():
    assert day25.find_loop_size([5764801, 17807724]) == (5764801, 8)
    assert day25.part1("5764801\n17807724") == 14897079
