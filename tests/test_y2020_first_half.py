from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc.errors import NoSolutionError, ParseError
from aoc.y2020 import day01, day02, day03, day04, day06, day07, day08, day09, day10, day11, day12

# ---------------------------------------------------------------------------
# Days 1-4
# ---------------------------------------------------------------------------
EXPENSES = "1721\n979\n366\n299\n675\n1456\n"


def test_report_repair():
    assert day01.part1(EXPENSES) == 514579
    assert day01.part2(EXPENSES) == 241861950


def test_report_repair_no_match():
    with pytest.raises(NoSolutionError):
        day01.part1("1\n2\n3\n")


def test_password_policies():
    text = "1-3 a: abcde\n1-3 b: cdefg\n2-9 c: ccccccccc\n"
    assert day02.part1(text) == 2
    assert day02.part2(text) == 1
    with pytest.raises(ParseError):
        day02.part1("1-3 a abcde\n")


TREES = """..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""


def test_toboggan_trees():
    assert day03.part1(TREES) == 7
    assert day03.part2(TREES) == 336


PASSPORTS = """ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753108 byr:1931
hgt:179cm

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in"""

INVALID_PASSPORTS = """eyr:1972 cid:100
hcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926

iyr:2019
hcl:#602927 eyr:1967 hgt:170cm
ecl:grn pid:012533040 byr:1946

hcl:dab227 iyr:2012
ecl:brn hgt:182cm pid:021572410 eyr:2020 byr:1992 cid:277

hgt:59cm ecl:zzz
eyr:2038 hcl:74454a iyr:2023
pid:3556412378 byr:2007"""

VALID_PASSPORTS = """pid:087499704 hgt:74in ecl:grn iyr:2012 eyr:2030 byr:1980
hcl:#623a2f

eyr:2029 ecl:blu cid:129 byr:1989
iyr:2014 pid:896056539 hcl:#a97842 hgt:165cm

hcl:#888785
hgt:164cm byr:2001 iyr:2015 cid:88
pid:545766238 ecl:hzl
eyr:2022

iyr:2010 hgt:158cm hcl:#b6652a ecl:blu byr:1944 eyr:2021 pid:093154719"""


def test_passport_required_keys():
    assert day04.part1(PASSPORTS) == 2


def test_passport_validation():
    assert day04.part2(INVALID_PASSPORTS) == 0
    assert day04.part2(VALID_PASSPORTS) == 4


# ---------------------------------------------------------------------------
# Days 6-9
# ---------------------------------------------------------------------------
CUSTOMS = "abc\n\na\nb\nc\n\nab\nac\n\na\na\na\na\n\nb"


def test_customs_forms():
    assert day06.part1(CUSTOMS) == 11
    assert day06.part2(CUSTOMS) == 6
    with pytest.raises(ParseError):
        day06.part1("ab1\n")


BAGS = """light red bags contain 1 bright white bag, 2 muted yellow bags.
dark orange bags contain 3 bright white bags, 4 muted yellow bags.
bright white bags contain 1 shiny gold bag.
muted yellow bags contain 2 shiny gold bags, 9 faded blue bags.
shiny gold bags contain 1 dark olive bag, 2 vibrant plum bags.
dark olive bags contain 3 faded blue bags, 4 dotted black bags.
vibrant plum bags contain 5 faded blue bags, 6 dotted black bags.
faded blue bags contain no other bags.
dotted black bags contain no other bags."""

NESTED_BAGS = """shiny gold bags contain 2 dark red bags.
dark red bags contain 2 dark orange bags.
dark orange bags contain 2 dark yellow bags.
dark yellow bags contain 2 dark green bags.
dark green bags contain 2 dark blue bags.
dark blue bags contain 2 dark violet bags.
dark violet bags contain no other bags."""


def test_bag_graph():
    assert day07.part1(BAGS) == 4
    assert day07.part2(BAGS) == 32
    assert day07.part2(NESTED_BAGS) == 126


def test_bag_graph_unknown_bag():
    with pytest.raises(ParseError):
        day07.parse_input("shiny gold bags contain 2 dark red bags.")


CONSOLE = "nop +0\nacc +1\njmp +4\nacc +3\njmp -3\nacc -99\nacc +1\njmp -4\nacc +6"


def test_handheld_console():
    assert day08.part1(CONSOLE) == 5
    assert day08.part2(CONSOLE) == 8


def test_handheld_console_outcomes():
    program = day08.parse_input("acc +2\njmp +5")
    assert day08.run(program) == (day08.Outcome.FAILURE, 2)
    assert day08.run(day08.parse_input("acc +3")) == (day08.Outcome.TERMINATED, 3)
    with pytest.raises(ParseError):
        day08.parse_input("hop +1")


def test_handheld_console_unrepairable():
    # every single swap still loops
    with pytest.raises(NoSolutionError):
        day08.part2("jmp +0\njmp -1")


XMAS = "35\n20\n15\n25\n47\n40\n62\n55\n65\n95\n102\n117\n150\n182\n127\n219\n299\n277\n309\n576"


def test_xmas_cipher():
    assert day09.part1(XMAS, preamble=5) == 127
    assert day09.part2(XMAS, preamble=5) == 62


def test_xmas_cipher_short_input():
    with pytest.raises(ParseError):
        day09.part1("1\n2\n", preamble=5)


# ---------------------------------------------------------------------------
# Days 10-12
# ---------------------------------------------------------------------------
SMALL_ADAPTERS = "16\n10\n15\n5\n1\n11\n7\n19\n6\n12\n4"
LARGE_ADAPTERS = (
    "28\n33\n18\n42\n31\n14\n46\n20\n48\n47\n24\n23\n49\n45\n19\n38\n"
    "39\n11\n1\n32\n25\n35\n8\n17\n7\n9\n4\n2\n34\n10\n3"
)


def test_adapters():
    assert day10.part1(SMALL_ADAPTERS) == 35
    assert day10.part1(LARGE_ADAPTERS) == 220
    assert day10.part2(SMALL_ADAPTERS) == 8
    assert day10.part2(LARGE_ADAPTERS) == 19208


SEATS = """L.LL.LL.LL
LLLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLLL
L.LLLLLL.L
L.LLLLL.LL"""


def test_seating_system():
    assert day11.part1(SEATS) == 37
    assert day11.part2(SEATS) == 26


def test_seating_rejects_unknown_cells():
    with pytest.raises(ParseError):
        day11.part1("L.\nLX\n")


def test_ferry_navigation():
    text = "F10\nN3\nF7\nR90\nF11"
    assert day12.part1(text) == 25
    assert day12.part2(text) == 286
    with pytest.raises(ParseError):
        day12.part1("Q10")
