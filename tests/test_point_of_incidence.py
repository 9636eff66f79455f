import pytest

from advent2023.point_of_incidence import (
    Axis,
    Landscape,
    Reflection,
    Terrain,
    answers,
    parse_landscape,
    split_patterns,
    summarize,
)

FIRST = [
    "#.##..##.",
    "..#.##.#.",
    "##......#",
    "##......#",
    "..#.##.#.",
    "..##..##.",
    "#.#.##.#.",
]

SECOND = [
    "#...##..#",
    "#....#..#",
    "..##..###",
    "#####.##.",
    "#####.##.",
    "..##..###",
    "#....#..#",
]

THIRD = [
    ".##..#..#.###",
    ".##.#...#..##",
    "..#.######.#.",
    ".......#.....",
    ".......#.....",
    "..#.######.#.",
    ".##.#...#..##",
    ".##..#..#.###",
    "####.#####.#.",
    "####.#####.#.",
    ".##.....#.###",
]

FOURTH = [
    "..##.##.##...",
    "##.#......###",
    "..########...",
    "#####..######",
    "..#......#...",
    ".####..####..",
    "#....##....##",
    "....#..#.....",
    "#...####...##",
    "##.#....#.###",
    "#...#..#...##",
    "#####..######",
    "##..#..#..###",
    ".#...##...#..",
    "..#.#..#.#...",
]

FIFTH = [
    ".###.#..#.###..",
    "#.#.#.##.#.#.##",
    "..#.######.#...",
    "..#...##...#...",
    "#.##.####..#.##",
    "##.########.###",
    "..#..####..#...",
    "#.##......##.##",
    "##.#..##..#.###",
]

SIXTH = [
    ".##.#....####..",
    "###....###...##",
    ".....###..#####",
    ".....###..#####",
    "###....###...##",
    ".##.#....####..",
    "#.#..#.#...#.##",
    "##..#.##.#.##..",
    ".#.#.#.#..#.###",
    ".#.###.#..#..##",
    ".#..#.....#.###",
    "..###.###..##..",
    "...#.#..#..####",
    "#.####.##..#.##",
    "..##.##.###.###",
    "#.#.##.#..#.###",
    "#..###...###.#.",
]


def cells(line):
    return [Terrain(char) for char in line]


@pytest.mark.parametrize("lines", [FIRST, SECOND])
def test_parse_landscape(lines):
    landscape = parse_landscape(lines)
    assert landscape == Landscape(width=9, height=7, ground=[cells(line) for line in lines])


def test_parse_landscape_ignores_indentation():
    text = "\n".join("\t\t" + line for line in FIRST).strip()
    assert parse_landscape(text.split("\n")) == parse_landscape(FIRST)


def test_describe_round_trip():
    assert parse_landscape(SECOND).describe() == "\n".join(SECOND)


@pytest.mark.parametrize(
    "lines, expected",
    [
        (FIRST, Reflection(Axis.VERTICAL, 4)),
        (SECOND, Reflection(Axis.HORIZONTAL, 3)),
    ],
)
def test_reflection(lines, expected):
    assert parse_landscape(lines).reflection() == expected


@pytest.mark.parametrize(
    "lines, expected",
    [
        (FIRST, Reflection(Axis.HORIZONTAL, 2)),
        (SECOND, Reflection(Axis.HORIZONTAL, 0)),
        (THIRD, Reflection(Axis.HORIZONTAL, 8)),
        (FOURTH, Reflection(Axis.VERTICAL, 5)),
        (FIFTH, Reflection(Axis.VERTICAL, 6)),
        (SIXTH, Reflection(Axis.VERTICAL, 13)),
    ],
)
def test_smudged_reflection(lines, expected):
    landscape = parse_landscape(lines)
    excluded = landscape.reflection()
    assert landscape.smudged_reflection(excluded) == expected


def test_smudged_reflection_leaves_ground_unchanged():
    landscape = parse_landscape(THIRD)
    landscape.smudged_reflection(landscape.reflection())
    assert landscape.describe() == "\n".join(THIRD)


def test_smudged_reflection_without_candidate_raises():
    landscape = parse_landscape(["#"])
    with pytest.raises(ValueError):
        landscape.smudged_reflection(Reflection())


def test_find_reflection_skips_excluded():
    landscape = parse_landscape(SECOND)
    assert landscape.find_reflection(Reflection(Axis.HORIZONTAL, 3)) == Reflection()


def test_summarize_notes():
    total = sum(summarize(parse_landscape(p).reflection()) for p in (FIRST, SECOND))
    assert total == 405


def test_summarize_notes_smudged():
    total = 0
    for pattern in (FIRST, SECOND):
        landscape = parse_landscape(pattern)
        total += summarize(landscape.smudged_reflection(landscape.reflection()))
    assert total == 400


def test_summarize_none_raises():
    with pytest.raises(ValueError):
        summarize(Reflection(Axis.NONE, 0))


def test_split_patterns():
    text = "\n".join(FIRST) + "\n\n" + "\n".join(SECOND) + "\n"
    assert split_patterns(text) == [FIRST, SECOND]


def test_answers():
    text = "\n".join(FIRST) + "\n\n" + "\n".join(SECOND) + "\n"
    assert answers(text) == (405, 400)


def test_reflection_str():
    assert str(Reflection(Axis.VERTICAL, 4)) == "Vertical @ 4"
    assert str(Reflection()) == "None"