"""Cosmic Expansion: measure distances between galaxies in an expanding universe."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A position in the image: x grows to the east, y grows to the south."""

    x: int
    y: int


def manhattan_distance(a: Point, b: Point) -> int:
    """Taxicab distance between two points."""
    return abs(a.x - b.x) + abs(a.y - b.y)


@dataclass
class Universe:
    """An image of the sky: its size and the positions of its galaxies."""

    width: int = 0
    height: int = 0
    galaxies: list[Point] = field(default_factory=list)

    def describe(self) -> str:
        """Render the universe with '#' for galaxies and '.' for empty space."""
        rows = [["."] * self.width for _ in range(self.height)]
        for galaxy in self.galaxies:
            rows[galaxy.y][galaxy.x] = "#"
        return "\n".join("".join(row) for row in rows)

    def unpopulated_rows(self) -> list[int]:
        """Row indices, ascending, that contain no galaxy."""
        populated = {galaxy.y for galaxy in self.galaxies}
        return [row for row in range(self.height) if row not in populated]

    def unpopulated_columns(self) -> list[int]:
        """Column indices, ascending, that contain no galaxy."""
        populated = {galaxy.x for galaxy in self.galaxies}
        return [column for column in range(self.width) if column not in populated]

    def expand(self, empty_value: int) -> None:
        """Replace every empty row and column by empty_value copies of itself."""
        columns = self.unpopulated_columns()
        rows = self.unpopulated_rows()
        growth = empty_value - 1

        self.width += growth * len(columns)
        self.height += growth * len(rows)

        galaxies = []
        for galaxy in self.galaxies:
            dx = growth * sum(1 for column in columns if galaxy.x > column)
            dy = growth * sum(1 for row in rows if galaxy.y > row)
            galaxies.append(Point(galaxy.x + dx, galaxy.y + dy))
        self.galaxies = galaxies

    def galaxy_distance(self, first: int, second: int) -> int:
        """Shortest path length between the galaxies with the given ids."""
        return manhattan_distance(self.galaxies[first], self.galaxies[second])


def parse_universe(lines: Sequence[str]) -> Universe:
    """Parse an image whose galaxies are marked with '#'."""
    universe = Universe()
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "#":
                universe.galaxies.append(Point(x, y))
        if y == 0:
            universe.width = len(line)
        universe.height += 1
    return universe


def partners(galaxy_id: int) -> list[int]:
    """Ids of all galaxies numbered below galaxy_id."""
    return list(range(galaxy_id))


def sum_galaxy_distances(universe: Universe) -> int:
    """Sum of shortest distances over every pair of galaxies."""
    return sum(
        universe.galaxy_distance(first, second)
        for first, second in combinations(range(len(universe.galaxies)), 2)
    )


def answers(text: str) -> tuple[int, int]:
    """Distance sums after expanding by a factor of 2 and of 1,000,000."""
    lines = text.strip().split("\n")

    young = parse_universe(lines)
    young.expand(2)

    old = parse_universe(lines)
    old.expand(1_000_000)

    return sum_galaxy_distances(young), sum_galaxy_distances(old)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cosmic Expansion")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    young, old = answers(Path(args.input).read_text())
    print(f"Sum of shortest paths between all pairs of galaxies: {young}")
    print(f"Sum of shortest paths between all pairs of galaxies: {old}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())