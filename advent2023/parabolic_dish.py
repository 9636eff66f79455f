"""Parabolic Reflector Dish: roll rounded rocks around a tilting platform."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Sequence


class Rock(Enum):
    """A single cell of the platform, valued by its map symbol."""

    EMPTY = "."
    ROUNDED = "O"
    CUBE = "#"


def _roll(line: Sequence[Rock]) -> list[Rock]:
    """Slide every rounded rock towards index 0 until it meets an obstacle."""
    result: list[Rock] = []
    rounded = 0
    length = 0

    def flush() -> None:
        result.extend([Rock.ROUNDED] * rounded)
        result.extend([Rock.EMPTY] * (length - rounded))

    for cell in line:
        if cell is Rock.CUBE:
            flush()
            result.append(Rock.CUBE)
            rounded = length = 0
        else:
            length += 1
            if cell is Rock.ROUNDED:
                rounded += 1
    flush()
    return result


@dataclass
class Platform:
    """The platform, stored column by column; index 0 of a column is north."""

    width: int
    height: int
    columns: list[list[Rock]] = field(default_factory=list)

    def describe(self) -> str:
        """Render the platform row by row in its map symbols."""
        return "\n".join(
            "".join(self.columns[x][y].value for x in range(self.width))
            for y in range(self.height)
        )

    def _rows(self) -> list[list[Rock]]:
        return [list(row) for row in zip(*self.columns)]

    def _set_rows(self, rows: Sequence[Sequence[Rock]]) -> None:
        self.columns = [list(column) for column in zip(*rows)]

    def tilt_north(self) -> None:
        """Roll all rounded rocks north."""
        self.columns = [_roll(column) for column in self.columns]

    def tilt_south(self) -> None:
        """Roll all rounded rocks south."""
        self.columns = [_roll(column[::-1])[::-1] for column in self.columns]

    def tilt_east(self) -> None:
        """Roll all rounded rocks east."""
        self._set_rows([_roll(row[::-1])[::-1] for row in self._rows()])

    def tilt_west(self) -> None:
        """Roll all rounded rocks west."""
        self._set_rows([_roll(row) for row in self._rows()])

    def tilt_cycle(self) -> None:
        """One spin cycle: north, west, south, east."""
        self.tilt_north()
        self.tilt_west()
        self.tilt_south()
        self.tilt_east()

    def load(self) -> int:
        """Total load on the north support beams."""
        return sum(
            self.height - y
            for column in self.columns
            for y, cell in enumerate(column)
            if cell is Rock.ROUNDED
        )


def parse_platform(lines: Sequence[str]) -> Platform:
    """Parse platform lines made of '.', 'O' and '#'."""
    width = len(lines[0])
    height = len(lines)
    rows = []
    for line in lines:
        try:
            rows.append([Rock(char) for char in line[:width]])
        except ValueError as error:
            raise ValueError(f"unknown rock type in {line!r}") from error
    columns = [[row[x] for row in rows] for x in range(width)]
    return Platform(width=width, height=height, columns=columns)


def load_after_cycles(platform: Platform, cycles: int) -> int:
    """Run the spin cycle ``cycles`` times and return the resulting load."""
    seen: dict[tuple[tuple[Rock, ...], ...], int] = {}
    history: list[tuple[tuple[Rock, ...], ...]] = []
    for done in range(cycles):
        state = tuple(tuple(column) for column in platform.columns)
        if state in seen:
            start = seen[state]
            period = done - start
            final = history[start + (cycles - start) % period]
            platform.columns = [list(column) for column in final]
            return platform.load()
        seen[state] = done
        history.append(state)
        platform.tilt_cycle()
    return platform.load()


def answers(text: str) -> tuple[int, int]:
    """Load after tilting north, and after a billion spin cycles."""
    platform = parse_platform(text.strip().split("\n"))
    platform.tilt_north()
    tilted = platform.load()
    return tilted, load_after_cycles(platform, 1_000_000_000)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parabolic Reflector Dish")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    tilted, spun = answers(Path(args.input).read_text())
    print(f"Total load on north support beams: {tilted}")
    print(f"Total load on north support beams after spin cycles: {spun}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())