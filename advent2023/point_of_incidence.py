"""Point of Incidence: find the lines of reflection in patterns of ash and rock."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Sequence


class Terrain(Enum):
    """A single cell of a pattern, valued by its map symbol."""

    ASH = "."
    ROCK = "#"


_INVERTED = {Terrain.ASH: Terrain.ROCK, Terrain.ROCK: Terrain.ASH}


class Axis(Enum):
    """Orientation of a line of reflection."""

    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Reflection:
    """A line of reflection lying just after row or column ``position``."""

    axis: Axis = Axis.NONE
    position: int = 0

    def __str__(self) -> str:
        if self.axis is Axis.VERTICAL:
            return f"Vertical @ {self.position}"
        if self.axis is Axis.HORIZONTAL:
            return f"Horizontal @ {self.position}"
        return "None"


@dataclass
class Landscape:
    """A rectangular pattern of terrain, stored row by row."""

    width: int = 0
    height: int = 0
    ground: list[list[Terrain]] = field(default_factory=list)

    def describe(self) -> str:
        """Render the pattern in its map symbols."""
        return "\n".join("".join(cell.value for cell in row) for row in self.ground)

    def _column(self, index: int) -> list[Terrain]:
        return [row[index] for row in self.ground]

    @staticmethod
    def _mirrors(lines: Sequence[Sequence[Terrain]], index: int) -> bool:
        span = min(index + 1, len(lines) - index - 1)
        return all(lines[index - k] == lines[index + 1 + k] for k in range(span))

    def find_reflection(self, excluded: Reflection | None = None) -> Reflection:
        """First horizontal, then vertical reflection that is not ``excluded``."""
        excluded = excluded or Reflection()

        for i in range(self.height - 1):
            if self._mirrors(self.ground, i) and excluded != Reflection(Axis.HORIZONTAL, i):
                return Reflection(Axis.HORIZONTAL, i)

        columns = [self._column(x) for x in range(self.width)]
        for i in range(self.width - 1):
            if self._mirrors(columns, i) and excluded != Reflection(Axis.VERTICAL, i):
                return Reflection(Axis.VERTICAL, i)

        return Reflection()

    def reflection(self) -> Reflection:
        """The pattern's line of reflection, or an axis of NONE."""
        return self.find_reflection(None)

    def smudged_reflection(self, excluded: Reflection) -> Reflection:
        """The reflection found after fixing exactly one smudged cell."""
        for row in self.ground:
            for x, cell in enumerate(row):
                row[x] = _INVERTED[cell]
                try:
                    found = self.find_reflection(excluded)
                finally:
                    row[x] = cell
                if found.axis is not Axis.NONE:
                    return found
        raise ValueError(f"couldn't find alternative reflection\n{self.describe()}")


def parse_landscape(lines: Sequence[str]) -> Landscape:
    """Parse pattern lines; characters other than '.' and '#' are ignored."""
    symbols = {terrain.value for terrain in Terrain}
    ground = [[Terrain(char) for char in line if char in symbols] for line in lines]
    width = len(ground[0]) if ground else 0
    return Landscape(width=width, height=len(ground), ground=ground)


def split_patterns(text: str) -> list[list[str]]:
    """Split the notes into patterns separated by blank lines."""
    patterns: list[list[str]] = []
    current: list[str] = []
    for line in text.strip().split("\n"):
        if line:
            current.append(line)
        else:
            patterns.append(current)
            current = []
    if current:
        patterns.append(current)
    return patterns


def summarize(reflection: Reflection) -> int:
    """Columns left of a vertical line, or 100 times rows above a horizontal one."""
    if reflection.axis is Axis.VERTICAL:
        return reflection.position + 1
    if reflection.axis is Axis.HORIZONTAL:
        return 100 * (reflection.position + 1)
    raise ValueError("no reflection found")


def answers(text: str) -> tuple[int, int]:
    """Note summaries for the clean and for the smudge-fixed patterns."""
    clean = 0
    smudged = 0
    for pattern in split_patterns(text):
        landscape = parse_landscape(pattern)
        original = landscape.reflection()
        clean += summarize(original)
        smudged += summarize(landscape.smudged_reflection(original))
    return clean, smudged


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Point of Incidence")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    clean, smudged = answers(Path(args.input).read_text())
    print(f"Note summary: {clean}")
    print(f"Note summary for smudged mirrors: {smudged}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())