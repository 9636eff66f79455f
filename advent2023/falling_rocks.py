"""Pyroclastic Flow: drop rock shapes into a narrow chamber pushed by jets of gas."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple, Sequence

_SNAPSHOT_ROWS = 64


class Point(NamedTuple):
    """A chamber position; x grows rightwards, y grows upwards from the floor."""

    x: int
    y: int


class Size(NamedTuple):
    """Width and height of a shape."""

    width: int
    height: int


@dataclass(frozen=True)
class Bitmap:
    """A shape's cells; row 0 is the bottom, bit 0x80 is the leftmost column."""

    size: Size
    rows: tuple[int, ...]

    @classmethod
    def from_text(cls, text: str) -> Bitmap:
        """Parse a picture of '#' and '.' drawn top row first."""
        rows = []
        max_width = 0
        for line in reversed(text.split("\n")):
            row = 0
            for i, char in enumerate(line):
                if char == "#":
                    row |= 0x80 >> i
                elif char != ".":
                    raise ValueError(f"unexpected character in bitmap: {char!r}")
                max_width = max(max_width, i + 1)
            rows.append(row)
        return cls(Size(max_width, len(rows)), tuple(rows))

    def describe(self) -> str:
        """Draw the bitmap top row first."""
        return "\n".join(
            "".join(
                "#" if row & (0x80 >> i) else "." for i in range(self.size.width)
            )
            for row in reversed(self.rows)
        )


class ShapeKind(Enum):
    """The five rock shapes, in the order they fall, valued by their pictures."""

    HORIZONTAL_LINE = "####"
    CROSS = ".#.\n###\n.#."
    ANGLE = "..#\n..#\n###"
    VERTICAL_LINE = "#\n#\n#\n#"
    SQUARE = "##\n##"


@lru_cache(maxsize=None)
def _bitmap(kind: ShapeKind) -> Bitmap:
    return Bitmap.from_text(kind.value)


@dataclass
class Shape:
    """A falling rock: its kind, cells and bottom-left position."""

    kind: ShapeKind
    bitmap: Bitmap
    position: Point = Point(0, 0)

    @property
    def size(self) -> Size:
        return self.bitmap.size


def make_shape(kind: ShapeKind) -> Shape:
    """A new shape of the given kind at the origin."""
    return Shape(kind, _bitmap(kind))


def bounds_intersect(origin: Point, size: Size, point: Point) -> bool:
    """Whether point lies in the rectangle with bottom-left origin and size (inclusive)."""
    return (
        origin.x <= point.x <= origin.x + size.width
        and origin.y <= point.y <= origin.y + size.height
    )


class JetDirection(Enum):
    """Direction a jet of gas pushes, valued by its input symbol."""

    LEFT = "<"
    RIGHT = ">"


def parse_jet_directions(line: str) -> list[JetDirection]:
    """Parse a pattern of '<' and '>' characters."""
    try:
        return [JetDirection(char) for char in line]
    except ValueError:
        raise ValueError("invalid jet direction") from None


@dataclass
class Tower:
    """Settled rock, one bit-row per level; top is the height of the highest rock."""

    width: int
    rows: list[int] = field(default_factory=list)
    top: int = 0

    def heights(self) -> list[int]:
        """Height of the highest settled cell in each column."""
        result = [0] * self.width
        for level, row in enumerate(self.rows, start=1):
            for column in range(self.width):
                if row & (0x80 >> column):
                    result[column] = level
        return result

    def add_empty_rows(self, count: int) -> None:
        """Append count empty rows to the top."""
        self.rows.extend([0] * count)

    def _ensure_rows(self, position: Point, size: Size) -> None:
        missing = position.y + size.height - len(self.rows)
        if missing > 0:
            self.add_empty_rows(missing)

    def can_shape_move_to(self, shape: Shape, position: Point) -> bool:
        """Whether the shape fits at position without hitting walls, floor or rock."""
        size = shape.size
        self._ensure_rows(position, size)

        if position.x < 0 or position.x + size.width > self.width:
            return False
        if position.y < 0:
            return False

        return not any(
            self.rows[position.y + y] & (row >> position.x)
            for y, row in enumerate(shape.bitmap.rows)
        )

    def lock_shape(self, shape: Shape) -> None:
        """Settle the shape into the tower at its current position."""
        position = shape.position
        self._ensure_rows(position, shape.size)
        for y, row in enumerate(shape.bitmap.rows):
            cells = (row >> position.x) & 0xFF
            self.rows[position.y + y] |= cells
            if cells:
                self.top = max(self.top, position.y + y + 1)


@dataclass
class Room:
    """The chamber: the tower, the shape sequence and the jet pattern."""

    width: int
    jet_directions: Sequence[JetDirection] | None = None
    next_shape_index: int = 0
    next_jet_index: int = 0
    tower: Tower = field(init=False)

    def __post_init__(self) -> None:
        self.jet_directions = list(self.jet_directions or [])
        self.tower = Tower(self.width)

    def next_shape(self) -> Shape:
        """A new shape, cycling through the five kinds."""
        kinds = list(ShapeKind)
        shape = make_shape(kinds[self.next_shape_index])
        self.next_shape_index = (self.next_shape_index + 1) % len(kinds)
        return shape

    def next_jet_direction(self) -> JetDirection:
        """The next jet push, cycling through the pattern."""
        if not self.jet_directions:
            raise ValueError("no jet directions")
        direction = self.jet_directions[self.next_jet_index]
        self.next_jet_index = (self.next_jet_index + 1) % len(self.jet_directions)
        return direction

    def tower_height(self) -> int:
        """Height of the tower of settled rock."""
        return self.tower.top

    def drop_shape(self) -> None:
        """Drop the next shape until it comes to rest."""
        shape = self.next_shape()
        shape.position = Point(2, self.tower_height() + 3)
        self.tower.add_empty_rows(3 + shape.size.height)

        while True:
            step = -1 if self.next_jet_direction() is JetDirection.LEFT else 1
            pushed = Point(shape.position.x + step, shape.position.y)
            if self.tower.can_shape_move_to(shape, pushed):
                shape.position = pushed

            fallen = Point(shape.position.x, shape.position.y - 1)
            if self.tower.can_shape_move_to(shape, fallen):
                shape.position = fallen
            else:
                self.tower.lock_shape(shape)
                break


def tower_height_after(jet_directions: Sequence[JetDirection], count: int) -> int:
    """Tower height after count drops, skipping ahead once the pattern repeats."""
    room = Room(7, jet_directions)
    heights = [0]
    seen: dict[tuple[int, int, tuple[int, ...]], int] = {}

    for dropped in range(count):
        top = room.tower_height()
        key = (
            room.next_shape_index,
            room.next_jet_index,
            tuple(room.tower.rows[max(0, top - _SNAPSHOT_ROWS) : top]),
        )
        if key in seen and top >= _SNAPSHOT_ROWS:
            start = seen[key]
            period = dropped - start
            gain = heights[dropped] - heights[start]
            cycles, rest = divmod(count - dropped, period)
            return heights[dropped] + cycles * gain + heights[start + rest] - heights[start]
        seen[key] = dropped
        room.drop_shape()
        heights.append(room.tower_height())

    return room.tower_height()


def answers(text: str) -> tuple[int, int]:
    """Tower heights after 2022 and after a trillion rocks."""
    jets = parse_jet_directions(text.strip())
    return tower_height_after(jets, 2022), tower_height_after(jets, 1_000_000_000_000)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Falling rocks")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    short, tall = answers(Path(args.input).read_text())
    print(f"Tower height: {short}")
    print(f"Tower height: {tall}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())