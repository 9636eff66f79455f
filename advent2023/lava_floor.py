"""The Floor Will Be Lava: trace beams of light through mirrors and splitters."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, Flag
from pathlib import Path
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Point:
    """A cell position: x grows to the east, y grows to the south."""

    x: int
    y: int


class Direction(Flag):
    """Direction of travel; flags so that visits can be combined per cell."""

    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8


class Tile(Enum):
    """A cell of the contraption, valued by its map symbol."""

    EMPTY = "."
    LEFT_MIRROR = "\\"
    RIGHT_MIRROR = "/"
    VERTICAL_SPLITTER = "|"
    HORIZONTAL_SPLITTER = "-"


@dataclass(frozen=True)
class Photon:
    """A beam front: where it is and which way it is heading."""

    position: Point
    direction: Direction


_NO_DIRECTION = Direction(0)

_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_REFLECTIONS = {
    Tile.RIGHT_MIRROR: {
        Direction.NORTH: Direction.EAST,
        Direction.EAST: Direction.NORTH,
        Direction.SOUTH: Direction.WEST,
        Direction.WEST: Direction.SOUTH,
    },
    Tile.LEFT_MIRROR: {
        Direction.SOUTH: Direction.EAST,
        Direction.WEST: Direction.NORTH,
        Direction.NORTH: Direction.WEST,
        Direction.EAST: Direction.SOUTH,
    },
}


@dataclass
class Grid:
    """The contraption's tiles and the directions in which each was visited."""

    width: int
    height: int
    rows: list[list[Tile]]
    visited: list[list[Direction]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def _check(self, position: Point) -> None:
        if not (0 <= position.x < self.width and 0 <= position.y < self.height):
            raise IndexError(f"invalid position {position.x},{position.y}")

    def describe(self) -> str:
        """Render the contraption in its map symbols."""
        return "\n".join("".join(tile.value for tile in row) for row in self.rows)

    def __getitem__(self, position: Point) -> Tile:
        self._check(position)
        return self.rows[position.y][position.x]

    def mark_visited(self, position: Point, direction: Direction) -> None:
        """Record that a beam passed position heading in direction."""
        self._check(position)
        self.visited[position.y][position.x] |= direction

    def has_visited(self, position: Point, direction: Direction) -> bool:
        """Whether a beam already passed position heading in direction."""
        self._check(position)
        return bool(self.visited[position.y][position.x] & direction)

    def _advance(self, photon: Photon, direction: Direction) -> Photon | None:
        dx, dy = _OFFSETS[direction]
        position = Point(photon.position.x + dx, photon.position.y + dy)
        if 0 <= position.x < self.width and 0 <= position.y < self.height:
            return Photon(position, direction)
        return None

    def step_empty(self, photon: Photon) -> Photon | None:
        """Move straight on; None when the beam leaves the grid."""
        return self._advance(photon, photon.direction)

    def step_mirror(self, photon: Photon, tile: Tile) -> Photon | None:
        """Reflect off a mirror and move; None when the beam leaves the grid."""
        table = _REFLECTIONS.get(tile)
        if table is None:
            raise ValueError(f"not a mirror: {tile.value!r}")
        return self._advance(photon, table[photon.direction])

    def step_splitter(self, photon: Photon, tile: Tile) -> list[Photon]:
        """Pass through a splitter edge-on, or split into two beams."""
        if tile is Tile.VERTICAL_SPLITTER:
            if photon.direction in (Direction.NORTH, Direction.SOUTH):
                outgoing = [photon.direction]
            else:
                outgoing = [Direction.NORTH, Direction.SOUTH]
        elif tile is Tile.HORIZONTAL_SPLITTER:
            if photon.direction in (Direction.EAST, Direction.WEST):
                outgoing = [photon.direction]
            else:
                outgoing = [Direction.WEST, Direction.EAST]
        else:
            raise ValueError(f"not a splitter: {tile.value!r}")

        moved = (self._advance(photon, direction) for direction in outgoing)
        return [next_photon for next_photon in moved if next_photon is not None]

    def step(self, photon: Photon, tile: Tile) -> list[Photon]:
        """The beams that leave tile after photon enters it."""
        if tile is Tile.EMPTY:
            moved = self.step_empty(photon)
        elif tile in _REFLECTIONS:
            moved = self.step_mirror(photon, tile)
        else:
            return self.step_splitter(photon, tile)
        return [] if moved is None else [moved]

    def trace(self, initial: Photon) -> Iterator[Point]:
        """Follow the beam breadth-first, yielding each position it passes."""
        self._check(initial.position)
        pending = deque([initial])
        while pending:
            photon = pending.popleft()
            tile = self[photon.position]
            yield photon.position
            self.mark_visited(photon.position, photon.direction)
            for next_photon in self.step(photon, tile):
                if not self.has_visited(next_photon.position, next_photon.direction):
                    pending.append(next_photon)

    def reset(self) -> None:
        """Forget every recorded visit."""
        self.visited = [[_NO_DIRECTION] * self.width for _ in range(self.height)]


def parse_grid(content: str) -> Grid:
    """Parse the contraption; characters that are not tiles are ignored."""
    symbols = {tile.value for tile in Tile}
    rows = [
        [Tile(char) for char in line if char in symbols]
        for line in content.strip().split("\n")
    ]
    width = len(rows[0]) if rows else 0
    return Grid(width=width, height=len(rows), rows=rows)


def energized_tiles(grid: Grid, photon: Photon) -> str:
    """Map of energized cells ('#') after tracing from photon."""
    energized = set(grid.trace(photon))
    return "\n".join(
        "".join("#" if Point(x, y) in energized else "." for x in range(grid.width))
        for y in range(grid.height)
    )


def energized_tiles_count(grid: Grid, photon: Photon) -> int:
    """Number of distinct cells energized when tracing from photon."""
    return len(set(grid.trace(photon)))


def _edge_photons(grid: Grid) -> Iterator[Photon]:
    for x in range(grid.width):
        yield Photon(Point(x, 0), Direction.SOUTH)
    for x in range(grid.width):
        yield Photon(Point(x, grid.height - 1), Direction.NORTH)
    for y in range(grid.height):
        yield Photon(Point(0, y), Direction.EAST)
    for y in range(grid.height):
        yield Photon(Point(grid.width - 1, y), Direction.WEST)


def max_energized_tiles_count(grid: Grid) -> int:
    """Largest energized count over every beam entering from an edge."""

    def count(photon: Photon) -> int:
        grid.reset()
        return energized_tiles_count(grid, photon)

    return max(count(photon) for photon in _edge_photons(grid))


def answers(text: str) -> tuple[int, int]:
    """Tiles energized from the top-left heading east, and the best edge start."""
    grid = parse_grid(text)
    first = energized_tiles_count(grid, Photon(Point(0, 0), Direction.EAST))
    return first, max_energized_tiles_count(grid)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="The Floor Will Be Lava")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    count, best = answers(Path(args.input).read_text())
    print(f"Energized tile count: {count}")
    print(f"Maximum energized tile count: {best}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())