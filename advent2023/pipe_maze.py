"""Pipe Maze: follow a closed loop of pipes and measure the area it encloses."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Sequence


class Tile(Enum):
    """A single cell of the maze, valued by its map symbol."""

    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    GROUND = "."
    START = "S"


class Direction(Enum):
    """A compass direction of travel."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class Point(NamedTuple):
    """A grid position; y grows southwards."""

    x: int
    y: int


_EXITS: dict[Tile, frozenset[Direction]] = {
    Tile.VERTICAL: frozenset({Direction.NORTH, Direction.SOUTH}),
    Tile.HORIZONTAL: frozenset({Direction.EAST, Direction.WEST}),
    Tile.NORTH_EAST: frozenset({Direction.NORTH, Direction.EAST}),
    Tile.NORTH_WEST: frozenset({Direction.NORTH, Direction.WEST}),
    Tile.SOUTH_WEST: frozenset({Direction.SOUTH, Direction.WEST}),
    Tile.SOUTH_EAST: frozenset({Direction.SOUTH, Direction.EAST}),
}

_TILE_FROM_EXITS: dict[frozenset[Direction], Tile] = {
    exits: tile for tile, exits in _EXITS.items()
}

_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_INITIAL_DIRECTION = {
    Tile.VERTICAL: Direction.NORTH,
    Tile.HORIZONTAL: Direction.EAST,
    Tile.NORTH_EAST: Direction.SOUTH,
    Tile.NORTH_WEST: Direction.SOUTH,
    Tile.SOUTH_EAST: Direction.NORTH,
    Tile.SOUTH_WEST: Direction.NORTH,
}


def _check_bounds(point: Point, width: int, height: int) -> None:
    if not (0 <= point.x < width and 0 <= point.y < height):
        raise IndexError(f"invalid position {point.x},{point.y}")


@dataclass
class Distances:
    """A per-cell integer map, initialised to -1 (unset)."""

    width: int
    height: int
    rows: list[list[int]] = field(init=False)

    def __post_init__(self) -> None:
        self.rows = [[-1] * self.width for _ in range(self.height)]

    def describe(self) -> str:
        """Render unset cells as '.', zero as '0', others as their natural log."""

        def symbol(distance: int) -> str:
            if distance < 0:
                return "."
            if distance == 0:
                return "0"
            return str(int(math.log(distance)))

        return "\n".join("".join(symbol(d) for d in row) for row in self.rows)

    def __getitem__(self, point: Point) -> int:
        _check_bounds(point, self.width, self.height)
        return self.rows[point.y][point.x]

    def __setitem__(self, point: Point, distance: int) -> None:
        _check_bounds(point, self.width, self.height)
        self.rows[point.y][point.x] = distance


@dataclass
class Grid:
    """The parsed maze, with the start cell replaced by its actual pipe."""

    start: Point
    width: int
    height: int
    rows: list[list[Tile]]

    def __getitem__(self, point: Point) -> Tile:
        _check_bounds(point, self.width, self.height)
        return self.rows[point.y][point.x]

    def __setitem__(self, point: Point, tile: Tile) -> None:
        _check_bounds(point, self.width, self.height)
        self.rows[point.y][point.x] = tile

    def neighbors(self, point: Point) -> Iterator[tuple[Point, Direction, Tile]]:
        """Yield in-bounds neighbours in north, south, east, west order."""
        _check_bounds(point, self.width, self.height)
        for direction in (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST):
            neighbor = update_position(point, direction)
            if 0 <= neighbor.x < self.width and 0 <= neighbor.y < self.height:
                yield neighbor, direction, self[neighbor]

    def traverse_loop(self) -> Iterator[tuple[Point, Direction, Tile]]:
        """Walk the loop from the start, yielding each cell once."""
        position = self.start
        tile = self[position]
        try:
            direction = _INITIAL_DIRECTION[tile]
        except KeyError:
            raise ValueError(f"unexpected tile: {tile.value}") from None

        while True:
            yield position, direction, tile
            direction = unused_exit_direction(tile, direction)
            position = update_position(position, direction)
            tile = self[position]
            if position == self.start:
                break

    def neighbor_tile(self, point: Point, direction: Direction) -> Tile:
        """The tile adjacent to point in the given direction."""
        neighbor = update_position(point, direction)
        if not (0 <= neighbor.x < self.width and 0 <= neighbor.y < self.height):
            raise IndexError(
                f"invalid direction {direction.value} from position {point.x},{point.y}"
            )
        return self.rows[neighbor.y][neighbor.x]

    def describe(self) -> str:
        """Render the grid, showing the start cell as 'S'."""
        lines = []
        for y, row in enumerate(self.rows):
            lines.append(
                "".join(
                    "S" if Point(x, y) == self.start else tile.value
                    for x, tile in enumerate(row)
                )
            )
        return "\n".join(lines)


def parse_grid(lines: Sequence[str]) -> Grid:
    """Parse map lines and resolve which pipe sits under the start marker."""
    rows: list[list[Tile]] = []
    start: Point | None = None
    for y, line in enumerate(lines):
        row = []
        for x, char in enumerate(line):
            try:
                tile = Tile(char)
            except ValueError:
                raise ValueError(f"unknown tile {char!r}") from None
            if tile is Tile.START:
                start = Point(x, y)
            row.append(tile)
        rows.append(row)

    if start is None:
        raise ValueError("no start position in grid")

    width = len(rows[0]) if rows else 0
    grid = Grid(start=start, width=width, height=len(rows), rows=rows)

    exits = [
        direction
        for _, direction, tile in grid.neighbors(start)
        if can_tile_exit(tile, invert_direction(direction))
    ]
    if len(exits) != 2:
        raise ValueError(f"unexpected number of exit directions: {exits}")

    grid[start] = tile_from_directions(exits[0], exits[1])
    return grid


def is_tile_pipe(tile: Tile) -> bool:
    """Whether the tile is one of the six pipe shapes."""
    return tile in _EXITS


def tile_from_directions(first: Direction, second: Direction) -> Tile:
    """The pipe whose two openings face the given directions."""
    if first == second:
        raise ValueError(f"both directions are the same {first.value}")
    return _TILE_FROM_EXITS[frozenset({first, second})]


def invert_direction(direction: Direction) -> Direction:
    """The opposite compass direction."""
    return _OPPOSITE[direction]


def unused_exit_direction(tile: Tile, direction: Direction) -> Direction:
    """The direction of travel out of a pipe entered while moving in direction."""
    exits = _EXITS.get(tile)
    if exits is None:
        raise ValueError(f"unexpected tile: {tile.value}")
    entry = invert_direction(direction)
    if entry not in exits:
        raise ValueError(f"unexpected tile/direction: {tile.value} {direction.value}")
    (other,) = exits - {entry}
    return other


def can_tile_exit(tile: Tile, direction: Direction) -> bool:
    """Whether the tile has an opening facing direction."""
    return direction in _EXITS.get(tile, frozenset())


def update_position(point: Point, direction: Direction) -> Point:
    """One step from point in direction."""
    dx, dy = _OFFSETS[direction]
    return Point(point.x + dx, point.y + dy)


def can_connect(first: Tile, direction: Direction, second: Tile) -> bool:
    """Whether first joins second when second lies in direction from first."""
    if not is_tile_pipe(first) or not is_tile_pipe(second):
        raise ValueError(f"unexpected tile type: {first.value} / {second.value}")
    return can_tile_exit(first, direction) and can_tile_exit(
        second, invert_direction(direction)
    )


def point_in_polygon(point: Point, vertices: Sequence[Point]) -> bool:
    """Crossing-number test; vertices form a closed path (last equals first)."""
    crossings = 0
    for a, b in zip(vertices, vertices[1:]):
        if (a.y <= point.y < b.y) or (b.y <= point.y < a.y):
            t = (point.y - a.y) / (b.y - a.y)
            if point.x < a.x + t * (b.x - a.x):
                crossings += 1
    return crossings % 2 == 1


def enclosed_area(grid: Grid) -> int:
    """Number of cells not on the loop that lie inside it."""
    vertices = [position for position, _, _ in grid.traverse_loop()]
    on_loop = set(vertices)
    vertices.append(grid.start)
    return sum(
        1
        for y in range(grid.height)
        for x in range(grid.width)
        if Point(x, y) not in on_loop and point_in_polygon(Point(x, y), vertices)
    )


def answers(text: str) -> tuple[int, int]:
    """Steps to the farthest loop point, and the area enclosed by the loop."""
    grid = parse_grid(text.strip().split("\n"))
    steps = sum(1 for _ in grid.traverse_loop())
    return steps // 2, enclosed_area(grid)


def _lines(items: Iterable[str]) -> list[str]:
    return list(items)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pipe Maze")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    farthest, area = answers(Path(args.input).read_text())
    print(f"Steps to furthest point from starting position: {farthest}")
    print(f"Area enclosed by loop: {area}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())