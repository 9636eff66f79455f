"""Boiling Boulders: surface area of a lava droplet built from unit cubes."""

from __future__ import annotations

import argparse
import re
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, NamedTuple, Sequence

_CUBE_PATTERN = re.compile(r"\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*,\s*([+-]?\d+)")


class Point3(NamedTuple):
    """A position in space."""

    x: int
    y: int
    z: int


class Side(Enum):
    """One of the six faces of a cube, valued by the offset to its neighbour."""

    TOP = (0, 0, 1)
    BOTTOM = (0, 0, -1)
    LEFT = (-1, 0, 0)
    RIGHT = (1, 0, 0)
    FRONT = (0, 1, 0)
    BACK = (0, -1, 0)


@dataclass
class Cube:
    """A unit of space: either lava or an empty cell."""

    position: Point3
    empty: bool = False
    external_access: bool = False
    faces_exposed: int = 0
    external_faces_exposed: int = 0


@dataclass
class Droplet:
    """The bounding box of the scan, every cell in it, and the lava cubes."""

    minimum: Point3
    maximum: Point3
    space: dict[Point3, Cube] = field(default_factory=dict)
    cubes: list[Cube] = field(default_factory=list)

    def _contains(self, point: Point3) -> bool:
        return all(lo <= value <= hi for lo, value, hi in zip(self.minimum, point, self.maximum))

    def cube(self, point: Point3) -> Cube:
        """The cell at point."""
        try:
            return self.space[point]
        except KeyError:
            raise IndexError(f"invalid position {point.x},{point.y},{point.z}") from None

    def neighbor(self, point: Point3, side: Side) -> Cube | None:
        """The cell next to point across side, or None at the edge of the box."""
        dx, dy, dz = side.value
        position = Point3(point.x + dx, point.y + dy, point.z + dz)
        if not self._contains(position):
            return None
        return self.cube(position)

    def _border_cells(self) -> Iterator[Point3]:
        low, high = self.minimum, self.maximum
        for z in range(low.z, high.z + 1):
            for x in range(low.x, high.x + 1):
                yield Point3(x, low.y, z)
                yield Point3(x, high.y, z)
            for y in range(low.y + 1, high.y):
                yield Point3(low.x, y, z)
                yield Point3(high.x, y, z)

    def fill_external_access(self) -> None:
        """Mark every empty cell reachable from the sides of the box."""
        pending: deque[Point3] = deque()
        visited: set[Point3] = set()

        for point in self._border_cells():
            cell = self.cube(point)
            if cell.empty and point not in visited:
                cell.external_access = True
                pending.append(point)
                visited.add(point)

        while pending:
            point = pending.popleft()
            for side in Side:
                cell = self.neighbor(point, side)
                if cell is not None and cell.empty and cell.position not in visited:
                    cell.external_access = True
                    pending.append(cell.position)
                    visited.add(cell.position)

    def surface_area(self) -> int:
        """Faces of lava cubes not touching another lava cube."""
        return sum(cube.faces_exposed for cube in self.cubes)

    def external_surface_area(self) -> int:
        """Faces of lava cubes reachable from outside the droplet."""
        return sum(cube.external_faces_exposed for cube in self.cubes)


def parse_cube(line: str) -> Cube:
    """Parse a line of the form 'x,y,z' into a lava cube."""
    match = _CUBE_PATTERN.match(line)
    if match is None:
        raise ValueError(f"invalid cube line: {line!r}")
    x, y, z = (int(group) for group in match.groups())
    return Cube(Point3(x, y, z))


def parse_cubes(text: str) -> Droplet:
    """Parse a scan, fill the surrounding space and count exposed faces."""
    lava = [parse_cube(line) for line in text.split("\n")]
    positions = [cube.position for cube in lava]
    minimum = Point3(*(min(values) for values in zip(*positions)))
    maximum = Point3(*(max(values) for values in zip(*positions)))

    droplet = Droplet(minimum, maximum)
    for z in range(minimum.z, maximum.z + 1):
        for y in range(minimum.y, maximum.y + 1):
            for x in range(minimum.x, maximum.x + 1):
                point = Point3(x, y, z)
                droplet.space[point] = Cube(point, empty=True)

    for cube in lava:
        droplet.space[cube.position] = cube
        droplet.cubes.append(cube)

    droplet.fill_external_access()

    for cube in droplet.cubes:
        for side in Side:
            cell = droplet.neighbor(cube.position, side)
            if cell is None:
                cube.faces_exposed += 1
                cube.external_faces_exposed += 1
            elif cell.empty:
                cube.faces_exposed += 1
                if cell.external_access:
                    cube.external_faces_exposed += 1

    return droplet


def answers(text: str) -> tuple[int, int]:
    """Total and exterior surface area of the droplet."""
    droplet = parse_cubes(text.strip())
    return droplet.surface_area(), droplet.external_surface_area()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lava droplet")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    surface, external = answers(Path(args.input).read_text())
    print(f"Lava droplets surface area: {surface} units")
    print(f"Lava droplets external surface area: {external} units")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())