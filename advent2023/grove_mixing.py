"""Grove Positioning: mix a circular list of numbers to find grove coordinates."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence


@dataclass
class WrappedList:
    """A circular list of numbers that can be mixed in place."""

    items: list[int] = field(default_factory=list)

    def new_index(self, index: int, delta: int) -> int:
        """Where the number at index ends up after moving delta places."""
        if delta == 0:
            return index

        length = len(self.items)
        target = (index + delta) % length

        if delta < 0:
            if target > index:
                target -= 1
            elif target == 0:
                target = length - 1
        else:
            if target < index:
                target += 1
            elif target == length - 1:
                target = 0

        return target

    def move(self, index: int, delta: int) -> int:
        """Move the number at index by delta places; return its new index."""
        target = self.new_index(index, delta)
        if target != index:
            self.items.insert(target, self.items.pop(index))
        return target

    def mix(self) -> None:
        """Move every number once, in its original order, by its own value."""
        handled = [False] * len(self.items)
        index = 0
        while index < len(self.items):
            if handled[index]:
                index += 1
                continue
            target = self.move(index, self.items[index])
            handled.pop(index)
            handled.insert(target, True)

    def coordinates(self) -> tuple[int, int, int]:
        """The numbers 1000, 2000 and 3000 places after the zero."""
        try:
            zero = self.items.index(0)
        except ValueError:
            raise ValueError("couldn't find 0") from None
        length = len(self.items)
        return tuple(self.items[(zero + offset) % length] for offset in (1000, 2000, 3000))

    def describe(self) -> str:
        """The numbers joined by ', '."""
        return ", ".join(str(number) for number in self.items)


def parse_wrapped_list(text: str) -> WrappedList:
    """Parse one integer per line."""
    items = []
    for line in text.split("\n"):
        try:
            items.append(int(line.strip()))
        except ValueError:
            raise ValueError(f"invalid number: {line!r}") from None
    return WrappedList(items)


def answers(text: str) -> int:
    """Sum of the grove coordinates after one round of mixing."""
    wrapped = parse_wrapped_list(text.strip())
    wrapped.mix()
    return sum(wrapped.coordinates())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Grove mixing")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    print(f"Sum of grove coordinates: {answers(Path(args.input).read_text())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())