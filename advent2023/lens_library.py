"""Lens Library: the HASH algorithm and the HASHMAP lens arrangement."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

BOX_COUNT = 256


@dataclass
class Lens:
    """A labelled lens with a focal length."""

    name: str
    focal_length: int


@dataclass
class Box:
    """A numbered box holding lenses in insertion order."""

    number: int
    lenses: list[Lens] = field(default_factory=list)

    def focusing_power(self) -> int:
        """Sum over lenses of (box number + 1) * slot * focal length."""
        return sum(
            (self.number + 1) * slot * lens.focal_length
            for slot, lens in enumerate(self.lenses, start=1)
        )


def _new_boxes() -> list[Box]:
    return [Box(number) for number in range(BOX_COUNT)]


@dataclass
class BoxLine:
    """The row of 256 boxes, addressed by the HASH of a lens label."""

    boxes: list[Box] = field(default_factory=_new_boxes)

    def __getitem__(self, index: int) -> Box:
        return self.boxes[index]

    def __len__(self) -> int:
        return len(self.boxes)

    def __iter__(self) -> Iterator[Box]:
        return iter(self.boxes)

    def remove_lens(self, name: str) -> None:
        """Take the lens with this label out of its box, if it is there."""
        box = self.boxes[hash_string(name)]
        box.lenses = [lens for lens in box.lenses if lens.name != name]

    def set_lens(self, name: str, focal_length: int) -> None:
        """Replace the lens with this label, or append a new one to its box."""
        box = self.boxes[hash_string(name)]
        for lens in box.lenses:
            if lens.name == name:
                lens.focal_length = focal_length
                return
        box.lenses.append(Lens(name, focal_length))

    def total_focusing_power(self) -> int:
        """Sum of the focusing power of every box."""
        return sum(box.focusing_power() for box in self.boxes)


def running_hash(current: int, text: str) -> int:
    """Continue the HASH algorithm from ``current`` over ``text``."""
    for char in text:
        current = ((current + ord(char)) & 0xFF) * 17 % 256
    return current


def hash_string(text: str) -> int:
    """The HASH algorithm: a value in 0..255."""
    return running_hash(0, text)


def sum_initialization_sequence(text: str) -> int:
    """Sum of the HASH of every comma-separated step."""
    return sum(hash_string(step) for step in text.split(","))


def sum_focusing_power(text: str) -> int:
    """Follow the initialization sequence and return the total focusing power."""
    line = BoxLine()
    for step in text.split(","):
        parts = step.split("=")
        if len(parts) == 2:
            label, length = parts
            line.set_lens(label, int(length))
        else:
            line.remove_lens(step.replace("-", ""))
    return line.total_focusing_power()


def answers(text: str) -> tuple[int, int]:
    """Sum of step hashes, and the focusing power of the final arrangement."""
    sequence = text.strip("\r\n")
    return sum_initialization_sequence(sequence), sum_focusing_power(sequence)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lens Library")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    total, power = answers(Path(args.input).read_text())
    print(f"Sum of initialization sequence hash: {total}")
    print(f"Focusing power of resulting lens configuration: {power}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())