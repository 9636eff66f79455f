"""Hot Springs: count spring arrangements that match damaged-run records."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Sequence


class SpringState(Enum):
    """Condition of a single spring, valued by its record symbol."""

    OPERATIONAL = "."
    BROKEN = "#"
    UNKNOWN = "?"


@dataclass
class SpringGroup:
    """One row of the condition records."""

    unfolded: int
    states: list[SpringState] = field(default_factory=list)
    damaged_runs: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.states = list(self.states)
        self.damaged_runs = list(self.damaged_runs)

    def describe(self) -> str:
        """Render the row in the record format."""
        states = "".join(state.value for state in self.states)
        runs = ",".join(str(run) for run in self.damaged_runs)
        return f"{states} {runs}"

    def solve(self) -> list[SpringGroup]:
        """Every fully determined row consistent with the damaged runs."""
        return [
            SpringGroup(1, alternative, self.damaged_runs)
            for alternative in generate_alternatives(self.states, self.damaged_runs)
            if is_alternative_valid(alternative, self.damaged_runs)
        ]

    def state_count(self, state: SpringState) -> int:
        """How many springs are in the given state."""
        return self.states.count(state)

    def unfold(self, factor: int) -> SpringGroup:
        """Repeat the row factor times, joining states with unknown springs."""
        states: list[SpringState] = []
        for i in range(factor):
            states.extend(self.states)
            if i < factor - 1:
                states.append(SpringState.UNKNOWN)
        return SpringGroup(factor, states, self.damaged_runs * factor)


def simplify_run(
    states: Sequence[SpringState], interested_state: SpringState
) -> list[int]:
    """Lengths of runs of interested_state, up to the first unknown spring."""
    runs: list[int] = []
    count = 0
    for state in states:
        if state is SpringState.UNKNOWN:
            break
        if state is interested_state:
            count += 1
        else:
            if count > 0:
                runs.append(count)
            count = 0
    if count > 0:
        runs.append(count)
    return runs


def is_alternative_valid(
    states: Sequence[SpringState], requirements: Sequence[int]
) -> bool:
    """Whether the broken runs of states match requirements exactly."""
    return simplify_run(states, SpringState.BROKEN) == list(requirements)


def _cannot_match(states: Sequence[SpringState], requirements: Sequence[int]) -> bool:
    runs = simplify_run(states, SpringState.BROKEN)
    if len(runs) > len(requirements):
        return True
    if not runs:
        return False
    *complete, last = runs
    if any(run != required for run, required in zip(complete, requirements)):
        return True
    return last > requirements[len(runs) - 1]


def _alternatives(
    states: list[SpringState], offset: int, requirements: Sequence[int]
) -> Iterator[list[SpringState]]:
    unknown = next(
        (i for i in range(offset, len(states)) if states[i] is SpringState.UNKNOWN),
        None,
    )
    if unknown is None:
        yield states
        return

    for replacement in (SpringState.BROKEN, SpringState.OPERATIONAL):
        mutated = list(states)
        mutated[unknown] = replacement
        if not _cannot_match(mutated, requirements):
            yield from _alternatives(mutated, unknown + 1, requirements)


def generate_alternatives(
    states: Sequence[SpringState], requirements: Sequence[int]
) -> list[list[SpringState]]:
    """Assignments of unknown springs, broken before operational, pruned early."""
    return list(_alternatives(list(states), 0, requirements))


def parse_line(line: str) -> SpringGroup:
    """Parse a record line such as '???.### 1,1,3'."""
    parts = line.split(" ")
    if len(parts) != 2:
        raise ValueError(f"unexpected line {line!r}")
    conditions, runs = parts

    states = []
    for char in conditions:
        try:
            states.append(SpringState(char))
        except ValueError:
            raise ValueError(f"unexpected spring state: {char!r}") from None

    return SpringGroup(1, states, [int(number) for number in runs.split(",")])


def answers(text: str) -> tuple[int, int]:
    """Total arrangements for the records as written and unfolded five times."""
    groups = [parse_line(line) for line in text.strip().split("\n")]
    folded = sum(len(group.solve()) for group in groups)
    unfolded = sum(len(group.unfold(5).solve()) for group in groups)
    return folded, unfolded


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hot Springs")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    folded, unfolded = answers(Path(args.input).read_text())
    print(f"Sum of possible arrangements: {folded}")
    print(f"Sum of unfolded possible arrangements: {unfolded}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())