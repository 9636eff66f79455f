# advent2023

Solvers for a collection of programming puzzles. Each puzzle lives in its own
module, exposes the pieces it is built from (parsers, grids, simulations) and
has an `answers(text)` function that takes the whole puzzle input as a string
and returns the answers.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Every puzzle has a command. Give it the path of your puzzle input file (it
reads `input.txt` in the current directory when no path is given) and it
prints the answers:

```
advent2023-pipe-maze input.txt
advent2023-cosmic-expansion input.txt
advent2023-hot-springs input.txt
advent2023-point-of-incidence input.txt
advent2023-parabolic-dish input.txt
advent2023-lens-library input.txt
advent2023-lava-floor input.txt
advent2023-falling-rocks input.txt
advent2023-grove-mixing input.txt
advent2023-lava-droplet input.txt
advent2023-monkey-math input.txt
```

## Modules

| Module | Puzzle | `answers(text)` returns |
| --- | --- | --- |
| `advent2023.pipe_maze` | Follow a loop of pipes | steps to the farthest point, enclosed area |
| `advent2023.cosmic_expansion` | Galaxies in an expanding universe | distance sums for expansion 2 and 1,000,000 |
| `advent2023.hot_springs` | Arrangements of broken and working springs | arrangement counts, folded and unfolded five times |
| `advent2023.point_of_incidence` | Lines of reflection in ash and rock patterns | note summaries, clean and with the smudge fixed |
| `advent2023.parabolic_dish` | Tilting a platform of rounded and cube rocks | load after tilting north, load after a billion spin cycles |
| `advent2023.lens_library` | The HASH algorithm and a line of 256 lens boxes | sum of step hashes, total focusing power |
| `advent2023.lava_floor` | Light beams through mirrors and splitters | tiles energized from the top-left, best count from any edge |
| `advent2023.falling_rocks` | Rocks falling in a chamber pushed by jets | tower height after 2022 and after a trillion rocks |
| `advent2023.grove_mixing` | Mixing a circular list of numbers | sum of the grove coordinates (a single number) |
| `advent2023.lava_droplet` | A droplet made of unit cubes | total and exterior surface area |
| `advent2023.monkey_math` | A tree of yelling monkeys | root's number, the number `humn` must yell |

## Library use

```python
from advent2023 import cosmic_expansion, lens_library

print(lens_library.hash_string("HASH"))  # 52
print(lens_library.sum_initialization_sequence(
    "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"))  # 1320

with open("input.txt") as handle:
    universe = cosmic_expansion.parse_universe(handle.read().strip().split("\n"))
universe.expand(2)
print(cosmic_expansion.sum_galaxy_distances(universe))
```

Other building blocks include `pipe_maze.parse_grid` and `Grid.traverse_loop`,
`hot_springs.parse_line` and `SpringGroup.solve`, `parabolic_dish.Platform`
with its `tilt_*` methods, `lava_floor.Grid.trace`, `falling_rocks.Room.drop_shape`,
`grove_mixing.WrappedList.mix`, `lava_droplet.parse_cubes` and
`monkey_math.create_tree`.

## What it does not do

- It does not download puzzle inputs; you supply the input file.
- `advent2023.grove_mixing` mixes the list once and reports only the sum of
  the grove coordinates; it has no second answer.
- `advent2023.hot_springs` enumerates every arrangement, so the unfolded count
  can take a long time on large inputs.