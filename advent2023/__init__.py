"""Solvers for eleven programming puzzles, one module per puzzle, each with answers(text)."""

__version__ = "0.1.0"

__all__ = [
    "cosmic_expansion",
    "falling_rocks",
    "grove_mixing",
    "hot_springs",
    "lava_droplet",
    "lava_floor",
    "lens_library",
    "monkey_math",
    "parabolic_dish",
    "pipe_maze",
    "point_of_incidence",
]