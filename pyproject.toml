[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2023"
version = "0.1.0"
description = "Solvers for a set of programming puzzles: pipe mazes, cosmic expansion, hot springs, mirrors, rolling rocks, light beams, falling rocks, list mixing, lava droplets and monkey math."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2023-pipe-maze = "advent2023.pipe_maze:main"
advent2023-cosmic-expansion = "advent2023.cosmic_expansion:main"
advent2023-hot-springs = "advent2023.hot_springs:main"
advent2023-point-of-incidence = "advent2023.point_of_incidence:main"
advent2023-parabolic-dish = "advent2023.parabolic_dish:main"
advent2023-lens-library = "advent2023.lens_library:main"
advent2023-lava-floor = "advent2023.lava_floor:main"
advent2023-falling-rocks = "advent2023.falling_rocks:main"
advent2023-grove-mixing = "advent2023.grove_mixing:main"
advent2023-lava-droplet = "advent2023.lava_droplet:main"
advent2023-monkey-math = "advent2023.monkey_math:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2023"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
