import itertools

import pytest

from advent2023.pipe_maze import (
    Direction,
    Distances,
    Point,
    Tile,
    answers,
    can_connect,
    can_tile_exit,
    enclosed_area,
    invert_direction,
    is_tile_pipe,
    main,
    parse_grid,
    point_in_polygon,
    tile_from_directions,
    unused_exit_direction,
    update_position,
)

V = Tile.VERTICAL
H = Tile.HORIZONTAL
NE = Tile.NORTH_EAST
NW = Tile.NORTH_WEST
SW = Tile.SOUTH_WEST
SE = Tile.SOUTH_EAST
G = Tile.GROUND
N = Direction.NORTH
S = Direction.SOUTH
E = Direction.EAST
W = Direction.WEST

SQUARE = [
    ".....",
    ".S-7.",
    ".|.|.",
    ".L-J.",
    ".....",
]

NOISY = [
    "-L|F7",
    "7S-7|",
    "L|7||",
    "-L-J|",
    "L|-JF",
]


@pytest.mark.parametrize(
    "content, rows",
    [
        (
            SQUARE,
            [
                [G, G, G, G, G],
                [G, SE, H, SW, G],
                [G, V, G, V, G],
                [G, NE, H, NW, G],
                [G, G, G, G, G],
            ],
        ),
        (
            NOISY,
            [
                [H, NE, V, SE, SW],
                [SW, SE, H, SW, V],
                [NE, V, SW, V, V],
                [H, NE, H, NW, V],
                [NE, V, H, NW, SE],
            ],
        ),
    ],
)
def test_parse_grid(content, rows):
    grid = parse_grid(content)
    assert grid.start == Point(1, 1)
    assert (grid.width, grid.height) == (5, 5)
    assert grid.rows == rows


@pytest.mark.parametrize("content", [SQUARE, NOISY])
def test_grid_describe(content):
    assert parse_grid(content).describe().split("\n") == content


@pytest.mark.parametrize(
    "content, position, direction, expected",
    [
        (SQUARE, Point(0, 0), E, G),
        (NOISY, Point(0, 1), E, SE),
        (NOISY, Point(3, 0), E, SW),
        (SQUARE, Point(2, 2), E, V),
        (SQUARE, Point(2, 2), N, H),
        (SQUARE, Point(2, 2), S, H),
        (SQUARE, Point(4, 3), W, NW),
    ],
)
def test_grid_neighbor_tile(content, position, direction, expected):
    assert parse_grid(content).neighbor_tile(position, direction) == expected


def test_neighbor_tile_out_of_bounds():
    grid = parse_grid(SQUARE)
    with pytest.raises(IndexError):
        grid.neighbor_tile(Point(0, 0), N)


def test_grid_getitem_out_of_bounds():
    grid = parse_grid(SQUARE)
    with pytest.raises(IndexError):
        grid[Point(5, 0)]


EXIT_TRUE = {
    (V, N), (V, S),
    (H, E), (H, W),
    (NE, N), (NE, E),
    (NW, N), (NW, W),
    (SE, S), (SE, E),
    (SW, S), (SW, W),
}


@pytest.mark.parametrize("tile, direction", list(itertools.product(Tile, Direction)))
def test_can_tile_exit(tile, direction):
    assert can_tile_exit(tile, direction) == ((tile, direction) in EXIT_TRUE)


@pytest.mark.parametrize(
    "tile, expected",
    [(V, True), (H, True), (NE, True), (NW, True), (SE, True), (SW, True),
     (G, False), (Tile.START, False)],
)
def test_is_tile_pipe(tile, expected):
    assert is_tile_pipe(tile) is expected


CONNECT_TRUE = {
    (V, N, V), (V, N, SE), (V, N, SW), (V, S, V), (V, S, NE), (V, S, NW),
    (H, E, H), (H, E, NW), (H, E, SW), (H, W, H), (H, W, NE), (H, W, SE),
    (NE, N, V), (NE, N, SE), (NE, N, SW), (NE, E, H), (NE, E, NW), (NE, E, SW),
    (NW, N, V), (NW, N, SE), (NW, N, SW), (NW, W, H), (NW, W, NE), (NW, W, SE),
    (SE, S, V), (SE, S, NE), (SE, S, NW), (SE, E, H), (SE, E, NW), (SE, E, SW),
    (SW, S, V), (SW, S, NE), (SW, S, NW), (SW, W, H), (SW, W, NE), (SW, W, SE),
}

PIPES = [V, H, NE, NW, SE, SW]


@pytest.mark.parametrize(
    "first, direction, second", list(itertools.product(PIPES, [N, S, E, W], PIPES))
)
def test_can_connect(first, direction, second):
    assert can_connect(first, direction, second) == (
        (first, direction, second) in CONNECT_TRUE
    )


def test_can_connect_rejects_ground():
    with pytest.raises(ValueError):
        can_connect(G, N, V)


def test_tile_from_directions():
    assert tile_from_directions(S, E) == SE
    assert tile_from_directions(W, N) == NW
    with pytest.raises(ValueError):
        tile_from_directions(N, N)


def test_invert_and_update():
    assert invert_direction(N) == S
    assert invert_direction(E) == W
    assert update_position(Point(2, 2), N) == Point(2, 1)
    assert update_position(Point(2, 2), E) == Point(3, 2)


def test_unused_exit_direction():
    assert unused_exit_direction(NE, S) == E
    assert unused_exit_direction(NE, W) == N
    assert unused_exit_direction(V, S) == S
    with pytest.raises(ValueError):
        unused_exit_direction(V, E)
    with pytest.raises(ValueError):
        unused_exit_direction(G, N)


@pytest.mark.parametrize(
    "content, expected",
    [
        (SQUARE, 4),
        (["..F7.", ".FJ|.", "SJ.L7", "|F--J", "LJ..."], 8),
    ],
)
def test_grid_distance(content, expected):
    grid = parse_grid(content)
    steps = list(grid.traverse_loop())
    assert len(steps) // 2 == expected
    assert steps[0][0] == grid.start


@pytest.mark.parametrize(
    "content, expected",
    [
        (
            [
                "...........",
                ".S-------7.",
                ".|F-----7|.",
                ".||.....||.",
                ".||.....||.",
                ".|L-7.F-J|.",
                ".|..|.|..|.",
                ".L--J.L--J.",
                "...........",
            ],
            4,
        ),
        (
            [
                "..........",
                ".S------7.",
                ".|F----7|.",
                ".||....||.",
                ".||....||.",
                ".|L-7F-J|.",
                ".|..||..|.",
                ".L--JL--J.",
                "..........",
            ],
            4,
        ),
        (
            [
                ".F----7F7F7F7F-7....",
                ".|F--7||||||||FJ....",
                ".||.FJ||||||||L7....",
                "FJL7L7LJLJ||LJ.L-7..",
                "L--J.L7...LJS7F-7L7.",
                "....F-J..F7FJ|L7L7L7",
                "....L7.F7||L7|.L7L7|",
                ".....|FJLJ|FJ|F7|.LJ",
                "....FJL-7.||.||||...",
                "....L---J.LJ.LJLJ...",
            ],
            8,
        ),
    ],
)
def test_grid_area(content, expected):
    assert enclosed_area(parse_grid(content)) == expected


def test_point_in_polygon_square():
    square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(0, 0)]
    assert point_in_polygon(Point(2, 2), square) is True
    assert point_in_polygon(Point(6, 2), square) is False


def test_distances():
    distances = Distances(3, 2)
    assert distances.describe() == "...\n..."
    distances[Point(0, 0)] = 0
    distances[Point(1, 0)] = 10
    assert distances[Point(1, 0)] == 10
    assert distances.describe() == "02.\n..."
    with pytest.raises(IndexError):
        distances[Point(3, 0)]


def test_answers():
    assert answers("\n".join(SQUARE) + "\n") == (4, 1)


def test_parse_grid_without_loop_raises():
    with pytest.raises(ValueError):
        parse_grid(["...", ".S.", "..."])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(SQUARE))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Steps to furthest point from starting position: 4" in out
    assert "Area enclosed by loop: 1" in out