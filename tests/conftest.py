"""Shared maze fixtures."""

import pytest

from turncost.utils.maze_io import parse_maze


SMALL_MAZE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

LARGE_MAZE = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""

# Two mirror-image routes around the block at (2,2), three turns each
TWIN_ROUTES = """\
#####
#...#
#S#E#
#...#
#####
"""

ENCLOSED_END = """\
#######
#S...##
#....#E
#######
"""


@pytest.fixture
def small_maze():
    return parse_maze(SMALL_MAZE)


@pytest.fixture
def large_maze():
    return parse_maze(LARGE_MAZE)


@pytest.fixture
def twin_routes():
    return parse_maze(TWIN_ROUTES)


@pytest.fixture
def enclosed_end():
    return parse_maze(ENCLOSED_END)


@pytest.fixture
def maze_files(tmp_path):
    """Example mazes written to disk, keyed by name."""
    files = {}
    for name, text in (("small", SMALL_MAZE), ("twin", TWIN_ROUTES), ("enclosed", ENCLOSED_END)):
        path = tmp_path / f"{name}.txt"
        path.write_text(text)
        files[name] = path
    return files
