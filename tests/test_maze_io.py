"""Tests for the maze text format."""

import pytest

from turncost.domain.errors import AmbiguousError, MalformedGridError, NotFoundError
from turncost.domain.reconstruct import trace_path
from turncost.domain.search import explore, optimal_path_positions
from turncost.domain.types import Direction, Position, SearchConfig
from turncost.utils.grid_factory import open_grid
from turncost.utils.maze_io import load_maze, maze_to_text, parse_maze, render_maze, save_maze


class TestParseMaze:

    def test_finds_start_and_end(self, small_maze):
        grid, start, end = small_maze
        assert grid.bounds() == (15, 15)
        assert start == Position(1, 13)
        assert end == Position(13, 1)

    def test_ignores_surrounding_blank_lines_and_crlf(self):
        grid, start, end = parse_maze("\n#S.E#\r\n#...#\r\n\n")
        assert grid.bounds() == (5, 2)
        assert start == Position(1, 0)
        assert end == Position(3, 0)

    def test_crlf_with_trailing_blank_line(self):
        grid, start, end = parse_maze("#####\r\n#S.E#\r\n#####\r\n\r\n")
        assert grid.bounds() == (5, 3)
        assert (start, end) == (Position(1, 1), Position(3, 1))

    def test_crlf_file(self, tmp_path):
        path = tmp_path / "windows.txt"
        path.write_bytes(b"#####\r\n#S.E#\r\n#####\r\n\r\n")
        grid, _, _ = load_maze(path)
        assert grid.bounds() == (5, 3)

    def test_blank_line_inside_maze(self):
        with pytest.raises(MalformedGridError):
            parse_maze("#S.E#\n\n#...#\n")

    def test_missing_end(self):
        with pytest.raises(NotFoundError):
            parse_maze("#S..#\n")

    def test_two_starts(self):
        with pytest.raises(AmbiguousError):
            parse_maze("#S.SE#\n")

    def test_ragged(self):
        with pytest.raises(MalformedGridError):
            parse_maze("#S.E#\n#..#\n")

    def test_unknown_glyph(self):
        with pytest.raises(MalformedGridError):
            parse_maze("#S~E#\n")


class TestFiles:

    def test_save_and_load(self, tmp_path, twin_routes):
        grid, start, end = twin_routes
        path = save_maze(grid, tmp_path / "nested" / "twin.txt")
        loaded, loaded_start, loaded_end = load_maze(path)
        assert loaded == grid
        assert (loaded_start, loaded_end) == (start, end)

    def test_maze_to_text(self):
        grid = open_grid(3, 2, Position(0, 0), Position(2, 1))
        assert maze_to_text(grid) == "S..\n..E\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_maze(tmp_path / "absent.txt")


class TestRenderMaze:

    def test_plain(self, twin_routes):
        grid, _, _ = twin_routes
        assert render_maze(grid) == "#####\n#...#\n#S#E#\n#...#\n#####"

    def test_optimal_tiles(self, twin_routes):
        grid, start, end = twin_routes
        tiles = optimal_path_positions(grid, start, Direction.RIGHT, end)
        assert render_maze(grid, highlight=tiles) == "#####\n#OOO#\n#S#E#\n#OOO#\n#####"

    def test_route_arrows(self):
        grid = open_grid(4, 3, Position(0, 0), Position(3, 2))
        config = SearchConfig()
        result = explore(grid, Position(0, 0), Direction.RIGHT, Position(3, 2))
        route = trace_path(result.cost_table, Position(0, 0), Position(3, 2), result.cost, config)
        assert render_maze(grid, route=route) == "S>>v\n...v\n...E"

    def test_start_and_end_keep_their_glyphs(self):
        grid = open_grid(2, 1, Position(0, 0), Position(1, 0))
        assert render_maze(grid, highlight=[Position(0, 0), Position(1, 0)]) == "SE"
