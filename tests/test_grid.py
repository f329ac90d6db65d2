"""Tests for the immutable grid model."""

import numpy as np
import pytest

from turncost.domain.errors import (
    AmbiguousError, MalformedGridError, NotFoundError, OutOfBoundsError
)
from turncost.domain.grid import Grid, build_grid
from turncost.domain.types import CellKind, Position


ROWS = [
    "#####",
    "#S.E#",
    "#####",
]


class TestBuildGrid:

    def test_bounds(self):
        grid = build_grid(ROWS)
        assert grid.bounds() == (5, 3)
        assert grid.width == 5
        assert grid.height == 3

    def test_accepts_cell_kinds(self):
        grid = build_grid([[CellKind.START, CellKind.EMPTY, CellKind.END]])
        assert grid.cell_at(Position(2, 0)).kind == CellKind.END

    def test_rejects_ragged_rows(self):
        with pytest.raises(MalformedGridError):
            build_grid(["###", "#S.E", "###"])

    def test_rejects_empty_input(self):
        with pytest.raises(MalformedGridError):
            build_grid([])
        with pytest.raises(MalformedGridError):
            build_grid(["", ""])

    def test_rejects_unknown_glyph(self):
        with pytest.raises(MalformedGridError):
            build_grid(["#S?E#"])

    def test_malformed_is_a_value_error(self):
        with pytest.raises(ValueError):
            build_grid(["##", "#"])

    def test_rows_round_trip(self):
        grid = build_grid(ROWS)
        assert build_grid(grid.rows()) == grid


class TestCellAccess:

    def test_cell_at(self):
        grid = build_grid(ROWS)
        cell = grid.cell_at(Position(1, 1))
        assert cell.kind == CellKind.START
        assert cell.position == Position(1, 1)
        assert grid.cell_at(Position(0, 0)).is_wall

    @pytest.mark.parametrize("position", [
        Position(-1, 0), Position(0, -1), Position(5, 0), Position(0, 3),
    ])
    def test_cell_at_out_of_bounds(self, position):
        grid = build_grid(ROWS)
        with pytest.raises(OutOfBoundsError):
            grid.cell_at(position)

    def test_is_passable(self):
        grid = build_grid(ROWS)
        assert grid.is_passable(Position(2, 1))
        assert not grid.is_passable(Position(0, 1))
        assert not grid.is_passable(Position(9, 9))

    def test_cells_row_major(self):
        grid = build_grid(["S.", ".E"])
        positions = [cell.position for cell in grid.cells()]
        assert positions == [Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)]

    def test_passable_positions_and_count(self):
        grid = build_grid(ROWS)
        assert set(grid.passable_positions()) == {Position(1, 1), Position(2, 1), Position(3, 1)}
        assert grid.count(CellKind.WALL) == 12

    @pytest.mark.parametrize("code", [7, -1, 300])
    def test_rejects_unknown_storage_codes(self, code):
        with pytest.raises(MalformedGridError):
            Grid(np.array([[0, code]]))

    def test_accepts_storage_codes(self):
        grid = Grid(np.array([[CellKind.START, CellKind.EMPTY, CellKind.END]]))
        assert grid.locate(CellKind.END) == Position(2, 0)

    def test_storage_is_read_only(self):
        grid = build_grid(ROWS)
        with pytest.raises(ValueError):
            grid._cells[0, 0] = CellKind.EMPTY


class TestFind:

    def test_find_unique(self):
        grid = build_grid(ROWS)
        assert grid.find(lambda cell: cell.kind == CellKind.END) == Position(3, 1)

    def test_find_none(self):
        grid = build_grid(["#.#"])
        with pytest.raises(NotFoundError):
            grid.find(lambda cell: cell.kind == CellKind.START)

    def test_find_ambiguous(self):
        grid = build_grid(ROWS)
        with pytest.raises(AmbiguousError):
            grid.find(lambda cell: cell.is_passable)

    def test_locate_matches_find(self):
        grid = build_grid(ROWS)
        assert grid.locate(CellKind.START) == grid.find(lambda cell: cell.kind == CellKind.START)

    def test_locate_ambiguous_and_missing(self):
        grid = build_grid(["S.S"])
        with pytest.raises(AmbiguousError):
            grid.locate(CellKind.START)
        with pytest.raises(NotFoundError):
            grid.locate(CellKind.END)

    def test_lookup_errors_are_lookup_errors(self):
        grid = build_grid(["..."])
        with pytest.raises(LookupError):
            grid.locate(CellKind.START)
