"""Immutable rectangular grid of cell kinds."""

from typing import Callable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from .errors import AmbiguousError, MalformedGridError, NotFoundError, OutOfBoundsError
from .types import Cell, CellKind, Position


class Grid:
    """
    Read-only map of cell kinds addressed by Position.
    Bounds are [0, width) x [0, height); row y holds cells (0..width-1, y).
    """

    def __init__(self, cells: np.ndarray):
        cells = np.asarray(cells)
        if cells.ndim != 2 or cells.shape[0] == 0 or cells.shape[1] == 0:
            raise MalformedGridError(f"Grid must be a non-empty 2D array, got shape {cells.shape}")
        unknown = ~np.isin(cells, [kind.value for kind in CellKind])
        if unknown.any():
            y, x = np.argwhere(unknown)[0]
            raise MalformedGridError(f"Unknown cell code {int(cells[y, x])} at ({x},{y})")
        self._cells = np.array(cells, dtype=np.int8)
        self._cells.setflags(write=False)

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    def bounds(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height

    def is_valid_position(self, position: Position) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def cell_at(self, position: Position) -> Cell:
        """Get the cell at position, raising OutOfBoundsError outside the grid."""
        if not self.is_valid_position(position):
            raise OutOfBoundsError(
                f"Position {position} is outside grid bounds {self.width}x{self.height}"
            )
        return Cell(CellKind(int(self._cells[position.y, position.x])), position)

    def is_passable(self, position: Position) -> bool:
        """In bounds and not a wall."""
        if not self.is_valid_position(position):
            return False
        return bool(self._cells[position.y, position.x] != CellKind.WALL)

    def cells(self) -> Iterator[Cell]:
        """Iterate all cells in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(CellKind(int(self._cells[y, x])), Position(x, y))

    def find(self, predicate: Callable[[Cell], bool]) -> Position:
        """
        Return the unique position whose cell matches predicate.

        Raises:
            NotFoundError: If no cell matches
            AmbiguousError: If more than one cell matches
        """
        matches = [cell.position for cell in self.cells() if predicate(cell)]
        return _unique(matches, "predicate")

    def locate(self, kind: CellKind) -> Position:
        """Unique position holding kind (vectorised find)."""
        matches = [Position(int(x), int(y)) for y, x in np.argwhere(self._cells == kind)]
        return _unique(matches, kind.name)

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self._cells == kind))

    def passable_positions(self) -> List[Position]:
        return [Position(int(x), int(y)) for y, x in np.argwhere(self._cells != CellKind.WALL)]

    def rows(self) -> List[List[CellKind]]:
        """Cell kinds row by row, suitable for build_grid."""
        return [[CellKind(int(code)) for code in row] for row in self._cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


def _unique(matches: List[Position], what: str) -> Position:
    if not matches:
        raise NotFoundError(f"No cell matches {what}")
    if len(matches) > 1:
        raise AmbiguousError(f"{len(matches)} cells match {what}, expected exactly one")
    return matches[0]


def build_grid(rows: Sequence[Sequence[Union[CellKind, str]]]) -> Grid:
    """
    Build a Grid from rows of cell kinds (or their glyphs).

    Args:
        rows: Sequence of equally long rows; row index is y, column index is x

    Returns:
        New immutable Grid

    Raises:
        MalformedGridError: If there are no rows, rows are empty or ragged,
            or a cell is not a known kind
    """
    if len(rows) == 0:
        raise MalformedGridError("Grid has no rows")

    width = len(rows[0])
    if width == 0:
        raise MalformedGridError("Grid rows are empty")

    codes = np.empty((len(rows), width), dtype=np.int8)
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MalformedGridError(
                f"Row {y} has length {len(row)}, expected {width}"
            )
        for x, value in enumerate(row):
            try:
                codes[y, x] = CellKind.coerce(value)
            except ValueError as e:
                raise MalformedGridError(f"Bad cell at ({x},{y}): {e}") from e

    return Grid(codes)
