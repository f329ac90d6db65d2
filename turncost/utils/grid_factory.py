"""Grid factory for creating open grids and seeded mazes."""

from typing import List, Optional, Tuple

import numpy as np

from ..domain.errors import OutOfBoundsError
from ..domain.grid import Grid
from ..domain.types import CellKind, Position
from .rng import SeededRNG


def open_grid(width: int, height: int, start: Position, end: Position) -> Grid:
    """
    Create a grid with no walls and the given start and end.

    Raises:
        ValueError: If width or height <= 0, or start == end
        OutOfBoundsError: If start or end is outside the grid
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    if start == end:
        raise ValueError("Start and end positions are the same")

    cells = np.full((height, width), CellKind.EMPTY, dtype=np.int8)
    for position, kind in ((start, CellKind.START), (end, CellKind.END)):
        if not (0 <= position.x < width and 0 <= position.y < height):
            raise OutOfBoundsError(f"{kind.name.title()} position {position} is out of bounds")
        cells[position.y, position.x] = kind
    return Grid(cells)


def generate_maze(width: int, height: int, seed: Optional[int] = None,
                  loops: float = 0.0) -> Tuple[Grid, Position, Position]:
    """
    Generate a maze using recursive backtracking.

    Start is placed in the bottom-left corridor and end in the top-right one.
    A perfect maze has exactly one route; loops > 0 removes that fraction of
    the remaining inner walls so that several routes can tie.

    Args:
        width: Grid width (minimum 5, reduced to odd)
        height: Grid height (minimum 5, reduced to odd)
        seed: Random seed for reproducibility
        loops: Fraction (0.0 to 1.0) of removable walls to knock out

    Returns:
        Tuple of (grid, start, end)

    Raises:
        ValueError: If a dimension is below 5 or loops is out of range
    """
    if width < 5 or height < 5:
        raise ValueError(f"Maze dimensions must be at least 5x5, got {width}x{height}")
    if not (0.0 <= loops <= 1.0):
        raise ValueError(f"Loops must be between 0.0 and 1.0, got {loops}")

    rng = SeededRNG(seed)

    # Ensure odd dimensions so corridors sit on odd coordinates
    maze_width = width if width % 2 == 1 else width - 1
    maze_height = height if height % 2 == 1 else height - 1

    cells = np.full((maze_height, maze_width), CellKind.WALL, dtype=np.int8)
    _carve_passages(cells, rng)
    if loops > 0.0:
        _add_loops(cells, loops, rng)

    start = Position(1, maze_height - 2)
    end = Position(maze_width - 2, 1)
    cells[start.y, start.x] = CellKind.START
    cells[end.y, end.x] = CellKind.END

    return Grid(cells), start, end


def _carve_passages(cells: np.ndarray, rng: SeededRNG) -> None:
    """Iterative depth-first carving from (1,1), moving two cells at a time."""
    height, width = cells.shape
    cells[1, 1] = CellKind.EMPTY

    stack = [(1, 1)]
    visited = {(1, 1)}
    directions = [(0, 2), (2, 0), (0, -2), (-2, 0)]

    while stack:
        x, y = stack[-1]

        neighbors: List[Tuple[Tuple[int, int], Tuple[int, int]]] = []
        for dx, dy in directions:
            nx, ny = x + dx, y + dy
            if 0 < nx < width - 1 and 0 < ny < height - 1 and (nx, ny) not in visited:
                neighbors.append(((nx, ny), (x + dx // 2, y + dy // 2)))

        if neighbors:
            (nx, ny), (wx, wy) = rng.choice(neighbors)
            cells[ny, nx] = CellKind.EMPTY
            cells[wy, wx] = CellKind.EMPTY
            visited.add((nx, ny))
            stack.append((nx, ny))
        else:
            # Backtrack
            stack.pop()


def _add_loops(cells: np.ndarray, fraction: float, rng: SeededRNG) -> None:
    """Knock out inner walls that separate two corridors."""
    height, width = cells.shape
    candidates = []
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if cells[y, x] != CellKind.WALL or (x % 2) == (y % 2):
                continue
            horizontal = cells[y, x - 1] != CellKind.WALL and cells[y, x + 1] != CellKind.WALL
            vertical = cells[y - 1, x] != CellKind.WALL and cells[y + 1, x] != CellKind.WALL
            if horizontal or vertical:
                candidates.append((x, y))

    rng.shuffle(candidates)
    for x, y in candidates[:int(len(candidates) * fraction)]:
        cells[y, x] = CellKind.EMPTY
