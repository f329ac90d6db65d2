"""
Maze text format: loading, saving and rendering.

A maze is lines of '#' (wall), '.' (open), 'S' (start) and 'E' (end),
with exactly one 'S' and one 'E'.
"""

from pathlib import Path
from typing import Iterable, Sequence, Tuple, Union

from ..domain.grid import Grid, build_grid
from ..domain.types import GLYPHS, CellKind, Position, State

# Glyph for tiles on some optimal route in rendered output
OPTIMAL_GLYPH = "O"


def parse_maze(text: str) -> Tuple[Grid, Position, Position]:
    """
    Parse maze text into (grid, start, end).

    Raises:
        MalformedGridError: If rows are ragged or contain unknown glyphs
        NotFoundError: If there is no start or no end
        AmbiguousError: If there is more than one start or end
    """
    rows = text.splitlines()
    # Blank lines around the maze are ignored, blank lines inside it are not
    while rows and not rows[-1]:
        rows.pop()
    while rows and not rows[0]:
        rows.pop(0)
    grid = build_grid(rows)
    return grid, grid.locate(CellKind.START), grid.locate(CellKind.END)


def load_maze(filepath: Union[str, Path]) -> Tuple[Grid, Position, Position]:
    """Load and parse a maze file. OSError propagates to the caller."""
    return parse_maze(Path(filepath).read_text(encoding="utf-8"))


def maze_to_text(grid: Grid) -> str:
    """Serialize a grid back to maze text."""
    return "\n".join("".join(GLYPHS[kind] for kind in row) for row in grid.rows()) + "\n"


def save_maze(grid: Grid, filepath: Union[str, Path]) -> Path:
    """Write a grid as maze text, creating parent directories."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(maze_to_text(grid), encoding="utf-8")
    return path


def render_maze(grid: Grid, highlight: Iterable[Position] = (),
                route: Sequence[State] = ()) -> str:
    """
    Render a grid as text.

    Open tiles in highlight are drawn as 'O'. Tiles along route are drawn as
    an arrow of the direction faced when leaving them. Start and end keep
    their glyphs.
    """
    canvas = [[GLYPHS[kind] for kind in row] for row in grid.rows()]

    for position in highlight:
        if canvas[position.y][position.x] == GLYPHS[CellKind.EMPTY]:
            canvas[position.y][position.x] = OPTIMAL_GLYPH

    for position, direction in route:
        if canvas[position.y][position.x] not in (GLYPHS[CellKind.START], GLYPHS[CellKind.END]):
            canvas[position.y][position.x] = direction.arrow

    return "\n".join("".join(row) for row in canvas)
