"""Turn-cost pathfinding - lowest-cost maze routes where facing matters.

Searches (position, direction) states where moving forward and turning have
different costs, and reports every tile that lies on some lowest-cost route.
"""

from .domain.errors import (
    AmbiguousError, MalformedGridError, NoPathError, NotFoundError, OutOfBoundsError, TurnCostError
)
from .domain.grid import Grid, build_grid
from .domain.search import optimal_path_positions, shortest_cost
from .domain.types import Cell, CellKind, Direction, Position, SearchConfig, State

__version__ = "1.0.0"

__all__ = [
    "AmbiguousError", "Cell", "CellKind", "Direction", "Grid", "MalformedGridError",
    "NoPathError", "NotFoundError", "OutOfBoundsError", "Position", "SearchConfig",
    "State", "TurnCostError", "build_grid", "optimal_path_positions", "shortest_cost",
]
