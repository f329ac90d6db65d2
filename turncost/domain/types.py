"""Core type definitions for direction-aware pathfinding."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Literal, NamedTuple, Optional, Union


@dataclass(frozen=True, order=True)
class Position:
    """Integer grid coordinate. Validity is relative to a grid's bounds."""
    x: int
    y: int

    def __add__(self, direction: "Direction") -> "Position":
        dx, dy = direction.vector
        return Position(self.x + dx, self.y + dy)

    def __sub__(self, direction: "Direction") -> "Position":
        dx, dy = direction.vector
        return Position(self.x - dx, self.y - dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Direction(Enum):
    """Cardinal facing. The value is the unit step vector, y grows downward."""
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def vector(self):
        return self.value

    @property
    def arrow(self) -> str:
        return _ARROWS[self]

    def turn_right(self) -> "Direction":
        """Rotate 90 degrees clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self) -> "Direction":
        """Rotate 90 degrees counter-clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def opposite(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Parse a direction name (any case) or an arrow glyph."""
        key = name.strip()
        for direction, arrow in _ARROWS.items():
            if key == arrow:
                return direction
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


_CLOCKWISE: List[Direction] = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]

_ARROWS: Dict[Direction, str] = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}


class CellKind(IntEnum):
    """Kinds of grid cell. Integer values are the on-grid storage codes."""
    WALL = 0
    EMPTY = 1
    START = 2
    END = 3

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @classmethod
    def coerce(cls, value: Union["CellKind", str]) -> "CellKind":
        """Accept a CellKind or its single-character glyph."""
        if isinstance(value, CellKind):
            return value
        if isinstance(value, str) and value in _KINDS_BY_GLYPH:
            return _KINDS_BY_GLYPH[value]
        raise ValueError(f"Unknown cell kind: {value!r}")


GLYPHS: Dict[CellKind, str] = {
    CellKind.WALL: "#",
    CellKind.EMPTY: ".",
    CellKind.START: "S",
    CellKind.END: "E",
}

_KINDS_BY_GLYPH: Dict[str, CellKind] = {glyph: kind for kind, glyph in GLYPHS.items()}


@dataclass(frozen=True)
class Cell:
    """A cell of the grid together with the position it occupies."""
    kind: CellKind
    position: Position

    @property
    def is_wall(self) -> bool:
        return self.kind == CellKind.WALL

    @property
    def is_passable(self) -> bool:
        return self.kind != CellKind.WALL


class State(NamedTuple):
    """Unit of visitation: where we are and which way we face."""
    position: Position
    direction: Direction


# Minimum known cost per reached state
CostTable = Dict[State, int]

# "first" stops at the first finalized end state, "exhaustive" drains the frontier
SearchMode = Literal["first", "exhaustive"]


@dataclass
class SearchConfig:
    """Movement costs for the search."""
    forward_cost: int = 1
    turn_cost: int = 1000

    def __post_init__(self):
        """Reject negative costs; the search relies on non-negative edges."""
        if self.forward_cost < 0 or self.turn_cost < 0:
            raise ValueError(
                f"Movement costs must be non-negative, got forward={self.forward_cost}, "
                f"turn={self.turn_cost}"
            )


@dataclass
class SearchResult:
    """Result of a directional search."""
    found: bool = False
    cost: Optional[int] = None
    states_explored: int = 0
    cost_table: CostTable = field(default_factory=dict)
    end_states: List[State] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether the end position was reached."""
        return self.found and self.cost is not None
