"""Forward and inverse state transitions for the directional search."""

from typing import List, Tuple

from .grid import Grid
from .types import SearchConfig, State


def get_successors(state: State, grid: Grid, config: SearchConfig) -> List[Tuple[State, int]]:
    """
    Get the states reachable from state in one move, with their move costs.
    Returns list of (next_state, cost) tuples: forward step (if the target
    cell is in bounds and not a wall), left turn, right turn.
    """
    position, direction = state
    successors = []

    ahead = position + direction
    if grid.is_passable(ahead):
        successors.append((State(ahead, direction), config.forward_cost))

    successors.append((State(position, direction.turn_left()), config.turn_cost))
    successors.append((State(position, direction.turn_right()), config.turn_cost))

    return successors


def get_predecessors(state: State, config: SearchConfig) -> List[Tuple[State, int]]:
    """
    Get the states that lead to state in one move, with the cost of that move.

    Undoing a left turn means facing right of the current direction and
    vice versa. The backward step may leave the grid; callers validate
    candidates against recorded costs, which only exist for reached states.
    """
    position, direction = state
    return [
        (State(position - direction, direction), config.forward_cost),
        (State(position, direction.turn_right()), config.turn_cost),
        (State(position, direction.turn_left()), config.turn_cost),
    ]


def get_move_cost(from_state: State, to_state: State, config: SearchConfig) -> int:
    """
    Cost of the single move from_state -> to_state.
    Raises ValueError if the two states are not one move apart.
    """
    from_position, from_direction = from_state
    to_position, to_direction = to_state

    if from_direction == to_direction and from_position + from_direction == to_position:
        return config.forward_cost
    if from_position == to_position and to_direction in (
            from_direction.turn_left(), from_direction.turn_right()):
        return config.turn_cost
    raise ValueError(f"Invalid move from {from_state} to {to_state}")
