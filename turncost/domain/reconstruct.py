"""Backward reconstruction of minimum-cost routes from a finished cost table."""

from collections import deque
from typing import FrozenSet, Iterator, List, Sequence, Set

from .transitions import get_move_cost, get_predecessors
from .types import CostTable, Direction, Position, SearchConfig, State


def _end_states(cost_table: CostTable, end: Position, lowest_cost: int) -> List[State]:
    """End-position states whose recorded cost equals the global minimum."""
    seeds = []
    for direction in Direction:
        state = State(end, direction)
        if cost_table.get(state) == lowest_cost:
            seeds.append(state)
    return seeds


def collect_optimal_states(cost_table: CostTable, start: Position, end: Position,
                           lowest_cost: int, config: SearchConfig) -> Set[State]:
    """
    Walk predecessor moves backward from every optimal end state.

    A predecessor is accepted only if its recorded cost plus the move cost
    equals the cost of the state being expanded. The table must come from an
    exhaustive search; otherwise costs are not final and the walk over- or
    under-reports. States at the start position are leaves.
    """
    seen: Set[State] = set()
    worklist = deque((state, lowest_cost) for state in _end_states(cost_table, end, lowest_cost))

    while worklist:
        state, cost = worklist.pop()
        if state in seen:
            continue
        seen.add(state)

        if state.position == start:
            continue

        for previous, move_cost in get_predecessors(state, config):
            previous_cost = cost - move_cost
            if cost_table.get(previous) == previous_cost:
                worklist.append((previous, previous_cost))

    return seen


def optimal_positions(cost_table: CostTable, start: Position, end: Position,
                      lowest_cost: int, config: SearchConfig) -> FrozenSet[Position]:
    """Positions (not states) covered by some minimum-cost route."""
    states = collect_optimal_states(cost_table, start, end, lowest_cost, config)
    return frozenset(state.position for state in states)


def _consistent_predecessors(cost_table: CostTable, state: State,
                             config: SearchConfig) -> Iterator[State]:
    """Predecessors whose recorded cost plus the move cost equals the state's cost."""
    cost = cost_table[state]
    for previous, move_cost in get_predecessors(state, config):
        if cost_table.get(previous) == cost - move_cost:
            yield previous


def trace_path(cost_table: CostTable, start: Position, end: Position,
               lowest_cost: int, config: SearchConfig) -> List[State]:
    """
    Reconstruct one minimum-cost route.

    Depth-first over consistent predecessors, backing out of dead ends. With
    zero move costs a consistent predecessor can lead away from the start.

    Returns its states from start to end, or an empty list if no end state
    attains lowest_cost.

    Raises:
        ValueError: If the table holds no consistent chain back to the start
    """
    seeds = _end_states(cost_table, end, lowest_cost)
    if not seeds:
        return []

    visited: Set[State] = set()
    for seed in seeds:
        visited.add(seed)
        path = [seed]
        options = [_consistent_predecessors(cost_table, seed, config)]
        while path:
            # Turns taken on the start tile are part of the route, so stop at cost 0
            if path[-1].position == start and cost_table[path[-1]] == 0:
                return list(reversed(path))
            for previous in options[-1]:
                if previous not in visited:
                    visited.add(previous)
                    path.append(previous)
                    options.append(_consistent_predecessors(cost_table, previous, config))
                    break
            else:
                path.pop()
                options.pop()

    raise ValueError(f"Cost table has no route from {start} to {end}")


def path_cost(path: Sequence[State], config: SearchConfig) -> int:
    """Calculate the total cost of a state sequence."""
    total_cost = 0
    for i in range(1, len(path)):
        total_cost += get_move_cost(path[i - 1], path[i], config)
    return total_cost


def path_positions(path: Sequence[State]) -> List[Position]:
    """Distinct positions of a route in visiting order."""
    positions: List[Position] = []
    for state in path:
        if not positions or positions[-1] != state.position:
            positions.append(state.position)
    return positions
