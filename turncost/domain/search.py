"""Direction-aware shortest path search over (position, direction) states."""

from typing import FrozenSet, Optional

from .errors import NoPathError
from .grid import Grid
from .priority_queue import PriorityQueue
from .reconstruct import optimal_positions
from .transitions import get_successors
from .types import CostTable, Direction, Position, SearchConfig, SearchMode, SearchResult, State


class DirectionalSearch:
    """
    Dijkstra-style label-correcting search where a state is a position plus
    the direction being faced. Moving forward and turning have separate costs.

    Two modes:
    - "first" stops when an end state is extracted; its cost is the minimum.
    - "exhaustive" drains the frontier so every reached state carries its exact
      minimum cost, which optimal path reconstruction depends on.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the search state."""
        self.queue = PriorityQueue()
        self.cost_table: CostTable = {}
        self.grid: Optional[Grid] = None
        self.start: Optional[Position] = None
        self.end: Optional[Position] = None
        self.config = SearchConfig()
        self.mode: SearchMode = "exhaustive"
        self.states_explored = 0
        self.current_state: Optional[State] = None
        self._result: Optional[SearchResult] = None

    def initialize(self, grid: Grid, start: Position, start_direction: Direction,
                   end: Position, config: Optional[SearchConfig] = None,
                   mode: SearchMode = "exhaustive"):
        """
        Prepare a search from (start, start_direction) to end.

        Raises:
            OutOfBoundsError: If start or end lies outside the grid
            NoPathError: If start or end is a wall
            ValueError: If mode is unknown
        """
        if mode not in ("first", "exhaustive"):
            raise ValueError(f"Unknown search mode: {mode!r}")

        start_cell = grid.cell_at(start)
        end_cell = grid.cell_at(end)
        if start_cell.is_wall:
            raise NoPathError(f"Start position {start} is a wall")
        if end_cell.is_wall:
            raise NoPathError(f"End position {end} is a wall")

        self.reset()
        self.grid = grid
        self.start = start
        self.end = end
        self.config = config or SearchConfig()
        self.mode = mode

        start_state = State(start, start_direction)
        self.cost_table[start_state] = 0
        self.queue.put(start_state, 0)

    def step(self) -> Optional[SearchResult]:
        """
        Extract and expand one state.
        Returns SearchResult if the search is complete, None otherwise.
        """
        if self.grid is None:
            raise ValueError("Search not initialized")
        if self._result is not None:
            return self._result

        if self.queue.is_empty():
            return self._finish()

        cost, state = self.queue.get()

        # Stale entry: the state was improved after this entry was queued
        if cost > self.cost_table[state]:
            return None

        self.current_state = state
        self.states_explored += 1

        if self.mode == "first" and state.position == self.end:
            self._result = SearchResult(
                found=True,
                cost=cost,
                states_explored=self.states_explored,
                cost_table=self.cost_table,
                end_states=[state],
            )
            return self._result

        for next_state, move_cost in get_successors(state, self.grid, self.config):
            next_cost = cost + move_cost
            known = self.cost_table.get(next_state)
            if known is None or known > next_cost:
                self.cost_table[next_state] = next_cost
                self.queue.put(next_state, next_cost)

        return None

    def run_complete(self) -> SearchResult:
        """Run until the search finishes and return the final SearchResult."""
        while True:
            result = self.step()
            if result is not None:
                return result

    def _finish(self) -> SearchResult:
        """Frontier exhausted: take the minimum over all end states."""
        end_costs = {
            State(self.end, direction): self.cost_table[State(self.end, direction)]
            for direction in Direction
            if State(self.end, direction) in self.cost_table
        }
        if not end_costs:
            self._result = SearchResult(
                found=False,
                states_explored=self.states_explored,
                cost_table=self.cost_table,
            )
            return self._result

        lowest_cost = min(end_costs.values())
        self._result = SearchResult(
            found=True,
            cost=lowest_cost,
            states_explored=self.states_explored,
            cost_table=self.cost_table,
            end_states=[state for state, cost in end_costs.items() if cost == lowest_cost],
        )
        return self._result

    def is_complete(self) -> bool:
        """Check if the search has finished (success or failure)."""
        return self._result is not None

    def frontier_size(self) -> int:
        return self.queue.size()

    def get_frontier_positions(self) -> list[Position]:
        """Positions with pending queue entries, for visualization."""
        return list({state.position for _, state in self.queue.get_all_items()})

    def get_explored_positions(self) -> list[Position]:
        """Positions with at least one reached state."""
        return list({state.position for state in self.cost_table})


def explore(grid: Grid, start: Position, start_direction: Direction, end: Position,
            config: Optional[SearchConfig] = None,
            mode: SearchMode = "exhaustive") -> SearchResult:
    """
    Run a complete search and return its SearchResult.
    Unlike shortest_cost, an unreachable end gives found=False instead of raising.
    """
    search = DirectionalSearch()
    search.initialize(grid, start, start_direction, end, config, mode)
    return search.run_complete()


def shortest_cost(grid: Grid, start: Position, start_direction: Direction, end: Position,
                  config: Optional[SearchConfig] = None) -> int:
    """
    Minimum cost to reach end in any final direction.

    Args:
        grid: Grid to search in
        start: Starting position
        start_direction: Direction faced at the start
        end: Target position
        config: Movement costs (defaults to forward=1, turn=1000)

    Returns:
        The minimum total cost

    Raises:
        NoPathError: If end cannot be reached
    """
    result = explore(grid, start, start_direction, end, config, mode="first")
    if not result.success:
        raise NoPathError(f"No path from {start} to {end}")
    return result.cost


def optimal_path_positions(grid: Grid, start: Position, start_direction: Direction,
                           end: Position,
                           config: Optional[SearchConfig] = None) -> FrozenSet[Position]:
    """
    Every position lying on at least one minimum-cost path from start to end.

    Raises:
        NoPathError: If end cannot be reached
    """
    config = config or SearchConfig()
    result = explore(grid, start, start_direction, end, config, mode="exhaustive")
    if not result.success:
        raise NoPathError(f"No path from {start} to {end}")
    return optimal_positions(result.cost_table, start, end, result.cost, config)
