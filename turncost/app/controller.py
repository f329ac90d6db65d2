"""Application controller connecting the viewer to the directional search."""

from typing import FrozenSet, List, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.errors import TurnCostError
from ..domain.grid import Grid
from ..domain.reconstruct import optimal_positions, trace_path
from ..domain.search import DirectionalSearch
from ..domain.types import Direction, Position, SearchConfig, SearchResult, State
from ..utils.grid_factory import generate_maze
from ..utils.maze_io import load_maze
from .fsm import SearchPhase, SearchStateMachine


class SearchController(QObject):
    """
    Controller that steps the exhaustive search and reconstructs optimal tiles.

    Signals:
        state_changed: Emitted when the search phase changes
        step_completed: Emitted after each batch of extractions
        search_completed: Emitted when the search finishes (success or failure)
        grid_updated: Emitted when the grid needs to be redrawn
        error_occurred: Emitted when an error occurs
    """

    state_changed = Signal(object)  # SearchPhase
    step_completed = Signal(object)  # Optional[SearchResult]
    search_completed = Signal(object)  # SearchResult
    grid_updated = Signal()
    error_occurred = Signal(str)

    def __init__(self):
        super().__init__()

        self._search = DirectionalSearch()
        self._state_machine = SearchStateMachine()
        self._grid: Optional[Grid] = None
        self._start: Optional[Position] = None
        self._end: Optional[Position] = None
        self._start_direction = Direction.RIGHT
        self._config = SearchConfig()
        self._result: Optional[SearchResult] = None
        self._optimal: FrozenSet[Position] = frozenset()
        self._route: List[State] = []

        # States extracted per step; the state space is 4x the tile count
        self.batch_size = 1

        self._timer = QTimer()
        self._timer.timeout.connect(self._on_timer_tick)
        self._timer_interval = 100  # milliseconds

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        self._state_machine.on_enter(SearchPhase.RUNNING, self._on_running_entered)
        self._state_machine.on_enter(SearchPhase.PAUSED, self._on_stopped_entered)
        self._state_machine.on_enter(SearchPhase.IDLE, self._on_stopped_entered)
        self._state_machine.on_enter(SearchPhase.RECONSTRUCTING, self._on_stopped_entered)
        self._state_machine.on_enter(SearchPhase.COMPLETE, self._on_finished_entered)
        self._state_machine.on_enter(SearchPhase.NO_PATH, self._on_finished_entered)
        self._state_machine.on_enter(SearchPhase.ERROR, self._on_stopped_entered)

    # Properties

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def start(self) -> Optional[Position]:
        return self._start

    @property
    def end(self) -> Optional[Position]:
        return self._end

    @property
    def start_direction(self) -> Direction:
        return self._start_direction

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def current_state(self) -> SearchPhase:
        return self._state_machine.phase

    @property
    def result(self) -> Optional[SearchResult]:
        return self._result

    @property
    def optimal(self) -> FrozenSet[Position]:
        """Tiles on some optimal route, empty until the search completes."""
        return self._optimal

    @property
    def route(self) -> List[State]:
        """One representative optimal route, empty until the search completes."""
        return self._route

    @property
    def speed(self) -> int:
        """Get the current speed (timer interval in ms)."""
        return self._timer_interval

    @speed.setter
    def speed(self, interval_ms: int):
        self._timer_interval = max(10, min(1000, interval_ms))
        if self._timer.isActive():
            self._timer.setInterval(self._timer_interval)

    # Grid Management

    def set_grid(self, grid: Grid, start: Position, end: Position) -> None:
        """Replace the grid and reset the search."""
        self._grid = grid
        self._start = start
        self._end = end
        self.reset_search()

    def load_maze_file(self, filepath: str) -> bool:
        """Load a maze text file."""
        try:
            grid, start, end = load_maze(filepath)
        except (TurnCostError, OSError) as e:
            self.error_occurred.emit(f"Failed to load maze: {e}")
            return False
        self.set_grid(grid, start, end)
        return True

    def generate_maze(self, width: int, height: int, seed: Optional[int] = None,
                      loops: float = 0.0) -> bool:
        """Generate a maze with the seeded backtracking generator."""
        try:
            grid, start, end = generate_maze(width, height, seed=seed, loops=loops)
        except ValueError as e:
            self.error_occurred.emit(f"Failed to generate maze: {e}")
            return False
        self.set_grid(grid, start, end)
        return True

    # Search Control

    def can_start(self) -> bool:
        return self._state_machine.can_enter(SearchPhase.RUNNING) and self._grid is not None

    def _begin(self, phase: SearchPhase) -> bool:
        """Initialize the exhaustive search and leave IDLE for phase."""
        if not self.can_start():
            return False

        try:
            self._search.initialize(self._grid, self._start, self._start_direction,
                                    self._end, self._config, mode="exhaustive")
        except TurnCostError as e:
            self.error_occurred.emit(f"Failed to start search: {e}")
            return False
        return self._state_machine.enter(phase)

    def step_search(self) -> bool:
        """Extract up to batch_size states. A step from IDLE leaves the run PAUSED."""
        if self._state_machine.phase == SearchPhase.IDLE:
            if not self._begin(SearchPhase.PAUSED):
                return False
        elif not self._state_machine.frontier_open():
            return False

        try:
            result = None
            for _ in range(self.batch_size):
                result = self._search.step()
                if result is not None:
                    break
            self.step_completed.emit(result)

            if result is not None:
                if result.success:
                    self._state_machine.enter(SearchPhase.RECONSTRUCTING)
                    self._finish(result)
                    self._state_machine.enter(SearchPhase.COMPLETE, {"result": result})
                else:
                    self._result = result
                    self._state_machine.enter(SearchPhase.NO_PATH, {"result": result})

            self.grid_updated.emit()
            return True
        except (TurnCostError, ValueError) as e:
            self._state_machine.enter(SearchPhase.ERROR, {"error": str(e)})
            self.error_occurred.emit(f"Search error: {e}")
            return False

    def run_search(self) -> bool:
        """Start or resume timed stepping."""
        if self._state_machine.phase == SearchPhase.PAUSED:
            return self._state_machine.enter(SearchPhase.RUNNING)
        return self._begin(SearchPhase.RUNNING)

    def pause_search(self) -> bool:
        if self._state_machine.phase != SearchPhase.RUNNING:
            return False
        return self._state_machine.enter(SearchPhase.PAUSED)

    def reset_search(self) -> bool:
        """Reset the search to idle."""
        self._search.reset()
        self._result = None
        self._optimal = frozenset()
        self._route = []
        if not self._state_machine.enter(SearchPhase.IDLE):
            self._state_machine.reset()
            self._timer.stop()
            self.state_changed.emit(SearchPhase.IDLE)
        self.grid_updated.emit()
        return True

    def set_start_direction(self, direction: Direction) -> None:
        self._start_direction = direction
        self.reset_search()

    def update_config(self, **kwargs):
        """Update search configuration and reset the search."""
        values = {"forward_cost": self._config.forward_cost, "turn_cost": self._config.turn_cost}
        values.update(kwargs)
        try:
            self._config = SearchConfig(**values)
        except (TypeError, ValueError) as e:
            self.error_occurred.emit(f"Invalid configuration: {e}")
            return
        self.reset_search()

    def _finish(self, result: SearchResult):
        self._result = result
        self._optimal = optimal_positions(result.cost_table, self._start, self._end,
                                          result.cost, self._config)
        self._route = trace_path(result.cost_table, self._start, self._end,
                                 result.cost, self._config)

    # State Machine Callbacks

    def _on_running_entered(self, context):
        self._timer.start(self._timer_interval)
        self.state_changed.emit(SearchPhase.RUNNING)

    def _on_stopped_entered(self, context):
        self._timer.stop()
        self.state_changed.emit(self._state_machine.phase)

    def _on_finished_entered(self, context):
        self._timer.stop()
        result = context.get("result") if context else None
        if result:
            self.search_completed.emit(result)
        self.state_changed.emit(self._state_machine.phase)

    def _on_timer_tick(self):
        if self._state_machine.phase == SearchPhase.RUNNING:
            self.step_search()

    # Utility methods

    def get_statistics(self) -> dict:
        """Get current search statistics."""
        return {
            "states_explored": self._search.states_explored,
            "frontier_size": self._search.frontier_size(),
            "states_reached": len(self._search.cost_table),
            "cost": self._result.cost if self._result else None,
            "optimal_tiles": len(self._optimal),
            "current_state": self._state_machine.phase.value,
            "state_description": self._state_machine.describe(),
        }

    def get_frontier_positions(self) -> List[Position]:
        return self._search.get_frontier_positions()

    def get_explored_positions(self) -> List[Position]:
        return self._search.get_explored_positions()

    def get_current_position(self) -> Optional[Position]:
        state = self._search.current_state
        return state.position if state else None
