"""Phases of a stepped directional search as the viewer drives it."""

from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional


class SearchPhase(Enum):
    """Where a search run is."""
    IDLE = "idle"
    RUNNING = "running"                # extracting on the timer
    PAUSED = "paused"                  # frontier open, advanced one Step at a time
    RECONSTRUCTING = "reconstructing"  # frontier drained, backward pass underway
    COMPLETE = "complete"
    NO_PATH = "no_path"
    ERROR = "error"


# Phases with entries left to extract
FRONTIER_OPEN: FrozenSet[SearchPhase] = frozenset({SearchPhase.RUNNING, SearchPhase.PAUSED})

_DRAINED = frozenset({SearchPhase.RECONSTRUCTING, SearchPhase.NO_PATH, SearchPhase.ERROR})

_NEXT_PHASES: Dict[SearchPhase, FrozenSet[SearchPhase]] = {
    SearchPhase.IDLE: frozenset({SearchPhase.RUNNING, SearchPhase.PAUSED}),
    SearchPhase.RUNNING: _DRAINED | {SearchPhase.PAUSED},
    SearchPhase.PAUSED: _DRAINED | {SearchPhase.RUNNING, SearchPhase.IDLE},
    SearchPhase.RECONSTRUCTING: frozenset({SearchPhase.COMPLETE, SearchPhase.ERROR}),
    SearchPhase.COMPLETE: frozenset({SearchPhase.IDLE}),
    SearchPhase.NO_PATH: frozenset({SearchPhase.IDLE}),
    SearchPhase.ERROR: frozenset({SearchPhase.IDLE}),
}

_DESCRIPTIONS = {
    SearchPhase.IDLE: "Ready to start",
    SearchPhase.RUNNING: "Exploring states",
    SearchPhase.PAUSED: "Paused, step to continue",
    SearchPhase.RECONSTRUCTING: "Tracing optimal tiles",
    SearchPhase.COMPLETE: "Optimal tiles found",
    SearchPhase.NO_PATH: "No path exists",
    SearchPhase.ERROR: "Error occurred",
}


class SearchStateMachine:
    """
    Tracks the phase of one search run and calls back on entry.

    A run leaves IDLE timed (RUNNING) or stepped (PAUSED). When the frontier
    drains it goes through RECONSTRUCTING to COMPLETE if the end was reached,
    or straight to NO_PATH if it was not. Every finished phase returns to IDLE.
    """

    def __init__(self):
        self._phase = SearchPhase.IDLE
        self._on_enter: Dict[SearchPhase, Callable[[Optional[dict]], None]] = {}

    @property
    def phase(self) -> SearchPhase:
        return self._phase

    def can_enter(self, phase: SearchPhase) -> bool:
        return phase in _NEXT_PHASES[self._phase]

    def enter(self, phase: SearchPhase, context: Optional[dict] = None) -> bool:
        """
        Move to phase if allowed, then run its entry callback with context.

        Returns:
            True if the phase changed, False if the move is not allowed
        """
        if not self.can_enter(phase):
            return False

        self._phase = phase
        callback = self._on_enter.get(phase)
        if callback is not None:
            callback(context)
        return True

    def on_enter(self, phase: SearchPhase, callback: Callable[[Optional[dict]], None]):
        self._on_enter[phase] = callback

    def reset(self):
        """Force the machine back to IDLE without callbacks."""
        self._phase = SearchPhase.IDLE

    def frontier_open(self) -> bool:
        return self._phase in FRONTIER_OPEN

    def describe(self) -> str:
        return _DESCRIPTIONS[self._phase]
