"""Min-priority queue for the directional search with lazy deletion."""

import heapq
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import State


@dataclass
class PriorityItem:
    """
    Item in the priority queue.

    Comparison order:
    1. cost (lower is better)
    2. sequence (earlier insertion first, for determinism)
    """
    cost: int
    sequence: int
    state: State

    def __lt__(self, other: 'PriorityItem') -> bool:
        """Define comparison for heap ordering."""
        if self.cost != other.cost:
            return self.cost < other.cost
        return self.sequence < other.sequence


class PriorityQueue:
    """
    Binary heap ordered by ascending cost.

    Entries are never updated in place. Pushing a state again with a better
    cost leaves the old entry behind; callers compare the popped cost with
    their best known cost and skip entries that are worse.
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._counter = 0

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def size(self) -> int:
        """Number of entries, stale ones included."""
        return len(self._heap)

    def put(self, state: State, cost: int):
        """Add an entry for state at cost."""
        heapq.heappush(self._heap, PriorityItem(cost, self._counter, state))
        self._counter += 1

    def get(self) -> Optional[Tuple[int, State]]:
        """
        Remove and return (cost, state) with the lowest cost.
        Returns None if queue is empty.
        """
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        return entry.cost, entry.state

    def get_all_items(self) -> List[Tuple[int, State]]:
        """
        All pending (cost, state) entries in heap order.
        Useful for visualization.
        """
        return [(entry.cost, entry.state) for entry in self._heap]
