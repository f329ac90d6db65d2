"""Tests for the lazy-deletion priority queue and state transitions."""

from turncost.domain.grid import build_grid
from turncost.domain.priority_queue import PriorityQueue
from turncost.domain.transitions import get_predecessors, get_successors
from turncost.domain.types import Direction, Position, SearchConfig, State


A = State(Position(0, 0), Direction.RIGHT)
B = State(Position(1, 0), Direction.RIGHT)
C = State(Position(1, 0), Direction.UP)


class TestPriorityQueue:

    def test_orders_by_cost(self):
        queue = PriorityQueue()
        queue.put(A, 1000)
        queue.put(B, 1)
        queue.put(C, 2000)
        assert [queue.get() for _ in range(3)] == [(1, B), (1000, A), (2000, C)]
        assert queue.get() is None
        assert queue.is_empty()

    def test_ties_are_first_in_first_out(self):
        queue = PriorityQueue()
        queue.put(C, 5)
        queue.put(A, 5)
        queue.put(B, 5)
        assert [queue.get()[1] for _ in range(3)] == [C, A, B]

    def test_keeps_stale_entries(self):
        queue = PriorityQueue()
        queue.put(A, 10)
        queue.put(A, 3)
        assert queue.size() == 2
        assert queue.get() == (3, A)
        assert queue.get() == (10, A)

    def test_pending_items(self):
        queue = PriorityQueue()
        queue.put(A, 1)
        queue.put(B, 2)
        assert sorted(cost for cost, _ in queue.get_all_items()) == [1, 2]
        assert not queue.is_empty()


class TestTransitions:

    def test_successors_skip_walls(self):
        grid = build_grid(["S#E"])
        successors = get_successors(A, grid, SearchConfig())
        assert successors == [
            (State(Position(0, 0), Direction.UP), 1000),
            (State(Position(0, 0), Direction.DOWN), 1000),
        ]

    def test_successors_skip_out_of_bounds(self):
        grid = build_grid(["SE"])
        successors = get_successors(State(Position(1, 0), Direction.RIGHT), grid, SearchConfig())
        assert all(state.position == Position(1, 0) for state, _ in successors)

    def test_forward_successor(self):
        grid = build_grid(["S.E"])
        successors = get_successors(A, grid, SearchConfig(forward_cost=3, turn_cost=7))
        assert successors[0] == (B, 3)
        assert [cost for _, cost in successors[1:]] == [7, 7]

    def test_predecessors_invert_successors(self):
        grid = build_grid(["...", "...", "..."])
        config = SearchConfig()
        here = State(Position(1, 1), Direction.UP)
        for successor, cost in get_successors(here, grid, config):
            assert (here, cost) in get_predecessors(successor, config)
