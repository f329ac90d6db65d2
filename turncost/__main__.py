"""Command line entry point for turn-cost pathfinding."""

import argparse
import os
import sys
from typing import Optional, Sequence

from .domain.errors import NoPathError, TurnCostError
from .domain.grid import Grid
from .domain.reconstruct import optimal_positions, trace_path
from .domain.search import explore, shortest_cost
from .domain.types import Direction, Position, SearchConfig
from .utils.grid_factory import generate_maze
from .utils.maze_io import load_maze, render_maze, save_maze


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turncost",
        description="Lowest-cost maze routes where turning costs more than moving",
    )
    parser.add_argument("maze", nargs="?", help="Path to a maze text file (# . S E)")
    parser.add_argument("--generate", nargs=2, type=int, metavar=("WIDTH", "HEIGHT"),
                        help="Generate a maze instead of loading one")
    parser.add_argument("--seed", type=int, help="Seed for --generate")
    parser.add_argument("--loops", type=float, default=0.0,
                        help="Fraction of inner walls to remove for --generate (0.0-1.0)")
    parser.add_argument("--save", type=str, help="Write the generated maze to this path")
    parser.add_argument("--direction", type=Direction.from_name, default=Direction.RIGHT,
                        help="Direction faced at the start (default: right)")
    parser.add_argument("--forward-cost", type=int, default=1, help="Cost of one step forward")
    parser.add_argument("--turn-cost", type=int, default=1000, help="Cost of a 90 degree turn")
    parser.add_argument("--part", choices=["cost", "tiles", "all"], default="all",
                        help="Report the lowest cost, the optimal tile count, or both")
    parser.add_argument("--render", action="store_true",
                        help="Print the maze with optimal tiles and one route marked")
    parser.add_argument("--gui", action="store_true", help="Open the maze in the Qt visualizer")
    return parser


def solve(grid: Grid, start: Position, end: Position, direction: Direction,
          config: SearchConfig, part: str, render: bool) -> int:
    """Run the requested queries and print the results."""
    if part == "cost":
        print(f"Lowest cost: {shortest_cost(grid, start, direction, end, config)}")
        return 0

    result = explore(grid, start, direction, end, config, mode="exhaustive")
    if not result.success:
        raise NoPathError(f"No path from {start} to {end}")

    tiles = optimal_positions(result.cost_table, start, end, result.cost, config)
    if part == "all":
        print(f"Lowest cost: {result.cost}")
    print(f"Optimal tiles: {len(tiles)}")
    print(f"States explored: {result.states_explored}")

    if render:
        route = trace_path(result.cost_table, start, end, result.cost, config)
        print()
        print(render_maze(grid, highlight=tiles, route=route))
    return 0


def run_gui(grid: Grid, start: Position, end: Position, direction: Direction,
            config: SearchConfig) -> int:
    """Open the visualizer on the given maze."""
    # Qt scaling defaults must be set before QApplication exists
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Turn-Cost Pathfinding Visualizer")

    # Import UI components after QApplication is created
    from .app.controller import SearchController
    from .ui.main_window import MainWindow

    controller = SearchController()
    controller.update_config(forward_cost=config.forward_cost, turn_cost=config.turn_cost)
    controller.set_grid(grid, start, end)
    controller.set_start_direction(direction)
    window = MainWindow(controller)
    window.show()
    return app.exec()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.maze and not args.generate:
        parser.error("give a maze file or --generate WIDTH HEIGHT")

    try:
        config = SearchConfig(forward_cost=args.forward_cost, turn_cost=args.turn_cost)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.generate:
            width, height = args.generate
            grid, start, end = generate_maze(width, height, seed=args.seed, loops=args.loops)
            print(f"🎲 Generated maze {grid.width}x{grid.height} (seed={args.seed})")
            if args.save:
                print(f"💾 Saved maze to {save_maze(grid, args.save)}")
        else:
            grid, start, end = load_maze(args.maze)
            print(f"📁 Loaded maze {args.maze} ({grid.width}x{grid.height})")
    except (TurnCostError, OSError, ValueError) as e:
        print(f"❌ Failed to prepare maze: {e}")
        return 1

    print(f"🎯 Start: {start} facing {args.direction.name.lower()} → End: {end}")

    if args.gui:
        return run_gui(grid, start, end, args.direction, config)

    try:
        return solve(grid, start, end, args.direction, config, args.part, args.render)
    except NoPathError as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
