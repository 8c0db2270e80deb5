import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'rat_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rat_maze.core.grid import Grid, InvalidMazeError
from rat_maze.algo.base import SolveAborted
from rat_maze.algo.backtracking import BacktrackingSolver

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rat Maze: backtracking maze solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve a maze file")
    solve_parser.add_argument("input_file", help="Path to maze text file (rows of o, w, r, c)")
    solve_parser.add_argument("--trace", action="store_true", help="Print every frame, not just the last one")
    solve_parser.add_argument("--visual", action="store_true", help="Show visualization")
    solve_parser.add_argument("--record", action="store_true", help="Record video (implies --visual)")
    solve_parser.add_argument("--record-events", type=str, help="Save solver frames to binary file")
    solve_parser.add_argument("--fps", type=int, default=30, help="Visualization frame rate")

    # Replay Command
    replay_parser = subparsers.add_parser("replay", help="Replay a frame log")
    replay_parser.add_argument("event_file", help="Path to event log file")
    replay_parser.add_argument("--visual", action="store_true", help="Show visualization")
    replay_parser.add_argument("--fps", type=int, default=30, help="Visualization frame rate")

    return parser

class Broadcast:
    """Fans one notification out to several listeners, in order."""
    def __init__(self, listeners):
        self.listeners = [l for l in listeners if l is not None]

    def __call__(self, maze):
        for listener in self.listeners:
            listener(maze)

class ConsolePrinter:
    def __init__(self, trace: bool):
        self.trace = trace
        self.step = 0

    def __call__(self, maze):
        self.step += 1
        if self.trace:
            print(f"--- step {self.step} ---")
            print(maze)

def run_solve(args, logger) -> int:
    logger.info(f"Loading {args.input_file}...")
    try:
        grid = Grid.from_file(args.input_file)
    except (InvalidMazeError, OSError) as e:
        logger.error(f"Cannot load {args.input_file}: {e}")
        return 2
    logger.info(f"Loaded {grid.width}x{grid.height} maze. Rat at {tuple(grid.initial_rat_position)}, "
                f"cheese at {tuple(grid.initial_cheese_position)}")

    from rat_maze.core.events import EventWriter
    printer = ConsolePrinter(args.trace)
    solver = BacktrackingSolver()
    solved = False
    evt_writer = None
    renderer = None
    try:
        if args.record_events:
            try:
                evt_writer = EventWriter(args.record_events)
            except OSError as e:
                logger.error(f"Cannot write {args.record_events}: {e}")
                return 2
            logger.info(f"Recording events to {args.record_events}...")

        if args.visual or args.record:
            from rat_maze.viz.renderer import Renderer
            name = os.path.splitext(os.path.basename(args.input_file))[0]
            renderer = Renderer(fps=args.fps, record=args.record, record_name=name)

        solved = solver.solve(grid, Broadcast([printer, evt_writer, renderer]))
        if evt_writer:
            evt_writer.log_result(solved)
        if not args.trace:
            print(grid)
        print(f"\n{'Solved' if solved else 'No path'} after {solver.step_count} steps "
              f"({solver.backtrack_count} backtracks)")
        if renderer:
            renderer.wait("Solved" if solved else "No path")
    except KeyboardInterrupt:
        logger.warning("Interrupted.")
    except SolveAborted:
        logger.info("Visualization closed early.")
    finally:
        if evt_writer:
            evt_writer.close()
        if renderer:
            renderer.close()

    return 0 if solved else 1

def run_replay(args, logger) -> int:
    logger.info(f"Replaying {args.event_file}...")
    from rat_maze.core.events import EventReader
    from rat_maze.viz.replay import ReplayAdapter

    try:
        reader = EventReader(args.event_file)
    except OSError as e:
        logger.error(f"Cannot read {args.event_file}: {e}")
        return 2
    try:
        w, h = reader.read_header()
    except ValueError as e:
        reader.close()
        logger.error(f"Cannot read {args.event_file}: {e}")
        return 2
    logger.info(f"Log Header: {w}x{h}")

    renderer = None
    if args.visual:
        from rat_maze.viz.renderer import Renderer
        renderer = Renderer(fps=args.fps)

    adapter = ReplayAdapter(reader)
    result = None
    try:
        result = adapter.replay(renderer if renderer else ConsolePrinter(trace=True))
        logger.info(f"Replayed {adapter.step_count} frames. Result: {result}")
        if renderer:
            renderer.wait("Solved" if result else "No path")
    except SolveAborted:
        logger.info("Visualization closed early.")
    finally:
        reader.close()
        if renderer:
            renderer.close()

    return 0 if result else 1

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("rat_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "solve":
        return run_solve(args, logger)
    elif args.command == "replay":
        return run_replay(args, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
