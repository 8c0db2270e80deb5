import logging
from typing import List
from rat_maze.core.cells import Cell
from rat_maze.core.grid import Grid
from rat_maze.core.position import Position
from rat_maze.algo.base import Solver, MazeListener

logger = logging.getLogger(__name__)

class BacktrackingSolver(Solver):
    """
    Depth-first walk with an explicit trail instead of recursion.
    Neighbors are tried North, East, South, West.
    """

    def solve(self, grid: Grid, listener: MazeListener) -> bool:
        if listener is None:
            raise ValueError("Listener cannot be None")

        self.step_count = 0
        self.backtrack_count = 0

        goal = grid.initial_cheese_position
        current = grid.initial_rat_position
        trail: List[Position] = []

        logger.debug(f"Solving {grid.width}x{grid.height} maze from {tuple(current)} to {tuple(goal)}")

        while True:
            current.place(grid, Cell.AGENT)
            self.step_count += 1
            listener(grid)

            if current.is_at(goal):
                logger.debug(f"Reached cheese after {self.step_count} steps")
                return True

            # Leave a breadcrumb and step to the first open neighbor
            for neighbor in current.neighbors():
                if neighbor.can_be_moved_to(grid):
                    trail.append(current)
                    current.place(grid, Cell.PATH)
                    current = neighbor
                    break
            else:
                current.place(grid, Cell.TRIED)
                if not trail:
                    logger.debug(f"No path found after {self.step_count} steps")
                    return False
                current = trail.pop()
                self.backtrack_count += 1
                logger.debug(f"Dead end, backtracking to {tuple(current)} (trail: {len(trail)})")

def solve(grid: Grid, listener: MazeListener) -> bool:
    return BacktrackingSolver().solve(grid, listener)
