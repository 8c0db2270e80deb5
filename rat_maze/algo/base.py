from abc import ABC, abstractmethod
from typing import Callable
from rat_maze.core.grid import Grid

# Called with the grid after every agent placement. May raise to abort.
MazeListener = Callable[[Grid], None]

class Solver(ABC):
    def __init__(self):
        self.step_count = 0
        self.backtrack_count = 0

    @abstractmethod
    def solve(self, grid: Grid, listener: MazeListener) -> bool:
        """
        Moves the rat through the grid in place, notifying the listener
        after each placement. Returns True once the cheese is reached.
        """
        pass

class SolveAborted(Exception):
    """Listeners raise this to stop a solve early. The grid is left as is."""
    pass
