from typing import Iterator, NamedTuple
from rat_maze.core.cells import Cell

class Position(NamedTuple):
    """
    A (row, column) coordinate. Holds no cell data: every accessor takes
    the Grid it indexes into.
    """
    row: int
    column: int

    def above(self) -> "Position":
        return Position(self.row - 1, self.column)

    def below(self) -> "Position":
        return Position(self.row + 1, self.column)

    def to_the_left(self) -> "Position":
        return Position(self.row, self.column - 1)

    def to_the_right(self) -> "Position":
        return Position(self.row, self.column + 1)

    def neighbors(self) -> Iterator["Position"]:
        """Yields the four neighbors in search order: North, East, South, West."""
        yield self.above()
        yield self.to_the_right()
        yield self.below()
        yield self.to_the_left()

    def is_in_maze(self, grid) -> bool:
        return 0 <= self.row < grid.height and 0 <= self.column < grid.width

    def contents(self, grid) -> Cell:
        return grid.contents(self)

    def place(self, grid, cell: Cell):
        grid.place(self, cell)

    def has_goal(self, grid) -> bool:
        return self.contents(grid) == Cell.GOAL

    def can_be_moved_to(self, grid) -> bool:
        # Bounds first: contents() does no checking
        if not self.is_in_maze(grid):
            return False
        return self.contents(grid) in (Cell.EMPTY, Cell.GOAL)

    def is_at(self, other: "Position") -> bool:
        return self.row == other.row and self.column == other.column
