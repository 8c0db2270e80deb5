from array import array
from typing import Iterable, Sequence
from rat_maze.core.cells import Cell, GLYPHS, SYMBOLS, AGENT_SYMBOL, GOAL_SYMBOL
from rat_maze.core.position import Position

class InvalidMazeError(ValueError):
    pass

def render_cells(width: int, cells) -> str:
    """Renders a flat row-major cell buffer, one line per row."""
    if width == 0:
        return ""
    rows = []
    for start in range(0, len(cells), width):
        rows.append("".join(GLYPHS[Cell(v)] for v in cells[start:start + width]))
    return "\n".join(rows)

class Grid:
    """
    A fixed-size rectangular maze. Cells are stored row-major, one byte
    per cell, holding Cell values.

    Build one through from_string, from_file or from_lines; all of them
    end up in the validating constructor.
    """

    __slots__ = ('width', 'height', 'cells', 'initial_rat_position', 'initial_cheese_position')

    def __init__(self, rows: Sequence[str]):
        self.height = len(rows)
        self.width = len(rows[0]) if rows else 0
        self.cells = array('B')

        rat = None
        cheese = None
        for r, line in enumerate(rows):
            if len(line) != self.width:
                raise InvalidMazeError("Non-rectangular maze")
            for c, symbol in enumerate(line):
                cell = SYMBOLS.get(symbol)
                if cell is None:
                    raise InvalidMazeError(f"Illegal character {symbol!r} at ({r}, {c})")
                if symbol == AGENT_SYMBOL:
                    if rat is not None:
                        raise InvalidMazeError("Maze can only have one rat")
                    rat = Position(r, c)
                elif symbol == GOAL_SYMBOL:
                    if cheese is not None:
                        raise InvalidMazeError("Maze can only have one cheese")
                    cheese = Position(r, c)
                self.cells.append(cell)

        if rat is None:
            raise InvalidMazeError("Maze has no rat")
        if cheese is None:
            raise InvalidMazeError("Maze has no cheese")

        self.initial_rat_position = rat
        self.initial_cheese_position = cheese

    @classmethod
    def from_string(cls, description: str) -> "Grid":
        """Rows separated by any run of whitespace."""
        return cls(description.split())

    @classmethod
    def from_file(cls, filename: str) -> "Grid":
        with open(filename, "r", encoding="utf-8") as f:
            return cls.from_lines(f)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        rows = []
        for line in lines:
            rows.extend(line.split())
        return cls(rows)

    def get_index(self, row: int, column: int) -> int:
        if 0 <= row < self.height and 0 <= column < self.width:
            return row * self.width + column
        raise IndexError(f"Position ({row}, {column}) out of bounds")

    def place(self, position: Position, cell: Cell):
        # Raw write: callers check bounds through Position.is_in_maze
        self.cells[position.row * self.width + position.column] = cell

    def contents(self, position: Position) -> Cell:
        return Cell(self.cells[position.row * self.width + position.column])

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def __str__(self) -> str:
        return render_cells(self.width, self.cells)
