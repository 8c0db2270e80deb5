from enum import IntEnum
from typing import Dict

class Cell(IntEnum):
    # Stored as one byte per cell in Grid.cells
    EMPTY = 0   # never visited
    WALL  = 1
    TRIED = 2   # dead end, never stepped on again
    PATH  = 3   # breadcrumb of the live path
    AGENT = 4   # the rat
    GOAL  = 5   # the cheese

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

# Rendering glyphs
GLYPHS: Dict[Cell, str] = {
    Cell.EMPTY: " ",
    Cell.WALL:  "█",
    Cell.TRIED: "x",
    Cell.PATH:  ".",
    Cell.AGENT: "r",
    Cell.GOAL:  "c",
}

# Input symbols. PATH and TRIED only ever come from the solver.
SYMBOLS: Dict[str, Cell] = {
    "o": Cell.EMPTY,
    "w": Cell.WALL,
    "r": Cell.AGENT,
    "c": Cell.GOAL,
}

AGENT_SYMBOL = "r"
GOAL_SYMBOL = "c"

_missing = set(Cell) - set(GLYPHS)
if _missing:
    raise RuntimeError(f"Cells without a glyph: {sorted(c.name for c in _missing)}")
del _missing
