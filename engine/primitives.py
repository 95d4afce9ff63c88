"""
Basic building blocks shared by the whole engine.
Symbols, coordinates and the empty-cell marker.
"""

from enum import Enum
from typing import NamedTuple


# Marker used for an empty cell in the grid and in field strings
EMPTY = "_"


class Symbol(Enum):
    """The two symbols in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the opposite symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


class Coordinate(NamedTuple):
    """
    A cell on the board in matrix orientation.

    Row 0 is the top row, column 0 is the left column.
    """
    row: int
    col: int
