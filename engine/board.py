"""
Board state for the TicTacToe engine.
Tracks the 3x3 grid, whose turn it is, and whether the game is over.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple, Union

import numpy as np

from .config import GameConfig
from .errors import CellOccupiedError, GameOverError, InvalidBoardError, OutOfRangeError
from .primitives import EMPTY, Coordinate, Symbol
from .win_checker import WinChecker


class OutcomeKind(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a game.

    winner is only set for OutcomeKind.WIN.
    """
    kind: OutcomeKind
    winner: Optional[Symbol] = None

    @property
    def is_final(self) -> bool:
        return self.kind != OutcomeKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WIN:
            return f"{self.winner.value} wins"
        if self.kind == OutcomeKind.DRAW:
            return "Draw"
        return "Game not finished"


IN_PROGRESS = Outcome(OutcomeKind.IN_PROGRESS)
DRAW = Outcome(OutcomeKind.DRAW)

_VALID_CELLS = {Symbol.X.value, Symbol.O.value, EMPTY}


class Board:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 grid (which symbol is where, "_" for empty)
    - The outcome (in progress, won, draw)

    There is no stored "current player": X moves when the number of filled
    cells is even, O when it is odd. apply_move is the only way the grid
    changes, so the parity rule always holds.
    """

    SIZE = GameConfig.BOARD_SIZE

    def __init__(self, field: str = GameConfig.EMPTY_FIELD):
        """
        Build a board from a row-major field string.

        Args:
            field: 9 characters, each "X", "O" or "_" (a space also
                means empty). "XX_______" puts two X's in the top row.
        """
        if len(field) != self.SIZE * self.SIZE:
            raise InvalidBoardError(
                f"Field must have {self.SIZE * self.SIZE} cells, got {len(field)}"
            )

        cells = [EMPTY if c == " " else c for c in field]
        bad = sorted(set(cells) - _VALID_CELLS)
        if bad:
            raise InvalidBoardError(f"Unknown cell values: {', '.join(bad)}")

        self.grid = np.array(cells, dtype="<U1").reshape(self.SIZE, self.SIZE)
        self._move_count = int((self.grid != EMPTY).sum())
        self._win_checker = WinChecker()
        self._outcome = self._compute_outcome()

    @classmethod
    def from_string(cls, field: str) -> "Board":
        """Create a board from a field string like "XO_X_____"."""
        return cls(field)

    @classmethod
    def _from_grid(cls, grid: np.ndarray, move_count: int, outcome: Outcome) -> "Board":
        board = cls.__new__(cls)
        board.grid = grid
        board._move_count = move_count
        board._win_checker = WinChecker()
        board._outcome = outcome
        return board

    @property
    def move_count(self) -> int:
        """Number of filled cells (0-9)."""
        return self._move_count

    def symbol_to_move(self) -> Symbol:
        """X on even move counts, O on odd ones."""
        return Symbol.X if self._move_count % 2 == 0 else Symbol.O

    def cell(self, row: int, col: int) -> str:
        """Get the character in a cell ("X", "O" or "_")."""
        return str(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def apply_move(self, coord: Union[Coordinate, Tuple[int, int]]) -> Outcome:
        """
        Place the symbol to move at the given cell.

        Args:
            coord: (row, col) in matrix orientation.

        Returns:
            The outcome after the move.

        Raises:
            GameOverError: the board is already won or drawn.
            OutOfRangeError: row or col is outside 0-2.
            CellOccupiedError: the cell is not empty.
        """
        row, col = coord

        if self._outcome.is_final:
            raise GameOverError()
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col)
        if not self.is_empty(row, col):
            raise CellOccupiedError(row, col, self.cell(row, col))

        self.grid[row, col] = self.symbol_to_move().value
        self._move_count += 1
        self._outcome = self._compute_outcome()

        return self._outcome

    def _compute_outcome(self) -> Outcome:
        winner = self._win_checker.check_winner(self.grid)
        if winner is not None:
            return Outcome(OutcomeKind.WIN, Symbol(winner))
        if self._move_count == self.SIZE * self.SIZE:
            return DRAW
        return IN_PROGRESS

    def is_terminal(self) -> bool:
        """True once a line is completed or the grid is full."""
        return self._outcome.is_final

    def outcome(self) -> Outcome:
        return self._outcome

    def empty_cells(self) -> List[Coordinate]:
        """All empty cells in row-major order."""
        from .move_generator import empty_spaces
        return empty_spaces(self)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board._from_grid(self.grid.copy(), self._move_count, self._outcome)

    def to_string(self) -> str:
        """Row-major field string, the inverse of from_string."""
        return "".join(self.grid.flatten().tolist())

    def render(self) -> str:
        """
        Render the board the way the console prints it.

        ---------
        | X O   |
        |   X   |
        |     O |
        ---------
        """
        lines = [GameConfig.BORDER]
        for row in self.grid.tolist():
            cells = " ".join(" " if c == EMPTY else c for c in row)
            lines.append(f"| {cells} |")
        lines.append(GameConfig.BORDER)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
