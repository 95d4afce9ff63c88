"""
Errors raised by the game engine and the console.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidCommandError(TicTacToeError):
    """A console command that is not `start <p1> <p2>` or `exit`."""


class InvalidMoveInputError(TicTacToeError):
    """Human move text that does not name a cell on the board."""


class InvalidBoardError(TicTacToeError, ValueError):
    """A field string that cannot be turned into a board."""


class IllegalMoveError(TicTacToeError, ValueError):
    """A move the board refuses to apply."""


class CellOccupiedError(IllegalMoveError):
    """The target cell already holds a symbol."""

    def __init__(self, row: int, col: int, symbol: str):
        super().__init__(f"Cell ({row}, {col}) is already occupied by {symbol}")
        self.row = row
        self.col = col
        self.symbol = symbol


class OutOfRangeError(IllegalMoveError):
    """The target cell is outside the 3x3 grid."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")
        self.row = row
        self.col = col


class GameOverError(IllegalMoveError):
    """The board is already won or drawn."""

    def __init__(self, message: str = "Game is already over!"):
        super().__init__(message)
