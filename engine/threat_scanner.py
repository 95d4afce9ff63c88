"""
Threat scanner for the medium AI level.
Finds cells where one more symbol completes a line.
"""

from typing import Optional

from .board import Board
from .move_generator import empty_spaces
from .primitives import Coordinate, Symbol
from .win_checker import WinChecker


_win_checker = WinChecker()


def completes_line(board: Board, coord: Coordinate, symbol: Symbol) -> bool:
    """
    Check whether placing symbol at coord would give it three in a row.

    The move is tried on a copy of the grid, so the board is left as is.

    Args:
        board: Current board.
        coord: An empty cell.
        symbol: The symbol to try (not necessarily the one to move).

    Returns:
        True if symbol owns a complete line after the hypothetical move.
    """
    row, col = coord
    if not board.is_empty(row, col):
        return False

    grid = board.grid.copy()
    grid[row, col] = symbol.value
    return _win_checker.check_winner(grid) == symbol.value


def find_winning_move(board: Board, symbol: Symbol) -> Optional[Coordinate]:
    """First empty cell (row-major) that wins for symbol, or None."""
    for coord in empty_spaces(board):
        if completes_line(board, coord, symbol):
            return coord
    return None


def find_blocking_move(board: Board, symbol: Symbol) -> Optional[Coordinate]:
    """First cell symbol must take to stop the opponent winning next turn."""
    return find_winning_move(board, symbol.opposite())
