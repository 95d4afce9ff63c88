"""
Move generator for the TicTacToe engine.
Lists the cells a move can go to.
"""

from typing import List

from .primitives import Coordinate


def empty_spaces(board) -> List[Coordinate]:
    """
    Get all empty cells on the board.

    Cells come out row-major (top row left to right, then the next row),
    which is the order the search uses to break ties.

    Args:
        board: The board to scan.

    Returns:
        List of Coordinate tuples. A fresh list on every call.
    """
    empty = []
    for row in range(board.SIZE):
        for col in range(board.SIZE):
            if board.is_empty(row, col):
                empty.append(Coordinate(row, col))
    return empty
