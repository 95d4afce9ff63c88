"""
Win checker for the TicTacToe engine.
Checks if a symbol has completed a line or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .primitives import EMPTY


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical symbols in a row
    (horizontally, vertically, or diagonally).

    Lines are scanned rows first, then columns, then diagonals, so the
    result is deterministic even for hand-built grids with several lines.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, grid: np.ndarray) -> Optional[str]:
        """
        Check if there's a winner.

        Args:
            grid: 3x3 array of cell characters.

        Returns:
            The winning symbol character, or None if no line is complete.
        """
        line = self.get_winning_line(grid)
        if line is None:
            return None
        row, col = line[0]
        return str(grid[row][col])

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first completed line if there is one.

        Args:
            grid: 3x3 array of cell characters.

        Returns:
            The winning line as list of (row, col), or None.
        """
        # Plain lists compare much faster than numpy scalars
        cells = grid.tolist() if isinstance(grid, np.ndarray) else grid

        for line in self.WINNING_LINES:
            if self._check_line(cells, line):
                return line
        return None

    def _check_line(self, cells: List[List[str]], line: List[Tuple[int, int]]) -> bool:
        """True if all 3 cells of the line hold the same symbol."""
        (r0, c0), (r1, c1), (r2, c2) = line
        first = cells[r0][c0]
        if first == EMPTY:
            return False
        return cells[r1][c1] == first and cells[r2][c2] == first

    def check_draw(self, grid: np.ndarray) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND no line is complete.

        Args:
            grid: 3x3 array of cell characters.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(grid) is not None:
            return False
        return not (np.asarray(grid) == EMPTY).any()
