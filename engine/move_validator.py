"""
Move validator for human players.
Turns typed coordinates into board cells and explains what is wrong with bad input.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board
from .config import GameConfig
from .errors import InvalidMoveInputError
from .primitives import Coordinate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    coordinate: Optional[Coordinate] = None


class MoveValidator:
    """
    Validates moves typed at the console.

    Input is "column row", both 1-3, with (1, 1) in the lower-left corner.
    Rules:
    1. Both values must be whole numbers
    2. Both values must be in 1-3
    3. The cell must be empty
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def parse(self, text: str) -> Coordinate:
        """
        Parse "column row" into a matrix coordinate.

        Args:
            text: Raw console input.

        Returns:
            Coordinate with row 0 at the top.

        Raises:
            InvalidMoveInputError: with the message to show the user.
        """
        parts = text.split()
        if len(parts) != 2:
            raise InvalidMoveInputError(self.config.MSG_NOT_NUMBERS)

        try:
            col, row = int(parts[0]), int(parts[1])
        except ValueError:
            raise InvalidMoveInputError(self.config.MSG_NOT_NUMBERS) from None

        size = self.config.BOARD_SIZE
        if not (1 <= row <= size and 1 <= col <= size):
            raise InvalidMoveInputError(self.config.MSG_OUT_OF_RANGE)

        return Coordinate(size - row, col - 1)

    def validate_move(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a typed move against the board.

        Args:
            board: Current board.
            text: Raw console input.

        Returns:
            ValidationResult with is_valid, error_message and the coordinate.
        """
        try:
            coord = self.parse(text)
        except InvalidMoveInputError as e:
            return ValidationResult(is_valid=False, error_message=str(e))

        if not board.is_empty(*coord):
            return ValidationResult(
                is_valid=False,
                error_message=self.config.MSG_OCCUPIED,
                coordinate=coord
            )

        # All checks passed!
        return ValidationResult(is_valid=True, coordinate=coord)
