"""
Game engine for the TicTacToe console.
Board state, win detection and the easy / medium / hard computer opponents.
"""

from .primitives import Symbol, Coordinate, EMPTY
from .config import GameConfig
from .errors import (
    TicTacToeError,
    InvalidCommandError,
    InvalidMoveInputError,
    InvalidBoardError,
    IllegalMoveError,
    CellOccupiedError,
    OutOfRangeError,
    GameOverError,
)
from .board import Board, Outcome, OutcomeKind
from .win_checker import WinChecker
from .move_generator import empty_spaces
from .search import SearchEngine, best_move
from .policies import PolicyKind, AIPlayer, policy_for_level, select_move
from .move_validator import MoveValidator, ValidationResult

__version__ = "1.0.0"
