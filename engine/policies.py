"""
Computer opponents for the TicTacToe console.
Maps a level name to a move-selection strategy and runs it.
"""

from enum import Enum
from typing import Optional

import numpy as np

from .board import Board
from .config import GameConfig
from .move_generator import empty_spaces
from .primitives import Coordinate
from .search import SearchEngine
from .threat_scanner import find_blocking_move, find_winning_move


class PolicyKind(Enum):
    """
    Who chooses the moves for a side.

    Adding a level means adding a member here, a label in LEVEL_POLICIES
    and an arm in select_move.
    """
    HUMAN = "user"
    RANDOM = "easy"
    HEURISTIC = "medium"
    OPTIMAL = "hard"


LEVEL_POLICIES = {kind.value: kind for kind in PolicyKind}


def policy_for_level(level: str) -> PolicyKind:
    """
    Get the policy for a level name.

    Unknown names get the easy (random) policy.
    """
    return LEVEL_POLICIES.get(level, LEVEL_POLICIES[GameConfig.DEFAULT_LEVEL])


def random_move(board: Board, rng: np.random.Generator) -> Coordinate:
    """Pick any empty cell, each with the same chance."""
    cells = empty_spaces(board)
    if not cells:
        raise ValueError("No empty cells to choose from")
    return cells[int(rng.integers(len(cells)))]


def heuristic_move(board: Board, rng: np.random.Generator) -> Coordinate:
    """
    Win if we can, block if we must, otherwise play randomly.
    """
    symbol = board.symbol_to_move()

    move = find_winning_move(board, symbol)
    if move is not None:
        return move

    move = find_blocking_move(board, symbol)
    if move is not None:
        return move

    return random_move(board, rng)


def select_move(
    kind: PolicyKind,
    board: Board,
    rng: Optional[np.random.Generator] = None,
    engine: Optional[SearchEngine] = None
) -> Coordinate:
    """
    Choose a move for the side to move.

    Args:
        kind: Which strategy to use.
        board: Current board. It is not modified.
        rng: Random source for the random and heuristic levels.
        engine: Search engine for the optimal level.

    Returns:
        (row, col) of an empty cell.
    """
    if rng is None:
        rng = np.random.default_rng()

    if kind == PolicyKind.RANDOM:
        return random_move(board, rng)
    elif kind == PolicyKind.HEURISTIC:
        return heuristic_move(board, rng)
    elif kind == PolicyKind.OPTIMAL:
        return (engine or SearchEngine()).best_move(board)
    elif kind == PolicyKind.HUMAN:
        raise ValueError("Human moves come from the console, not from a policy")
    raise ValueError(f"Unknown policy: {kind}")


class AIPlayer:
    """
    A computer player at one of the levels easy, medium or hard.

    Holds no game state: the board is passed in on every call.
    """

    def __init__(
        self,
        level: str,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            level: "easy", "medium" or "hard" (anything else plays easy).
            rng: Random source. Pass a seeded generator for repeatable games.
            config: Game settings.
        """
        self.config = config or GameConfig()
        self.level = level
        self.kind = policy_for_level(level)
        if self.kind == PolicyKind.HUMAN:
            raise ValueError("AIPlayer cannot play the user level")

        self.rng = rng if rng is not None else np.random.default_rng(self.config.RANDOM_SEED)
        self.engine = SearchEngine(self.config)

    def select_move(self, board: Board) -> Coordinate:
        """Announce the level and pick a move."""
        print(self.config.MSG_AI_MOVE.format(level=self.level))
        return select_move(self.kind, board, self.rng, self.engine)
