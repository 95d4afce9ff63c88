"""
Minimax search for the hard AI level.
Explores the whole game tree and picks the move with the best guaranteed result.
"""

from typing import Optional, Tuple

from .board import Board, OutcomeKind
from .config import GameConfig
from .errors import GameOverError
from .move_generator import empty_spaces
from .primitives import Coordinate, Symbol


class SearchEngine:
    """
    Plays TicTacToe perfectly using the Minimax algorithm.

    The engine will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    Scores are from the searching side's point of view:
    win = +1, draw = 0, loss = -1.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the search engine.

        Args:
            config: Game settings (scores and debug output).
        """
        self.config = config or GameConfig()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def best_move(self, board: Board, searcher: Optional[Symbol] = None) -> Coordinate:
        """
        Get the best move for the current position.

        Moves are tried in row-major order and only a strictly better score
        replaces the current choice, so equal moves resolve to the first one.
        A move that wins on the spot is taken immediately.

        Args:
            board: Current board. It is not modified.
            searcher: Side we are searching for (default: the side to move).

        Returns:
            (row, col) of the best move.

        Raises:
            GameOverError: the board is already won or drawn.
        """
        if board.is_terminal():
            raise GameOverError("No moves left to search, the game is over")

        searcher = searcher or board.symbol_to_move()
        self.positions_evaluated = 0

        best_score = None
        best_move = None

        for coord in empty_spaces(board):
            # Try this move
            child = board.copy()
            child.apply_move(coord)

            if child.outcome().winner == searcher:
                best_score, best_move = self.config.WIN_SCORE, coord
                break

            score = self.minimax(child, searcher)

            if best_score is None or score > best_score:
                best_score = score
                best_move = coord

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {tuple(best_move)} (score: {best_score})")

        return best_move

    def minimax(
        self,
        board: Board,
        searcher: Symbol,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        The side to move maximises when it is the searcher and minimises
        otherwise. Called with the default window the score is exact.

        Args:
            board: Position to evaluate.
            searcher: Side the score is reported for.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        terminal_score = self._terminal_score(board, searcher)
        if terminal_score is not None:
            return terminal_score

        is_maximizing = board.symbol_to_move() == searcher

        if is_maximizing:
            max_score = float('-inf')
            for coord in empty_spaces(board):
                child = board.copy()
                child.apply_move(coord)
                score = self.minimax(child, searcher, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for coord in empty_spaces(board):
                child = board.copy()
                child.apply_move(coord)
                score = self.minimax(child, searcher, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def _terminal_score(self, board: Board, searcher: Symbol) -> Optional[int]:
        outcome = board.outcome()
        if outcome.kind == OutcomeKind.WIN:
            if outcome.winner == searcher:
                return self.config.WIN_SCORE
            return self.config.LOSS_SCORE
        if outcome.kind == OutcomeKind.DRAW:
            return self.config.DRAW_SCORE
        return None

    def evaluate(self, board: Board) -> Tuple[Optional[Coordinate], int]:
        """
        Best move and its score for the side to move.

        Returns (None, score) for a finished board.
        """
        searcher = board.symbol_to_move()
        if board.is_terminal():
            return None, self.minimax(board, searcher)
        move = self.best_move(board, searcher)
        child = board.copy()
        child.apply_move(move)
        return move, self.minimax(child, searcher)


def best_move(board: Board, searcher: Optional[Symbol] = None) -> Coordinate:
    """Shortcut for SearchEngine().best_move()."""
    return SearchEngine().best_move(board, searcher)


# Quick test
if __name__ == "__main__":
    print("Testing SearchEngine...")

    engine = SearchEngine(GameConfig(DEBUG_MODE=True))

    # Test 1: X should take the top row
    board = Board("XX_OO____")
    print(board)
    move = engine.best_move(board)
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ Search takes the win!")

    # Test 2: O should block the top row
    board = Board("XX__O____")
    print(board)
    move = engine.best_move(board)
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ Search blocks the win!")

    print("\nSearchEngine test done!")
