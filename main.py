"""
Console front end for TicTacToe with AI.

Commands:
    start <p1> <p2>   play one game, p1 is X and moves first
    exit              quit

Each player is one of: user, easy, medium, hard.

Run this script to play TicTacToe against the computer (or watch it play itself)!
"""

from typing import Callable, List, Optional, Tuple

import numpy as np

from engine.board import Board, Outcome
from engine.config import GameConfig
from engine.errors import InvalidCommandError
from engine.move_validator import MoveValidator
from engine.policies import AIPlayer
from engine.primitives import Coordinate


class HumanPlayer:
    """
    A person typing moves at the console.

    Keeps asking until the input names an empty cell.
    """

    def __init__(self, input_fn: Callable[[str], str] = input, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.validator = MoveValidator(self.config)

    def select_move(self, board: Board) -> Coordinate:
        while True:
            text = self.input_fn(self.config.MOVE_PROMPT)
            result = self.validator.validate_move(board, text)
            if result.is_valid:
                return result.coordinate
            print(result.error_message)


class TicTacToeConsole:
    """
    Main controller for the console game.

    Game flow:
    1. Read a command; "start" builds a fresh board and two players
    2. Ask the player to move (X on even turns, O on odd turns)
    3. Apply the move and print the board
    4. Repeat until someone wins or it's a draw, then print the result
    5. Back to 1 until "exit"
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the console.

        Args:
            input_fn: Where lines come from (prompt in, line out).
            config: Game settings.
            rng: Random source shared by all computer players.
        """
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.rng = rng if rng is not None else np.random.default_rng(self.config.RANDOM_SEED)

    def parse_command(self, line: str) -> Optional[Tuple[str, str]]:
        """
        Parse a command line.

        Returns:
            The two player levels for "start", or None for "exit".

        Raises:
            InvalidCommandError: for anything else.
        """
        words = line.split()

        if len(words) == 1 and words[0] == "exit":
            return None

        if len(words) == 3 and words[0] == "start":
            levels = words[1], words[2]
            if all(level in self.config.LEVELS for level in levels):
                return levels

        raise InvalidCommandError(line)

    def make_player(self, level: str):
        if level == self.config.HUMAN_LEVEL:
            return HumanPlayer(self.input_fn, self.config)
        return AIPlayer(level, self.rng, self.config)

    def play_game(self, first: str, second: str) -> Outcome:
        """
        Play one game to the end.

        Args:
            first: Level of the X player.
            second: Level of the O player.

        Returns:
            The final outcome.
        """
        board = Board(self.config.EMPTY_FIELD)
        players = [self.make_player(first), self.make_player(second)]
        print(board.render())

        while not board.is_terminal():
            player = players[board.move_count % 2]
            board.apply_move(player.select_move(board))
            print(board.render())

        print(board.outcome())
        return board.outcome()

    def run(self) -> List[Outcome]:
        """
        Read commands until "exit" or end of input.

        Returns:
            Outcomes of the games played, in order.
        """
        results = []

        while True:
            try:
                line = self.input_fn(self.config.COMMAND_PROMPT)
            except EOFError:
                break

            try:
                levels = self.parse_command(line)
            except InvalidCommandError:
                print(self.config.MSG_BAD_PARAMETERS)
                continue

            if levels is None:
                break

            try:
                results.append(self.play_game(*levels))
            except EOFError:
                break

        return results


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with AI")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the easy and medium players (repeatable games)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics for the hard player"
    )

    args = parser.parse_args()

    config = GameConfig(DEBUG_MODE=args.debug, RANDOM_SEED=args.seed)
    console = TicTacToeConsole(config=config)

    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
