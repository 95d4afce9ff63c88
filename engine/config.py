"""
Game configuration for the TicTacToe console.
All the settings for the board, player levels and console text.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Instances may override any value (e.g. DEBUG_MODE from the command line).
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Field strings are row-major, one character per cell
    EMPTY_CELL = "_"
    EMPTY_FIELD = EMPTY_CELL * BOARD_SIZE * BOARD_SIZE

    # ==================== PLAYER SETTINGS ====================
    # "user" is a human at the console, the rest are computer levels
    HUMAN_LEVEL = "user"
    LEVELS = ("user", "easy", "medium", "hard")

    # Unknown levels fall back to this one
    DEFAULT_LEVEL = "easy"

    # ==================== SEARCH SETTINGS ====================
    # Scores from the searching side's point of view
    WIN_SCORE = 1
    DRAW_SCORE = 0
    LOSS_SCORE = -1

    # ==================== CONSOLE TEXT ====================
    COMMAND_PROMPT = "Input command: "
    MOVE_PROMPT = "Enter the coordinates: "
    BORDER = "---------"

    MSG_BAD_PARAMETERS = "Bad parameters!"
    MSG_NOT_NUMBERS = "You should enter numbers!"
    MSG_OUT_OF_RANGE = "Coordinates should be from 1 to 3!"
    MSG_OCCUPIED = "This cell is occupied! Choose another one!"
    MSG_AI_MOVE = 'Making move level "{level}"'

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
    RANDOM_SEED = None  # None = fresh entropy every run

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown config setting: {name}")
            setattr(self, name, value)
