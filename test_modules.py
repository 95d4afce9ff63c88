"""
Tests for the board, win checker, move generator, threat scanner and move validator.
"""

import numpy as np
import pytest

from engine.board import Board, OutcomeKind
from engine.errors import CellOccupiedError, GameOverError, InvalidBoardError, OutOfRangeError
from engine.move_generator import empty_spaces
from engine.move_validator import MoveValidator
from engine.primitives import Coordinate, Symbol
from engine.threat_scanner import completes_line, find_blocking_move, find_winning_move
from engine.win_checker import WinChecker


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.move_count == 0
    assert board.symbol_to_move() == Symbol.X
    assert not board.is_terminal()
    assert board.outcome().kind == OutcomeKind.IN_PROGRESS
    assert len(board.empty_cells()) == 9


def test_field_string_sets_move_count():
    board = Board.from_string("XX_______")
    assert board.move_count == 2
    assert board.symbol_to_move() == Symbol.X
    assert board.cell(0, 0) == "X"
    assert board.cell(0, 2) == "_"
    assert board.to_string() == "XX_______"


def test_spaces_count_as_empty():
    board = Board("X O      ")
    assert board.move_count == 2
    assert board.to_string() == "X_O______"


@pytest.mark.parametrize("field", ["", "XX", "XXXXXXXXXX", "XO?______"])
def test_bad_field_strings(field):
    with pytest.raises(InvalidBoardError):
        Board(field)


def test_apply_move_changes_one_cell():
    board = Board("X___O____")
    before = board.grid.copy()

    board.apply_move(Coordinate(2, 2))

    changed = np.argwhere(board.grid != before)
    assert changed.tolist() == [[2, 2]]
    assert board.cell(2, 2) == "X"
    assert board.move_count == 3
    assert board.symbol_to_move() == Symbol.O


def test_symbol_alternates_with_parity():
    rng = np.random.default_rng(7)
    for _ in range(50):
        board = Board()
        while not board.is_terminal():
            expected = Symbol.X if board.move_count % 2 == 0 else Symbol.O
            assert board.symbol_to_move() == expected
            cells = board.empty_cells()
            board.apply_move(cells[int(rng.integers(len(cells)))])
        assert 5 <= board.move_count <= 9


def test_apply_move_rejects_occupied_cell():
    board = Board("X________")
    with pytest.raises(CellOccupiedError):
        board.apply_move((0, 0))
    assert board.move_count == 1


@pytest.mark.parametrize("coord", [(3, 0), (0, 3), (-1, 1), (1, -1)])
def test_apply_move_rejects_out_of_range(coord):
    board = Board()
    with pytest.raises(OutOfRangeError):
        board.apply_move(coord)
    assert board.move_count == 0


def test_finished_board_refuses_moves():
    board = Board("XXXOO____")
    assert board.is_terminal()
    with pytest.raises(GameOverError):
        board.apply_move((2, 2))


def test_copy_is_independent():
    board = Board("X________")
    clone = board.copy()
    clone.apply_move((1, 1))
    assert board.cell(1, 1) == "_"
    assert board.move_count == 1
    assert clone.move_count == 2


def test_render():
    board = Board("XO__X___O")
    assert board.render() == (
        "---------\n"
        "| X O   |\n"
        "|   X   |\n"
        "|     O |\n"
        "---------"
    )


# ==================== OUTCOME ====================

@pytest.mark.parametrize("field, winner", [
    ("XXXOO____", Symbol.X),   # top row
    ("XX_OOOX__", Symbol.O),   # middle row
    ("O_XOX_O_X", Symbol.O),   # left column
    ("_X_OX_OX_", Symbol.X),   # middle column
    ("X_OOX___X", Symbol.X),   # main diagonal
    ("XXO_O_OX_", Symbol.O),   # anti diagonal
])
def test_line_wins(field, winner):
    board = Board(field)
    assert board.is_terminal()
    assert board.outcome().kind == OutcomeKind.WIN
    assert board.outcome().winner == winner
    assert str(board.outcome()) == f"{winner.value} wins"


def test_full_board_without_line_is_draw():
    board = Board("XOXXOOOXX")
    assert board.is_terminal()
    assert board.outcome().kind == OutcomeKind.DRAW
    assert str(board.outcome()) == "Draw"


def test_unfinished_board():
    board = Board("XO_______")
    assert not board.is_terminal()
    assert str(board.outcome()) == "Game not finished"


def test_winning_move_on_last_cell_is_win_not_draw():
    board = Board("XOXOXOOX_")
    board.apply_move((2, 2))
    assert board.outcome().winner == Symbol.X


def test_win_checker_scan_order():
    checker = WinChecker()
    grid = np.array(list("XXXX__X__")).reshape(3, 3)
    # Row beats column when both are complete
    assert checker.get_winning_line(grid) == [(0, 0), (0, 1), (0, 2)]
    assert checker.check_winner(grid) == "X"
    assert not checker.check_draw(grid)


# ==================== MOVE GENERATOR ====================

def test_empty_spaces_row_major():
    board = Board("X_O_X_O__")
    assert empty_spaces(board) == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]


def test_empty_spaces_full_board():
    assert empty_spaces(Board("XOXXOOOXX")) == []


# ==================== THREAT SCANNER ====================

def test_completes_line_every_geometry():
    # Each line, with the gap in each of its three positions
    for line in WinChecker.WINNING_LINES:
        for gap in line:
            cells = ["_"] * 9
            for row, col in line:
                if (row, col) != gap:
                    cells[row * 3 + col] = "O"
            board = Board("".join(cells))
            assert completes_line(board, Coordinate(*gap), Symbol.O), (line, gap)
            assert not completes_line(board, Coordinate(*gap), Symbol.X)


def test_completes_line_leaves_board_alone():
    board = Board("XX_______")
    completes_line(board, Coordinate(0, 2), Symbol.X)
    assert board.to_string() == "XX_______"


def test_find_winning_and_blocking_moves():
    board = Board("XX_OO____")
    assert find_winning_move(board, Symbol.X) == (0, 2)
    assert find_winning_move(board, Symbol.O) == (1, 2)
    assert find_blocking_move(board, Symbol.X) == (1, 2)
    assert find_winning_move(Board(), Symbol.X) is None


# ==================== MOVE VALIDATOR ====================

def test_validator_converts_cartesian_input():
    validator = MoveValidator()
    board = Board()
    assert validator.validate_move(board, "1 1").coordinate == (2, 0)
    assert validator.validate_move(board, "1 3").coordinate == (0, 0)
    assert validator.validate_move(board, "3 1").coordinate == (2, 2)
    assert validator.validate_move(board, " 2   2 ").coordinate == (1, 1)


@pytest.mark.parametrize("text, message", [
    ("", "You should enter numbers!"),
    ("one two", "You should enter numbers!"),
    ("1", "You should enter numbers!"),
    ("1 2 3", "You should enter numbers!"),
    ("1.5 2", "You should enter numbers!"),
    ("0 1", "Coordinates should be from 1 to 3!"),
    ("2 4", "Coordinates should be from 1 to 3!"),
    ("1 3", "This cell is occupied! Choose another one!"),
])
def test_validator_messages(text, message):
    result = MoveValidator().validate_move(Board("X________"), text)
    assert not result.is_valid
    assert result.error_message == message
