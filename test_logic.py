"""
Tests for the game logic: win checker, move validator, game session.
"""

import pytest

from logic.game_session import GameSession, HistoryIndexError
from logic.game_state import Cell, empty_board, format_board, get_empty_cells, place_mark
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

E, X, O = Cell.EMPTY, Cell.X, Cell.O


def board_from(text):
    """Build a board from a 9-character string like 'XXO.O....'."""
    symbols = {".": E, "X": X, "O": O}
    return tuple(symbols[ch] for ch in text)


@pytest.fixture
def session():
    return GameSession()


def play(session, *cells):
    for cell in cells:
        assert session.apply_move(cell)


# ==================== BOARD ====================

def test_empty_board():
    board = empty_board()
    assert len(board) == 9
    assert all(cell == E for cell in board)


def test_place_mark_copies_board():
    board = empty_board()
    new_board = place_mark(board, 4, X)
    assert new_board[4] == X
    assert board[4] == E
    assert get_empty_cells(new_board) == [0, 1, 2, 3, 5, 6, 7, 8]


def test_format_board_shows_marks_and_indices():
    board = board_from("X...O....")
    text = format_board(board, show_indices=True)
    assert "│ X │ 1 │ 2 │" in text
    assert "│ 3 │ O │ 5 │" in text
    assert "│ X │   │   │" in format_board(board)


def test_cell_opposite():
    assert X.opposite() == O
    assert O.opposite() == X
    assert E.opposite() == E


# ==================== WIN CHECKER ====================

def test_top_row_wins():
    assert WinChecker().evaluate(board_from("XXX......")) == X


def test_empty_board_has_no_winner():
    assert WinChecker().evaluate(empty_board()) is None


def test_full_board_without_line_has_no_winner():
    checker = WinChecker()
    board = board_from("XOXXOOOXX")
    assert checker.evaluate(board) is None


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    cells = [E] * 9
    for i in line:
        cells[i] = O
    checker = WinChecker()
    assert checker.evaluate(tuple(cells)) == O
    assert checker.get_winning_line(tuple(cells)) == line


def test_first_line_in_order_decides():
    # Top row X and middle row O: impossible in play, but must be deterministic
    board = board_from("XXXOOO...")
    checker = WinChecker()
    assert checker.evaluate(board) == X
    assert checker.get_winning_line(board) == (0, 1, 2)


def test_mixed_line_is_not_a_win():
    assert WinChecker().evaluate(board_from("XXO......")) is None


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(empty_board(), 0)
    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize("index", [-1, 9, 100, "4", None, True])
def test_validator_rejects_bad_index(index):
    result = MoveValidator().validate_move(empty_board(), index)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message


def test_validator_rejects_occupied_cell():
    result = MoveValidator().validate_move(board_from("....X...."), 4)
    assert not result.is_valid
    assert "occupied" in result.error_message


def test_validator_rejects_after_win():
    validator = MoveValidator()
    board = board_from("XXXOO....")
    result = validator.validate_move(board, 8)
    assert not result.is_valid
    assert "won" in result.error_message
    assert validator.get_valid_moves(board) == []


# ==================== GAME SESSION ====================

def test_new_session(session):
    assert session.history == (empty_board(),)
    assert session.current_move == 0
    assert session.turn_owner() == X
    assert session.winner() is None
    assert session.move_list() == [0]


def test_history_grows_one_per_move(session):
    for count, cell in enumerate([4, 0, 8, 2], start=1):
        assert session.apply_move(cell)
        assert len(session.history) == count + 1
        assert session.current_move == len(session.history) - 1


def test_marks_alternate(session):
    play(session, 4, 0)
    board = session.current_board()
    assert board[4] == X
    assert board[0] == O
    assert session.turn_owner() == X


def test_previous_snapshots_are_untouched(session):
    play(session, 4, 0)
    assert session.history[0] == empty_board()
    assert session.history[1] == board_from("....X....")
    assert session.history[2] == board_from("O...X....")


def test_occupied_cell_is_ignored(session):
    play(session, 4)
    before = session.history
    assert not session.apply_move(4)
    assert session.history == before
    assert session.current_move == 1


@pytest.mark.parametrize("index", [-1, 9])
def test_out_of_range_move_is_ignored(session, index):
    assert not session.apply_move(index)
    assert session.history == (empty_board(),)
    assert session.current_move == 0


def test_jump_to_shows_snapshot(session):
    play(session, 0, 4, 1)
    for k in session.move_list():
        session.jump_to(k)
        assert session.current_board() == session.history[k]
        assert (session.turn_owner() == X) == (k % 2 == 0)
    # jumping doesn't touch the history
    assert len(session.history) == 4


@pytest.mark.parametrize("index", [-1, 4, 100, "1", None, 1.0])
def test_jump_out_of_range_raises(session, index):
    play(session, 0, 4, 1)
    session.jump_to(2)
    with pytest.raises(HistoryIndexError):
        session.jump_to(index)
    assert session.current_move == 2
    assert len(session.history) == 4


def test_jump_error_is_index_error(session):
    with pytest.raises(IndexError):
        session.jump_to(1)


@pytest.mark.parametrize("pointer", [0, 1, 2, 3])
def test_move_after_jump_discards_later_moves(session, pointer):
    play(session, 0, 4, 1, 3)
    session.jump_to(pointer)
    assert session.apply_move(8)
    assert len(session.history) == pointer + 2
    assert session.current_move == pointer + 1
    assert session.current_board()[8] == session.turn_owner().opposite()


def test_jump_forward_again_before_moving(session):
    play(session, 0, 4, 1)
    latest = session.current_board()
    session.jump_to(0)
    session.jump_to(3)
    assert session.current_board() == latest


def test_win_then_moves_are_ignored(session):
    play(session, 0, 4, 1, 3, 2)
    assert session.winner() == X
    assert session.winning_line() == (0, 1, 2)
    assert session.status_text() == "Winner: X"

    before = session.history
    assert not session.apply_move(5)
    assert session.history == before
    assert session.current_move == 5


def test_jump_back_after_win_and_branch(session):
    play(session, 0, 4, 1, 3, 2)

    session.jump_to(2)
    assert session.current_board() == board_from("X...O....")
    assert session.turn_owner() == X
    assert session.winner() is None

    assert session.apply_move(1)
    assert len(session.history) == 4
    assert session.current_move == 3
    assert session.current_board() == board_from("XX..O....")
    assert session.status_text() == "Next player: O"


def test_move_labels(session):
    play(session, 0, 4)
    labels = [session.move_label(m) for m in session.move_list()]
    assert labels == ["Go to game start", "Go to move #1", "Go to move #2"]


def test_status_text_next_player(session):
    assert session.status_text() == "Next player: X"
    play(session, 0)
    assert session.status_text() == "Next player: O"


def test_full_board_draw_keeps_next_player_status(session):
    # X O X / X O O / O X X
    play(session, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert session.winner() is None
    assert session.status_text() == "Next player: O"
    assert not session.apply_move(0)


def test_reset(session):
    play(session, 0, 4, 1)
    session.jump_to(1)
    session.reset()
    assert session.history == (empty_board(),)
    assert session.current_move == 0
    assert session.turn_owner() == X


def test_history_is_a_copy(session):
    history = session.history
    play(session, 0)
    assert len(history) == 1
    assert len(session.history) == 2


def test_valid_moves_follow_current_snapshot(session):
    play(session, 0, 4)
    assert session.valid_moves() == [1, 2, 3, 5, 6, 7, 8]
    session.jump_to(0)
    assert session.valid_moves() == list(range(9))


def test_no_valid_moves_after_win(session):
    play(session, 0, 4, 1, 3, 2)
    assert session.valid_moves() == []
