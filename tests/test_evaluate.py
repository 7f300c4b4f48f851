import pytest

from tic_tac_toe_local.game_logic import WINNING_LINES, evaluate
from tic_tac_toe_local.models import Mark, Outcome, OutcomeStatus

X, O, _ = "X", "O", None


def test_empty_board_in_progress():
    assert evaluate([None] * 9) == Outcome.in_progress()


def test_partial_board_without_line_in_progress():
    board = [X, O, X,
             _, O, _,
             _, X, _]
    res = evaluate(board)
    assert res.status is OutcomeStatus.IN_PROGRESS
    assert res.winner is None
    assert res.line is None


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_is_a_win(line):
    board = [None] * 9
    for i in line:
        board[i] = O
    res = evaluate(board)
    assert res.status is OutcomeStatus.WIN
    assert res.winner is Mark.O
    assert res.line == line


def test_full_board_without_line_is_draw():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    assert evaluate(board) == Outcome.draw()


def test_full_board_with_line_is_win_not_draw():
    board = [X, X, X,
             O, O, X,
             X, O, O]
    res = evaluate(board)
    assert res.status is OutcomeStatus.WIN
    assert res.line == (0, 1, 2)


def test_row_preferred_over_column_on_constructed_board():
    board = [X, X, X,
             X, _, _,
             X, _, _]
    assert evaluate(board).line == (0, 1, 2)


def test_column_preferred_over_diagonal():
    board = [X, _, _,
             X, X, _,
             X, _, X]
    assert evaluate(board).line == (0, 3, 6)


def test_two_winners_resolved_by_scan_order():
    # Unreachable: both marks own a row. The earlier row wins.
    board = [O, O, O,
             X, X, X,
             _, _, _]
    res = evaluate(board)
    assert res.winner is Mark.O
    assert res.line == (0, 1, 2)


def test_accepts_enum_and_empty_string_cells():
    board = [Mark.X, "", Mark.O,
             "", Mark.X, "",
             Mark.O, "", Mark.X]
    res = evaluate(board)
    assert res.winner is Mark.X
    assert res.line == (0, 4, 8)


def test_evaluate_does_not_mutate_input():
    board = [X, O, _, _, _, _, _, _, _]
    before = list(board)
    evaluate(board)
    assert board == before


@pytest.mark.parametrize("size", [0, 8, 10])
def test_wrong_size_board_raises(size):
    with pytest.raises(ValueError):
        evaluate([None] * size)
