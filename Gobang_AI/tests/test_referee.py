"""Tests for move validation and post-move settlement."""

import pytest

from Gobang_AI.Board import Board, BLACK, WHITE
from Gobang_AI.engine import referee
from Gobang_AI.engine.errors import IllegalMove


def test_valid_move_passes():
    b = Board(size=15)
    assert referee.check_move((7, 7), b, BLACK) is True
    assert b.move_count == 0


@pytest.mark.parametrize("move", [(15, 0), (0, -1), (7,), None])
def test_bad_moves_rejected(move):
    b = Board(size=15)
    with pytest.raises(IllegalMove):
        referee.check_move(move, b, BLACK)


def test_occupied_rejected_and_board_unchanged():
    b = Board(size=15)
    b.place(7, 7, BLACK)
    with pytest.raises(IllegalMove):
        referee.check_move((7, 7), b, WHITE)
    with pytest.raises(IllegalMove):
        b.place(7, 7, WHITE)
    assert b.cells[7][7] == BLACK
    assert b.move_count == 1


def test_check_move_uses_board_validation(monkeypatch):
    calls = []
    b = Board()
    monkeypatch.setattr(b, "validate", lambda row, col, color: calls.append((row, col, color)))
    assert referee.check_move((99, 99), b, 0) is True
    assert calls == [(99, 99, 0)]


def test_unknown_color_rejected():
    with pytest.raises(IllegalMove):
        referee.check_move((0, 0), Board(), 0)


def test_settle_reports_win_then_draw():
    b = Board(size=15)
    for c in range(4):
        b.place(0, c, WHITE)
        assert referee.settle(b, 0, c) == (None, None)
    b.place(0, 4, WHITE)
    outcome, record = referee.settle(b, 0, 4)
    assert outcome == "win"
    assert set(record.cells) == {(0, c) for c in range(5)}

    small = Board(size=2)
    for r, c in [(0, 0), (0, 1), (1, 0)]:
        small.place(r, c, BLACK)
    small.place(1, 1, WHITE)
    assert referee.settle(small, 1, 1) == ("draw", None)
