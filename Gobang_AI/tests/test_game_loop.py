"""Tests for Omokgame turn handling and end-of-game state."""

import pytest

from Gobang_AI.AiPlayer import AiPlayer
from Gobang_AI.Board import BLACK, WHITE
from Gobang_AI.Omokgame import Omokgame
from Gobang_AI.Player import HumanPlayer, Player, QuitGame


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    is_human = True

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            raise QuitGame()
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def test_black_wins_and_final_render_gets_win_record():
    black = SeqPlayer(BLACK, [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)])
    white = SeqPlayer(WHITE, [(1, 0), (1, 1), (1, 2), (1, 3)])

    final = []

    def renderer(board, last_move, current_color, game_result, win_record=None):
        if game_result is not None:
            final.append((current_color, game_result, win_record))

    messages = []
    game = Omokgame(black, white, logger=messages.append, renderer=renderer)
    result = game.play()

    assert result == BLACK
    assert final and final[-1][0] == BLACK
    record = final[-1][2]
    assert record is game.win_record
    assert set(record.cells) == {(0, c) for c in range(5)}
    assert messages[-1] == "Player Black wins!"


def test_illegal_human_move_is_retried():
    black = SeqPlayer(BLACK, [(5, 5), (6, 6), (7, 7), (8, 8), (9, 9)])
    # (5, 5) is occupied and (20, 0) is off the board; both are retried
    white = SeqPlayer(WHITE, [(5, 5), (20, 0), (0, 0), (0, 1), (0, 2), (0, 3)])
    messages = []
    game = Omokgame(black, white, logger=messages.append)

    assert game.play() == BLACK
    assert sum("please try again" in m for m in messages) == 2
    assert game.board.cells[0][0] == WHITE


def test_quit_returns_none():
    black = SeqPlayer(BLACK, [(7, 7)])
    white = SeqPlayer(WHITE, [])
    messages = []
    game = Omokgame(black, white, logger=messages.append)
    assert game.play() is None
    assert messages[-1] == "Game over."


def test_draw_on_full_board():
    black = SeqPlayer(BLACK, [(0, 0), (1, 1)])
    white = SeqPlayer(WHITE, [(0, 1), (1, 0)])
    messages = []
    game = Omokgame(black, white, board_size=2, logger=messages.append)
    assert game.play() == 0
    assert messages[-1] == "It's a draw!"


def test_replay_starts_from_clear_board():
    black = SeqPlayer(BLACK, [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)] * 2)
    white = SeqPlayer(WHITE, [(1, 0), (1, 1), (1, 2), (1, 3)] * 2)
    game = Omokgame(black, white, logger=lambda *_: None)
    assert game.play() == BLACK
    assert game.play() == BLACK
    assert game.board.move_count == 9


def test_ai_win_message():
    game = Omokgame(HumanPlayer(BLACK), AiPlayer(WHITE, depth=2), logger=lambda *_: None)
    assert game.result_message(WHITE) == "AI wins!"
    assert game.result_message(BLACK) == "Player Black wins!"


def test_ai_errors_propagate():
    class BrokenAi(Player):
        def next_move(self, board):
            return (99, 99)

    game = Omokgame(BrokenAi(BLACK), SeqPlayer(WHITE, []), logger=lambda *_: None)
    with pytest.raises(ValueError):
        game.play()
