"""Minimax with alpha-beta pruning over radius-filtered candidates."""

import logging
import time

from . import heuristic
from . import move_selector

try:
    from engine.errors import ExhaustedBoard
except ImportError:
    from Gobang_AI.engine.errors import ExhaustedBoard


LOGGER = logging.getLogger(__name__)

INF = 10 ** 9


class MinimaxSearcher:
    """Encapsulates the state and logic for one depth-bounded search."""

    def __init__(self, board, color, depth, stats=None):
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.board = board
        self.color = color
        self.depth = depth
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.best_score = None

    def evaluate(self):
        return heuristic.evaluate_board(self.board, self.color)

    def search(self, depth, alpha, beta, maximizing, score=None):
        """
        Return the minimax score of the current board, looking `depth` plies ahead.
        The maximizing side places self.color, the minimizing side its opponent.
        `score` is the static evaluation of the current board when the caller already
        has it; children receive it updated through the lines of the simulated stone.
        Every simulated stone is removed before returning.
        """
        self.node_counter += 1
        if score is None:
            score = self.evaluate()
        if depth == 0:
            return score

        candidates = move_selector.generate_candidates(self.board)
        if not candidates:
            return score

        stone = self.color if maximizing else -self.color
        best_score = -INF if maximizing else INF

        for row, col in candidates:
            with self.board.simulate(row, col, stone):
                child_score = heuristic.update_score_after_move(self.board, row, col, self.color, score)
                value = self.search(depth - 1, alpha, beta, not maximizing, child_score)

            if maximizing:
                best_score = max(best_score, value)
                alpha = max(alpha, value)
            else:
                best_score = min(best_score, value)
                beta = min(beta, value)

            if beta <= alpha:
                break

        return best_score

    def select_move(self):
        """
        Return the candidate with the strictly greatest score (row-major first on ties),
        or None when no cell is a candidate.
        """
        self.start_time = time.time()
        self.node_counter = 0
        best_move = None
        best_score = -INF
        root_score = self.evaluate()

        for row, col in move_selector.generate_candidates(self.board):
            with self.board.simulate(row, col, self.color):
                child_score = heuristic.update_score_after_move(self.board, row, col, self.color, root_score)
                score = self.search(self.depth - 1, -float("inf"), float("inf"), False, child_score)
            if best_move is None or score > best_score:
                best_score = score
                best_move = (row, col)

        self.best_score = best_score if best_move is not None else None
        self._record_stats(best_move)
        return best_move

    def _record_stats(self, move):
        total_time = max(time.time() - self.start_time, 1e-9)
        entry = {
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "move": move,
            "score": self.best_score,
        }
        LOGGER.debug(
            "search depth=%d nodes=%d time=%.3fs move=%s score=%s",
            self.depth, self.node_counter, total_time, move, self.best_score,
        )
        if self.stats_list is not None:
            self.stats_list.append(entry)


def select_move(board, color, depth, rng=None, stats=None):
    """
    Public entry point: choose the AI's move without leaving any stone on the board.
    Raises ExhaustedBoard on a full board. An empty board gets a random opening
    near the center; a board with no candidate falls back to the empty cell
    nearest the center.
    """
    if board.is_full():
        raise ExhaustedBoard("No empty cell left; the game is a draw")

    if board.move_count == 0:
        return move_selector.opening_move(board, rng=rng)

    searcher = MinimaxSearcher(board, color, depth, stats=stats)
    move = searcher.select_move()
    if move is None:
        move = move_selector.fallback_move(board)
        LOGGER.warning("No candidate within search radius; falling back to %s", move)
    return move
