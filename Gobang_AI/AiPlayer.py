"""Minimax-backed AI player."""

import random

try:
    from Player import Player
    from ai import difficulty, search_minimax
except ImportError:
    from Gobang_AI.Player import Player
    from Gobang_AI.ai import difficulty, search_minimax


class AiPlayer(Player):
    is_human = False

    def __init__(self, color=1, depth=None, seed=None, announce=None):
        super().__init__(color)
        self.depth = depth or difficulty.depth_for(difficulty.DEFAULT)
        self.rng = random.Random(seed)
        self.announce = announce
        self.stats = []

    @property
    def difficulty(self):
        return difficulty.name_for(self.depth)

    def next_move(self, board):
        move = search_minimax.select_move(
            board,
            self.color,
            depth=self.depth,
            rng=self.rng,
            stats=self.stats,
        )
        if self.announce:
            self.announce(f"AI placed a move at ({move[0]}, {move[1]})")
        return move
