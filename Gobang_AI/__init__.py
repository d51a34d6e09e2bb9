"""Gobang_AI package exports."""

from .Board import Board, EMPTY, BLACK, WHITE, BOARD_SIZE
from .Omokgame import Omokgame
from .Player import Player, HumanPlayer, QuitGame
from .AiPlayer import AiPlayer

# Subpackages for rules, AI search, console view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "EMPTY",
    "BLACK",
    "WHITE",
    "BOARD_SIZE",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "QuitGame",
    "AiPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
