"""Error taxonomy shared by the board, referee, and search."""


class GobangError(Exception):
    """Base class for recoverable game-engine conditions."""


class IllegalMove(GobangError, ValueError):
    """Target cell is out of bounds or already occupied; the board is left unchanged."""


class NoLegalMove(GobangError, ValueError):
    """The engine cannot produce a move for the current position."""


class ExhaustedBoard(NoLegalMove):
    """Every cell is occupied; the caller should have declared a draw."""
