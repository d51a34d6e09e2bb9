"""Move validation and post-move settlement for the turn loop."""

try:
    from . import rules
    from .errors import IllegalMove
except ImportError:
    from engine import rules
    from engine.errors import IllegalMove


def check_move(move, board, color):
    """
    Validate a move without applying it. Shape errors are caught here; bounds,
    occupancy, and color are checked by Board.validate. Raises IllegalMove.
    """
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise IllegalMove(f"Malformed move: {move!r}") from exc
    board.validate(row, col, color)
    return True


def settle(board, row, col):
    """
    Classify the position after a placement at (row, col).
    Returns ("win", WinRecord), ("draw", None), or (None, None) while play continues.
    """
    record = rules.check_win(board, row, col)
    if record is not None:
        return "win", record
    if rules.is_board_full(board):
        return "draw", None
    return None, None
