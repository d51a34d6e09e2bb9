"""Line scanning along the four board directions (run length and blocked ends)."""

from typing import NamedTuple

# (drow, dcol): horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
MAX_REACH = 4  # steps scanned on each side of the origin


class LineScan(NamedTuple):
    count: int
    blocked_ends: int
    forward: tuple
    backward: tuple


def _walk(board, row, col, drow, dcol, color):
    """
    Collect same-color cells stepping away from (row, col), exclusive.
    Returns (cells, blocked): blocked is True when the walk stopped on the board
    edge or an opponent stone, False when it stopped on an empty cell or ran
    the full reach.
    """
    cells = []
    for step in range(1, MAX_REACH + 1):
        r, c = row + drow * step, col + dcol * step
        if not board.in_bounds(r, c):
            return cells, True
        value = board.cells[r][c]
        if value == color:
            cells.append((r, c))
        elif value != 0:
            return cells, True
        else:
            return cells, False
    return cells, False


def scan_line(board, row, col, color, direction):
    """
    Measure the contiguous run of `color` through (row, col) along `direction`.
    The origin is counted as owned by `color` whatever the cell holds.
    """
    drow, dcol = direction
    forward, forward_blocked = _walk(board, row, col, drow, dcol, color)
    backward, backward_blocked = _walk(board, row, col, -drow, -dcol, color)
    return LineScan(
        count=1 + len(forward) + len(backward),
        blocked_ends=int(forward_blocked) + int(backward_blocked),
        forward=tuple(forward),
        backward=tuple(backward),
    )

