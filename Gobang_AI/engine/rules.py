"""Win detection (five or more in a row) and draw detection."""

from typing import NamedTuple

from .lines import DIRECTIONS, scan_line

WIN_LENGTH = 5


class WinRecord(NamedTuple):
    color: int
    direction: tuple
    cells: tuple  # exactly WIN_LENGTH (row, col) pairs, origin first


def check_win(board, row, col):
    """
    Return a WinRecord if the stone at (row, col) completes five or more in a row.
    Assumes the stone is already placed. Only lines through (row, col) are checked.
    """
    color = board.cells[row][col]
    if color == 0:
        return None

    for direction in DIRECTIONS:
        scan = scan_line(board, row, col, color, direction)
        if scan.count >= WIN_LENGTH:
            ordered = ((row, col),) + scan.forward + scan.backward
            return WinRecord(color=color, direction=direction, cells=ordered[:WIN_LENGTH])
    return None


def is_board_full(board):
    return board.is_full()
