"""Static position evaluation from run length and blocked ends along each line."""

try:
    from engine.lines import DIRECTIONS, MAX_REACH, scan_line
except ImportError:
    from Gobang_AI.engine.lines import DIRECTIONS, MAX_REACH, scan_line

FIVE_SCORE = 100000

# (run length, blocked ends) -> score; runs of five or more score FIVE_SCORE regardless.
SCORE_TABLE = {
    (4, 0): 10000,
    (4, 1): 1000,
    (3, 0): 1000,
    (3, 1): 100,
    (2, 0): 100,
}


def line_score(count, blocked_ends):
    """Score one direction's (run length, blocked ends) pair."""
    if count >= 5:
        return FIVE_SCORE
    return SCORE_TABLE.get((count, blocked_ends), 0)


def evaluate_cell(board, row, col, color):
    """Sum line scores over the four directions through (row, col) for `color`."""
    total = 0
    for direction in DIRECTIONS:
        scan = scan_line(board, row, col, color, direction)
        total += line_score(scan.count, scan.blocked_ends)
    return total


def evaluate_board(board, color):
    """
    Board-wide heuristic. Positive favors `color` (the maximizing side), negative
    favors the opponent. Not a win check: stacked fives only rank positions.
    """
    total = 0
    cells = board.cells
    for row, col in board.history:
        value = cells[row][col]
        if value == color:
            total += evaluate_cell(board, row, col, color)
        else:
            total -= evaluate_cell(board, row, col, -color)
    return total


def _window_score(board, row, col, direction, color):
    """
    Signed direction-only score of every stone within reach of (row, col) along
    `direction`. These are the only line scores a stone at (row, col) can change.
    """
    drow, dcol = direction
    cells = board.cells
    total = 0
    for step in range(-MAX_REACH, MAX_REACH + 1):
        r, c = row + drow * step, col + dcol * step
        if not board.in_bounds(r, c):
            continue
        value = cells[r][c]
        if value == 0:
            continue
        scan = scan_line(board, r, c, value, direction)
        score = line_score(scan.count, scan.blocked_ends)
        total += score if value == color else -score
    return total


def update_score_after_move(board, row, col, color, prev_score):
    """
    Incrementally update evaluate_board(board, color) after a stone was placed at (row, col).
    board is assumed to already contain the stone; prev_score is the score without it.
    """
    stone = board.cells[row][col]
    after = sum(_window_score(board, row, col, d, color) for d in DIRECTIONS)
    board.cells[row][col] = 0
    try:
        before = sum(_window_score(board, row, col, d, color) for d in DIRECTIONS)
    finally:
        board.cells[row][col] = stone
    return prev_score + after - before
