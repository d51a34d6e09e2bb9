"""Candidate move generation: empty cells near existing stones, in row-major order."""

import random

SEARCH_RADIUS = 2  # Chebyshev radius: a 5x5 neighborhood
OPENING_RADIUS = 1


def is_candidate(board, row, col, radius=SEARCH_RADIUS):
    """Return True if (row, col) is empty and any stone lies within `radius` (Chebyshev)."""
    if not board.is_empty(row, col):
        return False
    size = board.size
    cells = board.cells
    for r in range(max(0, row - radius), min(size, row + radius + 1)):
        for c in range(max(0, col - radius), min(size, col + radius + 1)):
            if cells[r][c] != 0:
                return True
    return False


def generate_candidates(board, radius=SEARCH_RADIUS):
    """
    Return every candidate cell in row-major order (row ascending, then column).
    The order fixes tie-breaking in search: the first of equally scored moves wins.
    """
    size = board.size
    cells = board.cells
    marked = set()
    for row, col in board.history:
        for r in range(max(0, row - radius), min(size, row + radius + 1)):
            for c in range(max(0, col - radius), min(size, col + radius + 1)):
                if cells[r][c] == 0:
                    marked.add((r, c))
    return sorted(marked)


def opening_move(board, rng=None, radius=OPENING_RADIUS):
    """
    Pick a move for an empty board: a random empty cell within `radius` of the center.
    Pass a seeded random.Random for reproducible openings.
    """
    rng = rng or random
    center = board.size // 2
    choices = [
        (row, col)
        for row in range(center - radius, center + radius + 1)
        for col in range(center - radius, center + radius + 1)
        if board.is_empty(row, col)
    ]
    if not choices:
        return fallback_move(board)
    return rng.choice(choices)


def fallback_move(board):
    """Return the empty cell nearest the center (Chebyshev), row-major first; None if full."""
    center = board.size // 2
    best = None
    best_dist = None
    for row in range(board.size):
        for col in range(board.size):
            if not board.is_empty(row, col):
                continue
            dist = max(abs(row - center), abs(col - center))
            if best_dist is None or dist < best_dist:
                best = (row, col)
                best_dist = dist
    return best
