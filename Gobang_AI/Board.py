"""Board state container: a fixed 15x15 grid of stones with simulate/revert helpers."""

from contextlib import contextmanager

try:
    from engine.errors import IllegalMove
except ImportError:
    from Gobang_AI.engine.errors import IllegalMove

EMPTY = 0
BLACK = -1
WHITE = 1
BOARD_SIZE = 15


class Board:
    def __init__(self, size=BOARD_SIZE):
        # Store cells as -1 (black), 0 (empty), 1 (white); indexed cells[row][col]
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def validate(self, row, col, color):
        """Raise IllegalMove unless `color` may play at (row, col)."""
        if color not in (BLACK, WHITE):
            raise IllegalMove("color must be -1 (black) or 1 (white)")
        if not self.in_bounds(row, col):
            raise IllegalMove(f"move ({row}, {col}) out of bounds")
        if self.cells[row][col] != EMPTY:
            raise IllegalMove(f"cell ({row}, {col}) already occupied")

    def place(self, row, col, color):
        """Place a stone; raise IllegalMove if out of bounds or occupied."""
        self.validate(row, col, color)
        self._push_stone(row, col, color)

    def clear(self):
        for cells_row in self.cells:
            for col in range(self.size):
                cells_row[col] = EMPTY
        self.move_count = 0
        self.history = []

    def is_full(self):
        return self.move_count >= self.size * self.size

    def _push_stone(self, row, col, color):
        # Unchecked placement for search; callers guarantee the cell is empty.
        self.cells[row][col] = color
        self.move_count += 1
        self.history.append((row, col))

    def _pop_stone(self, row, col):
        self.cells[row][col] = EMPTY
        self.move_count -= 1
        self.history.pop()

    @contextmanager
    def simulate(self, row, col, color):
        """Temporarily place a stone; it is removed when the block exits, even on error."""
        self._push_stone(row, col, color)
        try:
            yield self
        finally:
            self._pop_stone(row, col)
