"""Console board renderer with last-move marker and winning-line highlight."""

try:
    from Player import format_coordinate
except ImportError:
    from Gobang_AI.Player import format_coordinate

TITLE = "Gobang Game"

STONES = {0: "·", -1: "●", 1: "○"}
WIN_MARK = "*"
LAST_MARK = "["
CLEAR_SCREEN = "\033[2J\033[H"


def render_board(board, last_move=None, win_cells=(), version=None, footer=None):
    """Return the board as text; winning cells are drawn as '*', the last move is prefixed with '['."""
    board_width = board.size * 2 + 2
    total_width = max(len(TITLE), board_width)
    pad = " " * ((total_width - len(TITLE)) // 2)

    lines = ["", pad + "-" * len(TITLE), pad + TITLE, pad + "-" * len(TITLE)]
    if version:
        label = f"v{version}"
        lines.append(" " * ((total_width - len(label)) // 2) + label)
    lines.append("")

    lines.append("  " + "".join(f"{format_coordinate(c):>2}" for c in range(board.size)))
    win_cells = set(win_cells)
    for row in range(board.size):
        out = [f"{format_coordinate(row):>2}"]
        for col in range(board.size):
            if (row, col) in win_cells:
                glyph = WIN_MARK
            else:
                glyph = STONES[board.cells[row][col]]
            if last_move == (row, col) and not win_cells:
                out.append(LAST_MARK + glyph)
            else:
                out.append(" " + glyph)
        lines.append("".join(out))

    if footer:
        lines.append("")
        lines.append(footer)
    return "\n".join(lines)


class TextView:
    def __init__(self, version=None, footer=None, out=print, clear_screen=False):
        self.version = version
        self.footer = footer
        self.out = out
        self.clear_screen = clear_screen

    def render(self, board, last_move, current_color, game_result, win_record=None):
        win_cells = win_record.cells if win_record is not None else ()
        text = render_board(board, last_move, win_cells, version=self.version, footer=self.footer)
        if self.clear_screen:
            text = CLEAR_SCREEN + text
        self.out(text)
