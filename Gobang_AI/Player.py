"""Abstract player interface and the console human player."""

QUIT_WORDS = ("q", "quit")


class QuitGame(Exception):
    """Raised when a human asks to leave the current game."""


class Player:
    is_human = False

    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for the next move."""
        raise NotImplementedError


def parse_coordinate(token):
    """Map one coordinate character ('0'-'9', 'A'-'E', any case) to an index 0-14."""
    if len(token) != 1:
        raise ValueError(f"Invalid coordinate {token!r}: expected a single character")
    ch = token.upper()
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "E":
        return 10 + ord(ch) - ord("A")
    raise ValueError(f"Invalid coordinate {token!r}: expected 0-9 or A-E")


def format_coordinate(index):
    return str(index) if index < 10 else chr(ord("A") + index - 10)


def parse_move(raw):
    """
    Parse 'R C' console input into (row, col).
    Raises QuitGame for 'q', ValueError for anything malformed.
    """
    text = raw.strip()
    if text.lower() in QUIT_WORDS:
        raise QuitGame()
    parts = text.split()
    if len(parts) == 1 and len(parts[0]) == 2:
        parts = list(parts[0])
    if len(parts) != 2:
        raise ValueError("Invalid input, please enter two characters")
    return parse_coordinate(parts[0]), parse_coordinate(parts[1])


class HumanPlayer(Player):
    is_human = True

    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, board):
        """Read one move from the console; malformed input raises ValueError."""
        name = "Black" if self.color == -1 else "White"
        try:
            raw = self.input_fn(f"Player {name}\nEnter move position, or 'q' to quit: ")
        except EOFError as exc:
            raise QuitGame() from exc
        return parse_move(raw)
