"""Game loop and turn management: Black moves first, five or more in a row wins."""

try:
    from Board import Board, BLACK
    from Player import QuitGame
    from engine import referee
except ImportError:
    from Gobang_AI.Board import Board, BLACK
    from Gobang_AI.Player import QuitGame
    from Gobang_AI.engine import referee


def color_name(color):
    return "Black" if color == BLACK else "White"


class Omokgame:
    def __init__(self, black_player, white_player, board_size=15, logger=print, renderer=None):
        self.board = Board(size=board_size)
        self.players = {-1: black_player, 1: white_player}
        self.logger = logger
        self.renderer = renderer
        self.move_index = 0
        self.win_record = None

    def reset(self):
        self.board.clear()
        self.move_index = 0
        self.win_record = None

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), 0 (draw), or None if quit."""
        self.reset()
        color = BLACK  # black starts
        game_result = None
        last_move = None

        while game_result is None:
            if self.renderer:
                self.renderer(self.board, last_move, color, game_result)

            player = self.players[color]
            try:
                move = player.next_move(self.board)
                referee.check_move(move, self.board, color)
                self.board.place(*move, color)
            except QuitGame:
                self.logger("Game over.")
                return None
            except ValueError as exc:  # IllegalMove or unparsable input
                if not player.is_human:
                    raise
                self.logger(f"{exc}, please try again.")
                continue

            last_move = tuple(move)
            self.logger(f"Move {self.move_index + 1}: {'B' if color == BLACK else 'W'} {last_move}")

            outcome, record = referee.settle(self.board, *last_move)
            if outcome == "win":
                self.win_record = record
                game_result = color
            elif outcome == "draw":
                game_result = 0
            else:
                color = -color  # swap turns
            self.move_index += 1

        if self.renderer:
            self.renderer(self.board, last_move, color, game_result, self.win_record)
        self.logger(self.result_message(game_result))
        return game_result

    def result_message(self, game_result):
        if game_result == 0:
            return "It's a draw!"
        winner = self.players[game_result]
        opponent = self.players[-game_result]
        if not winner.is_human and opponent.is_human:
            return "AI wins!"
        return f"Player {color_name(game_result)} wins!"
