"""Entry point for Gobang matches. Load config, wire players, run Omokgame with replay."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args, VERSION
    from utils.logger import log_event, configure
    from Omokgame import Omokgame
    from AiPlayer import AiPlayer
    from Player import HumanPlayer, QuitGame
    from Board import BOARD_SIZE
    from ai import difficulty
    from gui.text_view import TextView
except ImportError:
    from Gobang_AI.utils.cli import parse_args, VERSION
    from Gobang_AI.utils.logger import log_event, configure
    from Gobang_AI.Omokgame import Omokgame
    from Gobang_AI.AiPlayer import AiPlayer
    from Gobang_AI.Player import HumanPlayer, QuitGame
    from Gobang_AI.Board import BOARD_SIZE
    from Gobang_AI.ai import difficulty
    from Gobang_AI.gui.text_view import TextView


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gobang_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


MODE_MENU = (
    ("Player vs Player", "human-vs-human"),
    ("Player vs AI", "human-vs-ai"),
)
DIFFICULTY_MENU = (
    ("Easy", difficulty.EASY),
    ("Medium", difficulty.MEDIUM),
    ("Hard", difficulty.HARD),
)


def choose_from_menu(title, entries, input_fn=input, out=print):
    """Print a numbered menu and re-prompt until a listed number is entered."""
    lines = [title] + [f"{i}. {label}" for i, (label, _) in enumerate(entries, start=1)]
    out("\n".join(lines))
    while True:
        try:
            answer = input_fn("Enter your choice: ").strip()
        except EOFError:
            raise QuitGame() from None
        if answer.isdigit() and 1 <= int(answer) <= len(entries):
            return entries[int(answer) - 1][1]
        out("Invalid choice, please try again.")


def choose_mode(input_fn=input, out=print):
    return choose_from_menu("Select game mode:", MODE_MENU, input_fn, out)


def choose_difficulty(input_fn=input, out=print):
    return choose_from_menu("Select AI difficulty:", DIFFICULTY_MENU, input_fn, out)


def resolve_config(args, settings, input_fn=input, out=print):
    """
    Merge CLI flags over YAML settings; validate board size, mode, and difficulty.
    A mode or difficulty set by neither is asked for through the menus.
    """
    board_size = settings.get("board_size", BOARD_SIZE)
    if board_size != BOARD_SIZE:
        raise ValueError(f"Unsupported board_size {board_size}; only {BOARD_SIZE} is supported")

    mode = args.quick_mode or args.mode or settings.get("mode")
    if mode is None:
        mode = choose_mode(input_fn, out)

    if args.quick_mode == "human-vs-ai":
        level = difficulty.MEDIUM
    else:
        level = args.difficulty or settings.get("difficulty")
    if level is None:
        level = difficulty.DEFAULT if mode == "human-vs-human" else choose_difficulty(input_fn, out)

    return {
        "board_size": board_size,
        "mode": mode,
        "difficulty": level,
        "depth": difficulty.depth_for(level),
        "seed": args.seed if args.seed is not None else settings.get("seed"),
        "log_level": args.log_level or settings.get("log_level", "WARNING"),
        "clear_screen": bool(settings.get("clear_screen", False)),
        "replay": not args.no_replay,
    }


def build_players(mode, depth, seed=None, input_fn=input, announce=print):
    """Return (black, white) players for a play mode."""
    if mode == "human-vs-ai":
        return HumanPlayer(-1, input_fn=input_fn), AiPlayer(1, depth=depth, seed=seed, announce=announce)
    if mode == "ai-vs-human":
        return AiPlayer(-1, depth=depth, seed=seed, announce=announce), HumanPlayer(1, input_fn=input_fn)
    if mode == "human-vs-human":
        return HumanPlayer(-1, input_fn=input_fn), HumanPlayer(1, input_fn=input_fn)
    if mode == "ai-vs-ai":
        return (
            AiPlayer(-1, depth=depth, seed=seed, announce=announce),
            AiPlayer(1, depth=depth, seed=None if seed is None else seed + 1, announce=announce),
        )
    raise ValueError(f"Unsupported mode: {mode}")


def ask_replay(input_fn=input):
    try:
        answer = input_fn("Play again? (y/n): ")
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")


def main(argv=None, input_fn=input):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    try:
        config = resolve_config(args, settings, input_fn=input_fn)
    except QuitGame:
        print("Game over.")
        return 0
    configure(config["log_level"])

    black, white = build_players(config["mode"], config["depth"], seed=config["seed"], input_fn=input_fn)
    footer = None
    if config["mode"] in ("human-vs-ai", "ai-vs-human"):
        footer = f"AI Difficulty {config['difficulty'].capitalize()}"
    view = TextView(version=VERSION, footer=footer, clear_screen=config["clear_screen"])

    game = Omokgame(
        black_player=black,
        white_player=white,
        board_size=config["board_size"],
        logger=log_event,
        renderer=view.render,
    )

    while True:
        result = game.play()
        if result is None or not config["replay"] or not ask_replay(input_fn):
            break

    print("Thanks for playing, goodbye!")
    return 0


if __name__ == "__main__":
    main()
