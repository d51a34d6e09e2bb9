"""CLI options for selecting mode, difficulty, and config paths."""

VERSION = "0.1.2"
VERSION_TEXT = "\n".join([
    f"Gobang Game Version {VERSION}",
    "Author: Qiang Guo",
    "Email: bigdragonsoft@gmail.com",
    "Website: https://github.com/bigdragonsoft/gobang",
    "Copyright (C) 2024 BigDragonSoft.com",
])
MODES = ["human-vs-ai", "ai-vs-human", "human-vs-human", "ai-vs-ai"]


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Gobang Game (five in a row on a 15x15 board)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--mode", choices=MODES, default=None, help="Play mode (who plays black/white)")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        default=None,
        help="AI search depth preset (easy=2, medium=3, hard=4)",
    )
    parser.add_argument(
        "-1",
        dest="quick_mode",
        action="store_const",
        const="human-vs-ai",
        help="Start in player vs AI mode (medium difficulty)",
    )
    parser.add_argument(
        "-2",
        dest="quick_mode",
        action="store_const",
        const="human-vs-human",
        help="Start in player vs player mode",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the AI opening move")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING)")
    parser.add_argument("--no-replay", action="store_true", help="Exit after one game without asking")
    parser.add_argument("-v", "--version", action="version", version=VERSION_TEXT)
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)
