"""
Main entry point for playing Word Fall in the terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --seed 42 --verbose
    python -m src.main --layout board.txt
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional, Tuple

import yaml

from .engine import ActionResult, GameConfig, GameSession, parse_layout
from .utils.grid_render import render_snapshot


HELP_TEXT = (
    "Commands: a/left, d/right move the cursor; s/drop drops the letter; "
    "1-{cols} drops into that column; n new game; h help; q quit"
)

Command = Tuple[str, Optional[int]]


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def parse_command(text: str) -> Command:
    """
    Turn one line of player input into a command.

    Returns:
        Tuple of (name, argument). Names are ``move``, ``column``, ``drop``,
        ``new``, ``help``, ``quit``, and ``unknown``. ``column`` carries a
        0-based index; ``move`` carries -1 or 1.
    """
    text = text.strip().lower()

    if text in ("a", "left", "l", "<"):
        return "move", -1
    if text in ("d", "right", "r", ">"):
        return "move", 1
    if text in ("s", "drop", ""):
        return "drop", None
    if text in ("n", "new"):
        return "new", None
    if text in ("h", "help", "?"):
        return "help", None
    if text in ("q", "quit", "exit"):
        return "quit", None
    if re.fullmatch(r"[0-9]+", text):
        # Out-of-range numbers still go to the session, which rejects them
        return "column", int(text) - 1
    return "unknown", None


def run_command(session: GameSession, command: Command) -> Optional[ActionResult]:
    """Forward a parsed command to the session. Returns None for non-game commands."""
    name, arg = command
    if name == "move":
        return session.move_cursor(arg)
    if name == "column":
        return session.select_column(arg)
    if name == "drop":
        return session.drop_current()
    if name == "new":
        return session.new_game()
    return None


def describe_result(result: ActionResult) -> Optional[str]:
    """One-line summary of an action, or None when there is nothing to say."""
    if result.error:
        return f"Can't do that: {result.error.message}"
    if result.matches:
        words = ", ".join(sorted({m.word for m in result.matches}))
        return f"Found: {words}"
    if result.cleared and result.action != "NEW_GAME":
        return f"Cleared {len(result.cleared)} cells"
    return None


def main():
    parser = argparse.ArgumentParser(
        description="Play Word Fall in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  rows: 7
  cols: 7
  min_word_length: 4
  clear_mode: dismiss
  wrap_cursor: true
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used without one)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides the config file)"
    )
    parser.add_argument(
        "--wordlist",
        help="Word list file, .json array or one word per line (overrides the config file)"
    )
    parser.add_argument(
        "--layout",
        help="Text file with a starting grid ('.' for empty cells)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log game events to stderr"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.wordlist:
            overrides["wordlist"] = args.wordlist
        if overrides:
            config = config.model_copy(update=overrides)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        grid = None
        if args.layout:
            grid = parse_layout(Path(args.layout).read_text(), rows=config.rows, cols=config.cols)
            grid.apply_gravity()
        session = GameSession.create(config=config, grid=grid)
    except Exception as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        sys.exit(1)

    print(HELP_TEXT.format(cols=config.cols))
    print()
    print(render_snapshot(session.snapshot()))

    while True:
        try:
            text = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        command = parse_command(text)
        if command[0] == "quit":
            break
        if command[0] == "help":
            print(HELP_TEXT.format(cols=config.cols))
            continue
        if command[0] == "unknown":
            print(f"Unknown command: {text.strip()!r} (h for help)")
            continue

        result = run_command(session, command)
        message = describe_result(result)
        print()
        if message:
            print(message)
        print(render_snapshot(result.snapshot))

    return 0


if __name__ == "__main__":
    sys.exit(main())
