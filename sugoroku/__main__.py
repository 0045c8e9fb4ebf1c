"""CLI entry point: python -m sugoroku {play,world-to-tex,show}."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from sugoroku.config import load_board, load_players
from sugoroku.console import play_console_game
from sugoroku.errors import ConfigurationError, InfiniteEffectLoop
from sugoroku.export import write_tex


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> int:
    """Load both files and run an interactive game until someone wins."""
    names = load_players(args.player_list_file)
    board = load_board(args.world_file)
    logger.info(f"Starting {board.title!r} with {', '.join(names)}")

    try:
        play_console_game(board, names, max_turns=args.max_turns)
    except (KeyboardInterrupt, EOFError):
        print("\nGame abandoned.")
        return 130
    return 0


# ── world-to-tex ─────────────────────────────────────────────────────

def cmd_world_to_tex(args: argparse.Namespace) -> int:
    """Write the board as a LaTeX document."""
    board = load_board(args.world_file)
    out = write_tex(board, args.world_file, args.output)
    print(f"Document saved to {out}")
    return 0


# ── show ─────────────────────────────────────────────────────────────

def cmd_show(args: argparse.Namespace) -> int:
    """Print every area, for the host who knows the board."""
    board = load_board(args.world_file)
    print(board.title)
    print("=" * 40)
    for index, area in enumerate(board.areas):
        print(f"[Area {index}]")
        print(area.text())
        print()
    return 0


# ── main ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sugoroku",
        description="Sugoroku on a blind board",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine details to stderr")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play a game on the console")
    p_play.add_argument("player_list_file", type=Path, help="TOML file listing the players")
    p_play.add_argument("world_file", type=Path, help="TOML file describing the board")
    p_play.add_argument("--max-turns", type=int, default=None, help="Stop after this many turns")

    p_tex = sub.add_parser("world-to-tex", help="Export the board to LaTeX")
    p_tex.add_argument("world_file", type=Path, help="TOML file describing the board")
    p_tex.add_argument("--output", "-o", type=Path, help="Output .tex path")

    p_show = sub.add_parser("show", help="Print every area of the board")
    p_show.add_argument("world_file", type=Path, help="TOML file describing the board")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    commands = {
        "play": cmd_play,
        "world-to-tex": cmd_world_to_tex,
        "show": cmd_show,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        return command(args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    except InfiniteEffectLoop as exc:
        print(f"Board error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
