"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from chessfield.core.board import Board
from chessfield.ui.bootstrap import configure_logging, run_application
from chessfield.ui.settings import THEME_NAMES, AppSettings


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chessfield",
        description="Pseudo-legal chess board with a desktop view.",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="print the starting board as text and exit",
    )
    parser.add_argument(
        "--log-level",
        default=AppSettings.log_level,
        help="logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--theme",
        choices=THEME_NAMES,
        default=AppSettings.theme,
        help="board colour theme (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch chessfield; ``--text`` prints the starting board instead."""
    args = _parse_args(argv)
    settings = AppSettings(theme=args.theme, log_level=args.log_level)
    configure_logging(settings.log_level)
    if args.text:
        print(Board.initial())
        return 0
    return run_application([sys.argv[0]], settings)


if __name__ == "__main__":
    sys.exit(main())
