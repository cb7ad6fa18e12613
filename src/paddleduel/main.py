"""Executable entrypoint for Paddle Duel."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging

from .game import PaddleDuelGame
from .logging_config import setup_logging
from .utils import DATA_DIR


def main(argv: list[str] | None = None) -> None:
    """Launch the game."""
    parser = argparse.ArgumentParser(prog="paddleduel", description="Two-player paddle and ball duel.")
    parser.add_argument("--debug", action="store_true", help="log debug output to the console")
    parser.add_argument("--log-file", type=Path, default=None, help="also write logs to this file")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="where settings and scores are kept")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)
    root = Path(__file__).resolve().parents[2]
    PaddleDuelGame(root=root, data_dir=args.data_dir).run()


if __name__ == "__main__":
    main()
