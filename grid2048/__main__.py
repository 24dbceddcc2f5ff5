#!/usr/bin/env python3
"""
2048 in the terminal

Slide the board in one of four directions; equal tiles merge into their sum
and new tiles appear after every move. Reach 2048 to win.

Usage:
    python -m grid2048                      # 4x4 board
    python -m grid2048 --width 5 --height 6 # Custom board size
    python -m grid2048 --seed 7             # Reproducible tile spawns
    python -m grid2048 --log-file game.log --debug
"""

import sys
import random
import logging
import argparse

from grid2048.utils import config
from grid2048.ui.console import run_console_ui

logger = logging.getLogger(__name__)

RESULT_MESSAGES = {
    "win": "You won, congratulations!",
    "lose": "No moves left. Better luck next time!",
    "quit": "Thanks for playing!",
}


def build_parser():
    parser = argparse.ArgumentParser(description="2048 - terminal sliding tile puzzle")
    parser.add_argument('--width', type=int, default=None,
                        help=f"Number of columns (default: {config.GRID_WIDTH})")
    parser.add_argument('--height', type=int, default=None,
                        help=f"Number of rows (default: {config.GRID_HEIGHT})")
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for the tile spawner")
    parser.add_argument('--log-file', default=None,
                        help="Write log messages to this file")
    parser.add_argument('--debug', action='store_true',
                        help="Log every move and spawn (requires --log-file)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # curses owns the terminal, so logs only go to a file
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG if args.debug else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    applied = config.apply_settings({'grid_width': args.width, 'grid_height': args.height})
    try:
        config.validate_grid_size(config.GRID_WIDTH, config.GRID_HEIGHT)
    except config.ConfigError as e:
        parser.error(str(e))
    if applied:
        logger.info("Applied settings: %s", ", ".join(applied))

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.info("Starting %dx%d game", config.GRID_WIDTH, config.GRID_HEIGHT)

    try:
        outcome = run_console_ui(rng=rng)
    except KeyboardInterrupt:
        logger.info("Game interrupted by user")
        return 130

    logger.info("Game finished: %s", outcome)
    print(RESULT_MESSAGES[outcome])
    return 0


if __name__ == "__main__":
    sys.exit(main())
