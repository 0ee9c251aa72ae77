"""
Main entry point for terminal TicTacToe.

This script ties together:
- Logic (board, cursor, win checking, AI)
- Terminal (keyboard input, log file, snapshots)
- UI (menu, game and result screens)

Run this script to play TicTacToe in your terminal!
"""

import argparse
import logging
import sys
from typing import List, Optional

from logic.ai_player import Difficulty
from logic.config import AIConfig
from terminal.config import TerminalConfig
from terminal.log import setup_logging, shutdown_logging
from ui import TicTacToeApp, TicTacToeUI

logger = logging.getLogger("main")


def board_size(value: str) -> int:
    """argparse type for --size."""
    size = int(value)
    if size < 1:
        raise argparse.ArgumentTypeError(f"board size must be at least 1, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal TicTacToe")
    parser.add_argument(
        "--size",
        type=board_size,
        default=TerminalConfig.BOARD_SIZE,
        help="Board size N for an N x N game (default: %(default)s)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=AIConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty (default: %(default)s)"
    )
    parser.add_argument(
        "--log-file",
        default=TerminalConfig.LOG_FILE,
        help="File to append logs to (default: %(default)s)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write DEBUG level logs"
    )
    parser.add_argument(
        "--snapshot-dir",
        default=TerminalConfig.SNAPSHOT_DIR,
        help="Where 'p' saves board images (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_file, logging.DEBUG if args.debug else logging.INFO)
    logger.info("Starting %dx%d TicTacToe", args.size, args.size)

    app = TicTacToeApp(
        size=args.size,
        difficulty=Difficulty(args.difficulty),
        snapshot_dir=args.snapshot_dir
    )
    ui = TicTacToeUI(app)

    try:
        ui.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception:
        logger.critical("Crashed", exc_info=True)
        raise
    finally:
        logger.info("Goodbye!")
        shutdown_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
