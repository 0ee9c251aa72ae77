"""
Terminal module for TicTacToe.
Handles keyboard input, log files, and board snapshots.
"""

from .config import TerminalConfig
from .keyboard import Action, KeyReader, decode_key
from .log import setup_logging, shutdown_logging
from .snapshot import render_board_image, save_snapshot
