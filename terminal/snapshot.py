"""
Board snapshots for terminal TicTacToe.
Draws the board with OpenCV and saves it as a PNG image.
"""

import logging
import os
import time
from typing import Optional

import cv2
import numpy as np

from logic.board import Cell
from logic.game_state import GameState
from .config import TerminalConfig

logger = logging.getLogger(__name__)

# BGR colors
GRID_COLOR = (0, 0, 0)
X_COLOR = (255, 0, 0)       # Blue
O_COLOR = (0, 0, 255)       # Red
WIN_COLOR = (0, 200, 0)     # Green


def render_board_image(game_state: GameState, cell_px: Optional[int] = None) -> np.ndarray:
    """
    Create an image of the board with X and O markers.

    Args:
        game_state: Game to draw.
        cell_px: Size of one cell in pixels.

    Returns:
        BGR image of the board.
    """
    size = game_state.size
    cell_size = cell_px or TerminalConfig.SNAPSHOT_CELL_PX
    image_size = size * cell_size
    line_thickness = TerminalConfig.SNAPSHOT_LINE_THICKNESS

    # White background
    grid_img = np.ones((image_size, image_size, 3), dtype=np.uint8) * 255

    for i in range(1, size):
        offset = i * cell_size
        cv2.line(grid_img, (offset, 0), (offset, image_size), GRID_COLOR, line_thickness)
        cv2.line(grid_img, (0, offset), (image_size, offset), GRID_COLOR, line_thickness)

    cv2.rectangle(grid_img, (0, 0), (image_size - 1, image_size - 1), GRID_COLOR, line_thickness)

    margin = cell_size // 5
    marker_size = cell_size // 2 - margin
    marker_thickness = max(2, cell_size // 15)

    for row, cells in enumerate(game_state.board.rows()):
        for col, cell in enumerate(cells):
            if cell == Cell.EMPTY:
                continue

            cx = col * cell_size + cell_size // 2
            cy = row * cell_size + cell_size // 2

            if cell == Cell.X:
                cv2.line(grid_img,
                         (cx - marker_size, cy - marker_size),
                         (cx + marker_size, cy + marker_size),
                         X_COLOR, marker_thickness)
                cv2.line(grid_img,
                         (cx + marker_size, cy - marker_size),
                         (cx - marker_size, cy + marker_size),
                         X_COLOR, marker_thickness)
            else:
                cv2.circle(grid_img, (cx, cy), marker_size, O_COLOR, marker_thickness)

    winning_line = game_state.winning_line()
    if winning_line:
        (first_row, first_col), (last_row, last_col) = winning_line[0], winning_line[-1]
        start = (first_col * cell_size + cell_size // 2, first_row * cell_size + cell_size // 2)
        end = (last_col * cell_size + cell_size // 2, last_row * cell_size + cell_size // 2)
        cv2.line(grid_img, start, end, WIN_COLOR, marker_thickness * 2)

    return grid_img


def save_snapshot(game_state: GameState, directory: Optional[str] = None) -> Optional[str]:
    """
    Save an image of the board.

    Args:
        game_state: Game to draw.
        directory: Output folder, created if missing.

    Returns:
        Path of the written file, or None if it could not be written.
    """
    directory = directory or TerminalConfig.SNAPSHOT_DIR
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        logger.warning("Could not create snapshot directory %s: %s", directory, e)
        return None

    stamp = time.time_ns()
    filename = os.path.join(directory, f"tictactoe_{stamp}.png")
    suffix = 1
    while os.path.exists(filename):
        filename = os.path.join(directory, f"tictactoe_{stamp}_{suffix}.png")
        suffix += 1

    if not cv2.imwrite(filename, render_board_image(game_state)):
        logger.warning("Could not write snapshot %s", filename)
        return None

    logger.info("Saved snapshot: %s", filename)
    return filename
