"""
Cursor controller for terminal TicTacToe.
Tracks the highlighted cell and keeps it on the board.
"""

import logging
from typing import Tuple

logger = logging.getLogger(__name__)


class Cursor:
    """
    A single selectable position on the board.

    Positions are (col, row). Moves that would leave the board are
    ignored, there is no wraparound.
    """

    def __init__(self, size: int, col: int = 0, row: int = 0):
        self.size = size
        self.col = col
        self.row = row

    def position(self) -> Tuple[int, int]:
        """Get the current (col, row)."""
        return (self.col, self.row)

    def select(self, col: int, row: int):
        """Jump to (col, row). Out-of-bounds requests are ignored."""
        if not (0 <= col < self.size and 0 <= row < self.size):
            logger.debug("Ignoring cursor request outside the board: (%d, %d)", col, row)
            return
        self.col = col
        self.row = row

    def move_left(self):
        if self.col == 0:
            return
        self.select(self.col - 1, self.row)

    def move_right(self):
        if self.col == self.size - 1:
            return
        self.select(self.col + 1, self.row)

    def move_up(self):
        if self.row == 0:
            return
        self.select(self.col, self.row - 1)

    def move_down(self):
        if self.row == self.size - 1:
            return
        self.select(self.col, self.row + 1)

    def copy(self) -> "Cursor":
        return Cursor(self.size, self.col, self.row)

    def __repr__(self) -> str:
        return f"Cursor(col={self.col}, row={self.row})"
