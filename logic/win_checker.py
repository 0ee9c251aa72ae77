"""
Win checker for terminal TicTacToe.
Checks if the last move completed a line.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineCounts:
    """
    How many cells of each line match its target value.

    Rows and columns are counted against the reference cell's value.
    The diagonals are counted against their anchor cells: top-left for
    the main diagonal, top-right for the anti-diagonal.
    """
    row: int
    column: int
    main_diagonal: int
    anti_diagonal: int
    target: Cell
    main_target: Cell = Cell.EMPTY
    anti_target: Cell = Cell.EMPTY

    def ranked(self) -> List[Tuple[str, int, Cell]]:
        """(line, count, target) in tie-break order."""
        return [
            ("row", self.row, self.target),
            ("column", self.column, self.target),
            ("main_diagonal", self.main_diagonal, self.main_target),
            ("anti_diagonal", self.anti_diagonal, self.anti_target),
        ]


class WinChecker:
    """
    Checks for win conditions on an N x N board.

    Only the lines through the most recently played cell are scanned, a
    move cannot complete any other line. Diagonals are only checked on
    odd-sized boards, even boards never produce a diagonal win.
    """

    def count_rows_cols(self, board: Board, row: int, col: int) -> Tuple[int, int, Cell]:
        """
        Count cells matching the reference cell in its row and column.

        Args:
            board: The game board.
            row: Row of the reference cell.
            col: Column of the reference cell.

        Returns:
            (row_count, col_count, target). Both counts are 0 when the
            reference cell is empty.
        """
        target = board.get(row, col)
        if target == Cell.EMPTY:
            return 0, 0, target

        count_row = int(np.count_nonzero(board.row(row) == target))
        count_col = int(np.count_nonzero(board.column(col) == target))

        logger.debug(
            "Counted row %d / column %d for %s: row=%d col=%d",
            row, col, target.name, count_row, count_col
        )
        return count_row, count_col, target

    def count_diagonals(self, board: Board) -> Tuple[int, int, Cell, Cell]:
        """
        Count cells matching the anchor of each diagonal.

        Returns:
            (main_count, anti_count, main_target, anti_target).
            Always (0, 0, EMPTY, EMPTY) for even sizes.
        """
        size = board.size
        if size % 2 == 0:
            return 0, 0, Cell.EMPTY, Cell.EMPTY

        main_target = board.get(0, 0)
        anti_target = board.get(0, size - 1)

        steps = np.arange(size)
        main_cells = board.cells[steps * (size + 1)]
        anti_cells = board.cells[(steps + 1) * (size - 1)]

        count_main = 0
        count_anti = 0
        if main_target != Cell.EMPTY:
            count_main = int(np.count_nonzero(main_cells == main_target))
        if anti_target != Cell.EMPTY:
            count_anti = int(np.count_nonzero(anti_cells == anti_target))

        return count_main, count_anti, main_target, anti_target

    def count_lines(self, board: Board, row: int, col: int) -> LineCounts:
        """Count all four line types for a reference cell."""
        count_row, count_col, target = self.count_rows_cols(board, row, col)
        count_main, count_anti, main_target, anti_target = self.count_diagonals(board)
        return LineCounts(
            row=count_row,
            column=count_col,
            main_diagonal=count_main,
            anti_diagonal=count_anti,
            target=target,
            main_target=main_target,
            anti_target=anti_target,
        )

    def check_winner(self, board: Board, row: int, col: int) -> Optional[Cell]:
        """
        Check if there's a winner after a move at (row, col).

        A line is complete when its count equals the board size. The
        winner is the target of the largest count, ties go to the first
        of row, column, main diagonal, anti-diagonal.

        Args:
            board: The game board.
            row: Row of the most recently played cell.
            col: Column of the most recently played cell.

        Returns:
            The winning Cell, or None if no line is complete.
        """
        counts = self.count_lines(board, row, col)
        ranked = counts.ranked()

        if not any(count == board.size for _, count, _ in ranked):
            return None

        best = max(count for _, count, _ in ranked)
        for line, count, target in ranked:
            if count == best:
                logger.debug("Winner %s on %s", target.name, line)
                return target
        return None

    def get_winning_line(self, board: Board, row: int, col: int) -> Optional[List[Tuple[int, int]]]:
        """
        Get the completed line through (row, col), if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        size = board.size
        counts = self.count_lines(board, row, col)
        for line, count, _ in counts.ranked():
            if count != size:
                continue
            if line == "row":
                return [(row, c) for c in range(size)]
            if line == "column":
                return [(r, col) for r in range(size)]
            if line == "main_diagonal":
                return [(i, i) for i in range(size)]
            return [(i, size - 1 - i) for i in range(size)]
        return None
