"""
Board model for terminal TicTacToe.
An N x N grid of cells stored row-major in a numpy array.
"""

from enum import IntEnum
from typing import Iterator, List, Sequence, Tuple

import numpy as np


class Cell(IntEnum):
    """The value held by a single board cell."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def symbol(self) -> str:
        """Single character used when drawing the cell."""
        return " " if self == Cell.EMPTY else self.name


class BoardIndexError(IndexError):
    """A row or column outside the board was addressed."""


class Board:
    """
    Fixed-size grid of cells.

    Cells live in a flat array of length size * size,
    addressed as index = row * size + col. The length never changes.
    """

    def __init__(self, size: int = 3):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns). Must be at least 1.
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self.cells = np.full(size * size, int(Cell.EMPTY), dtype=np.int8)

    @classmethod
    def from_cells(cls, size: int, cells: Sequence[Cell]) -> "Board":
        """
        Build a board from a flat row-major list of cells.

        Args:
            size: Board size.
            cells: Exactly size * size cell values.

        Returns:
            A new Board holding those values.
        """
        if len(cells) != size * size:
            raise ValueError(
                f"Expected {size * size} cells for a {size}x{size} board, got {len(cells)}"
            )
        board = cls(size)
        board.cells[:] = [int(cell) for cell in cells]
        return board

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise BoardIndexError(
                f"Cell ({row}, {col}) is outside a {self.size}x{self.size} board"
            )
        return row * self.size + col

    def get(self, row: int, col: int) -> Cell:
        """Get the value at (row, col)."""
        return Cell(int(self.cells[self._index(row, col)]))

    def set(self, row: int, col: int, value: Cell):
        """
        Overwrite the value at (row, col).

        No occupancy check happens here, the session does that before
        calling.
        """
        self.cells[self._index(row, col)] = int(value)

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not np.any(self.cells == Cell.EMPTY)

    def row(self, row: int) -> np.ndarray:
        """Values of one row (a view, do not modify)."""
        self._index(row, 0)
        return self.cells[row * self.size:(row + 1) * self.size]

    def column(self, col: int) -> np.ndarray:
        """Values of one column (a view, do not modify)."""
        self._index(0, col)
        return self.cells[col::self.size]

    def rows(self) -> Iterator[List[Cell]]:
        """Iterate over the rows, top to bottom."""
        for row in range(self.size):
            yield [Cell(int(value)) for value in self.row(row)]

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        indices = np.flatnonzero(self.cells == Cell.EMPTY)
        return [(int(i) // self.size, int(i) % self.size) for i in indices]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self.size)
        new_board.cells = self.cells.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __repr__(self) -> str:
        marks = "".join("_" if v == Cell.EMPTY else Cell(int(v)).name for v in self.cells)
        return f"Board(size={self.size}, cells='{marks}')"
