"""
Tests for line counting and winner resolution.
"""

import pytest

from logic.board import Board, Cell
from logic.win_checker import LineCounts, WinChecker

X, O, _ = Cell.X, Cell.O, Cell.EMPTY


@pytest.fixture
def checker() -> WinChecker:
    return WinChecker()


class TestRowsAndColumns:

    def test_empty_reference_counts_nothing(self, checker):
        board = Board(3)
        assert checker.count_rows_cols(board, 0, 0) == (0, 0, _)

    def test_full_row(self, checker):
        board = Board.from_cells(3, [X, X, X, O, _, O, _, O, _])
        assert checker.count_rows_cols(board, 0, 1) == (3, 1, X)

    def test_full_column(self, checker):
        board = Board.from_cells(3, [O, X, _, O, _, X, O, X, _])
        assert checker.count_rows_cols(board, 2, 0) == (1, 3, O)

    def test_mixed_board(self, checker):
        board = Board.from_cells(3, [X, O, X, O, X, O, X, _, O])
        assert checker.count_rows_cols(board, 1, 1) == (1, 1, X)


class TestDiagonals:

    def test_main_diagonal(self, checker):
        board = Board.from_cells(3, [X, O, _, O, X, _, _, O, X])
        assert checker.count_diagonals(board) == (3, 0, X, _)

    def test_partial_main_diagonal(self, checker):
        board = Board.from_cells(3, [O, O, _, O, X, _, _, O, X])
        assert checker.count_diagonals(board) == (1, 0, O, _)

        board = Board.from_cells(3, [X, O, _, O, X, _, _, O, O])
        assert checker.count_diagonals(board) == (2, 0, X, _)

    def test_anti_diagonal(self, checker):
        board = Board.from_cells(3, [_, _, O, X, O, _, O, X, X])
        assert checker.count_diagonals(board) == (0, 3, _, O)

    def test_single_cell_board(self, checker):
        board = Board.from_cells(1, [X])
        assert checker.count_diagonals(board) == (1, 1, X, X)

    @pytest.mark.parametrize("cells", [
        [X] * 16,
        [X, _, _, O,
         _, X, O, _,
         _, O, X, _,
         O, _, _, X],
        [_] * 16,
    ])
    def test_even_size_never_counts_diagonals(self, checker, cells):
        board = Board.from_cells(4, cells)
        assert checker.count_diagonals(board) == (0, 0, _, _)


class TestWinner:

    def test_diagonal_winner(self, checker):
        board = Board.from_cells(3, [X, O, _, O, X, _, _, O, X])
        counts = checker.count_lines(board, 0, 0)
        assert counts.main_diagonal == 3
        assert counts.anti_diagonal == 0
        assert checker.check_winner(board, 0, 0) == X

    def test_row_winner(self, checker):
        board = Board.from_cells(3, [X, X, X, O, _, O, _, O, _])
        counts = checker.count_lines(board, 0, 0)
        assert (counts.row, counts.column) == (3, 1)
        assert checker.check_winner(board, 0, 0) == X

    def test_column_winner(self, checker):
        board = Board.from_cells(3, [O, X, _, O, _, X, O, X, _])
        assert checker.check_winner(board, 2, 0) == O

    def test_no_winner(self, checker):
        board = Board.from_cells(3, [X, O, X, O, X, O, _, _, O])
        assert checker.check_winner(board, 1, 1) is None

    def test_full_board_without_line(self, checker):
        board = Board.from_cells(3, [X, O, X, X, O, O, O, X, X])
        for row in range(3):
            for col in range(3):
                assert checker.check_winner(board, row, col) is None

    def test_even_board_diagonal_is_not_a_win(self, checker):
        board = Board.from_cells(4, [
            X, O, O, _,
            _, X, _, _,
            _, O, X, _,
            _, _, _, X,
        ])
        assert checker.check_winner(board, 3, 3) is None

    def test_even_board_row_still_wins(self, checker):
        board = Board.from_cells(4, [
            O, O, O, O,
            X, X, X, _,
            _, _, _, _,
            X, _, _, _,
        ])
        assert checker.check_winner(board, 0, 2) == O

    def test_ties_prefer_row(self, checker):
        board = Board.from_cells(3, [X, X, X, X, _, _, X, O, O])
        counts = checker.count_lines(board, 0, 0)
        assert counts.row == counts.column == 3
        assert [line for line, _count, _target in counts.ranked()][0] == "row"
        assert checker.get_winning_line(board, 0, 0) == [(0, 0), (0, 1), (0, 2)]

    def test_size_one_board(self, checker):
        assert checker.check_winner(Board.from_cells(1, [O]), 0, 0) == O


class TestWinningLine:

    def test_column_line(self, checker):
        board = Board.from_cells(3, [O, X, _, O, _, X, O, X, _])
        assert checker.get_winning_line(board, 1, 0) == [(0, 0), (1, 0), (2, 0)]

    def test_anti_diagonal_line(self, checker):
        board = Board.from_cells(3, [_, _, O, X, O, _, O, X, X])
        assert checker.get_winning_line(board, 2, 0) == [(0, 2), (1, 1), (2, 0)]

    def test_no_line(self, checker):
        assert checker.get_winning_line(Board(3), 0, 0) is None


def test_line_counts_order():
    counts = LineCounts(row=1, column=2, main_diagonal=3, anti_diagonal=0,
                        target=X, main_target=O, anti_target=_)
    assert counts.ranked() == [
        ("row", 1, X),
        ("column", 2, X),
        ("main_diagonal", 3, O),
        ("anti_diagonal", 0, _),
    ]
