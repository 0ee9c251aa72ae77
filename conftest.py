"""
Pytest fixtures for TicTacToe tests.
"""

import pytest

from logic.board import Board, Cell
from logic.game_state import GameState, GameStatus

X, O, _ = Cell.X, Cell.O, Cell.EMPTY


@pytest.fixture
def empty_game() -> GameState:
    """A fresh 3x3 game."""
    return GameState(size=3)


@pytest.fixture
def make_game():
    """Build a game from a flat row-major list of cells."""
    def _make(cells, current_player=Cell.X, cursor=(0, 0)) -> GameState:
        size = int(len(cells) ** 0.5)
        game = GameState(size=size, board=Board.from_cells(size, cells), current_player=current_player)
        game.request_move(cursor)
        return game
    return _make


@pytest.fixture
def play():
    """Play (row, col) through the commit/resolve cycle."""
    def _play(game: GameState, row: int, col: int) -> GameStatus:
        game.request_move((col, row))
        assert game.commit(), f"commit at ({row}, {col}) was rejected"
        return game.resolve()
    return _play
