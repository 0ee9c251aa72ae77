"""
Tests for the AI opponent.
"""

import random

import pytest

from logic.ai_player import AIPlayer, Difficulty
from logic.board import Cell
from logic.game_state import GameState, GameStatus

X, O, _ = Cell.X, Cell.O, Cell.EMPTY


def test_blocks_a_winning_move(make_game):
    game = make_game([X, X, _,
                      _, O, _,
                      _, _, _], current_player=O)
    assert AIPlayer(O).get_best_move(game) == (0, 2)


def test_takes_a_winning_move(make_game):
    game = make_game([O, O, _,
                      _, X, _,
                      _, _, X], current_player=O)
    assert AIPlayer(O).get_best_move(game) == (0, 2)


def test_opens_in_the_centre():
    game = GameState(size=3)
    assert AIPlayer(X).get_best_move(game) == (1, 1)


def test_not_my_turn(empty_game):
    assert AIPlayer(O).get_best_move(empty_game) is None


def test_single_move_left(make_game):
    game = make_game([X, O, X,
                      X, O, O,
                      O, X, _], current_player=X)
    assert AIPlayer(X).get_best_move(game) == (2, 2)


def test_search_does_not_touch_the_game(make_game):
    game = make_game([X, _, _,
                      _, _, _,
                      _, _, _], current_player=O)
    board_before = game.board.copy()
    AIPlayer(O).get_best_move(game)
    assert game.board == board_before
    assert game.current_player == O
    assert not game.pending_commit


def test_blocks_on_larger_board(make_game):
    game = make_game([X, X, X, _,
                      O, O, _, _,
                      _, _, _, _,
                      _, _, _, _], current_player=O)
    ai = AIPlayer(O)
    assert ai.get_best_move(game) == (0, 3)
    assert ai.moves_evaluated > 0


def test_easy_plays_a_random_empty_cell(make_game):
    game = make_game([X, _, _,
                      _, _, _,
                      _, _, _], current_player=O)
    ai = AIPlayer(O, Difficulty.EASY, rng=random.Random(7))
    for _attempt in range(10):
        assert ai.choose_move(game) in game.get_empty_cells()


def test_medium_uses_both_strategies(make_game):
    game = make_game([X, X, _,
                      _, O, _,
                      _, _, _], current_player=O)
    ai = AIPlayer(O, Difficulty.MEDIUM, rng=random.Random(3))
    moves = {ai.choose_move(game) for _attempt in range(30)}
    assert (0, 2) in moves
    assert moves <= set(game.get_empty_cells())


def test_ai_cannot_play_empty():
    with pytest.raises(ValueError):
        AIPlayer(Cell.EMPTY)


def test_hard_ai_never_loses_to_random_play():
    rng = random.Random(11)
    ai = AIPlayer(O)
    for _game in range(3):
        game = GameState(size=3)
        while not game.is_game_over:
            if game.current_player == X:
                row, col = rng.choice(game.get_empty_cells())
            else:
                row, col = ai.get_best_move(game)
            game.request_move((col, row))
            assert game.commit()
            game.resolve()
        assert game.status in (GameStatus.DRAW, GameStatus.WON)
        assert game.winner != X
