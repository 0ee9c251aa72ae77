"""
AI player for terminal TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

from .board import Cell
from .config import AIConfig
from .game_state import GameState
from .move_validator import MoveValidator

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Some strategy
    HARD = "hard"        # Full minimax


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    Candidate moves are played out on copies of the game through the
    normal commit/resolve cycle, so the AI judges wins exactly as the
    game does. On a 3x3 board it searches to the end and never loses;
    larger boards are searched a few plies deep.
    """

    def __init__(
        self,
        player: Cell = Cell.O,
        difficulty: Difficulty = Difficulty.HARD,
        max_depth: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            difficulty: How strong the AI plays.
            max_depth: Search depth override. Picked from the board size
                when not given.
            rng: Random source for EASY/MEDIUM moves.
        """
        if player == Cell.EMPTY:
            raise ValueError("AI must play X or O")
        self.player = player
        self.difficulty = difficulty
        self.max_depth = max_depth
        self.rng = rng or random.Random()
        self.validator = MoveValidator()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def choose_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Pick a move according to the difficulty level.

        Returns:
            (row, col) of the chosen move, or None if no move is possible.
        """
        if self.difficulty == Difficulty.EASY:
            return self._get_random_move(game_state)
        if self.difficulty == Difficulty.MEDIUM:
            if self.rng.random() < AIConfig.MEDIUM_BEST_MOVE_RATE:
                return self.get_best_move(game_state)
            return self._get_random_move(game_state)
        return self.get_best_move(game_state)

    def get_best_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        self.moves_evaluated = 0

        if game_state.current_player != self.player:
            logger.warning("Asked for a move but it is not %s's turn", self.player.name)
            return None

        valid_moves = self.validator.get_valid_moves(game_state)

        if not valid_moves:
            return None

        if len(valid_moves) == 1:
            return valid_moves[0]

        # Only reached when the AI plays X. Centre is a strong opening on odd boards
        center = (game_state.size // 2, game_state.size // 2)
        if game_state.size % 2 == 1 and not game_state.moves and center in valid_moves:
            return center

        depth = self._search_depth(game_state)
        best_score = float('-inf')
        best_move = valid_moves[0]

        for row, col in valid_moves:
            new_state = self._play(game_state, row, col)
            score = self._minimax(new_state, depth - 1, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %s)",
            self.moves_evaluated, best_move, best_score
        )
        return best_move

    def _search_depth(self, game_state: GameState) -> int:
        if self.max_depth is not None:
            return max(1, self.max_depth)
        if game_state.size <= 3:
            return AIConfig.SMALL_BOARD_DEPTH
        return AIConfig.LARGE_BOARD_DEPTH

    def _get_random_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        valid_moves: List[Tuple[int, int]] = self.validator.get_valid_moves(game_state)
        return self.rng.choice(valid_moves) if valid_moves else None

    @staticmethod
    def _play(game_state: GameState, row: int, col: int) -> GameState:
        """Play (row, col) on a copy and resolve it."""
        new_state = game_state.copy()
        new_state.request_move((col, row))
        new_state.commit()
        new_state.resolve()
        return new_state

    def _minimax(
        self,
        game_state: GameState,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            game_state: Current state to evaluate.
            depth: How deep to search.
            is_maximizing: True if maximizing player's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        winner = game_state.winner
        if winner == self.player:
            return AIConfig.WIN_SCORE + depth  # prefer faster wins
        elif winner == self.player.opposite():
            return AIConfig.LOSS_SCORE - depth  # prefer slower losses
        elif game_state.is_draw:
            return AIConfig.DRAW_SCORE

        if depth <= 0:
            return AIConfig.DRAW_SCORE

        valid_moves = self.validator.get_valid_moves(game_state)
        if not valid_moves:
            return AIConfig.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for row, col in valid_moves:
                new_state = self._play(game_state, row, col)
                score = self._minimax(new_state, depth - 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in valid_moves:
                new_state = self._play(game_state, row, col)
                score = self._minimax(new_state, depth - 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
