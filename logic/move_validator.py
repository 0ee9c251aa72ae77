"""
Move validator for terminal TicTacToe.
Validates that a commit follows the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from .board import Cell

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. The previous commit must have been resolved
    3. Can only place on empty cells inside the board
    """

    def validate_move(self, game_state: "GameState", row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.pending_commit:
            return ValidationResult(
                is_valid=False,
                error_message="Previous move has not been resolved yet"
            )

        size = game_state.size
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

        occupant = game_state.board.get(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []
        return game_state.board.empty_cells()
