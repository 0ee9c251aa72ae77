"""
Game state management for terminal TicTacToe.
Tracks the board, the cursor, whose turn it is and the outcome.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Cell
from .cursor import Cursor
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_validator = MoveValidator()
_win_checker = WinChecker()


class GameStatus(Enum):
    """Outcome of a session."""
    ACTIVE = "active"
    WON = "won"
    DRAW = "draw"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    row: int
    col: int
    move_number: int        # 0 for the first move of the game


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The N x N board
    - The cursor
    - Current player
    - Whether a placed move still waits for resolve()
    - Move history
    - Game status (ongoing, won, draw)

    A move is played in two steps. commit() places the current player's
    mark under the cursor and flips the turn, resolve() then checks the
    committed cell for a win or draw. Once the game is won or drawn it
    accepts nothing further; start a new GameState to play again.
    """

    size: int = 3

    # Mode flags for the menu layer, not used by the rules
    is_ai: bool = False
    can_player_select: bool = True

    board: Optional[Board] = None
    cursor: Optional[Cursor] = None

    # Current player's turn
    current_player: Cell = Cell.X

    # Set by commit(), cleared by resolve()
    pending_commit: bool = False

    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Cell] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        if self.board is None:
            self.board = Board(self.size)
        if self.cursor is None:
            self.cursor = Cursor(self.size)
        if self.board.size != self.size:
            raise ValueError(
                f"Board size {self.board.size} does not match game size {self.size}"
            )

    @property
    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if self.is_draw:
            return GameStatus.DRAW
        return GameStatus.ACTIVE

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    # ==================== CURSOR ====================

    def move_left(self):
        if not self.is_game_over:
            self.cursor.move_left()

    def move_right(self):
        if not self.is_game_over:
            self.cursor.move_right()

    def move_up(self):
        if not self.is_game_over:
            self.cursor.move_up()

    def move_down(self):
        if not self.is_game_over:
            self.cursor.move_down()

    def request_move(self, position: Tuple[int, int]):
        """Move the cursor to (col, row). Does not place anything."""
        if self.is_game_over:
            return
        col, row = position
        self.cursor.select(col, row)

    # ==================== COMMIT / RESOLVE ====================

    def commit(self) -> bool:
        """
        Place the current player's mark under the cursor.

        Returns:
            True if the mark was placed, False if the move was rejected.
            A rejected move leaves the board and the turn untouched.
        """
        col, row = self.cursor.position()
        result = _validator.validate_move(self, row, col)
        if not result.is_valid:
            logger.debug("Commit rejected: %s", result.error_message)
            return False

        self.board.set(row, col, self.current_player)
        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))
        logger.debug("%s committed cell (%d, %d)", self.current_player.name, row, col)
        logger.debug("Current board: %r", self.board)

        self.current_player = self.current_player.opposite()
        self.pending_commit = True
        return True

    def resolve(self) -> GameStatus:
        """
        Check the last committed cell for a win or a draw.

        Does nothing when no commit is pending or the game is already
        over, so calling it repeatedly is harmless.

        Returns:
            The status after resolving.
        """
        if self.is_game_over or not self.pending_commit:
            return self.status
        self.pending_commit = False

        move = self.last_move
        winner = _win_checker.check_winner(self.board, move.row, move.col)

        if winner is not None:
            self.winner = winner
            self.is_game_over = True
            logger.info("Player %s wins after %d moves", winner.name, len(self.moves))
        elif self.board.is_full():
            self.is_draw = True
            self.is_game_over = True
            logger.info("Game drawn after %d moves", len(self.moves))

        return self.status

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Cells of the completed line, or None if nobody has won."""
        if self.winner is None:
            return None
        move = self.last_move
        return _win_checker.get_winning_line(self.board, move.row, move.col)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        return self.board.empty_cells()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            size=self.size,
            is_ai=self.is_ai,
            can_player_select=self.can_player_select,
            board=self.board.copy(),
            cursor=self.cursor.copy(),
            current_player=self.current_player,
            pending_commit=self.pending_commit,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
