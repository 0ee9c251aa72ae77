"""
Logic module for terminal TicTacToe.
Handles the board, cursor, game rules, and AI opponent.
"""

from .board import Board, BoardIndexError, Cell
from .cursor import Cursor
from .game_state import GameState, GameStatus, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import LineCounts, WinChecker
from .ai_player import AIPlayer, Difficulty
