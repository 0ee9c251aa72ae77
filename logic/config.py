"""
Game logic configuration for terminal TicTacToe.
Settings for the automated opponent.
"""


class AIConfig:
    """
    Configuration class for the AI opponent.
    Change these values to trade strength for speed!
    """

    # ==================== DIFFICULTY ====================
    DEFAULT_DIFFICULTY = "hard"   # easy, medium or hard

    # Chance that MEDIUM plays the minimax move instead of a random one
    MEDIUM_BEST_MOVE_RATE = 0.5

    # ==================== SEARCH DEPTH ====================
    # A 3x3 game has at most 9 moves, so this searches to the end
    SMALL_BOARD_DEPTH = 9

    # Boards larger than 3x3 are searched this many plies ahead
    LARGE_BOARD_DEPTH = 2

    # ==================== SCORING ====================
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0
