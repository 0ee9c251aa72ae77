"""
Terminal configuration for TicTacToe.
All the settings for the board, keys, colors, logging and snapshots.
"""


class TerminalConfig:
    """
    Configuration class for the terminal front end.
    Change these values based on your setup!
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # ==================== KEY BINDINGS ====================
    # Raw key strings as read from the terminal -> action names
    KEY_BINDINGS = {
        "\x1b[A": "MOVE_UP",      # Arrow keys
        "\x1b[B": "MOVE_DOWN",
        "\x1b[C": "MOVE_RIGHT",
        "\x1b[D": "MOVE_LEFT",
        "\x1bOA": "MOVE_UP",      # Arrow keys in application cursor mode
        "\x1bOB": "MOVE_DOWN",
        "\x1bOC": "MOVE_RIGHT",
        "\x1bOD": "MOVE_LEFT",
        "w": "MOVE_UP",
        "s": "MOVE_DOWN",
        "d": "MOVE_RIGHT",
        "a": "MOVE_LEFT",
        "\r": "CONFIRM",
        "\n": "CONFIRM",
        "p": "SNAPSHOT",
        "q": "QUIT",
        "\x03": "QUIT",           # Ctrl+C
    }

    # ==================== STYLES ====================
    # rich style strings
    CURSOR_STYLE = "black on white"
    SELECTED_STYLE = "black on white"
    RESULT_SELECTED_STYLE = "reverse"
    WINNER_STYLE = "on green"
    FOOTER_STYLE = "dim"

    # ==================== LOGGING ====================
    LOG_FILE = ".log"
    LOG_FORMAT = "[%(levelname)s][%(asctime)s]: %(message)s"
    LOG_DATE_FORMAT = "%Y/%m/%d; %H:%M:%S"
    LOG_LEVEL_NAMES = {"WARNING": "WARN", "CRITICAL": "FATAL"}

    # ==================== SNAPSHOTS ====================
    SNAPSHOT_DIR = "snapshots"
    SNAPSHOT_CELL_PX = 120     # Pixels per board cell in saved images
    SNAPSHOT_LINE_THICKNESS = 3
