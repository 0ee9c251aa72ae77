"""
Log file setup for terminal TicTacToe.

The screen belongs to the game, so diagnostics go to a file instead of
stdout. Losing the log is never fatal: if the file can't be opened the
records are dropped.
"""

import logging
from typing import Optional

from .config import TerminalConfig

_handler: Optional[logging.Handler] = None
_previous_level: Optional[int] = None


class LevelNameFormatter(logging.Formatter):
    """Formatter that writes short level names (WARN, FATAL)."""

    def __init__(self, fmt=None, datefmt=None, level_names=None):
        super().__init__(fmt, datefmt=datefmt)
        self.level_names = TerminalConfig.LOG_LEVEL_NAMES if level_names is None else level_names

    def format(self, record: logging.LogRecord) -> str:
        name = self.level_names.get(record.levelname)
        if name is not None:
            # Other handlers share the record
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = name
        return super().format(record)


def setup_logging(path: Optional[str] = None, level: int = logging.INFO) -> logging.Handler:
    """
    Send all log records to a file.

    Args:
        path: Log file, appended to. Defaults to TerminalConfig.LOG_FILE.
        level: Minimum level to record.

    Returns:
        The handler that was installed.
    """
    global _handler, _previous_level
    shutdown_logging()

    path = path or TerminalConfig.LOG_FILE
    try:
        handler: logging.Handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()

    handler.setFormatter(LevelNameFormatter(
        TerminalConfig.LOG_FORMAT,
        datefmt=TerminalConfig.LOG_DATE_FORMAT
    ))

    root = logging.getLogger()
    _previous_level = root.level
    root.addHandler(handler)
    root.setLevel(level)
    _handler = handler
    return handler


def shutdown_logging():
    """Flush and remove the handler installed by setup_logging()."""
    global _handler, _previous_level
    if _handler is None:
        return
    root = logging.getLogger()
    root.removeHandler(_handler)
    if _previous_level is not None:
        root.setLevel(_previous_level)
    _handler.flush()
    _handler.close()
    _handler = None
    _previous_level = None
