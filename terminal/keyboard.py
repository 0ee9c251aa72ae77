"""
Keyboard input for terminal TicTacToe.
Reads raw keys from the terminal and turns them into game actions.
"""

import os
import select
import sys
import termios
import tty
from enum import Enum
from typing import Dict, Optional

from .config import TerminalConfig


class Action(Enum):
    """Abstract inputs understood by the application."""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    SNAPSHOT = "snapshot"
    QUIT = "quit"


def decode_key(key: str, bindings: Optional[Dict[str, str]] = None) -> Optional[Action]:
    """
    Map a raw key string to an Action.

    Args:
        key: One key as returned by KeyReader.read_key().
        bindings: Key -> action name table. Defaults to TerminalConfig.KEY_BINDINGS.

    Returns:
        The Action, or None for keys that do nothing.
    """
    bindings = TerminalConfig.KEY_BINDINGS if bindings is None else bindings
    name = bindings.get(key)
    if name is None:
        return None
    return Action[name]


class KeyReader:
    """
    Reads single key presses from a POSIX terminal.

    Use as a context manager: the terminal is switched to cbreak mode
    (no echo, no line buffering) on entry and restored on exit.
    """

    # How long to wait for the rest of an escape sequence
    ESCAPE_TIMEOUT = 0.05

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._saved_attrs = None

    def __enter__(self):
        fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._saved_attrs is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def _read_byte(self, fd) -> bytes:
        byte = os.read(fd, 1)
        if not byte:
            raise EOFError("Keyboard input closed")
        return byte

    def read_key(self) -> str:
        """
        Block until a key is pressed.

        Returns:
            The key as a string. Escape sequences (arrow keys) are
            returned whole, e.g. "\\x1b[A". Bytes after the end of the
            sequence stay unread for the next call.

        Raises:
            EOFError: The input stream was closed.
        """
        fd = self.stream.fileno()
        key = self._read_byte(fd)
        if key != b"\x1b" or not self._has_input(fd):
            return key.decode("utf-8", errors="replace")

        key += self._read_byte(fd)
        if key[-1:] in (b"[", b"O"):
            # CSI/SS3: parameters until a final byte in 0x40-0x7E
            while self._has_input(fd):
                key += self._read_byte(fd)
                if 0x40 <= key[-1] <= 0x7E:
                    break
        return key.decode("utf-8", errors="replace")

    def _has_input(self, fd) -> bool:
        readable, _, _ = select.select([fd], [], [], self.ESCAPE_TIMEOUT)
        return bool(readable)

    def read_action(self) -> Optional[Action]:
        """Read one key and decode it. A closed input stream means QUIT."""
        try:
            key = self.read_key()
        except EOFError:
            return Action.QUIT
        return decode_key(key)
