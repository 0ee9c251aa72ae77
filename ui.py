"""
TicTacToe Terminal UI
A cursor-driven interface for TicTacToe using rich.

Screens:
- Main menu (play against the AI, play locally, exit)
- Game board with a highlighted cursor cell
- Result screen (winner or draw, return to menu or restart)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Type, Union

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.text import Text

from logic.ai_player import AIPlayer, Difficulty
from logic.board import Cell
from logic.game_state import GameState, GameStatus
from terminal.config import TerminalConfig
from terminal.keyboard import Action, KeyReader
from terminal.snapshot import save_snapshot

logger = logging.getLogger(__name__)


class MenuChoice(Enum):
    """Entries of the main menu."""
    PLAY_AI = "Play with AI"
    PLAY_LOCAL = "Play locally"
    EXIT = "Exit"


class ResultChoice(Enum):
    """Entries of the result screen."""
    RETURN_TO_MENU = "Return to Menu"
    RESTART = "Restart"


@dataclass
class MenuState:
    """The main menu screen."""
    selected: int = 0
    confirmed: bool = False

    options = list(MenuChoice)

    @property
    def choice(self) -> MenuChoice:
        return self.options[self.selected]

    def try_increment(self):
        if self.selected < len(self.options) - 1:
            self.selected += 1

    def try_decrement(self):
        if self.selected > 0:
            self.selected -= 1


@dataclass
class ResultState:
    """The result screen shown after a finished game."""
    session: GameState
    selected: int = 0
    confirmed: bool = False

    options = list(ResultChoice)

    @property
    def choice(self) -> ResultChoice:
        return self.options[self.selected]

    def try_increment(self):
        if self.selected < len(self.options) - 1:
            self.selected += 1

    def try_decrement(self):
        if self.selected > 0:
            self.selected -= 1


AppState = Union[MenuState, GameState, ResultState]


class TicTacToeApp:
    """
    Application state machine.

    Every input goes through handle(), which looks up what the action
    means on the current screen. update() then performs the screen
    change, if any.
    """

    def __init__(
        self,
        size: int = TerminalConfig.BOARD_SIZE,
        difficulty: Difficulty = Difficulty.HARD,
        snapshot_dir: Optional[str] = None,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the application.

        Args:
            size: Board size for new games.
            difficulty: AI difficulty for "Play with AI".
            snapshot_dir: Where board snapshots are written.
            ai: AI player to use instead of a default one.
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self.snapshot_dir = snapshot_dir
        self.ai = ai or AIPlayer(Cell.O, difficulty)
        self.state: AppState = MenuState()
        self.is_running = True
        self.message: Optional[str] = None

        self._transitions: Dict[Tuple[Type, Action], Callable] = {
            (MenuState, Action.MOVE_UP): lambda s: s.try_decrement(),
            (MenuState, Action.MOVE_DOWN): lambda s: s.try_increment(),
            (MenuState, Action.CONFIRM): self._confirm,
            (GameState, Action.MOVE_LEFT): lambda s: s.move_left(),
            (GameState, Action.MOVE_RIGHT): lambda s: s.move_right(),
            (GameState, Action.MOVE_UP): lambda s: s.move_up(),
            (GameState, Action.MOVE_DOWN): lambda s: s.move_down(),
            (GameState, Action.CONFIRM): lambda s: s.commit(),
            (GameState, Action.SNAPSHOT): lambda s: self._snapshot(s),
            (ResultState, Action.MOVE_UP): lambda s: s.try_decrement(),
            (ResultState, Action.MOVE_DOWN): lambda s: s.try_increment(),
            (ResultState, Action.CONFIRM): self._confirm,
            (ResultState, Action.SNAPSHOT): lambda s: self._snapshot(s.session),
        }

    def handle(self, action: Optional[Action]):
        """Apply one input to the current screen."""
        if action is None:
            return
        logger.debug("%s handled in %s", action.name, type(self.state).__name__)

        if action == Action.QUIT:
            self.is_running = False
            return

        handler = self._transitions.get((type(self.state), action))
        if handler is not None:
            self.message = None
            handler(self.state)

    def update(self):
        """Move to the next screen if the current one is done."""
        state = self.state

        if isinstance(state, MenuState):
            if state.confirmed:
                self._leave_menu(state.choice)

        elif isinstance(state, GameState):
            status = state.resolve()
            if status == GameStatus.ACTIVE and self._is_ai_turn(state):
                self._ai_turn(state)
                status = state.status
            if status != GameStatus.ACTIVE:
                self.state = ResultState(session=state)

        elif isinstance(state, ResultState):
            if state.confirmed:
                if state.choice == ResultChoice.RESTART:
                    self.state = self._new_game(state.session.is_ai)
                else:
                    self.state = MenuState()

    def _confirm(self, state: Union[MenuState, ResultState]):
        state.confirmed = True

    def _leave_menu(self, choice: MenuChoice):
        if choice == MenuChoice.EXIT:
            self.is_running = False
        else:
            self.state = self._new_game(is_ai=choice == MenuChoice.PLAY_AI)

    def _new_game(self, is_ai: bool) -> GameState:
        logger.info("New %dx%d game (%s)", self.size, self.size, "vs AI" if is_ai else "local")
        return GameState(size=self.size, is_ai=is_ai)

    def _is_ai_turn(self, state: GameState) -> bool:
        return state.is_ai and state.current_player == self.ai.player

    def _ai_turn(self, state: GameState):
        move = self.ai.choose_move(state)
        if move is None:
            return
        row, col = move
        state.request_move((col, row))
        state.commit()
        state.resolve()

    def _snapshot(self, session: GameState):
        path = save_snapshot(session, self.snapshot_dir)
        self.message = f"Saved {path}" if path else "Snapshot failed"


class TicTacToeUI:
    """
    Draws the application with rich and feeds it keyboard input.
    """

    def __init__(self, app: TicTacToeApp, console: Optional[Console] = None):
        self.app = app
        self.console = console or Console()

    def render(self) -> RenderableType:
        """Build the renderable for the current screen."""
        state = self.app.state
        if isinstance(state, MenuState):
            body = self._render_menu(state)
        elif isinstance(state, ResultState):
            body = self._render_result(state)
        else:
            body = self._render_game(state)

        if self.app.message:
            body = Group(body, Text(""), Text(self.app.message, style=TerminalConfig.FOOTER_STYLE, justify="center"))
        return Align.center(body, vertical="middle")

    def _render_menu(self, menu: MenuState) -> RenderableType:
        lines = []
        for index, option in enumerate(menu.options):
            style = TerminalConfig.SELECTED_STYLE if index == menu.selected else ""
            lines.append(Text(option.value, style=style, justify="center"))
        return Group(*lines)

    def _render_board(self, game: GameState) -> Text:
        board_text = Text(justify="center")
        cursor = game.cursor.position()
        for row, cells in enumerate(game.board.rows()):
            if row:
                board_text.append("\n")
            for col, cell in enumerate(cells):
                style = TerminalConfig.CURSOR_STYLE if cursor == (col, row) else ""
                board_text.append("[")
                board_text.append(cell.symbol, style=style)
                board_text.append("]")
        return board_text

    def _render_game(self, game: GameState) -> RenderableType:
        turn = f"Player {game.current_player.name}'s turn"
        if game.is_ai:
            turn += " (you)" if game.current_player == Cell.X else " (AI)"
        footer = Text(turn, style=TerminalConfig.FOOTER_STYLE, justify="center")
        return Group(self._render_board(game), Text(""), footer)

    def _render_result(self, result: ResultState) -> RenderableType:
        winner = result.session.winner
        if winner is None:
            headline = "Draw"
        else:
            headline = f"Winner: Player {winner.name}"

        lines = [
            Text(headline, style=TerminalConfig.WINNER_STYLE, justify="center"),
            Text(""),
        ]
        for index, option in enumerate(result.options):
            style = TerminalConfig.RESULT_SELECTED_STYLE if index == result.selected else ""
            lines.append(Text(option.value, style=style, justify="center"))
        return Group(*lines)

    def run(self):
        """Run the input/draw loop until the app stops."""
        with self.console.screen(hide_cursor=True) as screen, KeyReader() as keys:
            screen.update(self.render())
            while self.app.is_running:
                action = keys.read_action()
                if action is None:
                    continue
                self.app.handle(action)
                self.app.update()
                if self.app.is_running:
                    screen.update(self.render())
