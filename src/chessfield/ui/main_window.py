"""MainWindow — top-level window hosting the board and a status bar."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from chessfield.core.coords import Position
from chessfield.core.enums import Color
from chessfield.core.errors import IllegalMoveError
from chessfield.core.piece import Piece
from chessfield.game.game import Game
from chessfield.ui.board_widget import BoardWidget
from chessfield.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for chessfield."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("chessfield")

        self._settings = settings or AppSettings()
        self._game = Game()

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self._update_status()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_widget = BoardWidget(self._game, self._settings)
        self._board_widget.move_requested.connect(self._on_move_requested)
        self.setCentralWidget(self._board_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new_game)

        menu_game.addSeparator()

        act_quit = QAction("Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

    def _connect_game_events(self) -> None:
        events = self._game.events
        events.on_move.append(self._on_game_move)
        events.on_turn_changed.append(self._on_turn_changed)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self) -> None:
        """Discard the current game and start from the initial position."""
        self._game = Game()
        self._connect_game_events()
        self._board_widget.set_game(self._game)
        self._update_status()
        _LOGGER.debug("Started a new game")

    def _on_move_requested(self, origin: Position, target: Position) -> None:
        try:
            self._game.make_move(origin, target)
        except IllegalMoveError as exc:
            self._status_label.setText(str(exc))

    def _on_game_move(
        self, _origin: Position, _target: Position, _captured: Piece | None
    ) -> None:
        self._board_widget.refresh()

    def _on_turn_changed(self, _color: Color) -> None:
        self._update_status()

    def _update_status(self) -> None:
        side = "White" if self._game.turn == Color.WHITE else "Black"
        self._status_label.setText(f"{side} to move")
