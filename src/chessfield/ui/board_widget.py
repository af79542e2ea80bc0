"""BoardWidget — clickable 8x8 grid showing a :class:`Game`."""

from __future__ import annotations

from functools import partial

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QSizePolicy, QWidget

from chessfield.core.coords import File, Position, Rank
from chessfield.core.enums import Color
from chessfield.game.game import Game
from chessfield.ui.settings import AppSettings
from chessfield.ui.theme import BoardTheme


def _css(color: QColor) -> str:
    return color.name()


class BoardWidget(QWidget):
    """Renders the board and turns two clicks into a move request.

    The first click on a piece of the side to move selects it and
    highlights its destinations; a click on a highlighted square emits
    ``move_requested``.  Any other click clears or changes the selection.

    Signals:
        move_requested(Position, Position): origin and target of a move.
    """

    move_requested = pyqtSignal(object, object)

    def __init__(
        self, game: Game, settings: AppSettings | None = None, parent=None
    ) -> None:
        super().__init__(parent)
        self._game = game
        self._settings = settings or AppSettings()
        self._theme = BoardTheme.named(self._settings.theme)

        # Interaction state
        self._selected: Position | None = None
        self._highlighted: frozenset[Position] = frozenset()

        self._buttons: dict[Position, QPushButton] = {}
        self._coord_labels: list[QLabel] = []

        self._build_grid()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selected(self) -> Position | None:
        return self._selected

    @property
    def highlighted(self) -> frozenset[Position]:
        return self._highlighted

    def square_button(self, position: Position) -> QPushButton:
        return self._buttons[position]

    def set_game(self, game: Game) -> None:
        """Show another game (e.g. after "New game")."""
        self._game = game
        self.clear_selection()

    def apply_settings(self, settings: AppSettings) -> None:
        self._settings = settings
        self._theme = BoardTheme.named(settings.theme)
        for label in self._coord_labels:
            label.setHidden(not settings.show_coordinates)
        for button in self._buttons.values():
            button.setFixedSize(settings.tile_size, settings.tile_size)
        self.refresh()

    def clear_selection(self) -> None:
        self._selected = None
        self._highlighted = frozenset()
        self.refresh()

    def refresh(self) -> None:
        """Redraw every square from the current board."""
        for position, button in self._buttons.items():
            piece = self._game[position]
            button.setText(piece.glyph if piece else "")
            color = piece.color if piece else None
            button.setStyleSheet(self._square_style(position, color))

    # ── Click handling ───────────────────────────────────────────────────

    def _on_square_clicked(self, position: Position) -> None:
        if self._selected is not None and position in self._highlighted:
            origin = self._selected
            self._selected = None
            self._highlighted = frozenset()
            self.move_requested.emit(origin, position)
            self.refresh()
            return

        destinations = self._game.moves_available(position)
        if destinations:
            self._selected = position
            self._highlighted = destinations
            self.refresh()
        else:
            self.clear_selection()

    # ── Layout / painting helpers ────────────────────────────────────────

    def _build_grid(self) -> None:
        grid = QGridLayout(self)
        grid.setSpacing(0)
        grid.setContentsMargins(4, 4, 4, 4)
        size = self._settings.tile_size

        # Row 0 is rank 8; column 0 holds rank labels, row 8 file labels.
        for row, rank in enumerate(reversed(Rank)):
            rank_label = self._make_coord_label(str(rank))
            grid.addWidget(rank_label, row, 0)
            for col, file in enumerate(File, start=1):
                position = Position(rank, file)
                button = QPushButton(self)
                button.setFixedSize(size, size)
                button.setFlat(True)
                button.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
                button.setToolTip(str(position))
                button.clicked.connect(partial(self._on_square_clicked, position))
                grid.addWidget(button, row, col)
                self._buttons[position] = button

        for col, file in enumerate(File, start=1):
            grid.addWidget(self._make_coord_label(str(file)), 8, col)

    def _make_coord_label(self, text: str) -> QLabel:
        label = QLabel(text, self)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setHidden(not self._settings.show_coordinates)
        self._coord_labels.append(label)
        return label

    def _square_style(self, position: Position, piece_color: Color | None) -> str:
        theme = self._theme
        is_light = (position.rank.offset + position.file.offset) % 2 == 1
        background = theme.light_square if is_light else theme.dark_square
        if position == self._selected:
            background = theme.highlight_from
        elif self._settings.show_legal_moves and position in self._highlighted:
            background = theme.highlight_to

        if piece_color == Color.BLACK:
            foreground = theme.piece_black
        else:
            foreground = theme.piece_white
        font_px = max(12, int(self._settings.tile_size * 0.6))
        return (
            f"QPushButton {{ background: {_css(background)}; color: {_css(foreground)};"
            f" border: none; font-size: {font_px}px; }}"
        )
