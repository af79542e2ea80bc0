"""Tests for BoardWidget selection and rendering."""

from __future__ import annotations

from chessfield.core.coords import D5, D7, E1, E2, E3, E4, E5, E7, F3, G1, H3, Position
from chessfield.game.game import Game
from chessfield.ui.board_widget import BoardWidget
from chessfield.ui.settings import AppSettings
from chessfield.ui.theme import BoardTheme


def test_initial_glyphs(widget: BoardWidget) -> None:
    assert widget.square_button(E1).text() == "♔"
    assert widget.square_button(E2).text() == "♙"
    assert widget.square_button(E4).text() == ""


def test_select_piece_highlights_destinations(widget: BoardWidget) -> None:
    widget._on_square_clicked(E2)
    assert widget.selected == E2
    assert widget.highlighted == {E3, E4}


def test_select_opponent_piece_does_nothing(widget: BoardWidget) -> None:
    widget._on_square_clicked(E7)
    assert widget.selected is None
    assert widget.highlighted == frozenset()


def test_click_empty_square_clears_selection(widget: BoardWidget) -> None:
    widget._on_square_clicked(E2)
    widget._on_square_clicked(E5)
    assert widget.selected is None
    assert widget.highlighted == frozenset()


def test_reselect_other_piece(widget: BoardWidget) -> None:
    widget._on_square_clicked(E2)
    widget._on_square_clicked(G1)
    assert widget.selected == G1
    assert widget.highlighted == {F3, H3}


def test_click_destination_emits_move(widget: BoardWidget) -> None:
    requested: list[tuple[Position, Position]] = []
    widget.move_requested.connect(lambda o, t: requested.append((o, t)))

    widget._on_square_clicked(E2)
    widget._on_square_clicked(E4)

    assert requested == [(E2, E4)]
    assert widget.selected is None


def test_refresh_after_game_move(qapp: object) -> None:
    game = Game()
    widget = BoardWidget(game)
    game.make_move(E2, E4)
    game.make_move(D7, D5)
    widget.refresh()
    assert widget.square_button(E4).text() == "♙"
    assert widget.square_button(E2).text() == ""


def test_highlight_style_uses_theme(widget: BoardWidget) -> None:
    theme = BoardTheme.default()
    widget._on_square_clicked(E2)
    assert theme.highlight_from.name() in widget.square_button(E2).styleSheet()
    assert theme.highlight_to.name() in widget.square_button(E4).styleSheet()


def test_hidden_legal_moves(qapp: object) -> None:
    widget = BoardWidget(Game(), AppSettings(show_legal_moves=False))
    widget._on_square_clicked(E2)
    assert widget.highlighted == {E3, E4}
    highlight = BoardTheme.default().highlight_to.name()
    assert highlight not in widget.square_button(E4).styleSheet()


def test_apply_settings_toggles_coordinates(widget: BoardWidget) -> None:
    assert all(not label.isHidden() for label in widget._coord_labels)

    widget.apply_settings(AppSettings(show_coordinates=False))
    assert all(label.isHidden() for label in widget._coord_labels)


def test_apply_settings_resizes_tiles(widget: BoardWidget) -> None:
    widget.apply_settings(AppSettings(tile_size=40))
    button = widget.square_button(E2)
    assert button.minimumWidth() == button.maximumWidth() == 40


def test_unknown_theme_falls_back_to_default() -> None:
    assert BoardTheme.named("Nope") == BoardTheme.default()
    assert BoardTheme.named("Blue") == BoardTheme.blue()
