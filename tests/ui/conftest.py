"""Headless Qt fixtures for the board widget and main window tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from chessfield.game.game import Game  # noqa: E402
from chessfield.ui.board_widget import BoardWidget  # noqa: E402
from chessfield.ui.main_window import MainWindow  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    return app if app is not None else QApplication([])


@pytest.fixture(autouse=True)
def _close_windows(qapp: QApplication) -> Iterator[None]:
    yield
    for top in qapp.topLevelWidgets():
        top.close()
    qapp.processEvents()


@pytest.fixture
def widget(qapp: QApplication) -> BoardWidget:
    """A board widget over a fresh game."""
    return BoardWidget(Game())


@pytest.fixture
def window(qapp: QApplication) -> MainWindow:
    return MainWindow()
