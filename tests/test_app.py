"""Tests for the command-line entry point."""

import logging

import pytest

from chessfield.app import main
from chessfield.core.board import Board
from chessfield.ui.bootstrap import configure_logging


def test_text_mode_prints_starting_board(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--text"]) == 0
    out = capsys.readouterr().out
    assert out == str(Board.initial()) + "\n"
    assert out.splitlines()[0] == " b♖  b♘  b♗  b♕  b♔  b♗  b♘  b♖ "


def test_rejects_unknown_theme() -> None:
    with pytest.raises(SystemExit):
        main(["--text", "--theme", "Purple"])


def test_configure_logging_warns_on_unknown_level(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING):
        configure_logging("not-a-level")
    assert "Unknown log level" in caplog.text


def test_text_mode_applies_log_level(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    levels: list[str] = []
    monkeypatch.setattr("chessfield.app.configure_logging", levels.append)
    assert main(["--text", "--log-level", "DEBUG"]) == 0
    assert levels == ["DEBUG"]
    assert capsys.readouterr().out.startswith(" b♖ ")


def test_text_mode_default_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    levels: list[str] = []
    monkeypatch.setattr("chessfield.app.configure_logging", levels.append)
    main(["--text"])
    assert levels == ["WARNING"]
