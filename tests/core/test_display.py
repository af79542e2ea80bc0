"""Tests for the text rendering of a board."""

from chessfield.core.board import Board
from chessfield.core.coords import D7, D5, E2, E4
from chessfield.core.display import render_board, render_row
from chessfield.core.enums import Color, PieceKind
from chessfield.core.piece import Piece, tile_code

INITIAL_LINES = [
    " b♖  b♘  b♗  b♕  b♔  b♗  b♘  b♖ ",
    " b♙  b♙  b♙  b♙  b♙  b♙  b♙  b♙ ",
    " __  __  __  __  __  __  __  __ ",
    " __  __  __  __  __  __  __  __ ",
    " __  __  __  __  __  __  __  __ ",
    " __  __  __  __  __  __  __  __ ",
    " w♙  w♙  w♙  w♙  w♙  w♙  w♙  w♙ ",
    " w♖  w♘  w♗  w♕  w♔  w♗  w♘  w♖ ",
]


class TestRenderBoard:
    def test_initial_board(self) -> None:
        assert render_board(Board.initial()).split("\n") == INITIAL_LINES

    def test_no_trailing_newline(self) -> None:
        text = render_board(Board.initial())
        assert not text.endswith("\n")
        assert text.count("\n") == 7

    def test_str_matches_render(self) -> None:
        board = Board.initial()
        assert str(board) == render_board(board)

    def test_after_moves(self) -> None:
        board = Board.initial()
        board.make_move(E2, E4)
        board.make_move(D7, D5)
        lines = render_board(board).split("\n")
        assert lines[1] == " b♙  b♙  b♙  __  b♙  b♙  b♙  b♙ "
        assert lines[3] == " __  __  __  b♙  __  __  __  __ "
        assert lines[4] == " __  __  __  __  w♙  __  __  __ "
        assert lines[6] == " w♙  w♙  w♙  w♙  __  w♙  w♙  w♙ "

    def test_empty_board(self) -> None:
        assert render_board(Board()).split("\n") == [" __ " * 8] * 8


class TestTileCodes:
    def test_empty(self) -> None:
        assert tile_code(None) == "__"

    def test_glyph_ignores_color(self) -> None:
        white = Piece(Color.WHITE, PieceKind.QUEEN)
        black = Piece(Color.BLACK, PieceKind.QUEEN)
        assert white.glyph == black.glyph == "♕"
        assert tile_code(white) == "w♕"
        assert tile_code(black) == "b♕"

    def test_distinct_glyphs(self) -> None:
        glyphs = {Piece(Color.WHITE, kind).glyph for kind in PieceKind}
        assert len(glyphs) == len(PieceKind)

    def test_render_row(self) -> None:
        row = [Piece(Color.BLACK, PieceKind.KING), None]
        assert render_row(row) == " b♔  __ "
