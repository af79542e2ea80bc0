"""Piece value object and tile helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessfield.core.enums import Color, PieceKind

# One glyph per kind; color is carried by the 'w' / 'b' prefix.
_GLYPHS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♙",
    PieceKind.KNIGHT: "♘",
    PieceKind.BISHOP: "♗",
    PieceKind.ROOK: "♖",
    PieceKind.QUEEN: "♕",
    PieceKind.KING: "♔",
}

EMPTY_CODE = "__"


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    kind: PieceKind

    @property
    def glyph(self) -> str:
        """Color-agnostic symbol, e.g. ♘."""
        return _GLYPHS[self.kind]

    @property
    def code(self) -> str:
        """Two-character cell code, e.g. 'b♕'."""
        return f"{self.color.code}{self.glyph}"

    def __str__(self) -> str:
        return self.code


# A square's contents: a piece, or None for an empty square.
Tile: TypeAlias = Piece | None


def tile_code(tile: Tile) -> str:
    """Render one square: '__' when empty, otherwise the piece code."""
    return EMPTY_CODE if tile is None else tile.code
