"""Exceptions raised by the game layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessfield.core.coords import Position
    from chessfield.core.enums import Color


class IllegalMoveError(ValueError):
    """The requested destination is not available to the piece on *origin*."""

    def __init__(self, origin: Position, target: Position, turn: Color) -> None:
        super().__init__(f"Illegal move for {turn!s}: {origin} -> {target}")
        self.origin = origin
        self.target = target
        self.turn = turn
