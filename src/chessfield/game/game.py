"""Game — owns the board and the side to move.

This is the only place where a move is checked before the board is
mutated.  Listeners subscribe via :class:`GameEvents` so a UI or a test
can follow the game without polling.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessfield.core.board import Board
from chessfield.core.coords import Position
from chessfield.core.display import render_board
from chessfield.core.enums import Color
from chessfield.core.errors import IllegalMoveError
from chessfield.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

# origin, target, captured piece
MoveCallback = Callable[[Position, Position, "Piece | None"], None]
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """A single game session: a fresh board with White to move.

    Methods are meant to be called from one thread; give every session its
    own instance.
    """

    __slots__ = ("_board", "_turn", "events")

    def __init__(self) -> None:
        self._board = Board.initial()
        self._turn = Color.WHITE
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """A snapshot of the board; changing it does not affect the game."""
        return self._board.copy()

    @property
    def turn(self) -> Color:
        return self._turn

    # ── Queries ──────────────────────────────────────────────────────────

    def __getitem__(self, position: Position) -> Piece | None:
        return self._board[position]

    def moves_available(self, position: Position) -> frozenset[Position]:
        """Destinations for the piece on *position*, if it is the mover's."""
        return self._board.moves_available(position, self._turn)

    def legal_moves(self) -> dict[Position, frozenset[Position]]:
        """Every movable piece of the side to move and its destinations."""
        moves: dict[Position, frozenset[Position]] = {}
        for origin in self._board.occupied(self._turn):
            targets = self.moves_available(origin)
            if targets:
                moves[origin] = targets
        return moves

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(self, origin: Position, target: Position) -> None:
        """Play *origin* → *target* and pass the turn.

        Raises:
            IllegalMoveError: *target* is not among ``moves_available(origin)``.
                Board and turn are left untouched.
        """
        if target not in self.moves_available(origin):
            _LOGGER.info("Rejected move %s-%s for %s", origin, target, self._turn)
            raise IllegalMoveError(origin, target, self._turn)

        captured = self._board[target]
        self._board.make_move(origin, target)
        mover = self._turn
        self._turn = mover.opposite
        _LOGGER.debug("%s played %s-%s", mover, origin, target)

        self._emit_move(origin, target, captured)
        self._emit_turn_changed()

    def try_move(self, origin: Position, target: Position) -> bool:
        """Like :meth:`make_move` but report rejection as ``False``."""
        try:
            self.make_move(origin, target)
        except IllegalMoveError:
            return False
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(
        self, origin: Position, target: Position, captured: Piece | None
    ) -> None:
        for cb in self.events.on_move:
            cb(origin, target, captured)

    def _emit_turn_changed(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._turn)

    def __str__(self) -> str:
        return render_board(self._board)
