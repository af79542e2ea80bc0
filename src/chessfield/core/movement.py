"""Pseudo-legal movement: per-kind step tables and the direction scan.

Every piece kind is described as data: a tuple of :class:`Step` entries,
each a (direction, max distance, mode) triple.  :func:`scan` walks one
step outward from the origin at a time and is the only place where
blocking and capturing are decided.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessfield.core.coords import Position, Rank
from chessfield.core.enums import Color, PieceKind

if TYPE_CHECKING:
    from chessfield.core.board import Board


class MoveMode(IntEnum):
    """What a step is allowed to do with the destination square."""

    MOVE_ONLY = auto()  # empty squares only (pawn push)
    ATTACK_ONLY = auto()  # enemy-occupied squares only (pawn capture)
    MOVE_AND_ATTACK = auto()


@dataclass(frozen=True, slots=True)
class Step:
    """One scanned direction: ``(d_rank, d_file)`` repeated up to *distance* times."""

    direction: tuple[int, int]
    distance: int
    mode: MoveMode


# Longest possible slide on an 8x8 board.
MAX_SLIDE = 7

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KING_DIRS = QUEEN_DIRS


def _steps(
    directions: tuple[tuple[int, int], ...],
    distance: int,
    mode: MoveMode = MoveMode.MOVE_AND_ATTACK,
) -> tuple[Step, ...]:
    return tuple(Step(d, distance, mode) for d in directions)


# Kinds whose geometry does not depend on color or square.
_STEP_TABLE: dict[PieceKind, tuple[Step, ...]] = {
    PieceKind.KNIGHT: _steps(KNIGHT_OFFSETS, 1),
    PieceKind.BISHOP: _steps(BISHOP_DIRS, MAX_SLIDE),
    PieceKind.ROOK: _steps(ROOK_DIRS, MAX_SLIDE),
    PieceKind.QUEEN: _steps(QUEEN_DIRS, MAX_SLIDE),
    PieceKind.KING: _steps(KING_DIRS, 1),
}

_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_HOME_RANK: dict[Color, Rank] = {Color.WHITE: Rank.TWO, Color.BLACK: Rank.SEVEN}


def pawn_steps(color: Color, rank: Rank) -> tuple[Step, ...]:
    """Forward push (two squares from the home rank) plus both capture diagonals."""
    forward = _PAWN_FORWARD[color]
    push_distance = 2 if rank == _PAWN_HOME_RANK[color] else 1
    return (
        Step((forward, 0), push_distance, MoveMode.MOVE_ONLY),
        Step((forward, -1), 1, MoveMode.ATTACK_ONLY),
        Step((forward, 1), 1, MoveMode.ATTACK_ONLY),
    )


def steps_for(kind: PieceKind, color: Color, origin: Position) -> tuple[Step, ...]:
    """Movement table for a piece of *kind* and *color* standing on *origin*."""
    if kind == PieceKind.PAWN:
        return pawn_steps(color, origin.rank)
    return _STEP_TABLE[kind]


def scan(
    board: Board, origin: Position, step: Step, color: Color
) -> Iterator[Position]:
    """Yield reachable squares along *step* for a piece of *color* on *origin*.

    Stops at the board edge, at the first own piece (excluded), at the
    first enemy piece (included when the mode can attack), and at the
    first empty square when the mode can only attack.
    """
    d_rank, d_file = step.direction
    for i in range(1, step.distance + 1):
        target = origin.add(d_rank * i, d_file * i)
        if target is None:
            return

        occupant = board[target]
        if occupant is None:
            if step.mode == MoveMode.ATTACK_ONLY:
                return
            yield target
            continue

        if occupant.color != color and step.mode != MoveMode.MOVE_ONLY:
            yield target
        return
