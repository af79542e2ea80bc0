"""Board - tile placement on an 8x8 grid and pseudo-legal move queries."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessfield.core.coords import File, Position, Rank
from chessfield.core.display import render_board
from chessfield.core.enums import Color, PieceKind
from chessfield.core.movement import scan, steps_for
from chessfield.core.piece import Piece, Tile

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid of tiles indexed by :class:`Position`.

    Rows are stored rank 1 first; ``Position`` coordinates are 1-based and
    mapped to 0-based storage through ``Rank.offset`` / ``File.offset``.
    The only public mutation is :meth:`make_move`, which trusts its caller.
    """

    __slots__ = ("_tiles",)

    def __init__(self) -> None:
        self._tiles: list[list[Tile]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def get(self, position: Position) -> Tile:
        return self._tiles[position.rank.offset][position.file.offset]

    def __getitem__(self, position: Position) -> Tile:
        return self.get(position)

    def is_empty(self, position: Position) -> bool:
        return self.get(position) is None

    def _set(self, position: Position, tile: Tile) -> None:
        self._tiles[position.rank.offset][position.file.offset] = tile

    def _set_line(self, rank: Rank, color: Color, kinds: tuple[PieceKind, ...]) -> None:
        for file, kind in zip(File, kinds):
            self._set(Position(rank, file), Piece(color, kind))

    def rows(self) -> Iterator[tuple[Rank, list[Tile]]]:
        """Ranks top-down (rank 8 first) with their tiles from file a to h."""
        for rank in reversed(Rank):
            yield rank, list(self._tiles[rank.offset])

    def occupied(self, color: Color) -> list[Position]:
        """Squares holding a piece of *color*, a1 first."""
        return [
            Position(rank, file)
            for rank in Rank
            for file in File
            if (tile := self._tiles[rank.offset][file.offset]) is not None
            and tile.color == color
        ]

    # -- Move generation ----------------------------------------------------

    def moves_available(self, position: Position, turn: Color) -> frozenset[Position]:
        """Pseudo-legal destinations for the piece on *position*.

        Empty when the square is empty or holds a piece not belonging to
        *turn*.  King safety is not considered.
        """
        piece = self.get(position)
        if piece is None or piece.color != turn:
            return frozenset()

        destinations: set[Position] = set()
        for step in steps_for(piece.kind, piece.color, position):
            destinations.update(scan(self, position, step, piece.color))
        return frozenset(destinations)

    # -- Mutation -----------------------------------------------------------

    def make_move(self, origin: Position, target: Position) -> None:
        """Move whatever is on *origin* to *target*, overwriting it.

        No legality check happens here; :class:`~chessfield.game.Game` is
        the gate.
        """
        self._set(target, self.get(origin))
        self._set(origin, None)

    def copy(self) -> Board:
        b = Board()
        b._tiles = [row.copy() for row in self._tiles]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b._set_line(Rank.ONE, Color.WHITE, _BACK_RANK)
        b._set_line(Rank.TWO, Color.WHITE, (PieceKind.PAWN,) * 8)
        b._set_line(Rank.SEVEN, Color.BLACK, (PieceKind.PAWN,) * 8)
        b._set_line(Rank.EIGHT, Color.BLACK, _BACK_RANK)
        return b

    @classmethod
    def from_placement(cls, placement: Mapping[Position, Piece]) -> Board:
        """Board holding exactly the given pieces; every other square is empty."""
        b = cls()
        for position, piece in placement.items():
            if not isinstance(position, Position):
                raise TypeError(f"Expected Position key, got {position!r}")
            if not isinstance(piece, Piece):
                raise TypeError(f"Expected Piece at {position}, got {piece!r}")
            b._set(position, piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __str__(self) -> str:
        return render_board(self)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, tiles in self.rows():
            row = [tile.code if tile else "." for tile in tiles]
            rows.append(f"{rank!s} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
