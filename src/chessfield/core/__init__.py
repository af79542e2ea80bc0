"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessfield.core import Board, Color, Position

    board = Board.initial()
    print(board.moves_available(Position.parse("e2"), Color.WHITE))
"""

from chessfield.core.board import Board
from chessfield.core.coords import File, Position, Rank, all_positions
from chessfield.core.display import render_board
from chessfield.core.enums import Color, PieceKind
from chessfield.core.errors import IllegalMoveError
from chessfield.core.movement import MoveMode, Step, scan, steps_for
from chessfield.core.piece import Piece, Tile, tile_code

__all__ = [
    # Enums
    "Color",
    "MoveMode",
    "PieceKind",
    # Coordinates
    "File",
    "Position",
    "Rank",
    "all_positions",
    # Domain objects
    "Board",
    "Piece",
    "Step",
    "Tile",
    # Movement
    "scan",
    "steps_for",
    # Rendering
    "render_board",
    "tile_code",
    # Errors
    "IllegalMoveError",
]
