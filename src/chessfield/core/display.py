"""Plain-text board rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from chessfield.core.piece import Tile, tile_code

if TYPE_CHECKING:
    from chessfield.core.board import Board


def render_row(tiles: Iterable[Tile]) -> str:
    return "".join(f" {tile_code(tile)} " for tile in tiles)


def render_board(board: Board) -> str:
    """Eight lines, rank 8 first; cells are ' __ ' or e.g. ' w♖ '.

    No trailing newline after the last row.
    """
    return "\n".join(render_row(tiles) for _rank, tiles in board.rows())
