"""Board coordinates: ranks, files and bounds-checked positions.

Ranks and files are 1-based ordinals (``Rank.ONE`` .. ``Rank.EIGHT``,
``File.A`` .. ``File.H``).  Storage code works with the 0-based
``offset``.  There is no off-board ``Position``: every conversion that
could leave the board returns ``None`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_FILE_CHARS = "abcdefgh"
_RANK_CHARS = "12345678"


class Rank(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8

    @property
    def offset(self) -> int:
        """Zero-based index 0–7."""
        return self.value - 1

    @classmethod
    def from_offset(cls, offset: int) -> Rank | None:
        if 0 <= offset < 8:
            return cls(offset + 1)
        return None

    @classmethod
    def from_char(cls, char: str) -> Rank | None:
        """'1'..'8' → rank, anything else → None."""
        if len(char) != 1 or char not in _RANK_CHARS:
            return None
        return cls.from_offset(_RANK_CHARS.index(char))

    def __str__(self) -> str:
        return _RANK_CHARS[self.offset]


class File(IntEnum):
    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8

    @property
    def offset(self) -> int:
        """Zero-based index 0–7."""
        return self.value - 1

    @classmethod
    def from_offset(cls, offset: int) -> File | None:
        if 0 <= offset < 8:
            return cls(offset + 1)
        return None

    @classmethod
    def from_char(cls, char: str) -> File | None:
        """'a'..'h' (either case) → file, anything else → None."""
        if len(char) != 1 or char.lower() not in _FILE_CHARS:
            return None
        return cls.from_offset(_FILE_CHARS.index(char.lower()))

    def __str__(self) -> str:
        return _FILE_CHARS[self.offset]


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A square on the board.  Ordered rank-major: a1 < b1 < ... < h8."""

    rank: Rank
    file: File

    def __post_init__(self) -> None:
        # Raises ValueError for anything off the board.
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "file", File(self.file))

    def add(self, d_rank: int, d_file: int) -> Position | None:
        """Shift by a signed vector; ``None`` if the result leaves the board."""
        rank = Rank.from_offset(self.rank.offset + d_rank)
        file = File.from_offset(self.file.offset + d_file)
        if rank is None or file is None:
            return None
        return Position(rank, file)

    @classmethod
    def parse(cls, name: str) -> Position | None:
        """Parse a square name such as ``"e2"``; ``None`` when malformed."""
        if len(name) != 2:
            return None
        file = File.from_char(name[0])
        rank = Rank.from_char(name[1])
        if rank is None or file is None:
            return None
        return cls(rank, file)

    def __str__(self) -> str:
        return str(self.file) + str(self.rank)

    def __repr__(self) -> str:
        return f"Position({self})"


def all_positions() -> list[Position]:
    """Every square, a1 first and h8 last."""
    return [Position(rank, file) for rank in Rank for file in File]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(Rank.ONE, f) for f in File)
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(Rank.TWO, f) for f in File)
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(Rank.THREE, f) for f in File)
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(Rank.FOUR, f) for f in File)
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(Rank.FIVE, f) for f in File)
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(Rank.SIX, f) for f in File)
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(Rank.SEVEN, f) for f in File)
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(Rank.EIGHT, f) for f in File)
