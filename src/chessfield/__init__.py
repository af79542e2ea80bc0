"""chessfield — pseudo-legal chess move generation with a small Qt front end."""

__version__ = "0.1.0"
