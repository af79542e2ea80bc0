"""User-configurable settings for the desktop front end."""

from __future__ import annotations

from dataclasses import dataclass

THEME_NAMES = ("Classic", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    theme: str = "Classic"
    tile_size: int = 64  # px per square
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"
