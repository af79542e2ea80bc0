"""Game layer — turn tracking and the single move-legality gate.

Quick start::

    from chessfield.core.coords import E2, E4
    from chessfield.game import Game

    game = Game()
    game.make_move(E2, E4)
    print(game)
"""

from chessfield.game.game import Game, GameEvents

__all__ = [
    "Game",
    "GameEvents",
]
