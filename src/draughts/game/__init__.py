"""Game layer — applies approved hops to a board and reports them.

Quick start::

    from draughts.game import GameSession

    session = GameSession()
    session.select(5, 0)
    info = session.select(4, 1)
"""

from draughts.game.session import GameSession, MoveRecord, SessionEvents

__all__ = [
    "GameSession",
    "MoveRecord",
    "SessionEvents",
]
