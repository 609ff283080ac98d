"""Game management layer: the entry points a presentation shell calls.

Quick start::

    from chessrules.core import E2, E4
    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.events.on_rejected.append(print)
    ctrl.submit_move(E2, E4)
"""

from chessrules.game.controller import (
    GameController,
    GameEvents,
    Rejected,
    generate_legal_destinations,
    resolve_move,
    try_apply_move,
)

__all__ = [
    "GameController",
    "GameEvents",
    "Rejected",
    "generate_legal_destinations",
    "resolve_move",
    "try_apply_move",
]
