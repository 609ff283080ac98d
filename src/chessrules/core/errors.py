"""Exceptions raised by the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import RejectReason
    from chessrules.core.move import Move


class ChessRulesError(Exception):
    """Base class for all engine errors."""


class IllegalMoveError(ChessRulesError, ValueError):
    """A move was committed that does not pass the legality filter.

    Only raised when precondition checking is switched on; ordinary callers
    get a rejection value instead.
    """

    def __init__(self, move: Move, reason: RejectReason) -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason
