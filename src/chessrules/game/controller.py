"""Shell-facing entry points and GameController, the single-game session.

The functions here are what a presentation layer calls: enumerate
destinations for highlighting, try a move, start over. GameController wraps
them for shells that prefer to hold one mutable session object and subscribe
to callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.config import settings
from chessrules.core.enums import GameResult, PieceType, RejectReason
from chessrules.core.move import Move
from chessrules.core.rules import Rules
from chessrules.core.state import GameState, apply_move, create_initial_state
from chessrules.core.types import Position, is_valid_position

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Rejected:
    """A refused move request. The state it was tried on is unchanged."""

    reason: RejectReason
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return f"{self.reason}: {self.message}"
        return str(self.reason)


def generate_legal_destinations(state: GameState, from_sq: Position) -> list[Position]:
    """Squares the side to move can reach from *from_sq*.

    Promotion choices collapse to one destination. Empty when *from_sq* is
    off the board, empty, or holds an opponent piece.
    """
    destinations: list[Position] = []
    for move in state.legal_moves_from(from_sq):
        if move.to_sq not in destinations:
            destinations.append(move.to_sq)
    return destinations


def resolve_move(
    state: GameState,
    from_sq: Position,
    to_sq: Position,
    promote_to: PieceType | None = None,
) -> Move | Rejected:
    """Turn a (from, to, promotion) request into the fully tagged move it names."""
    if state.is_game_over:
        return Rejected(RejectReason.GAME_OVER)
    if not (is_valid_position(from_sq) and is_valid_position(to_sq)):
        return Rejected(RejectReason.MALFORMED, f"{from_sq!r} -> {to_sq!r}")

    piece = state.board.at(from_sq)
    if piece is None:
        return Rejected(RejectReason.NO_PIECE, str(from_sq))
    if piece.color != state.current_player:
        return Rejected(RejectReason.WRONG_TURN, f"{state.current_player} to move")

    candidates = [
        m
        for m in Rules.pseudo_legal_moves_from(state, from_sq)
        if m.to_sq == to_sq
    ]
    if not candidates:
        return Rejected(RejectReason.UNREACHABLE, f"{from_sq}{to_sq}")

    for candidate in candidates:
        if candidate.promotion == promote_to:
            return candidate
    if promote_to is None:
        return Rejected(RejectReason.MISSING_PROMOTION, f"{from_sq}{to_sq}")
    return Rejected(RejectReason.MALFORMED, f"{from_sq}{to_sq} cannot promote")


def try_apply_move(
    state: GameState,
    from_sq: Position,
    to_sq: Position,
    promote_to: PieceType | None = None,
) -> GameState | Rejected:
    """Apply the move from *from_sq* to *to_sq* if it is legal.

    Castling and en passant are recognised from the squares alone; a pawn
    reaching the last rank needs *promote_to*.
    """
    move = resolve_move(state, from_sq, to_sq, promote_to)
    if isinstance(move, Rejected):
        return move

    reason = Rules.check_move(state, move)
    if reason is not None:
        return Rejected(reason, str(move))
    return apply_move(state, move)


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]  # move, state after
RejectedCallback = Callable[[Rejected], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Holds the current GameState of one game and replaces it per move.

    Once the game reaches checkmate or stalemate every further move is
    refused until :meth:`new_game` re-seeds the starting position.
    """

    __slots__ = ("_state", "_undo_stack", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else create_initial_state()
        self._undo_stack: list[GameState] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, state: GameState | None = None) -> None:
        """Start over from the initial position (or from *state*)."""
        self._state = state if state is not None else create_initial_state()
        self._undo_stack.clear()
        _LOGGER.debug("New game, %s to move", self._state.current_player)

    def legal_destinations(self, from_sq: Position) -> list[Position]:
        return generate_legal_destinations(self._state, from_sq)

    def submit_move(
        self,
        from_sq: Position,
        to_sq: Position,
        promote_to: PieceType | None = None,
    ) -> bool:
        """Try a move. Returns True if it was legal and applied."""
        outcome = try_apply_move(self._state, from_sq, to_sq, promote_to)
        if isinstance(outcome, Rejected):
            _LOGGER.debug("Rejected %s -> %s: %s", from_sq, to_sq, outcome)
            self._emit_rejected(outcome)
            return False

        self._push_undo(self._state)
        self._state = outcome
        move = outcome.move_history[-1]
        _LOGGER.debug("Applied %s", move)
        self._emit_move(move)

        if outcome.is_game_over:
            _LOGGER.info(
                "Game over after %d plies: %s", outcome.ply_count, outcome.status.name
            )
            self._emit_game_over(outcome.result)
        return True

    def undo_move(self) -> bool:
        """Go back to the state before the last accepted move."""
        if not self._undo_stack:
            return False
        self._state = self._undo_stack.pop()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _push_undo(self, state: GameState) -> None:
        limit = settings().history_limit
        if limit == 0:
            return
        self._undo_stack.append(state)
        if limit is not None and len(self._undo_stack) > limit:
            del self._undo_stack[0]

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_rejected(self, rejected: Rejected) -> None:
        for cb in self.events.on_rejected:
            cb(rejected)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
