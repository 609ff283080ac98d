"""High-level chess rules: move legality, check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import is_in_check as board_in_check
from chessrules.core.enums import Color, GameResult, GameStatus, MoveFlag, RejectReason
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Position, is_valid_position

if TYPE_CHECKING:
    from chessrules.core.state import GameState


def classify(in_check: bool, has_legal_moves: bool) -> GameStatus:
    """Terminal status for the side to move."""
    if has_legal_moves:
        return GameStatus.IN_PROGRESS
    return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE


def _same_tags(candidate: Move, request: Move) -> bool:
    # An untagged request may stand for a double push; a tagged one must be one.
    if request.flag == MoveFlag.DOUBLE_PAWN and candidate.flag != MoveFlag.DOUBLE_PAWN:
        return False
    return (
        candidate.promotion == request.promotion
        and candidate.is_castling == request.is_castling
        and candidate.is_en_passant == request.is_en_passant
    )


class Rules:
    """Static rule-checker that operates on a :class:`GameState`.

    Apart from game_result, these queries recompute from the board and do
    not read the flags cached on the state.
    """

    @staticmethod
    def check_move(state: GameState, move: Move) -> RejectReason | None:
        """Why *move* is illegal in *state*, or None if it is legal."""
        matched = Rules.match_move(state, move)
        return matched if isinstance(matched, RejectReason) else None

    @staticmethod
    def match_move(state: GameState, move: Move) -> Move | RejectReason:
        """The legal generated move that *move* requests, or why there is none.

        The request must name the same promotion piece and the same
        castling / en passant tags as the generated move it matches. Missing
        tags are rejected rather than filled in. ``DOUBLE_PAWN`` may be left
        off a two-row pawn push but is refused on any other move.
        """
        if not (is_valid_position(move.from_sq) and is_valid_position(move.to_sq)):
            return RejectReason.MALFORMED
        if move.flag == MoveFlag.PROMOTION and move.promotion is None:
            return RejectReason.MALFORMED
        if move.promotion is not None and move.promotion not in PROMOTION_TYPES:
            return RejectReason.MALFORMED

        piece = state.board.at(move.from_sq)
        if piece is None:
            return RejectReason.NO_PIECE
        if piece.color != state.current_player:
            return RejectReason.WRONG_TURN
        if move.piece is not None and move.piece != piece:
            return RejectReason.MALFORMED

        gen = MoveGenerator.for_state(state)
        candidates = [m for m in gen.piece_moves(move.from_sq, piece) if m.to_sq == move.to_sq]
        if not candidates:
            return RejectReason.UNREACHABLE

        match = next((m for m in candidates if _same_tags(m, move)), None)
        if match is None:
            if move.promotion is None and any(m.is_promotion for m in candidates):
                return RejectReason.MISSING_PROMOTION
            return RejectReason.MALFORMED

        if not gen.keeps_king_safe(match, piece.color):
            return RejectReason.LEAVES_KING_IN_CHECK
        return match

    @staticmethod
    def is_legal(state: GameState, move: Move) -> bool:
        return Rules.check_move(state, move) is None

    @staticmethod
    def pseudo_legal_moves_from(state: GameState, from_sq: Position) -> list[Move]:
        return MoveGenerator.for_state(state).piece_moves(from_sq)

    @staticmethod
    def legal_moves(state: GameState) -> list[Move]:
        gen = MoveGenerator.for_state(state)
        return gen.generate_legal_moves(state.current_player)

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return board_in_check(state.board, state.current_player)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        if not Rules.is_in_check(state):
            return False
        return len(Rules.legal_moves(state)) == 0

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        if Rules.is_in_check(state):
            return False
        return len(Rules.legal_moves(state)) == 0

    @staticmethod
    def game_result(state: GameState) -> GameResult:
        """Determine the current game result from the state's flags."""
        if state.is_checkmate:
            return (
                GameResult.BLACK_WINS
                if state.current_player == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if state.is_stalemate:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
