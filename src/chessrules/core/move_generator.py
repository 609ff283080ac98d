"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
    pawn_attack_squares,
)
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.piece import Piece
from chessrules.core.types import Position, is_valid_position

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.state import GameState


_SLIDER_RAYS = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}

_KING_HOME_COL = 4

# kingside? -> (rook col, cols that must be empty, cols the king crosses, king target col)
_CASTLE_GEOMETRY: dict[bool, tuple[int, tuple[int, ...], tuple[int, ...], int]] = {
    True: (7, (5, 6), (5, 6), 6),
    False: (0, (1, 2, 3), (3, 2), 2),
}


class MoveGenerator:
    """Generates moves on a :class:`Board` for a given en passant / castling context.

    The generator never modifies the board. Legality is decided by applying
    each candidate to a new board and checking the mover's king.
    """

    __slots__ = ("_board", "_en_passant", "_castling")

    def __init__(
        self,
        board: Board,
        en_passant: Position | None = None,
        castling: CastlingRights = CastlingRights.NONE,
    ) -> None:
        self._board = board
        self._en_passant = en_passant
        self._castling = castling

    @classmethod
    def for_state(cls, state: GameState) -> MoveGenerator:
        return cls(state.board, state.en_passant, state.castling)

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, from_sq: Position, piece: Piece | None = None) -> list[Move]:
        """Pseudo-legal moves of the piece on *from_sq* (or of *piece* placed there)."""
        if not is_valid_position(from_sq):
            return []
        if piece is None:
            piece = self._board.at(from_sq)
            if piece is None:
                return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(from_sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_step(from_sq, piece, KNIGHT_TARGETS[from_sq], moves)
        elif ptype == PieceType.KING:
            self._gen_step(from_sq, piece, KING_TARGETS[from_sq], moves)
            self._gen_castling(from_sq, piece, moves)
        else:
            self._gen_sliding(from_sq, piece, _SLIDER_RAYS[ptype][from_sq], moves)
        return moves

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check)."""
        moves: list[Move] = []
        for pos, piece in self._board.pieces(color):
            moves.extend(self.piece_moves(pos, piece))
        return moves

    def keeps_king_safe(self, move: Move, color: Color) -> bool:
        """Would *color*'s king be out of check after *move*?"""
        return not is_in_check(self._board.apply(move), color)

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        return [
            move
            for move in self.generate_pseudo_legal_moves(color)
            if self.keeps_king_safe(move, color)
        ]

    def legal_moves_from(self, from_sq: Position) -> list[Move]:
        """Legal moves of the piece on *from_sq*, for whichever side owns it."""
        piece = self._board.at(from_sq)
        if piece is None:
            return []
        return [
            move
            for move in self.piece_moves(from_sq, piece)
            if self.keeps_king_safe(move, piece.color)
        ]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        step = color.pawn_direction
        last_row = color.opposite.back_rank

        one_step = sq.shifted(step, 0)
        if is_valid_position(one_step) and board.is_empty(one_step):
            if one_step.row == last_row:
                self._add_promotions(sq, one_step, piece, None, moves)
            else:
                moves.append(Move(sq, one_step, piece=piece))
                if sq.row == color.pawn_rank:
                    two_step = sq.shifted(2 * step, 0)
                    if board.is_empty(two_step):
                        moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN, piece=piece))

        for cap_sq in pawn_attack_squares(sq, color):
            target = board.at(cap_sq)
            if target is not None:
                if target.color == color:
                    continue
                if cap_sq.row == last_row:
                    self._add_promotions(sq, cap_sq, piece, target, moves)
                else:
                    moves.append(Move(sq, cap_sq, piece=piece, captured=target))
            elif cap_sq == self._en_passant:
                passed = board.at(Position(sq.row, cap_sq.col))
                if (
                    passed is not None
                    and passed.color != color
                    and passed.piece_type == PieceType.PAWN
                ):
                    moves.append(
                        Move(sq, cap_sq, MoveFlag.EN_PASSANT, piece=piece, captured=passed)
                    )

    @staticmethod
    def _add_promotions(
        sq: Position,
        to_sq: Position,
        piece: Piece,
        captured: Piece | None,
        moves: list[Move],
    ) -> None:
        for pt in PROMOTION_TYPES:
            moves.append(
                Move(sq, to_sq, MoveFlag.PROMOTION, pt, piece=piece, captured=captured)
            )

    def _gen_step(
        self,
        sq: Position,
        piece: Piece,
        targets: tuple[Position, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board.at(to_sq)
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq, piece=piece, captured=target))

    def _gen_sliding(
        self,
        sq: Position,
        piece: Piece,
        rays: tuple[tuple[Position, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board.at(to_sq)
                if target is None:
                    moves.append(Move(sq, to_sq, piece=piece))
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq, piece=piece, captured=target))
                break

    def _gen_castling(self, king_sq: Position, piece: Piece, moves: list[Move]) -> None:
        color = piece.color
        row = color.back_rank
        if king_sq != Position(row, _KING_HOME_COL):
            return
        if not self._castling & CastlingRights.both(color):
            return

        board = self._board
        opponent = color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return

        rook = Piece(color, PieceType.ROOK)
        for kingside in (True, False):
            if not self._castling & CastlingRights.for_side(color, kingside):
                continue
            rook_col, empty_cols, path_cols, target_col = _CASTLE_GEOMETRY[kingside]
            if board.at(Position(row, rook_col)) != rook:
                continue
            if any(not board.is_empty(Position(row, c)) for c in empty_cols):
                continue
            if any(is_square_attacked(board, Position(row, c), opponent) for c in path_cols):
                continue
            flag = MoveFlag.CASTLE_KINGSIDE if kingside else MoveFlag.CASTLE_QUEENSIDE
            moves.append(Move(king_sq, Position(row, target_col), flag, piece=piece))


def generate_pseudo_legal_moves(
    board: Board,
    from_sq: Position,
    piece: Piece,
    en_passant: Position | None = None,
    castling: CastlingRights = CastlingRights.NONE,
) -> list[Move]:
    """Pseudo-legal moves for *piece* standing on *from_sq*.

    Off-board origins yield an empty list.
    """
    return MoveGenerator(board, en_passant, castling).piece_moves(from_sq, piece)
