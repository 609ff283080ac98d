"""GameState - complete game state (board + metadata) and move transition."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.config import EngineSettings, settings
from chessrules.core.attacks import is_in_check
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    GameStatus,
    MoveFlag,
    PieceType,
    RejectReason,
)
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, classify
from chessrules.core.types import A1, A8, H1, H8, Position, is_valid_position

_ROOK_CORNERS: dict[Position, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class GameState:
    """Full chess position: board, side to move, castling, en passant, clocks.

    States are immutable snapshots. ``is_check``, ``is_checkmate``,
    ``is_stalemate`` and ``legal_moves`` are derived from the other fields
    when the state is created and cannot be passed in, so they always agree
    with the board.
    """

    board: Board = field(default_factory=Board.initial)
    current_player: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Position | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    move_history: tuple[Move, ...] = ()

    is_check: bool = field(init=False)
    is_checkmate: bool = field(init=False)
    is_stalemate: bool = field(init=False)
    legal_moves: tuple[Move, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.en_passant is not None and not is_valid_position(self.en_passant):
            raise ValueError(f"En passant target off the board: {self.en_passant!r}")
        if self.halfmove_clock < 0:
            raise ValueError(f"Negative halfmove clock: {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(f"Fullmove number must start at 1: {self.fullmove_number}")

        gen = MoveGenerator(self.board, self.en_passant, self.castling)
        in_check = is_in_check(self.board, self.current_player)
        legal = tuple(gen.generate_legal_moves(self.current_player))
        status = classify(in_check, bool(legal))

        object.__setattr__(self, "is_check", in_check)
        object.__setattr__(self, "is_checkmate", status == GameStatus.CHECKMATE)
        object.__setattr__(self, "is_stalemate", status == GameStatus.STALEMATE)
        object.__setattr__(self, "legal_moves", legal)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        if self.is_checkmate:
            return GameStatus.CHECKMATE
        if self.is_stalemate:
            return GameStatus.STALEMATE
        return GameStatus.IN_PROGRESS

    @property
    def result(self) -> GameResult:
        return Rules.game_result(self)

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None

    def can_castle(self, color: Color, kingside: bool) -> bool:
        """Whether *color* still holds the right to castle on that wing."""
        return bool(self.castling & CastlingRights.for_side(color, kingside))

    def legal_moves_from(self, from_sq: Position) -> list[Move]:
        """Legal moves of the side to move that start on *from_sq*."""
        return [m for m in self.legal_moves if m.from_sq == from_sq]


def create_initial_state() -> GameState:
    """Standard starting position, white to move."""
    return GameState()


# ── Move application ─────────────────────────────────────────────────────


def _updated_castling(castling: CastlingRights, move: Move, piece: Piece) -> CastlingRights:
    if piece.piece_type == PieceType.KING:
        castling &= ~CastlingRights.both(piece.color)

    # A rook leaving its corner, or anything landing on it, ends that right.
    for sq in (move.from_sq, move.to_sq):
        right = _ROOK_CORNERS.get(sq)
        if right is not None:
            castling &= ~right
    return castling


def _recorded_flag(move: Move, is_pawn: bool) -> MoveFlag:
    """The flag the move generator gives a move with these squares and tags."""
    if move.promotion is not None:
        return MoveFlag.PROMOTION
    if is_pawn and abs(move.to_sq.row - move.from_sq.row) == 2:
        return MoveFlag.DOUBLE_PAWN
    if move.is_castling or move.is_en_passant:
        return move.flag
    return MoveFlag.NORMAL


def apply_move(
    state: GameState, move: Move, *, config: EngineSettings | None = None
) -> GameState:
    """Commit *move* and return the following state.

    The caller is responsible for the legality check; *state* is never
    modified either way. With ``check_preconditions`` enabled an illegal
    move raises :class:`IllegalMoveError` instead.
    """
    active = config if config is not None else settings()
    if active.check_preconditions:
        matched = Rules.match_move(state, move)
        if isinstance(matched, RejectReason):
            raise IllegalMoveError(move, matched)
        move = matched

    board = state.board
    piece = board.at(move.from_sq)
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    if move.flag == MoveFlag.EN_PASSANT:
        captured = board.at(Position(move.from_sq.row, move.to_sq.col))
    else:
        captured = board.at(move.to_sq)

    next_board = board.apply(move)

    is_pawn = piece.piece_type == PieceType.PAWN
    flag = _recorded_flag(move, is_pawn)
    next_en_passant: Position | None = None
    if flag == MoveFlag.DOUBLE_PAWN:
        next_en_passant = Position(
            (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
        )

    halfmove_clock = 0 if is_pawn or captured is not None else state.halfmove_clock + 1
    fullmove_number = state.fullmove_number
    if state.current_player == Color.BLACK:
        fullmove_number += 1

    record = Move(
        move.from_sq,
        move.to_sq,
        flag,
        move.promotion,
        piece=piece,
        captured=captured,
    )

    return GameState(
        board=next_board,
        current_player=state.current_player.opposite,
        castling=_updated_castling(state.castling, move, piece),
        en_passant=next_en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
        move_history=state.move_history + (record,),
    )
