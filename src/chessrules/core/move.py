"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

PROMOTION_TYPES: tuple[PieceType, ...] = tuple(_PROMO_CHARS)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of a transition.

    A Move is only a request until the legality filter accepts it. ``piece``
    and ``captured`` describe the pieces involved and do not take part in
    equality; ``flag`` does. A bare request such as ``Move(E2, E4)`` is not
    equal to the generated ``DOUBLE_PAWN`` move, so look requests up with
    :meth:`Rules.match_move` instead of ``in legal_moves``.
    """

    from_sq: Position
    to_sq: Position
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None
    piece: Piece | None = field(default=None, compare=False)
    captured: Piece | None = field(default=None, compare=False)

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """Long-algebraic notation, e.g. 'e7e8q'."""
        return str(self)
