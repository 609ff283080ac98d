"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Position, is_valid_position, string_to_position

Row = tuple[Piece | None, ...]

_EMPTY_ROW: Row = (None,) * 8

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# flag -> (rook origin col, rook destination col)
_CASTLE_ROOK_COLS: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}


class Board:
    """Persistent 64-square board.

    Every update returns a new Board and leaves the receiver untouched, so
    hypothetical moves can be explored without copying by hand. Unchanged
    rows are shared between the old and the new board.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[Row, ...] | None = None) -> None:
        if rows is None:
            rows = (_EMPTY_ROW,) * 8
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board needs exactly 8 rows of 8 squares")
        self._rows: tuple[Row, ...] = rows

    # -- Element access -----------------------------------------------------

    def at(self, pos: Position) -> Piece | None:
        """Piece on *pos*; off-board positions read as empty."""
        if not is_valid_position(pos):
            return None
        return self._rows[pos.row][pos.col]

    __getitem__ = at

    def is_empty(self, pos: Position) -> bool:
        return self.at(pos) is None

    def set(self, pos: Position, piece: Piece | None) -> Board:
        """New board with *piece* (or nothing) on *pos*."""
        return self.with_changes({pos: piece})

    def with_changes(self, changes: Mapping[Position, Piece | None]) -> Board:
        """New board with several squares replaced at once."""
        rows = list(self._rows)
        touched: dict[int, list[Piece | None]] = {}
        for pos, piece in changes.items():
            if not is_valid_position(pos):
                raise ValueError(f"Cannot place a piece off the board: {pos!r}")
            row = touched.get(pos.row)
            if row is None:
                row = touched[pos.row] = list(rows[pos.row])
            row[pos.col] = piece
        for idx, row in touched.items():
            rows[idx] = tuple(row)
        return Board(tuple(rows))

    # -- Query helpers ------------------------------------------------------

    def items(self) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares in row-major order."""
        for row_idx, row in enumerate(self._rows):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    yield Position(row_idx, col_idx), piece

    def pieces(self, color: Color) -> list[tuple[Position, Piece]]:
        """All squares occupied by *color*, with their pieces."""
        return [(pos, piece) for pos, piece in self.items() if piece.color == color]

    def king_square(self, color: Color) -> Position | None:
        """Square of *color*'s king, or None if it is missing."""
        found: Position | None = None
        for pos, piece in self.items():
            if piece.color == color and piece.piece_type == PieceType.KING:
                assert found is None, f"Two {color.name} kings on board"
                found = pos
        return found

    # -- Move application ---------------------------------------------------

    def apply(self, move: Move) -> Board:
        """Relocate the pieces *move* touches and return the resulting board.

        Handles en passant removal, the castling rook slide and promotion.
        No legality checks are made here.
        """
        piece = self.at(move.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        changes: dict[Position, Piece | None] = {move.from_sq: None}

        # The pawn taken en passant stands beside the origin, not on to_sq
        if move.flag == MoveFlag.EN_PASSANT:
            changes[Position(move.from_sq.row, move.to_sq.col)] = None

        if move.promotion is not None:
            changes[move.to_sq] = piece.promoted(move.promotion)
        else:
            changes[move.to_sq] = piece

        rook_cols = _CASTLE_ROOK_COLS.get(move.flag)
        if rook_cols is not None:
            row = move.from_sq.row
            rook_from = Position(row, rook_cols[0])
            rook = self.at(rook_from)
            assert rook is not None, f"Castling without a rook on {rook_from}"
            changes[rook_from] = None
            changes[Position(row, rook_cols[1])] = rook

        return self.with_changes(changes)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        rows: list[Row] = [_EMPTY_ROW] * 8
        rows[0] = tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK)
        rows[1] = (Piece(Color.WHITE, PieceType.PAWN),) * 8
        rows[6] = (Piece(Color.BLACK, PieceType.PAWN),) * 8
        rows[7] = tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK)
        return cls(tuple(rows))

    @classmethod
    def from_pieces(cls, placement: Mapping[str, str]) -> Board:
        """Build a board from square names and piece letters.

        Example::

            Board.from_pieces({"e1": "K", "e8": "k", "a7": "P"})
        """
        return cls().with_changes(
            {string_to_position(sq): Piece.from_char(ch) for sq, ch in placement.items()}
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx in range(7, -1, -1):
            cells = [str(p) if p else "." for p in self._rows[row_idx]]
            lines.append(f"{row_idx + 1} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
