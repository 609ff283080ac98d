"""Board coordinates and notation helpers.

Board layout (row-major, white at the bottom):
    row 0 is white's back rank (rank 1), row 7 is black's (rank 8)
    col 0 is the a-file, col 7 is the h-file
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """A board coordinate. Only meaningful when both fields are in 0..7."""

    row: int
    col: int

    def shifted(self, drow: int, dcol: int) -> Position:
        """Position offset by (*drow*, *dcol*); the result may be off-board."""
        return Position(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        if not is_valid_position(self):
            return f"({self.row}, {self.col})"
        return position_to_string(self)


def is_valid_position(pos: Position) -> bool:
    """Check whether both coordinates lie on the board."""
    return 0 <= pos.row < 8 and 0 <= pos.col < 8


def position_to_string(pos: Position) -> str:
    """Coordinate name, e.g. Position(0, 4) → 'e1'."""
    if not is_valid_position(pos):
        raise ValueError(f"Position off the board: {pos!r}")
    return _FILES[pos.col] + _RANKS[pos.row]


def string_to_position(name: str) -> Position:
    """Parse a coordinate name, e.g. 'e4' → Position(3, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(_RANKS.index(name[1]), _FILES.index(name[0]))


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(8) for col in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(7, c) for c in range(8))
