"""Attack detection: which squares a side controls, and whether a king is in check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import ALL_POSITIONS, Position, is_valid_position

if TYPE_CHECKING:
    from chessrules.core.board import Board


# (drow, dcol) offsets
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------

Targets = dict[Position, tuple[Position, ...]]
Rays = dict[Position, tuple[tuple[Position, ...], ...]]


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> Targets:
    targets: Targets = {}
    for pos in ALL_POSITIONS:
        moves = (pos.shifted(dr, dc) for dr, dc in offsets)
        targets[pos] = tuple(to for to in moves if is_valid_position(to))
    return targets


def _build_rays(directions: tuple[tuple[int, int], ...]) -> Rays:
    rays: Rays = {}
    for pos in ALL_POSITIONS:
        square_rays: list[tuple[Position, ...]] = []
        for dr, dc in directions:
            ray: list[Position] = []
            to = pos.shifted(dr, dc)
            # stop at the edge; never wrap to the next row
            while is_valid_position(to):
                ray.append(to)
                to = to.shifted(dr, dc)
            square_rays.append(tuple(ray))
        rays[pos] = tuple(square_rays)
    return rays


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


def pawn_attack_squares(pos: Position, color: Color) -> tuple[Position, ...]:
    """Squares a *color* pawn on *pos* attacks, whether occupied or not."""
    step = color.pawn_direction
    return tuple(
        to for to in (pos.shifted(step, -1), pos.shifted(step, 1)) if is_valid_position(to)
    )


def _has_attacker(
    board: Board, squares: tuple[Position, ...], by_color: Color, piece_type: PieceType
) -> bool:
    for sq in squares:
        piece = board.at(sq)
        if piece is not None and piece.color == by_color and piece.piece_type == piece_type:
            return True
    return False


def _ray_attacked(
    board: Board,
    rays: tuple[tuple[Position, ...], ...],
    by_color: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for sq in ray:
            piece = board.at(sq)
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False


def is_square_attacked(board: Board, pos: Position, by_color: Color) -> bool:
    """Is *pos* attacked by any piece of *by_color*?

    Pawn attacks are looked up from the target square backwards: a *by_color*
    pawn attacks *pos* if it stands one step behind it diagonally. This
    counts empty squares too, unlike the pawn's capture moves.
    """
    if not is_valid_position(pos):
        return False

    # A by_color pawn attacking pos sits where an opposite-colored pawn on pos
    # would attack.
    if _has_attacker(
        board, pawn_attack_squares(pos, by_color.opposite), by_color, PieceType.PAWN
    ):
        return True

    if _has_attacker(board, KNIGHT_TARGETS[pos], by_color, PieceType.KNIGHT):
        return True

    if _has_attacker(board, KING_TARGETS[pos], by_color, PieceType.KING):
        return True

    if _ray_attacked(board, BISHOP_RAYS[pos], by_color, _DIAGONAL_SLIDERS):
        return True

    return _ray_attacked(board, ROOK_RAYS[pos], by_color, _ORTHOGONAL_SLIDERS)


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent? A missing king never is."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
