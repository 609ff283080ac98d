"""Tests for attack detection and check."""

from chessrules.core.attacks import is_in_check, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.types import (
    D3, D4, D5, E3, E4, E5, F3, F4, F5, G7, H1, H8,
    Position,
    string_to_position,
)


def _sq(name: str) -> Position:
    return string_to_position(name)


class TestPawnAttacks:
    def test_white_pawn_attacks_empty_diagonals(self) -> None:
        board = Board.from_pieces({"e4": "P"})
        assert is_square_attacked(board, D5, Color.WHITE)
        assert is_square_attacked(board, F5, Color.WHITE)

    def test_white_pawn_does_not_attack_forward(self) -> None:
        board = Board.from_pieces({"e4": "P"})
        assert not is_square_attacked(board, E5, Color.WHITE)
        assert not is_square_attacked(board, D3, Color.WHITE)

    def test_black_pawn_attacks_downward(self) -> None:
        board = Board.from_pieces({"e4": "p"})
        assert is_square_attacked(board, D3, Color.BLACK)
        assert is_square_attacked(board, F3, Color.BLACK)
        assert not is_square_attacked(board, D5, Color.BLACK)

    def test_edge_pawn_does_not_wrap(self) -> None:
        board = Board.from_pieces({"h4": "P"})
        assert is_square_attacked(board, _sq("g5"), Color.WHITE)
        assert not is_square_attacked(board, _sq("a5"), Color.WHITE)
        assert not is_square_attacked(board, _sq("a6"), Color.WHITE)


class TestPieceAttacks:
    def test_knight(self) -> None:
        board = Board.from_pieces({"g1": "N"})
        assert is_square_attacked(board, F3, Color.WHITE)
        assert is_square_attacked(board, _sq("h3"), Color.WHITE)
        assert is_square_attacked(board, _sq("e2"), Color.WHITE)
        assert not is_square_attacked(board, _sq("g3"), Color.WHITE)

    def test_king_adjacency(self) -> None:
        board = Board.from_pieces({"e4": "k"})
        for sq in (D3, E3, F3, D4, F4, D5, E5, F5):
            assert is_square_attacked(board, sq, Color.BLACK)
        assert not is_square_attacked(board, E4, Color.BLACK)

    def test_rook_ray_stops_at_blocker(self) -> None:
        board = Board.from_pieces({"a1": "R", "a4": "p"})
        assert is_square_attacked(board, _sq("a3"), Color.WHITE)
        assert is_square_attacked(board, _sq("a4"), Color.WHITE)
        assert not is_square_attacked(board, _sq("a5"), Color.WHITE)
        assert is_square_attacked(board, H1, Color.WHITE)

    def test_bishop_diagonal(self) -> None:
        board = Board.from_pieces({"a1": "B"})
        assert is_square_attacked(board, H8, Color.WHITE)
        assert not is_square_attacked(board, _sq("a8"), Color.WHITE)

    def test_queen_both_directions(self) -> None:
        board = Board.from_pieces({"d4": "q"})
        assert is_square_attacked(board, _sq("d8"), Color.BLACK)
        assert is_square_attacked(board, G7, Color.BLACK)
        assert not is_square_attacked(board, _sq("e6"), Color.BLACK)

    def test_wrong_color_not_counted(self) -> None:
        board = Board.from_pieces({"a1": "R"})
        assert not is_square_attacked(board, H1, Color.BLACK)

    def test_off_board_square_never_attacked(self) -> None:
        board = Board.from_pieces({"a1": "R"})
        assert not is_square_attacked(board, Position(0, 8), Color.WHITE)


class TestCheck:
    def test_initial_position_no_check(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_rook_gives_check(self) -> None:
        board = Board.from_pieces({"e1": "K", "e8": "r"})
        assert is_in_check(board, Color.WHITE)

    def test_blocked_check(self) -> None:
        board = Board.from_pieces({"e1": "K", "e2": "P", "e8": "r"})
        assert not is_in_check(board, Color.WHITE)

    def test_pawn_gives_check(self) -> None:
        board = Board.from_pieces({"e1": "K", "d2": "p"})
        assert is_in_check(board, Color.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        board = Board.from_pieces({"e8": "r", "a1": "Q"})
        assert not is_in_check(board, Color.WHITE)
