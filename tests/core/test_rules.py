"""Tests for Rules: move checking, check, checkmate, stalemate."""

import pytest

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
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, classify
from chessrules.core.state import GameState, apply_move, create_initial_state
from chessrules.core.types import (
    A7, A8, C3, D6, E1, E2, E3, E4, E5, E7, E8, F3, G1,
    Position,
)


def _state(
    placement: dict[str, str],
    to_move: Color = Color.WHITE,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Position | None = None,
) -> GameState:
    return GameState(
        board=Board.from_pieces(placement),
        current_player=to_move,
        castling=castling,
        en_passant=en_passant,
    )


class TestCheckMove:
    def test_bare_request_is_accepted(self) -> None:
        assert Rules.check_move(create_initial_state(), Move(E2, E4)) is None
        assert Rules.is_legal(create_initial_state(), Move(E2, E4))

    def test_off_board_square(self) -> None:
        move = Move(E2, Position(8, 4))
        assert Rules.check_move(create_initial_state(), move) == RejectReason.MALFORMED

    def test_empty_origin(self) -> None:
        move = Move(E4, E5)
        assert Rules.check_move(create_initial_state(), move) == RejectReason.NO_PIECE

    def test_opponent_piece(self) -> None:
        move = Move(E7, E5)
        assert Rules.check_move(create_initial_state(), move) == RejectReason.WRONG_TURN

    def test_unreachable_destination(self) -> None:
        move = Move(E2, E5)
        assert Rules.check_move(create_initial_state(), move) == RejectReason.UNREACHABLE

    def test_piece_description_must_match_board(self) -> None:
        move = Move(E2, E4, piece=Piece(Color.WHITE, PieceType.KNIGHT))
        assert Rules.check_move(create_initial_state(), move) == RejectReason.MALFORMED

    def test_pinned_piece_cannot_move(self) -> None:
        state = _state({"e1": "K", "e2": "N", "e8": "r", "a8": "k"})
        assert Rules.check_move(state, Move(E2, C3)) == RejectReason.LEAVES_KING_IN_CHECK
        assert Move(E2, C3) in Rules.pseudo_legal_moves_from(state, E2)
        assert all(m.from_sq != E2 for m in Rules.legal_moves(state))

    def test_king_cannot_walk_into_check(self) -> None:
        state = _state({"e1": "K", "d8": "r", "a8": "k"})
        move = Move(E1, Position(0, 3))
        assert Rules.check_move(state, move) == RejectReason.LEAVES_KING_IN_CHECK


class TestCheckMoveTags:
    def test_promotion_required(self) -> None:
        state = _state({"e7": "P", "a1": "K", "h3": "k"})
        assert Rules.check_move(state, Move(E7, E8)) == RejectReason.MISSING_PROMOTION

    def test_promotion_accepted(self) -> None:
        state = _state({"e7": "P", "a1": "K", "h3": "k"})
        move = Move(E7, E8, MoveFlag.PROMOTION, PieceType.QUEEN)
        assert Rules.check_move(state, move) is None

    @pytest.mark.parametrize("bad", [PieceType.KING, PieceType.PAWN])
    def test_promotion_to_invalid_type(self, bad: PieceType) -> None:
        state = _state({"e7": "P", "a1": "K", "h3": "k"})
        move = Move(E7, E8, MoveFlag.PROMOTION, bad)
        assert Rules.check_move(state, move) == RejectReason.MALFORMED

    def test_promotion_flag_without_piece(self) -> None:
        state = _state({"e7": "P", "a1": "K", "h3": "k"})
        move = Move(E7, E8, MoveFlag.PROMOTION)
        assert Rules.check_move(state, move) == RejectReason.MALFORMED

    def test_promotion_on_ordinary_move(self) -> None:
        move = Move(E2, E4, promotion=PieceType.QUEEN)
        assert Rules.check_move(create_initial_state(), move) == RejectReason.MALFORMED

    def test_castling_requires_tag(self) -> None:
        state = _state(
            {"e1": "K", "h1": "R", "e8": "k"}, castling=CastlingRights.WHITE_KINGSIDE
        )
        assert Rules.check_move(state, Move(E1, G1)) == RejectReason.MALFORMED
        tagged = Move(E1, G1, MoveFlag.CASTLE_KINGSIDE)
        assert Rules.check_move(state, tagged) is None

    def test_castling_without_right(self) -> None:
        state = _state({"e1": "K", "h1": "R", "e8": "k"})
        move = Move(E1, G1, MoveFlag.CASTLE_KINGSIDE)
        assert Rules.check_move(state, move) == RejectReason.UNREACHABLE

    def test_en_passant_requires_tag(self) -> None:
        state = _state({"e5": "P", "d5": "p", "e1": "K", "e8": "k"}, en_passant=D6)
        assert Rules.check_move(state, Move(E5, D6)) == RejectReason.MALFORMED
        tagged = Move(E5, D6, MoveFlag.EN_PASSANT)
        assert Rules.check_move(state, tagged) is None

    def test_en_passant_needs_target(self) -> None:
        state = _state({"e5": "P", "d5": "p", "e1": "K", "e8": "k"})
        move = Move(E5, D6, MoveFlag.EN_PASSANT)
        assert Rules.check_move(state, move) == RejectReason.UNREACHABLE

    def test_double_push_tag_accepted_on_double_push(self) -> None:
        move = Move(E2, E4, MoveFlag.DOUBLE_PAWN)
        assert Rules.check_move(create_initial_state(), move) is None

    def test_double_push_tag_on_single_step(self) -> None:
        move = Move(E2, E3, MoveFlag.DOUBLE_PAWN)
        assert Rules.check_move(create_initial_state(), move) == RejectReason.MALFORMED

    def test_double_push_tag_on_knight(self) -> None:
        move = Move(G1, F3, MoveFlag.DOUBLE_PAWN)
        assert Rules.check_move(create_initial_state(), move) == RejectReason.MALFORMED


class TestMatchMove:
    def test_bare_request_resolves_to_generated_move(self) -> None:
        state = create_initial_state()
        request = Move(E2, E4)
        assert request not in state.legal_moves

        matched = Rules.match_move(state, request)
        assert isinstance(matched, Move)
        assert matched.flag == MoveFlag.DOUBLE_PAWN
        assert matched in state.legal_moves

    def test_promotion_request_resolves_to_promotion_flag(self) -> None:
        state = _state({"a7": "P", "e1": "K", "h3": "k"})
        matched = Rules.match_move(state, Move(A7, A8, promotion=PieceType.QUEEN))
        assert isinstance(matched, Move)
        assert matched.flag == MoveFlag.PROMOTION
        assert matched in state.legal_moves

    def test_rejection_is_returned(self) -> None:
        matched = Rules.match_move(create_initial_state(), Move(E2, E5))
        assert matched == RejectReason.UNREACHABLE


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(create_initial_state())

    def test_discovered_check(self) -> None:
        state = _state({"a1": "K", "e1": "R", "e4": "N", "e8": "k"})
        after = apply_move(state, Move(E4, C3))
        assert after.current_player == Color.BLACK
        assert Rules.is_in_check(after)

    def test_check_matches_state_flag(self) -> None:
        state = _state({"e1": "K", "e8": "r", "a8": "k"})
        assert Rules.is_in_check(state)
        assert state.is_check


class TestCheckmate:
    def test_fools_mate(self) -> None:
        state = create_initial_state()
        for move in (
            Move(Position(1, 5), Position(2, 5)),
            Move(Position(6, 4), Position(4, 4)),
            Move(Position(1, 6), Position(3, 6)),
            Move(Position(7, 3), Position(3, 7)),
        ):
            state = apply_move(state, move)
        assert Rules.is_checkmate(state)
        assert not Rules.is_stalemate(state)
        assert Rules.game_result(state) == GameResult.BLACK_WINS

    def test_scholars_mate(self) -> None:
        state = _state(
            {
                "e8": "k", "d8": "q", "f8": "b", "e7": "p", "d7": "p",
                "f7": "Q", "c4": "B", "e1": "K",
            },
            to_move=Color.BLACK,
        )
        assert Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.WHITE_WINS

    def test_check_with_escape_is_not_mate(self) -> None:
        state = _state({"e1": "K", "e8": "r", "a8": "k"})
        assert not Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.IN_PROGRESS


class TestStalemate:
    def test_king_in_corner(self) -> None:
        state = _state({"h8": "k", "f6": "K", "g6": "Q"}, to_move=Color.BLACK)
        assert Rules.is_stalemate(state)
        assert not Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.DRAW

    def test_pawn_blocked_and_king_boxed(self) -> None:
        state = _state({"a8": "k", "a7": "P", "b6": "K"}, to_move=Color.BLACK)
        assert Rules.is_stalemate(state)

    def test_starting_position_is_not_stalemate(self) -> None:
        assert not Rules.is_stalemate(create_initial_state())


class TestClassify:
    @pytest.mark.parametrize(
        ("in_check", "has_moves", "expected"),
        [
            (False, True, GameStatus.IN_PROGRESS),
            (True, True, GameStatus.IN_PROGRESS),
            (True, False, GameStatus.CHECKMATE),
            (False, False, GameStatus.STALEMATE),
        ],
    )
    def test_classify(self, in_check: bool, has_moves: bool, expected: GameStatus) -> None:
        assert classify(in_check, has_moves) == expected
