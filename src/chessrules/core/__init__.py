"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import E2, E4, Move, Rules, apply_move, create_initial_state

    state = create_initial_state()
    move = Move(E2, E4)
    if Rules.is_legal(state, move):
        state = apply_move(state, move)
"""

from chessrules.core.attacks import is_in_check, is_square_attacked
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
from chessrules.core.errors import ChessRulesError, IllegalMoveError
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import MoveGenerator, generate_pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.state import GameState, apply_move, create_initial_state
from chessrules.core.types import (
    A1, A2, A3, A4, A5, A6, A7, A8,
    B1, B2, B3, B4, B5, B6, B7, B8,
    C1, C2, C3, C4, C5, C6, C7, C8,
    D1, D2, D3, D4, D5, D6, D7, D8,
    E1, E2, E3, E4, E5, E6, E7, E8,
    F1, F2, F3, F4, F5, F6, F7, F8,
    G1, G2, G3, G4, G5, G6, G7, G8,
    H1, H2, H3, H4, H5, H6, H7, H8,
    Position,
    is_valid_position,
    position_to_string,
    string_to_position,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    "RejectReason",
    # Types / helpers
    "Position",
    "is_valid_position",
    "position_to_string",
    "string_to_position",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "MoveGenerator",
    "PROMOTION_TYPES",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "create_initial_state",
    "generate_pseudo_legal_moves",
    "is_in_check",
    "is_square_attacked",
    # Errors
    "ChessRulesError",
    "IllegalMoveError",
    # Named squares
    "A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8",
    "B1", "B2", "B3", "B4", "B5", "B6", "B7", "B8",
    "C1", "C2", "C3", "C4", "C5", "C6", "C7", "C8",
    "D1", "D2", "D3", "D4", "D5", "D6", "D7", "D8",
    "E1", "E2", "E3", "E4", "E5", "E6", "E7", "E8",
    "F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8",
    "G1", "G2", "G3", "G4", "G5", "G6", "G7", "G8",
    "H1", "H2", "H3", "H4", "H5", "H6", "H7", "H8",
]
