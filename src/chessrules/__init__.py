"""Chess rules engine: legal moves, move application, check/mate/stalemate."""

from chessrules.config import EngineSettings, configure, settings
from chessrules.core import (
    Board,
    CastlingRights,
    Color,
    GameResult,
    GameState,
    GameStatus,
    IllegalMoveError,
    Move,
    MoveFlag,
    Piece,
    PieceType,
    Position,
    RejectReason,
    Rules,
    apply_move,
    create_initial_state,
    position_to_string,
    string_to_position,
)
from chessrules.game import (
    GameController,
    Rejected,
    generate_legal_destinations,
    try_apply_move,
)

__all__ = [
    "Board",
    "CastlingRights",
    "Color",
    "EngineSettings",
    "GameController",
    "GameResult",
    "GameState",
    "GameStatus",
    "IllegalMoveError",
    "Move",
    "MoveFlag",
    "Piece",
    "PieceType",
    "Position",
    "RejectReason",
    "Rejected",
    "Rules",
    "apply_move",
    "configure",
    "create_initial_state",
    "generate_legal_destinations",
    "position_to_string",
    "settings",
    "string_to_position",
    "try_apply_move",
]
