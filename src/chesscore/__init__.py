"""Chess rules core: board, move generation, check detection and FEN.

Quick start::

    from chesscore import Position, STARTING_FEN

    pos = Position.from_fen(STARTING_FEN)
    print(pos.generate_moves("e2"))
    pos.play("e2", "e4")
    print(pos.get_fen())
"""

from chesscore.board import Board
from chesscore.enums import CastlingRights, Color, GameResult, PieceType
from chesscore.errors import (
    ChessError,
    EmptySquare,
    FriendlyOccupied,
    IllegalMove,
    InvalidFen,
    InvalidNotation,
    MoveError,
    OutOfRange,
)
from chesscore.move_generator import (
    all_legal_moves,
    is_in_check,
    legal_moves,
    pseudo_legal_moves,
)
from chesscore.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesscore.piece import Piece
from chesscore.position import Position
from chesscore.rules import Rules
from chesscore.types import Square, parse_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    # Errors
    "ChessError",
    "EmptySquare",
    "FriendlyOccupied",
    "IllegalMove",
    "InvalidFen",
    "InvalidNotation",
    "MoveError",
    "OutOfRange",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    "Rules",
    # Move generation
    "all_legal_moves",
    "is_in_check",
    "legal_moves",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
