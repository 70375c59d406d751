"""Pseudo-legal and legal move generation + attack detection.

Every destination is derived through :meth:`Square.offset`, which validates
the row and column separately, so rays never wrap from one file edge onto
the next rank.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.board import Board
from chesscore.enums import CastlingRights, Color, PieceType
from chesscore.piece import Piece
from chesscore.types import Square

if TYPE_CHECKING:
    from chesscore.position import Position

Offsets = tuple[tuple[int, int], ...]

# (drow, dcol) pairs.
KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Offsets = BISHOP_DIRS + ROOK_DIRS

# piece type -> (direction set, max ray length)
_MOVE_RULES: dict[PieceType, tuple[Offsets, int]] = {
    PieceType.KNIGHT: (KNIGHT_OFFSETS, 1),
    PieceType.BISHOP: (BISHOP_DIRS, 7),
    PieceType.ROOK: (ROOK_DIRS, 7),
    PieceType.QUEEN: (QUEEN_DIRS, 7),
    PieceType.KING: (KING_OFFSETS, 1),
}

_HOME_ROWS: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
_PAWN_START_ROWS: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_KING_HOME_COL = 4

# (right, rook column, squares that must be empty, king transit/landing columns)
_CASTLING_LANES: dict[
    Color, tuple[tuple[CastlingRights, int, tuple[int, ...], tuple[int, ...]], ...]
] = {
    Color.WHITE: (
        (CastlingRights.WHITE_KINGSIDE, 7, (5, 6), (5, 6)),
        (CastlingRights.WHITE_QUEENSIDE, 0, (1, 2, 3), (3, 2)),
    ),
    Color.BLACK: (
        (CastlingRights.BLACK_KINGSIDE, 7, (5, 6), (5, 6)),
        (CastlingRights.BLACK_QUEENSIDE, 0, (1, 2, 3), (3, 2)),
    ),
}


# -- Pseudo-legal generation ----------------------------------------------


def slide(
    board: Board,
    origin: Square,
    color: Color,
    directions: Offsets,
    max_steps: int = 7,
) -> list[Square]:
    """Walk each direction from *origin*, stopping at the first occupant.

    Squares held by *color* end the ray and are excluded; an opposing piece
    ends the ray and is included as a capture.
    """
    moves: list[Square] = []
    for drow, dcol in directions:
        sq: Square | None = origin
        for _ in range(max_steps):
            sq = sq.offset(drow, dcol)
            if sq is None:
                break
            target = board[sq]
            if target is None:
                moves.append(sq)
                continue
            if target.color != color:
                moves.append(sq)
            break
    return moves


def pawn_moves(position: Position, origin: Square, color: Color) -> list[Square]:
    """Pushes, double push from the start rank, captures and en passant."""
    board = position.board
    step = color.forward
    moves: list[Square] = []

    one_step = origin.offset(step, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.append(one_step)
        if origin.row == _PAWN_START_ROWS[color]:
            two_step = one_step.offset(step, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.append(two_step)

    for dcol in (-1, 1):
        cap_sq = origin.offset(step, dcol)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None:
            if target.color != color:
                moves.append(cap_sq)
        elif cap_sq == position.en_passant:
            moves.append(cap_sq)
    return moves


def pseudo_legal_moves(position: Position, origin: Square) -> list[Square]:
    """Destinations allowed by the piece's movement rule, ignoring king safety.

    Castling is never produced here; see :func:`castling_moves`.
    """
    piece = position.board[origin]
    if piece is None:
        return []
    if piece.piece_type == PieceType.PAWN:
        return pawn_moves(position, origin, piece.color)
    directions, max_steps = _MOVE_RULES[piece.piece_type]
    return slide(position.board, origin, piece.color, directions, max_steps)


# -- Attack detection -----------------------------------------------------


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Is *sq* among the pseudo-legal destinations of a *by_color* piece?

    The *by_color* king is not counted as an attacker. A pawn only attacks
    diagonally onto an occupied square, so test empty squares by placing a
    piece there first.
    """
    for from_sq, piece in position.board.items():
        if piece.color != by_color or piece.piece_type == PieceType.KING:
            continue
        if sq in pseudo_legal_moves(position, from_sq):
            return True
    return False


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked? A side without a king is never in check."""
    king_sq = position.board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(position, king_sq, color.opposite)


# -- Legality -------------------------------------------------------------


def leaves_king_in_check(position: Position, origin: Square, target: Square) -> bool:
    """Apply the move to a throwaway copy and test the mover's king."""
    piece = position.board[origin]
    if piece is None:
        return False
    clone = position.copy()
    clone.move_piece(origin, target)
    return is_in_check(clone, piece.color)


def castling_moves(position: Position, origin: Square) -> list[Square]:
    """Castling destinations for the king on *origin*."""
    piece = position.board[origin]
    if piece is None or piece.piece_type != PieceType.KING:
        return []

    color = piece.color
    home_row = _HOME_ROWS[color]
    if origin != Square(home_row, _KING_HOME_COL):
        return []
    if not position.castling & CastlingRights.both(color):
        return []
    if is_in_check(position, color):
        return []

    board = position.board
    rook = Piece(color, PieceType.ROOK)
    moves: list[Square] = []
    for right, rook_col, empty_cols, king_cols in _CASTLING_LANES[color]:
        if not position.castling & right:
            continue
        if board[Square(home_row, rook_col)] != rook:
            continue
        if any(not board.is_empty(Square(home_row, col)) for col in empty_cols):
            continue
        transit = Square(home_row, king_cols[0])
        landing = Square(home_row, king_cols[-1])
        if _king_attacked_on(position, origin, transit, piece):
            continue
        if leaves_king_in_check(position, origin, landing):
            continue
        moves.append(landing)
    return moves


def _king_attacked_on(
    position: Position, origin: Square, sq: Square, king: Piece
) -> bool:
    shifted = position.copy()
    shifted.board[origin] = None
    shifted.board[sq] = king
    return is_in_check(shifted, king.color)


def legal_moves(position: Position, origin: Square) -> list[Square]:
    """Pseudo-legal moves of the piece on *origin* that keep its king safe."""
    piece = position.board[origin]
    if piece is None:
        return []

    legal = [
        target
        for target in pseudo_legal_moves(position, origin)
        if not leaves_king_in_check(position, origin, target)
    ]
    if piece.piece_type == PieceType.KING:
        legal.extend(castling_moves(position, origin))
    return legal


def all_legal_moves(position: Position, color: Color) -> list[tuple[Square, Square]]:
    """Every legal ``(origin, destination)`` pair for *color*."""
    moves: list[tuple[Square, Square]] = []
    for origin in position.board.all_pieces(color):
        moves.extend((origin, target) for target in legal_moves(position, origin))
    return moves


def has_legal_move(position: Position, color: Color) -> bool:
    """Whether any piece of *color* has at least one legal move."""
    return any(
        legal_moves(position, origin) for origin in position.board.all_pieces(color)
    )
