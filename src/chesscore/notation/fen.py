"""FEN parsing and serialization."""

from __future__ import annotations

import logging
from typing import Final

from chesscore.board import Board
from chesscore.enums import CastlingRights, Color
from chesscore.errors import InvalidFen, InvalidNotation
from chesscore.piece import Piece
from chesscore.position import Position
from chesscore.types import Square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: Final = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split(" ")
    if len(parts) != 6:
        raise InvalidFen(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    board = _parse_placement(placement, fen)

    # 2. Side to move
    try:
        side = Color.from_fen_char(side_part)
    except ValueError as exc:
        raise InvalidFen(f"Invalid FEN side-to-move field: {side_part!r}") from exc

    # 3. Castling
    castling = CastlingRights.NONE
    rights = dict(_CASTLING_LETTERS)
    for ch in castling_part:
        if ch == "-":
            continue
        if ch not in rights:
            raise InvalidFen(f"Invalid FEN castling field: {castling_part!r}")
        castling |= rights[ch]

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = Square.from_notation(ep_part)
        except InvalidNotation as exc:
            raise InvalidFen(f"Invalid FEN en-passant square: {ep_part!r}") from exc

    # 5-6. Clocks
    halfmove = _parse_counter(half_part, "halfmove clock")
    fullmove = _parse_counter(full_part, "fullmove number")

    for color in Color:
        if board.king_square(color) is None:
            _LOGGER.warning("FEN has no %s king: %s", color, fen)
    _LOGGER.debug("Loaded FEN %s", fen)

    return Position(board, side, castling, ep, halfmove, fullmove)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFen(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not 1 <= step <= 8:
                    raise InvalidFen(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                try:
                    piece = Piece.from_char(ch)
                except ValueError as exc:
                    raise InvalidFen(
                        f"Invalid FEN piece character {ch!r}: {fen!r}"
                    ) from exc
                if col >= 8:
                    raise InvalidFen(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = piece
                col += 1
            if col > 8:
                raise InvalidFen(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise InvalidFen(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_counter(text: str, name: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise InvalidFen(f"Invalid FEN {name}: {text!r}")
    return int(text)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[Square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = pos.turn.fen_char

    # 3. Castling
    castling_str = "".join(
        letter for letter, right in _CASTLING_LETTERS if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = str(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
