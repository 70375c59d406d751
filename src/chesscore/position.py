"""Position: complete game state (board + metadata) and move application."""

from __future__ import annotations

import logging
from typing import Final

from chesscore import move_generator
from chesscore.board import Board
from chesscore.enums import CastlingRights, Color, PieceType
from chesscore.errors import EmptySquare, FriendlyOccupied, IllegalMove
from chesscore.piece import Piece
from chesscore.rules import Rules
from chesscore.types import Square, parse_square

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPE: Final = PieceType.QUEEN
_LAST_ROWS: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    All mutation goes through :meth:`move_piece` (or its checked variant
    :meth:`play`) and :meth:`place_piece` / :meth:`remove_piece`.
    """

    __slots__ = (
        "board",
        "turn",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board()
        self.turn = turn
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Position:
        """Empty board, White to move, no castling rights."""
        return cls()

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls(Board.initial(), castling=CastlingRights.ALL)

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        from chesscore.notation.fen import position_from_fen

        return position_from_fen(fen)

    def load_fen(self, fen: str) -> None:
        """Replace this position's state with the one described by *fen*.

        On error the position is left unchanged.
        """
        loaded = Position.from_fen(fen)
        self.board = loaded.board
        self.turn = loaded.turn
        self.castling = loaded.castling
        self.en_passant = loaded.en_passant
        self.halfmove_clock = loaded.halfmove_clock
        self.fullmove_number = loaded.fullmove_number

    def get_fen(self) -> str:
        from chesscore.notation.fen import position_to_fen

        return position_to_fen(self)

    # ── Piece access ─────────────────────────────────────────────────────

    def get_piece(self, square: Square | str) -> Piece | None:
        return self.board[parse_square(square)]

    def place_piece(self, piece: Piece, square: Square | str) -> None:
        """Put *piece* on *square*, replacing whatever stood there."""
        self.board[parse_square(square)] = piece

    def remove_piece(self, square: Square | str) -> Piece | None:
        sq = parse_square(square)
        piece = self.board[sq]
        self.board[sq] = None
        return piece

    def clear(self) -> None:
        """Reset to an empty board with default metadata."""
        self.board.clear()
        self.turn = Color.WHITE
        self.castling = CastlingRights.NONE
        self.en_passant = None
        self.halfmove_clock = 0
        self.fullmove_number = 1

    # ── Rule queries ─────────────────────────────────────────────────────

    def generate_moves(self, square: Square | str) -> list[Square]:
        """Legal destinations for the piece on *square* (empty if none)."""
        return move_generator.legal_moves(self, parse_square(square))

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self, color)

    def is_in_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self, color)

    def is_in_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(self, color)

    # ── Core move operations ─────────────────────────────────────────────

    def move_piece(self, origin: Square | str, target: Square | str) -> Piece | None:
        """Apply a move without legality checks and return the captured piece.

        Raises :class:`EmptySquare` when *origin* is empty and
        :class:`FriendlyOccupied` when *target* holds a piece of the same
        color; the position is left untouched in both cases.
        """
        from_sq = parse_square(origin)
        to_sq = parse_square(target)

        piece = self.board[from_sq]
        if piece is None:
            raise EmptySquare(f"No piece on {from_sq}")
        captured = self.board[to_sq]
        if captured is not None and captured.color == piece.color:
            raise FriendlyOccupied(
                f"Cannot move {piece} from {from_sq} onto own {captured} on {to_sq}"
            )

        is_pawn = piece.piece_type == PieceType.PAWN

        # En passant: the captured pawn sits beside the origin, not on the target
        if (
            is_pawn
            and captured is None
            and to_sq == self.en_passant
            and to_sq.col != from_sq.col
        ):
            ep_capture_sq = Square(from_sq.row, to_sq.col)
            victim = self.board[ep_capture_sq]
            if (
                victim is not None
                and victim.piece_type == PieceType.PAWN
                and victim.color != piece.color
            ):
                captured = victim
                self.board[ep_capture_sq] = None

        self.board[from_sq] = None
        placed = piece
        if is_pawn and to_sq.row == _LAST_ROWS[piece.color]:
            placed = Piece(piece.color, _PROMOTION_TYPE)
        self.board[to_sq] = placed

        # Slide the rook for castling
        if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
            rook_from_col, rook_to_col = (7, 5) if to_sq.col > from_sq.col else (0, 3)
            rook_from = Square(from_sq.row, rook_from_col)
            rook = self.board[rook_from]
            if rook == Piece(piece.color, PieceType.ROOK):
                self.board[Square(from_sq.row, rook_to_col)] = rook
                self.board[rook_from] = None

        # En passant target for the opponent
        if is_pawn and abs(to_sq.row - from_sq.row) == 2:
            self.en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)
        else:
            self.en_passant = None

        self._update_castling(from_sq, to_sq, piece)

        self.halfmove_clock += 1
        if self.turn == Color.BLACK:
            self.fullmove_number += 1
        self.turn = self.turn.opposite

        _LOGGER.debug(
            "Moved %s %s-%s%s",
            piece,
            from_sq,
            to_sq,
            f" capturing {captured}" if captured is not None else "",
        )
        return captured

    def play(self, origin: Square | str, target: Square | str) -> Piece | None:
        """Apply a move only if it is legal for the side to move."""
        from_sq = parse_square(origin)
        to_sq = parse_square(target)

        piece = self.board[from_sq]
        if piece is None:
            raise EmptySquare(f"No piece on {from_sq}")
        if piece.color != self.turn:
            raise IllegalMove(f"It is {self.turn}'s turn, {from_sq} holds {piece}")
        if to_sq not in move_generator.legal_moves(self, from_sq):
            raise IllegalMove(f"Illegal move {from_sq}-{to_sq} for {piece}")
        return self.move_piece(from_sq, to_sq)

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        Square(0, 7): CastlingRights.WHITE_KINGSIDE,
        Square(7, 0): CastlingRights.BLACK_QUEENSIDE,
        Square(7, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, from_sq: Square, to_sq: Square, piece: Piece) -> None:
        next_castling = self.castling
        if piece.piece_type == PieceType.KING:
            next_castling &= ~CastlingRights.both(piece.color)

        for sq in (from_sq, to_sq):
            if sq in self._ROOK_CORNERS:
                next_castling &= ~self._ROOK_CORNERS[sq]

        self.castling = next_castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent clone; the board is copied, pieces are shared values."""
        return Position(
            board=self.board.copy(),
            turn=self.turn,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.turn == other.turn
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __str__(self) -> str:
        return self.board.render(unicode=True)

    def __repr__(self) -> str:
        return f"Position({self.get_fen()!r})"
