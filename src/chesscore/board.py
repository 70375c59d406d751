"""Board - sparse piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesscore.enums import Color, PieceType
from chesscore.piece import Piece
from chesscore.types import Square


class Board:
    """Mutable mapping of occupied squares to pieces.

    The dictionary is the only record of piece placement; every other view
    (per-color lists, king location, the text grid) is derived from it.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: dict[Square, Piece] | None = None) -> None:
        self._pieces: dict[Square, Piece] = dict(pieces) if pieces else {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._pieces.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is None:
            self._pieces.pop(sq, None)
        else:
            self._pieces[sq] = piece

    def __contains__(self, sq: object) -> bool:
        return sq in self._pieces

    def __iter__(self) -> Iterator[Square]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._pieces

    def items(self) -> list[tuple[Square, Piece]]:
        """Snapshot of ``(square, piece)`` pairs, safe to iterate while mutating."""
        return list(self._pieces.items())

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self._pieces.items()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self._pieces.items() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it has none."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        return Board(self._pieces)

    def clear(self) -> None:
        self._pieces.clear()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[Square(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.BLACK, PieceType.PAWN)

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for col, pt in enumerate(back_rank):
            b[Square(0, col)] = Piece(Color.WHITE, pt)
            b[Square(7, col)] = Piece(Color.BLACK, pt)
        return b

    # -- Text views ---------------------------------------------------------

    def grid(self, unicode: bool = False) -> list[list[str]]:
        """8x8 character grid, rank 8 first, '.' for empty squares."""
        rows: list[list[str]] = []
        for row in range(7, -1, -1):
            line = []
            for col in range(8):
                p = self._pieces.get(Square(row, col))
                if p is None:
                    line.append(".")
                else:
                    line.append(p.symbol if unicode else str(p))
            rows.append(line)
        return rows

    def render(self, unicode: bool = False) -> str:
        """Board diagram with rank and file labels."""
        lines = [
            f"{8 - idx} {' '.join(line)}"
            for idx, line in enumerate(self.grid(unicode))
        ]
        lines.append("  a b c d e f g h")
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        return self.render()
