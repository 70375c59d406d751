"""Square value type and coordinate helpers.

Board layout (row = rank index, col = file index):
    a1=(0, 0)=0, b1=(0, 1)=1, ..., h1=(0, 7)=7
    a2=(1, 0)=8, ...
    ...
    a8=(7, 0)=56, ..., h8=(7, 7)=63
"""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.errors import InvalidNotation, OutOfRange

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """One of the 64 board squares, addressed by row (rank) and column (file)."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not Square.is_valid(self.row, self.col):
            raise OutOfRange(f"Square out of board: ({self.row}, {self.col})")

    @staticmethod
    def is_valid(row: int, col: int) -> bool:
        """Whether (row, col) lies on the board."""
        return 0 <= row < 8 and 0 <= col < 8

    # ── Linear index ─────────────────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a linear index, e.g. 0 → a1, 63 → h8."""
        if not 0 <= index < 64:
            raise OutOfRange(f"Square index out of range: {index}")
        return cls(index >> 3, index & 7)

    def to_index(self) -> int:
        return self.row * 8 + self.col

    @property
    def index(self) -> int:
        """Linear index 0–63."""
        return self.to_index()

    # ── Algebraic notation ───────────────────────────────────────────────

    @classmethod
    def from_notation(cls, text: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(3, 4)."""
        if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
            raise InvalidNotation(f"Invalid square name: {text!r}")
        return cls(_RANKS.index(text[1]), _FILES.index(text[0]))

    def to_notation(self) -> str:
        return _FILES[self.col] + _RANKS[self.row]

    def __str__(self) -> str:
        return self.to_notation()

    # ── Geometry ─────────────────────────────────────────────────────────

    def offset(self, drow: int, dcol: int) -> Square | None:
        """Square shifted by (drow, dcol), or ``None`` when it leaves the board."""
        row = self.row + drow
        col = self.col + dcol
        if not Square.is_valid(row, col):
            return None
        return Square(row, col)


def parse_square(square: Square | str) -> Square:
    """Accept either a :class:`Square` or its algebraic name."""
    if isinstance(square, Square):
        return square
    return Square.from_notation(square)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, c) for c in range(8))
