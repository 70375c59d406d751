"""Exception hierarchy raised by the rules core."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`chesscore`."""


class InvalidFen(ChessError, ValueError):
    """Malformed FEN string."""


class InvalidNotation(ChessError, ValueError):
    """Square text that is not a file letter followed by a rank digit."""


class OutOfRange(ChessError, ValueError):
    """Coordinate or linear index outside the 8x8 board."""


class MoveError(ChessError):
    """A move could not be applied."""


class EmptySquare(MoveError):
    """No piece on the origin square."""


class FriendlyOccupied(MoveError):
    """Destination holds a piece of the mover's own color."""


class IllegalMove(MoveError):
    """Destination is not among the piece's legal moves."""
