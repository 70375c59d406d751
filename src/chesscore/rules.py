"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.enums import Color, GameResult
from chesscore.move_generator import has_legal_move, is_in_check

if TYPE_CHECKING:
    from chesscore.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Nothing is cached: every query rescans the board.
    """

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        """Is *color* (default: side to move) in check?"""
        return is_in_check(position, position.turn if color is None else color)

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        color = position.turn if color is None else color
        if position.board.king_square(color) is None:
            return False
        if not is_in_check(position, color):
            return False
        return not has_legal_move(position, color)

    @staticmethod
    def is_stalemate(position: Position, color: Color | None = None) -> bool:
        color = position.turn if color is None else color
        if position.board.king_square(color) is None:
            return False
        if is_in_check(position, color):
            return False
        return not has_legal_move(position, color)

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result for the side to move."""
        color = position.turn
        if Rules.is_checkmate(position, color):
            return GameResult.win_for(color.opposite)
        if Rules.is_stalemate(position, color):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
