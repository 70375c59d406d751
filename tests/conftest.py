"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesscore.notation import STARTING_FEN, position_from_fen
from chesscore.position import Position


@pytest.fixture
def empty_position() -> Position:
    """Empty board, White to move, no castling rights."""
    return Position.empty()


@pytest.fixture
def start_position() -> Position:
    """Standard starting position loaded through FEN."""
    return position_from_fen(STARTING_FEN)
