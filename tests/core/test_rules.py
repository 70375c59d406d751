"""Tests for Rules: check, checkmate, stalemate."""

import pytest

from chesscore.enums import Color, GameResult
from chesscore.notation import STARTING_FEN, position_from_fen
from chesscore.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert not Rules.is_in_check(pos)
        assert not pos.is_in_check(Color.BLACK)

    def test_lone_king(self) -> None:
        pos = position_from_fen("8/8/8/3K4/8/8/8/8 w - - 0 1")
        assert not pos.is_in_check(Color.WHITE)

    def test_no_king_is_never_in_check(self) -> None:
        pos = position_from_fen("q7/8/8/8/8/8/8/8 w - - 0 1")
        assert not pos.is_in_check(Color.WHITE)

    def test_queen_with_clear_line(self) -> None:
        pos = position_from_fen("q7/8/8/3K4/8/8/8/8 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)

    def test_interposed_piece_blocks(self) -> None:
        pos = position_from_fen("q7/1P6/8/3K4/8/8/8/8 w - - 0 1")
        assert not pos.is_in_check(Color.WHITE)

    def test_knight_ignores_blockers(self) -> None:
        pos = position_from_fen("8/8/2PPP3/2PKP3/2PPP3/4n3/8/8 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)

    def test_pawn_gives_check_diagonally_only(self) -> None:
        assert position_from_fen("8/8/8/3p4/4K3/8/8/8 w - - 0 1").is_in_check(
            Color.WHITE
        )
        assert not position_from_fen("8/8/8/4p3/4K3/8/8/8 w - - 0 1").is_in_check(
            Color.WHITE
        )

    def test_fools_mate_in_check(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert Rules.is_in_check(pos)
        assert not Rules.is_in_check(pos, Color.BLACK)


class TestCheckmate:
    @pytest.mark.parametrize(
        "fen, color",
        [
            ("K6r/7r/8/8/8/8/8/8 w - - 0 1", Color.WHITE),  # double rook
            ("7k/7R/5N2/8/8/8/8/8 w - - 0 1", Color.BLACK),  # Arabian
            ("3R2k1/5ppp/8/8/8/8/8/8 w - - 0 1", Color.BLACK),  # back rank
            ("3k4/3Q4/3R4/8/8/8/8/8 b - - 0 1", Color.BLACK),  # supported queen
            (FOOLS_MATE, Color.WHITE),
        ],
    )
    def test_mates(self, fen: str, color: Color) -> None:
        pos = position_from_fen(fen)
        assert Rules.is_checkmate(pos, color)
        assert pos.is_in_checkmate(color)

    def test_capture_escapes_mate(self) -> None:
        pos = position_from_fen("K6r/7r/6N1/8/8/8/8/8 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)
        assert not pos.is_in_checkmate(Color.WHITE)

    def test_king_can_step_away(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert pos.is_in_check(Color.WHITE)
        assert not pos.is_in_checkmate(Color.WHITE)

    def test_not_in_check_is_not_mate(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not pos.is_in_checkmate(Color.BLACK)

    def test_own_king_does_not_guard_squares(self) -> None:
        # d6 king alone would cover c7, d7 and e7; kings are not attackers
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert pos.is_in_check(Color.BLACK)
        assert not pos.is_in_checkmate(Color.BLACK)

    def test_no_king_is_not_mate(self) -> None:
        pos = position_from_fen("7r/7r/8/8/8/8/8/8 w - - 0 1")
        assert not pos.is_in_checkmate(Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(pos)
        assert pos.is_in_stalemate(Color.BLACK)

    def test_not_stalemate_when_has_moves(self) -> None:
        pos = position_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not Rules.is_stalemate(pos)

    def test_checkmate_is_not_stalemate(self) -> None:
        pos = position_from_fen(FOOLS_MATE)
        assert not Rules.is_stalemate(pos)


class TestGameResult:
    def test_in_progress(self) -> None:
        assert Rules.game_result(position_from_fen(STARTING_FEN)) == GameResult.IN_PROGRESS

    def test_black_wins(self) -> None:
        assert Rules.game_result(position_from_fen(FOOLS_MATE)) == GameResult.BLACK_WINS

    def test_white_wins(self) -> None:
        pos = position_from_fen("3k4/3Q4/3R4/8/8/8/8/8 b - - 0 1")
        assert Rules.game_result(pos) == GameResult.WHITE_WINS

    def test_stalemate_draw(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.game_result(pos) == GameResult.DRAW

    def test_scholars_mate_sequence(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        for origin, target in (
            ("e2", "e4"), ("e7", "e5"),
            ("f1", "c4"), ("b8", "c6"),
            ("d1", "h5"), ("g8", "f6"),
            ("h5", "f7"),
        ):
            pos.play(origin, target)
        assert pos.is_in_checkmate(Color.BLACK)
        assert Rules.game_result(pos) == GameResult.WHITE_WINS
