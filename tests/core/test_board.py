"""Tests for Board and Piece."""

import pytest

from chesscore.board import Board
from chesscore.enums import Color, PieceType
from chesscore.piece import Piece
from chesscore.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    Square,
)


class TestPiece:
    def test_fen_characters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("K") == Piece(Color.WHITE, PieceType.KING)
        assert Piece.from_char("p") == Piece(Color.BLACK, PieceType.PAWN)

    @pytest.mark.parametrize("char", ["x", "1", "", "KK"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_value_semantics(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece(Color.WHITE, PieceType.ROOK)
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for white_sq, black_sq, pt in zip(
            (A1, B1, C1, D1, E1, F1, G1, H1), (A8, B8, C8, D8, E8, F8, G8, H8), expected
        ):
            assert board[white_sq] == Piece(Color.WHITE, pt)
            assert board[black_sq] == Piece(Color.BLACK, pt)

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.row == 1 for sq in white)
        assert len(black) == 8 and all(sq.row == 6 for sq in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[Square(row, col)] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)
        assert E4 in board
        assert len(board) == 1

    def test_setting_none_clears(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = None
        assert board.is_empty(E4)
        assert len(board) == 0

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_is_none(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_pieces_filters_color_and_type(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.WHITE, PieceType.KING) == [E1]
        assert sorted(board.pieces(Color.BLACK, PieceType.ROOK)) == [A8, H8]
        assert Board().pieces(Color.WHITE, PieceType.QUEEN) == []

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert len(board) == 0


class TestBoardText:
    def test_grid_orientation(self) -> None:
        grid = Board.initial().grid()
        assert "".join(grid[0]) == "rnbqkbnr"
        assert "".join(grid[7]) == "RNBQKBNR"
        assert "".join(grid[3]) == "........"

    def test_repr_labels(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0].startswith("8 r n b q k b n r")
        assert "a b c d e f g h" in text

    def test_unicode_render(self) -> None:
        text = Board.initial().render(unicode=True)
        assert "♔" in text
        assert "♚" in text
