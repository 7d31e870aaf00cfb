"""Tests for Position, Piece and Move value objects."""

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.piece import Piece
from chessmoves.core.types import ALL_POSITIONS, Position, on_board


class TestPosition:
    def test_value_equality(self) -> None:
        assert Position(4, 5) == Position(4, 5)
        assert hash(Position(4, 5)) == hash(Position(4, 5))
        assert len({Position(1, 1), Position(1, 1)}) == 1

    @pytest.mark.parametrize("row,column", [(0, 1), (9, 1), (1, 0), (1, 9)])
    def test_off_board_rejected(self, row: int, column: int) -> None:
        with pytest.raises(ValueError):
            Position(row, column)

    def test_offset(self) -> None:
        assert Position(4, 4).offset(1, -2) == Position(5, 2)
        assert Position(8, 8).offset(1, 0) is None
        assert Position(1, 1).offset(0, -1) is None

    def test_names(self) -> None:
        assert Position(1, 1).name == "a1"
        assert Position(4, 5).name == "e4"
        assert Position(8, 8).name == "h8"
        assert Position.from_name("e4") == Position(4, 5)
        assert str(Position(2, 4)) == "d2"

    @pytest.mark.parametrize("name", ["", "e", "e9", "i4", "e44"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError):
            Position.from_name(name)

    def test_all_positions(self) -> None:
        assert len(ALL_POSITIONS) == 64
        assert len(set(ALL_POSITIONS)) == 64
        assert on_board(8, 8)
        assert not on_board(0, 8)


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_pawn_geometry(self) -> None:
        assert (Color.WHITE.forward, Color.BLACK.forward) == (1, -1)
        assert (Color.WHITE.pawn_start_row, Color.BLACK.pawn_start_row) == (2, 7)
        assert (Color.WHITE.promotion_row, Color.BLACK.promotion_row) == (8, 1)


class TestPiece:
    def test_value_equality(self) -> None:
        a = Piece(Color.WHITE, PieceType.KNIGHT)
        b = Piece(Color.WHITE, PieceType.KNIGHT)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Piece(Color.BLACK, PieceType.KNIGHT)

    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)
        assert Piece.from_char("P") == Piece(Color.WHITE, PieceType.PAWN)

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.ROOK).symbol == "♜"


class TestMove:
    def test_value_equality(self) -> None:
        a = Move(Position(7, 1), Position(8, 1), PieceType.QUEEN)
        b = Move(Position(7, 1), Position(8, 1), PieceType.QUEEN)
        c = Move(Position(7, 1), Position(8, 1), PieceType.ROOK)
        assert a == b
        assert len({a, b, c}) == 2

    def test_uci(self) -> None:
        assert str(Move(Position(2, 5), Position(4, 5))) == "e2e4"
        promo = Move(Position(7, 5), Position(8, 5), PieceType.KNIGHT)
        assert promo.uci == "e7e8n"
        assert promo.is_promotion
        assert not Move(Position(2, 5), Position(3, 5)).is_promotion
