"""Tests for enums, square helpers and pieces."""

import pytest

from boardplay.core.enums import Color, GameResult, PieceType
from boardplay.core.piece import Piece
from boardplay.core.types import (
    SQUARES,
    file_of,
    from_index,
    make_square,
    parse_square,
    rank_of,
    to_index,
)


class TestSquares:
    def test_sixty_four_squares(self) -> None:
        assert len(SQUARES) == 64
        assert SQUARES[0] == "a1"
        assert SQUARES[-1] == "h8"

    def test_coordinates(self) -> None:
        assert file_of("e4") == 4
        assert rank_of("e4") == 3
        assert make_square(4, 3) == "e4"

    def test_index_round_trip(self) -> None:
        assert from_index(to_index("g7")) == "g7"

    def test_parse_square_normalises(self) -> None:
        assert parse_square(" E4 ") == "e4"

    @pytest.mark.parametrize("name", ["", "i1", "a9", "e44"])
    def test_parse_square_rejects(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.from_chess(False) == Color.BLACK
        assert Color.BLACK.chess_color is False

    def test_piece_letters(self) -> None:
        assert PieceType.KNIGHT.letter == "n"
        assert PieceType.from_letter("Q") == PieceType.QUEEN

    def test_bad_piece_letter(self) -> None:
        with pytest.raises(ValueError):
            PieceType.from_letter("x")

    def test_result_for_winner(self) -> None:
        assert GameResult.win_for(Color.WHITE) == "1-0"
        assert GameResult.win_for(Color.BLACK) == "0-1"


def test_piece_fen_char_and_symbol() -> None:
    assert str(Piece(Color.WHITE, PieceType.ROOK)) == "R"
    assert str(Piece(Color.BLACK, PieceType.ROOK)) == "r"
    assert Piece(Color.BLACK, PieceType.KING).symbol == "♚"
