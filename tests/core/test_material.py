"""Tests for material balance."""

import pytest

from boardplay.core.enums import Color, PieceType
from boardplay.core.material import MaterialDiff, material_diff
from boardplay.core.rules import STARTING_FEN


class TestMaterialDiff:
    def test_starting_position_is_even(self) -> None:
        result = material_diff(STARTING_FEN)
        assert result.diff == 0
        assert set(result.pieces.values()) == {0}

    @pytest.mark.parametrize("fen", ["", "xyz/8", None])
    def test_malformed_input_is_zero(self, fen: str) -> None:
        assert material_diff(fen) == MaterialDiff()

    def test_white_up_a_knight(self) -> None:
        fen = "rnbqkb1r/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b KQkq - 0 1"
        result = material_diff(fen)
        assert result.pieces[PieceType.KNIGHT] == 1
        assert result.diff == 3

    def test_black_up_exchange(self) -> None:
        fen = "r3k3/8/8/8/8/8/8/2B1K3 w - - 0 1"
        result = material_diff(fen)
        assert result.pieces[PieceType.ROOK] == -1
        assert result.pieces[PieceType.BISHOP] == 1
        assert result.diff == -2


class TestForSide:
    def test_leading_side_gets_label(self) -> None:
        result = material_diff("4k3/8/8/8/8/8/P7/4K3 w - - 0 1")
        white = result.for_side(Color.WHITE)
        black = result.for_side(Color.BLACK)
        assert white.label == "+1"
        assert white.pieces == {PieceType.PAWN: 1}
        assert black.label is None
        assert black.pieces == {}

    def test_black_lead_is_negative(self) -> None:
        result = material_diff("r3k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        black = result.for_side(Color.BLACK)
        white = result.for_side(Color.WHITE)
        assert black.label == "-2"
        assert black.pieces == {PieceType.ROOK: 1}
        assert white.label is None
        assert white.pieces == {PieceType.BISHOP: 1}

    def test_even_has_no_labels(self) -> None:
        result = material_diff(STARTING_FEN)
        assert result.for_side(Color.WHITE).label is None
        assert result.for_side(Color.BLACK).label is None
