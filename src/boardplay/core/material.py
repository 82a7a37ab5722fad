"""Material balance for the captured-material display."""

from __future__ import annotations

from dataclasses import dataclass, field

import chess

from boardplay.core.enums import Color, PieceType

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
}


def _zero_counts() -> dict[PieceType, int]:
    return dict.fromkeys(PIECE_VALUES, 0)


@dataclass(slots=True, frozen=True)
class SideMaterial:
    """What one side's material bar shows: surplus pieces and the numeric lead."""

    pieces: dict[PieceType, int]
    label: str | None


@dataclass(slots=True, frozen=True)
class MaterialDiff:
    """White-minus-black piece counts and the weighted total."""

    pieces: dict[PieceType, int] = field(default_factory=_zero_counts)
    diff: int = 0

    def for_side(self, color: Color) -> SideMaterial:
        sign = 1 if color == Color.WHITE else -1
        pieces = {pt: n * sign for pt, n in self.pieces.items() if n * sign > 0}
        if self.diff * sign <= 0:
            return SideMaterial(pieces, None)
        label = f"+{self.diff}" if self.diff > 0 else str(self.diff)
        return SideMaterial(pieces, label)


def material_diff(fen: str) -> MaterialDiff:
    """Count material from the placement field of *fen*.

    Display-only: malformed input yields an all-zero result instead of an error.
    """
    try:
        board = chess.BaseBoard(fen.split()[0])
    except (ValueError, IndexError, AttributeError):
        return MaterialDiff()

    pieces = _zero_counts()
    for piece_type in PIECE_VALUES:
        white = len(board.pieces(piece_type, chess.WHITE))
        black = len(board.pieces(piece_type, chess.BLACK))
        pieces[piece_type] = white - black
    diff = sum(PIECE_VALUES[pt] * n for pt, n in pieces.items())
    return MaterialDiff(pieces, diff)
