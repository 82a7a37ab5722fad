"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass, replace

import chess

from boardplay.core.enums import PieceType
from boardplay.core.types import Square, from_index, is_valid_square, to_index


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable origin/destination pair with an optional promotion piece.

    Doubles as the *move intent* handed from the parser and the promotion
    resolver to the game tree: legality is only checked when applied.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if not is_valid_square(self.from_sq) or not is_valid_square(self.to_sq):
            raise ValueError(f"Invalid move squares: {self.from_sq!r}, {self.to_sq!r}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    # ── Conversion ───────────────────────────────────────────────────────

    def with_promotion(self, promotion: PieceType | None) -> Move:
        return replace(self, promotion=promotion)

    def to_chess(self) -> chess.Move:
        promotion = int(self.promotion) if self.promotion is not None else None
        return chess.Move(to_index(self.from_sq), to_index(self.to_sq), promotion)

    @classmethod
    def from_chess(cls, move: chess.Move) -> Move:
        promotion = PieceType(move.promotion) if move.promotion else None
        return cls(from_index(move.from_square), from_index(move.to_square), promotion)
