"""Promotion resolver — defers a pawn move until the promotion piece is known."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, auto

from boardplay.core.enums import PROMOTION_PIECES, Color, PieceType
from boardplay.core.errors import PromotionError
from boardplay.core.move import Move
from boardplay.core.rules import Rules
from boardplay.core.types import Square, rank_of
from boardplay.game.settings import BoardSettings

_LOGGER = logging.getLogger(__name__)

# Order the chooser lists pieces in, from the promotion square outwards.
_WHITE_ORDER = (PieceType.QUEEN, PieceType.KNIGHT, PieceType.ROOK, PieceType.BISHOP)


class PromotionPhase(IntEnum):
    """Finite-state-machine states for the promotion chooser."""

    IDLE = auto()
    AWAITING_SELECTION = auto()


@dataclass(frozen=True, slots=True)
class PendingMove:
    """A pawn move waiting for its promotion piece."""

    from_sq: Square
    to_sq: Square
    color: Color


def is_promotion_move(fen: str, move: Move) -> bool:
    """Whether *move* takes a pawn of the side to move onto its last rank."""
    piece = Rules.piece_at(fen, move.from_sq)
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False
    side = Rules.side_to_move(fen)
    if piece.color != side:
        return False
    last_rank = 7 if side == Color.WHITE else 0
    return rank_of(move.to_sq) == last_rank


class PromotionResolver:
    """Two-state machine: ``IDLE`` ↔ ``AWAITING_SELECTION``.

    A pending move always ends in exactly one :meth:`select` (a committed
    move) or one :meth:`cancel` (nothing is played).
    """

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: PendingMove | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> PromotionPhase:
        if self._pending is None:
            return PromotionPhase.IDLE
        return PromotionPhase.AWAITING_SELECTION

    @property
    def is_awaiting(self) -> bool:
        return self._pending is not None

    @property
    def pending(self) -> PendingMove | None:
        return self._pending

    @property
    def choices(self) -> tuple[PieceType, ...]:
        """Promotable pieces in display order for the pending side."""
        if self._pending is None:
            return ()
        if self._pending.color == Color.BLACK:
            return tuple(reversed(_WHITE_ORDER))
        return _WHITE_ORDER

    # ── Transitions ──────────────────────────────────────────────────────

    def submit(
        self,
        fen: str,
        move: Move,
        settings: BoardSettings,
        *,
        force_dialog: bool = False,
    ) -> Move | None:
        """Route a move attempt; return it when it can be committed right away.

        Returns ``None`` when the move now waits for :meth:`select`.
        *force_dialog* is the modifier-key override of auto-promotion.
        """
        if self._pending is not None:
            _LOGGER.debug("New move attempt replaces pending promotion")
            self._pending = None

        if move.promotion is not None or not is_promotion_move(fen, move):
            return move

        if settings.auto_promote and not force_dialog:
            return move.with_promotion(PieceType.QUEEN)

        self._pending = PendingMove(
            move.from_sq, move.to_sq, Rules.side_to_move(fen)
        )
        _LOGGER.debug("Awaiting promotion choice for %s", move.uci)
        return None

    def select(self, piece_type: PieceType) -> Move:
        """Commit the pending move with *piece_type* and return to idle."""
        if self._pending is None:
            raise PromotionError("No promotion is pending")
        if piece_type not in PROMOTION_PIECES:
            raise PromotionError(f"Cannot promote to {piece_type.name.lower()}")
        pending = self._pending
        self._pending = None
        return Move(pending.from_sq, pending.to_sq, piece_type)

    def cancel(self) -> None:
        """Abandon the pending move entirely; no default promotion is played."""
        if self._pending is not None:
            _LOGGER.debug(
                "Promotion cancelled for %s%s",
                self._pending.from_sq,
                self._pending.to_sq,
            )
        self._pending = None
