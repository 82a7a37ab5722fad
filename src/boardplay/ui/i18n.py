"""Internationalisation strings for the board chrome.

Usage::

    from boardplay.ui.i18n import t, set_language

    set_language("Russian")
    print(t().promote_title)   # "Превращение пешки"
"""

from __future__ import annotations

from dataclasses import dataclass

from boardplay.core.enums import PieceType
from boardplay.core.errors import (
    AmbiguousInput,
    BoardPlayError,
    IllegalMove,
    InvalidPosition,
    PositionEditFailed,
    VariationRejected,
)


@dataclass(frozen=True)
class Strings:
    # ── PromotionDialog ──────────────────────────────────────────────────
    promote_title: str
    promote_label: str
    piece_queen: str
    piece_rook: str
    piece_bishop: str
    piece_knight: str

    # ── MoveInput ────────────────────────────────────────────────────────
    move_input_placeholder: str
    move_input_invalid: str

    # ── Board errors ─────────────────────────────────────────────────────
    invalid_position_title: str
    illegal_move: str  # "Illegal move: {move}"
    variation_rejected: str
    edit_failed: str  # "Position edit failed: {msg}"

    def piece_name(self, piece_type: PieceType) -> str:
        return {
            PieceType.QUEEN: self.piece_queen,
            PieceType.ROOK: self.piece_rook,
            PieceType.BISHOP: self.piece_bishop,
            PieceType.KNIGHT: self.piece_knight,
        }.get(piece_type, piece_type.name.capitalize())

    def error_message(self, error: BoardPlayError) -> str:
        """Localised one-line description of a board error."""
        if isinstance(error, InvalidPosition):
            return f"{self.invalid_position_title}: {error.reason}"
        if isinstance(error, IllegalMove):
            return self.illegal_move.format(move=error.uci)
        if isinstance(error, VariationRejected):
            return self.variation_rejected
        if isinstance(error, AmbiguousInput):
            return self.move_input_invalid
        if isinstance(error, PositionEditFailed):
            return self.edit_failed.format(msg=error)
        return str(error)


_EN = Strings(
    promote_title="Pawn Promotion",
    promote_label="Choose a piece to promote to:",
    piece_queen="Queen",
    piece_rook="Rook",
    piece_bishop="Bishop",
    piece_knight="Knight",
    move_input_placeholder="Move",
    move_input_invalid="Invalid move",
    invalid_position_title="Invalid position",
    illegal_move="Illegal move: {move}",
    variation_rejected="Variations are disabled for this game",
    edit_failed="Position edit failed: {msg}",
)

_RU = Strings(
    promote_title="Превращение пешки",
    promote_label="Выберите фигуру для превращения:",
    piece_queen="Ферзь",
    piece_rook="Ладья",
    piece_bishop="Слон",
    piece_knight="Конь",
    move_input_placeholder="Ход",
    move_input_invalid="Неверный ход",
    invalid_position_title="Неверная позиция",
    illegal_move="Недопустимый ход: {move}",
    variation_rejected="Варианты для этой партии отключены",
    edit_failed="Не удалось изменить позицию: {msg}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
