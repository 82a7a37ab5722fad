"""Promotion chooser — lets the user pick the promotion piece."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from boardplay.core.enums import Color, PieceType
from boardplay.core.piece import Piece
from boardplay.ui.i18n import t

if TYPE_CHECKING:
    from boardplay.game.session import BoardSession


class PromotionDialog(QDialog):
    """Popup column of promotion pieces.

    Runs as a ``Popup`` window, so a click anywhere outside it rejects the
    dialog; rejection cancels the pending move.
    """

    def __init__(
        self,
        color: Color,
        choices: Sequence[PieceType],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.Popup)
        self.setModal(True)

        self._selected: PieceType | None = None
        self._buttons: dict[PieceType, QPushButton] = {}

        layout = QVBoxLayout(self)
        layout.setSpacing(0)
        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._label)

        for pt in choices:
            btn = QPushButton(Piece(color, pt).symbol)
            btn.setFont(QFont("Adwaita Sans", 32))
            btn.setFixedSize(68, 68)
            btn.clicked.connect(lambda checked, p=pt: self._choose(p))
            layout.addWidget(btn)
            self._buttons[pt] = btn

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.promote_title)
        self._label.setText(s.promote_label)
        for pt, btn in self._buttons.items():
            btn.setToolTip(s.piece_name(pt))

    def _choose(self, piece_type: PieceType) -> None:
        self._selected = piece_type
        self.accept()

    @property
    def selected(self) -> PieceType | None:
        return self._selected

    def button(self, piece_type: PieceType) -> QPushButton:
        return self._buttons[piece_type]

    @staticmethod
    def ask(
        color: Color,
        choices: Sequence[PieceType],
        parent: QWidget | None = None,
    ) -> PieceType | None:
        """Show the dialog and return the chosen piece type, or ``None`` on cancel."""
        dlg = PromotionDialog(color, choices, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None

    @staticmethod
    def resolve(session: BoardSession, parent: QWidget | None = None) -> bool:
        """Drive *session*'s pending promotion to a commit or a cancel."""
        resolver = session.promotion
        pending = resolver.pending
        if pending is None:
            return False
        choice = PromotionDialog.ask(pending.color, resolver.choices, parent)
        if choice is None:
            session.cancel_promotion()
            return False
        return session.select_promotion(choice)
