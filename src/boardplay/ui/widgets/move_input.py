"""MoveInput — keyboard move entry under the board."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QLineEdit, QWidget

from boardplay.game.session import BoardSession
from boardplay.ui.i18n import t

_ERROR_STYLE = "QLineEdit { border: 1px solid #ca3431; }"


class MoveInput(QLineEdit):
    """Line edit that submits typed moves to a :class:`BoardSession`.

    Signals:
        move_played(): A typed move was applied to the tree.
        promotion_requested(): The move waits for a promotion piece.
    """

    move_played = pyqtSignal()
    promotion_requested = pyqtSignal()

    def __init__(self, session: BoardSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._error: str | None = None
        self.setFixedWidth(80)
        self.returnPressed.connect(self._on_submit)
        self.textEdited.connect(lambda _text: self._set_error(None))
        self.retranslate_ui()

    @property
    def error(self) -> str | None:
        return self._error

    def retranslate_ui(self) -> None:
        self.setPlaceholderText(t().move_input_placeholder)
        if self._error is not None:
            self._set_error(t().move_input_invalid)

    def _on_submit(self) -> None:
        text = self.text().strip()
        if not text:
            return
        if self._session.submit_text(text):
            self.clear()
            self.move_played.emit()
            return
        failure = self._session.input_error or self._session.error
        if failure is None and self._session.promotion.is_awaiting:
            self.clear()
            self.promotion_requested.emit()
            return
        self._set_error(t().error_message(failure) if failure is not None else None)

    def _set_error(self, message: str | None) -> None:
        self._error = message
        self.setToolTip(message or "")
        self.setStyleSheet(_ERROR_STYLE if message else "")
