"""Inline banner showing the latest board error above the board."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QWidget

from boardplay.core.errors import BoardPlayError
from boardplay.game.session import BoardSnapshot
from boardplay.ui.i18n import t

_BANNER_STYLE = (
    "QLabel { background: #3a1f1f; color: #f3b6b5; border: 1px solid #ca3431;"
    " border-radius: 4px; padding: 6px; }"
)


class ErrorBanner(QLabel):
    """Hidden until there is something to report; never blocks the board."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWordWrap(True)
        self.setStyleSheet(_BANNER_STYLE)
        self.hide()

    def show_error(self, error: BoardPlayError | None) -> None:
        if error is None:
            self.clear_error()
            return
        self.setText(t().error_message(error))
        self.show()

    def show_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Prefer the position parse failure, then the last rejected action."""
        self.show_error(snapshot.position_error or snapshot.error)

    def clear_error(self) -> None:
        self.clear()
        self.hide()
