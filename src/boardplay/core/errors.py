"""Recoverable error taxonomy for board interactions.

None of these are fatal: every operation that raises one leaves the game
tree in its last valid state.
"""

from __future__ import annotations


class BoardPlayError(Exception):
    """Base class for all board-interaction errors."""


class InvalidPosition(BoardPlayError, ValueError):
    """A position string could not be parsed by the rule engine."""

    def __init__(self, fen: str, reason: str) -> None:
        super().__init__(reason)
        self.fen = fen
        self.reason = reason


class IllegalMove(BoardPlayError):
    """The rule engine rejected an attempted move."""

    def __init__(self, fen: str, uci: str) -> None:
        super().__init__(f"Illegal move {uci} in {fen}")
        self.fen = fen
        self.uci = uci


class AmbiguousInput(BoardPlayError):
    """Keyboard text matched zero or several legal moves."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No unique legal move matches {text!r}")
        self.text = text


class VariationRejected(BoardPlayError):
    """A move would branch the tree while variations are disabled."""


class PromotionError(BoardPlayError):
    """The promotion resolver was driven outside its protocol."""


class PositionEditFailed(BoardPlayError):
    """The free-edit position editor reported a failure."""
