"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the board session depends on these ABCs, not
on the concrete (threaded) position editor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from boardplay.core.types import Square

PositionCallback = Callable[[str], None]  # fen after the edit
ErrorCallback = Callable[[str], None]  # display message


class IPositionEditor(ABC):
    """Free-edit move service used while the board is in editing mode."""

    @abstractmethod
    def make_move(
        self,
        fen: str,
        from_sq: Square,
        to_sq: Square,
        *,
        on_done: PositionCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Start moving the piece on *from_sq* to *to_sq*.

        Returns immediately.  Exactly one of the callbacks fires once the
        edit completes.
        """
