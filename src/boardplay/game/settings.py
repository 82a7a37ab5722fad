"""Board interaction settings snapshot."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class BoardSettings:
    """All user-configurable board toggles.

    Passed explicitly into each operation; callers swap the whole snapshot
    instead of mutating shared state.
    """

    # Moves
    auto_promote: bool = True
    forced_en_passant: bool = False
    move_input: bool = False

    # Display
    show_arrows: bool = True
    show_dests: bool = True

    # Files
    auto_save: bool = False

    def with_changes(self, **changes: Any) -> BoardSettings:
        return replace(self, **changes)
