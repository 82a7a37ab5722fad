"""Game management layer — tree, promotion state machine, board session.

Quick start::

    from boardplay.game import BoardSession, BoardSettings

    session = BoardSession(settings=BoardSettings(auto_promote=False))
    session.drop("e2", "e4")
    session.submit_text("e5")
    snapshot = session.snapshot()
"""

from boardplay.game.interfaces import IPositionEditor
from boardplay.game.promotion import (
    PendingMove,
    PromotionPhase,
    PromotionResolver,
    is_promotion_move,
)
from boardplay.game.session import BoardSession, BoardSnapshot
from boardplay.game.settings import BoardSettings
from boardplay.game.tree import (
    DrawShape,
    GameHeaders,
    GameNode,
    GameTree,
    TreeEvents,
)

__all__ = [
    # Interfaces
    "IPositionEditor",
    # Tree
    "DrawShape",
    "GameHeaders",
    "GameNode",
    "GameTree",
    "TreeEvents",
    # Promotion
    "PendingMove",
    "PromotionPhase",
    "PromotionResolver",
    "is_promotion_move",
    # Session
    "BoardSession",
    "BoardSettings",
    "BoardSnapshot",
]
