"""Core domain layer — pure functions over FEN strings.

Chess rules are delegated to ``python-chess``; this layer only adapts them
to what an interactive board needs.

Quick start::

    from boardplay.core import STARTING_FEN, compute_destinations, parse_keyboard_move

    dests = compute_destinations(STARTING_FEN)
    move = parse_keyboard_move("Nf3", STARTING_FEN)
"""

from boardplay.core.destinations import (
    Destinations,
    compute_destinations,
    resolve_drop,
)
from boardplay.core.enums import (
    PROMOTION_PIECES,
    Color,
    GameResult,
    PieceType,
    TerminalKind,
)
from boardplay.core.errors import (
    AmbiguousInput,
    BoardPlayError,
    IllegalMove,
    InvalidPosition,
    PositionEditFailed,
    PromotionError,
    VariationRejected,
)
from boardplay.core.material import MaterialDiff, SideMaterial, material_diff
from boardplay.core.move import Move
from boardplay.core.notation import move_to_squares, parse_keyboard_move, parse_uci
from boardplay.core.piece import Piece
from boardplay.core.rules import STARTING_FEN, Rules, TerminalState
from boardplay.core.types import Square, parse_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "PROMOTION_PIECES",
    "TerminalKind",
    # Errors
    "AmbiguousInput",
    "BoardPlayError",
    "IllegalMove",
    "InvalidPosition",
    "PositionEditFailed",
    "PromotionError",
    "VariationRejected",
    # Domain objects
    "Move",
    "Piece",
    "Rules",
    "STARTING_FEN",
    "Square",
    "TerminalState",
    "parse_square",
    # Board helpers
    "Destinations",
    "MaterialDiff",
    "SideMaterial",
    "compute_destinations",
    "material_diff",
    "resolve_drop",
    # Notation
    "move_to_squares",
    "parse_keyboard_move",
    "parse_uci",
]
