"""Legal-destination maps for board affordances and drop resolution."""

from __future__ import annotations

from boardplay.core.enums import PieceType
from boardplay.core.errors import InvalidPosition
from boardplay.core.rules import Rules
from boardplay.core.types import SQUARES, Square

Destinations = dict[Square, list[Square]]

# King destination when castling → square of the rook the king may be dropped on.
_CASTLE_ROOK_SQUARES: dict[tuple[Square, Square], Square] = {
    ("e1", "g1"): "h1",
    ("e1", "c1"): "a1",
    ("e8", "g8"): "h8",
    ("e8", "c8"): "a8",
}
_ROOK_DROP_TARGETS: dict[tuple[Square, Square], Square] = {
    (king, rook): dest for (king, dest), rook in _CASTLE_ROOK_SQUARES.items()
}


def compute_destinations(fen: str, forced_en_passant: bool = False) -> Destinations:
    """Map each movable origin square to its legal destinations.

    Castling kings also list the rook's square so the king can be dropped on
    it.  With *forced_en_passant* enabled, an available en-passant capture
    hides every other move.  Invalid positions and positions without legal moves
    (checkmate, stalemate) give ``{}``.
    """
    try:
        side = Rules.side_to_move(fen)
    except InvalidPosition:
        return {}

    dests: Destinations = {}
    for sq in SQUARES:
        piece = Rules.piece_at(fen, sq)
        if piece is None or piece.color != side:
            continue
        targets = sorted(Rules.legal_destinations(fen, sq))
        if not targets:
            continue
        if piece.piece_type == PieceType.KING:
            for target in list(targets):
                rook_sq = _CASTLE_ROOK_SQUARES.get((sq, target))
                if rook_sq is not None and Rules.is_castling(fen, sq, target):
                    targets.append(rook_sq)
        dests[sq] = targets

    if forced_en_passant:
        captures = _en_passant_only(fen, dests)
        if captures:
            return captures
    return dests


def _en_passant_only(fen: str, dests: Destinations) -> Destinations:
    captures: Destinations = {}
    for origin, targets in dests.items():
        ep = [t for t in targets if Rules.is_en_passant(fen, origin, t)]
        if ep:
            captures[origin] = ep
    return captures


def resolve_drop(fen: str, orig: Square, dest: Square) -> Square:
    """Translate a king dropped on its own castling rook into the castling square."""
    target = _ROOK_DROP_TARGETS.get((orig, dest))
    if target is None:
        return dest
    try:
        piece = Rules.piece_at(fen, orig)
        if piece is None or piece.piece_type != PieceType.KING:
            return dest
        if not Rules.has_castling_right(fen, dest):
            return dest
    except InvalidPosition:
        return dest
    return target
