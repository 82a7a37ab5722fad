"""Move-input parsing: keyboard text and compact UCI codes."""

from __future__ import annotations

import re

import chess

from boardplay.core.enums import PieceType
from boardplay.core.errors import InvalidPosition
from boardplay.core.move import Move
from boardplay.core.rules import Rules
from boardplay.core.types import Square, to_index

_COORDINATE_RE = re.compile(
    r"^([a-h][1-8])\s*[-x:\s]?\s*([a-h][1-8])\s*=?\s*([qrbn])?[+#]?$"
)
_CASTLE_RE = re.compile(r"^[o0]-?[o0](-?[o0])?[+#]?$")


def parse_uci(code: str) -> Move:
    """Decode ``e2e4`` / ``e7e8q`` into a :class:`Move` without checking legality."""
    if len(code) not in (4, 5):
        raise ValueError(f"Invalid UCI move: {code!r}")
    promotion = PieceType.from_letter(code[4]) if len(code) == 5 else None
    return Move(code[:2].lower(), code[2:4].lower(), promotion)


def move_to_squares(move: Move | None) -> tuple[Square, Square] | None:
    """Origin/destination pair used for last-move highlighting."""
    if move is None:
        return None
    return move.from_sq, move.to_sq


def parse_keyboard_move(text: str, fen: str) -> Move | None:
    """Resolve free-form keyboard text against the legal moves of *fen*.

    Accepts coordinates (``e2e4``, ``e7-e8=q``) and SAN (``Nf3``, ``nf3``,
    ``O-O``) in any case.  Returns ``None`` when nothing or more than one
    legal move matches.  A coordinate pawn push to the last rank without a
    promotion letter comes back with ``promotion=None``.
    """
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        board = Rules.parse(fen)
    except InvalidPosition:
        return None

    lowered = cleaned.lower()
    match = _COORDINATE_RE.match(lowered)
    if match is not None:
        return _match_coordinates(board, *match.groups())

    candidates = _san_candidates(cleaned)
    matches = _parse_san_all(board, candidates)
    if matches:
        return matches.pop() if len(matches) == 1 else None

    # "e8" for a pawn on e7: hand the promotion choice to the resolver.
    promoted = _parse_san_all(board, [c + "=Q" for c in candidates])
    if len(promoted) == 1:
        return promoted.pop().with_promotion(None)
    return None


def _parse_san_all(board: chess.Board, spellings: list[str]) -> set[Move]:
    """Distinct legal moves matched by any of *spellings*."""
    moves: set[Move] = set()
    for spelling in spellings:
        try:
            parsed = board.parse_san(spelling)
        except ValueError:
            continue
        # "--" and "0000" parse as the null move.
        if parsed:
            moves.add(Move.from_chess(parsed))
    return moves


def _match_coordinates(
    board: chess.Board,
    from_name: str,
    to_name: str,
    promo_letter: str | None,
) -> Move | None:
    from_idx, to_idx = to_index(from_name), to_index(to_name)
    candidates = [
        m
        for m in board.legal_moves
        if m.from_square == from_idx and m.to_square == to_idx
    ]
    if not candidates:
        return None
    if promo_letter is not None:
        wanted = PieceType.from_letter(promo_letter)
        for m in candidates:
            if m.promotion == wanted:
                return Move.from_chess(m)
        return None
    if len(candidates) == 1:
        return Move.from_chess(candidates[0])
    # Several candidates only happen for promotions; let the resolver choose.
    return Move(from_name, to_name)


def _san_candidates(text: str) -> list[str]:
    """Spellings of *text* worth feeding to the SAN parser, most literal first."""
    compact = text.replace(" ", "")
    lowered = compact.lower()
    if _CASTLE_RE.match(lowered):
        rings = lowered.count("o") + lowered.count("0")
        return ["O-O-O" if rings == 3 else "O-O"]

    candidates = [compact]
    if lowered != compact:
        candidates.append(lowered)
    if lowered[0] in "nbrqk":
        candidates.append(lowered[0].upper() + lowered[1:])
    return candidates
