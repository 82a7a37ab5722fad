"""Square type alias and coordinate helpers.

Squares are lowercase names (``"a1"`` … ``"h8"``), the same keys the board
widget and annotation shapes use.  ``python-chess`` indices stay internal to
:mod:`boardplay.core.rules`.
"""

from __future__ import annotations

from typing import TypeAlias

import chess

Square: TypeAlias = str  # "a1"–"h8"

FILES = "abcdefgh"
RANKS = "12345678"

SQUARES: tuple[Square, ...] = tuple(chess.SQUARE_NAMES)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return FILES.index(sq[0])


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return RANKS.index(sq[1])


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return FILES[file] + RANKS[rank]


def is_valid_square(name: object) -> bool:
    """Check whether *name* is a square name such as ``"e4"``."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


def parse_square(name: str) -> Square:
    """Normalise a square name, e.g. ``'E4'`` → ``'e4'``."""
    lowered = name.strip().lower()
    if not is_valid_square(lowered):
        raise ValueError(f"Invalid square name: {name!r}")
    return lowered


def to_index(sq: Square) -> chess.Square:
    """``python-chess`` square index for *sq*."""
    return chess.parse_square(sq)


def from_index(index: chess.Square) -> Square:
    return chess.square_name(index)
