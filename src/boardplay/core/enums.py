"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto

import chess


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def chess_color(self) -> chess.Color:
        """The ``python-chess`` boolean for this side."""
        return self == Color.WHITE

    @classmethod
    def from_chess(cls, color: chess.Color) -> Color:
        return cls.WHITE if color else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value.

    Values match ``python-chess`` piece types so conversion is a cast.
    """

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lowercase letter used in UCI promotions and FEN, e.g. ``"n"``."""
        return chess.piece_symbol(self.value)

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        try:
            return cls(chess.PIECE_SYMBOLS.index(letter.lower()))
        except ValueError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


PROMOTION_PIECES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class GameResult(StrEnum):
    """PGN result tokens stored in the game headers."""

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"
    IN_PROGRESS = "*"

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS


class TerminalKind(IntEnum):
    """Whether (and how) a position ends the game."""

    NONE = 0
    CHECKMATE = auto()
    DRAW = auto()
