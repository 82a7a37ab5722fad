"""Rule-engine adapter: pure functions over FEN strings backed by python-chess."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from boardplay.core.enums import Color, GameResult, TerminalKind
from boardplay.core.errors import IllegalMove, InvalidPosition
from boardplay.core.move import Move
from boardplay.core.piece import Piece
from boardplay.core.types import Square, from_index, to_index

STARTING_FEN = chess.STARTING_FEN

_KING_ERRORS = (
    chess.STATUS_EMPTY
    | chess.STATUS_NO_WHITE_KING
    | chess.STATUS_NO_BLACK_KING
    | chess.STATUS_TOO_MANY_KINGS
)


@dataclass(frozen=True, slots=True)
class TerminalState:
    """Game-over classification of a position."""

    kind: TerminalKind = TerminalKind.NONE
    winner: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != TerminalKind.NONE

    @property
    def result(self) -> GameResult:
        if self.kind == TerminalKind.CHECKMATE and self.winner is not None:
            return GameResult.win_for(self.winner)
        if self.kind == TerminalKind.DRAW:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS


class Rules:
    """Static rule queries.  Every method takes a FEN string and is pure."""

    @staticmethod
    def parse(fen: str) -> chess.Board:
        """Parse *fen* into a fresh board, raising :class:`InvalidPosition`."""
        if not isinstance(fen, str) or not fen.strip():
            raise InvalidPosition(str(fen), "Empty position")
        try:
            board = chess.Board(fen)
        except ValueError as exc:
            raise InvalidPosition(fen, str(exc)) from None
        if board.status() & _KING_ERRORS:
            raise InvalidPosition(fen, "Each side needs exactly one king")
        return board

    @staticmethod
    def serialize(board: chess.Board) -> str:
        """FEN for *board*, keeping the en-passant field as parsed."""
        return board.fen(en_passant="fen")

    @staticmethod
    def validate(fen: str) -> str:
        """Round-trip *fen* through the engine and return the normalised string."""
        return Rules.serialize(Rules.parse(fen))

    # ── Queries ──────────────────────────────────────────────────────────

    @staticmethod
    def side_to_move(fen: str) -> Color:
        return Color.from_chess(Rules.parse(fen).turn)

    @staticmethod
    def piece_at(fen: str, square: Square) -> Piece | None:
        piece = Rules.parse(fen).piece_at(to_index(square))
        return Piece.from_chess(piece) if piece is not None else None

    @staticmethod
    def is_check(fen: str) -> bool:
        return Rules.parse(fen).is_check()

    @staticmethod
    def legal_moves(fen: str) -> list[Move]:
        return [Move.from_chess(m) for m in Rules.parse(fen).legal_moves]

    @staticmethod
    def legal_destinations(fen: str, from_sq: Square) -> set[Square]:
        board = Rules.parse(fen)
        mask = chess.BB_SQUARES[to_index(from_sq)]
        return {
            from_index(m.to_square) for m in board.generate_legal_moves(from_mask=mask)
        }

    @staticmethod
    def is_en_passant(fen: str, from_sq: Square, to_sq: Square) -> bool:
        board = Rules.parse(fen)
        return board.is_en_passant(chess.Move(to_index(from_sq), to_index(to_sq)))

    @staticmethod
    def is_castling(fen: str, from_sq: Square, to_sq: Square) -> bool:
        board = Rules.parse(fen)
        return board.is_castling(chess.Move(to_index(from_sq), to_index(to_sq)))

    @staticmethod
    def has_castling_right(fen: str, rook_sq: Square) -> bool:
        """Whether the rook on *rook_sq* may still castle."""
        board = Rules.parse(fen)
        return bool(board.castling_rights & chess.BB_SQUARES[to_index(rook_sq)])

    @staticmethod
    def terminal_state(fen: str) -> TerminalState:
        """Checkmate, or a draw by stalemate / insufficient material / fifty moves."""
        board = Rules.parse(fen)
        if board.is_checkmate():
            return TerminalState(
                TerminalKind.CHECKMATE, Color.from_chess(not board.turn)
            )
        if (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.halfmove_clock >= 100
        ):
            return TerminalState(TerminalKind.DRAW)
        return TerminalState()

    # ── Transitions ──────────────────────────────────────────────────────

    @staticmethod
    def make_move(fen: str, move: Move) -> tuple[str, str]:
        """Apply a legal *move*; return ``(fen_after, san)``."""
        board = Rules.parse(fen)
        chess_move = move.to_chess()
        if not board.is_legal(chess_move):
            raise IllegalMove(fen, move.uci)
        san = board.san(chess_move)
        board.push(chess_move)
        return Rules.serialize(board), san
