"""Free-edit position service: moves pieces without consulting legality."""

from __future__ import annotations

from collections.abc import Callable

from boardplay.core.errors import InvalidPosition
from boardplay.core.rules import Rules
from boardplay.core.types import Square, to_index

EditFunction = Callable[[str, Square, Square], str]


def free_move(fen: str, from_sq: Square, to_sq: Square) -> str:
    """Lift the piece on *from_sq* and put it on *to_sq*.

    Whatever stood on *to_sq* is replaced.  Side to move and the move
    counters are kept; en passant is cleared and castling rights that no
    longer match the king/rook placement are dropped.
    """
    board = Rules.parse(fen)
    piece = board.piece_at(to_index(from_sq))
    if piece is None:
        raise InvalidPosition(fen, f"No piece on {from_sq}")
    if from_sq == to_sq:
        return Rules.serialize(board)

    board.remove_piece_at(to_index(from_sq))
    board.set_piece_at(to_index(to_sq), piece)
    board.ep_square = None
    board.castling_rights = board.clean_castling_rights()
    return Rules.validate(board.fen())
