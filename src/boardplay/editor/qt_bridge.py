"""Qt bridge to run free-edit moves in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from boardplay.editor.service import EditFunction, free_move


class EditorWorker(QObject):
    """Thread-affine worker that applies position edits on demand."""

    position_ready = pyqtSignal(int, str)  # request_id, fen
    edit_failed = pyqtSignal(int, str)  # request_id, message

    def __init__(self, edit: EditFunction = free_move) -> None:
        super().__init__()
        self._edit = edit

    @pyqtSlot(int, str, str, str)
    def make_move(self, request_id: int, fen: str, from_sq: str, to_sq: str) -> None:
        """Edit *fen* by moving *from_sq* to *to_sq* and emit the result."""
        try:
            new_fen = self._edit(fen, from_sq, to_sq)
        except Exception as exc:
            self.edit_failed.emit(request_id, str(exc))
            return
        self.position_ready.emit(request_id, new_fen)
