"""Background position-editor orchestration for the UI thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from boardplay.core.types import Square
from boardplay.editor import EditFunction, EditorWorker, free_move
from boardplay.game.interfaces import ErrorCallback, IPositionEditor, PositionCallback

_LOGGER = logging.getLogger(__name__)


class _EditorCommandBus(QObject):
    edit_requested = pyqtSignal(int, str, str, str)


class EditorSession(IPositionEditor):
    """Owns the worker thread that performs free-edit moves.

    Results are delivered in arrival order and are never dropped as stale:
    the board session applies each one to whatever node is current then.
    """

    __slots__ = (
        "_command_bus",
        "_thread",
        "_worker",
        "_callbacks",
        "_next_request_id",
        "_is_started",
        "_is_shutting_down",
    )

    def __init__(
        self,
        *,
        edit: EditFunction = free_move,
        parent: QObject | None = None,
    ) -> None:
        self._command_bus = _EditorCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = EditorWorker(edit)
        self._callbacks: dict[int, tuple[PositionCallback, ErrorCallback]] = {}
        self._next_request_id = 0
        self._is_started = False
        self._is_shutting_down = False

    @property
    def pending_requests(self) -> int:
        return len(self._callbacks)

    def setup(self) -> None:
        """Start worker thread and connect cross-thread signals."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._worker.moveToThread(self._thread)
        self._command_bus.edit_requested.connect(self._worker.make_move)
        self._worker.position_ready.connect(self._on_worker_ready)
        self._worker.edit_failed.connect(self._on_worker_failed)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Stop the worker thread; outstanding edits are discarded."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._thread.quit()
        self._thread.wait(2000)
        self._callbacks.clear()
        self._is_started = False

    def make_move(
        self,
        fen: str,
        from_sq: Square,
        to_sq: Square,
        *,
        on_done: PositionCallback,
        on_error: ErrorCallback,
    ) -> None:
        if not self._is_started:
            self.setup()
        if self._is_shutting_down:
            on_error("Position editor is shutting down")
            return

        self._next_request_id += 1
        request_id = self._next_request_id
        self._callbacks[request_id] = (on_done, on_error)
        self._command_bus.edit_requested.emit(request_id, fen, from_sq, to_sq)

    def _on_worker_ready(self, request_id: int, fen: str) -> None:
        callbacks = self._callbacks.pop(request_id, None)
        if callbacks is None or self._is_shutting_down:
            return
        callbacks[0](fen)

    def _on_worker_failed(self, request_id: int, message: str) -> None:
        callbacks = self._callbacks.pop(request_id, None)
        if callbacks is None or self._is_shutting_down:
            return
        _LOGGER.warning("Position edit failed: %s", message)
        callbacks[1](message)
