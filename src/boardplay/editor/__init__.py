"""Free-edit position editor: service function and Qt worker bridge."""

from boardplay.editor.qt_bridge import EditorWorker
from boardplay.editor.service import EditFunction, free_move

__all__ = [
    "EditFunction",
    "EditorWorker",
    "free_move",
]
