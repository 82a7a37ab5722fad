"""Shared pytest fixtures for the boardplay test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Widgets are built without a display on CI; fall back to the offscreen plugin.
_HEADLESS = sys.platform.startswith("linux") and not (
    os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
)
if _HEADLESS:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def _needs_qt(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication shared by every widget test."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_locale() -> Iterator[None]:
    """Every test starts and ends with the English strings."""
    from boardplay.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def editor_session(qapp: object) -> Iterator[object]:
    """A threaded position editor that is always shut down afterwards."""
    del qapp
    from boardplay.ui.editor_session import EditorSession

    session = EditorSession()
    yield session
    session.shutdown()


@pytest.fixture(autouse=True)
def _close_top_level_widgets(request: pytest.FixtureRequest) -> Iterator[None]:
    """Widgets created without a parent must not outlive their test."""
    if not _needs_qt(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
