"""Shared pytest fixtures for the draughts test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

# Board widget tests need a Qt platform even on headless Linux runners.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

_UI_TESTS = Path(__file__).resolve().parent / "ui"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return _UI_TESTS in Path(str(request.node.fspath)).resolve().parents


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    """Single QApplication shared by every widget test."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    """MainWindow switches the global locale; start and end each test in English."""
    from draughts.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close MainWindow and BoardWidget instances left open by tests/ui."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in app.topLevelWidgets():
        widget.close()
        widget.deleteLater()
    app.processEvents()
