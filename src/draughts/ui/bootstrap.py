"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING

from draughts.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(environ: Mapping[str, str] | None = None) -> int:
    """Set the root log level from ``DRAUGHTS_LOG_LEVEL`` (default WARNING)."""
    env = os.environ if environ is None else environ
    name = env.get("DRAUGHTS_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    unknown = not isinstance(level, int)
    if unknown:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if unknown:
        _LOGGER.warning("Unknown log level %r, using WARNING", name)
    return level


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Draughts")
    app.setStyle("Fusion")


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from draughts.ui.main_window import MainWindow

    configure_logging()
    settings = AppSettings.from_env()
    _LOGGER.info("Starting with language=%s", settings.language)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
