"""User-configurable settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    show_coordinates: bool = True

    # Rules applied by the session, not the core
    promote_on_last_row: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Read ``DRAUGHTS_LANGUAGE`` and ``DRAUGHTS_PROMOTE`` overrides."""
        env = os.environ if environ is None else environ
        settings = cls()
        if "DRAUGHTS_LANGUAGE" in env:
            settings.language = env["DRAUGHTS_LANGUAGE"]
        if "DRAUGHTS_PROMOTE" in env:
            settings.promote_on_last_row = env["DRAUGHTS_PROMOTE"].strip().lower() in _TRUE_VALUES
        return settings
