"""Structural faults raised by the core.

Illegal moves are not errors: they come back from
:meth:`Board.get_move_info` as :class:`~draughts.core.move.Invalid`.
"""

from __future__ import annotations


class DraughtsError(Exception):
    """Base class for all core faults."""


class ParseError(DraughtsError, ValueError):
    """A serialized piece label or board grid could not be decoded."""


class CellOutOfRangeError(DraughtsError, IndexError):
    """Coordinates fall outside the board grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell out of range: ({row}, {col})")
        self.row = row
        self.col = col
