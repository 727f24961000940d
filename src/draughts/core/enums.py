"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def forward(self) -> int:
        """Row delta of a forward step: White moves up the grid, Black down."""
        return -1 if self is Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceVariant(IntEnum):
    """Whether a piece is a plain man or has been crowned."""

    DEFAULT = 0
    CROWNED = 1


class InvalidReason(IntEnum):
    """Why a hop was rejected by the legality check."""

    FROM_EMPTY = auto()
    TO_OCCUPIED = auto()
    INVALID_DISTANCE = auto()
    INVALID_VICTIM = auto()
