"""Move value objects and the legality classification of a single hop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from draughts.core.enums import InvalidReason
from draughts.core.types import Cell, cell_name


@dataclass(frozen=True, slots=True)
class Invalid:
    """The hop breaks a rule; *reason* says which one."""

    reason: InvalidReason

    @property
    def is_legal(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Step:
    """A non-capturing relocation."""

    @property
    def is_legal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Capture:
    """A relocation that removes the opposing piece at *victim*."""

    victim: Cell

    @property
    def is_legal(self) -> bool:
        return True


MoveInfo: TypeAlias = Invalid | Step | Capture


@dataclass(frozen=True, slots=True)
class Move:
    """Source and destination of one hop."""

    from_cell: Cell
    to_cell: Cell

    def __str__(self) -> str:
        return f"{cell_name(*self.from_cell)}-{cell_name(*self.to_cell)}"
